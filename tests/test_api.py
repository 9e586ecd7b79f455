import json

import pytest
from fastapi.testclient import TestClient

from conftest import ScriptedBackend
from landing_page_builder.assembler import SectionAssembler
from landing_page_builder.content_client import ContentClient
from landing_page_builder.dictionaries import resolve_plan
from services.api.main import app, get_assembler, get_content_client

REQUEST_BODY = {
    "industry": "restaurant",
    "style": "vibrant",
    "websiteName": "Gourmet Haven",
    "description": "Fine dining",
    "uniqueSellingPoints": ["Chef's table", "Local produce"],
}


@pytest.fixture
def backend() -> ScriptedBackend:
    return ScriptedBackend({"Hero": json.dumps({"title": "Seasonal tasting menus"})})


@pytest.fixture
def client(backend, fixed_context):
    content_client = ContentClient(backend, timeout=1.0)
    assembler = SectionAssembler(content_client, context_factory=fixed_context)
    app.dependency_overrides[get_assembler] = lambda: assembler
    app.dependency_overrides[get_content_client] = lambda: content_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_generate_website(client):
    response = client.post("/v1/websites:generate", json=REQUEST_BODY)

    assert response.status_code == 200
    data = response.json()
    assert [section["sectionType"] for section in data["sections"]] == resolve_plan("restaurant")
    hero = data["sections"][1]
    assert hero["type"] == "AdaptiveHero"
    assert hero["source"] == "llm"
    assert hero["props"]["title"] == "Seasonal tasting menus"
    assert data["metadata"]["title"] == "Gourmet Haven"
    assert data["settings"]["colorScheme"]["primary"] == "#f43f5e"


def test_generate_rejects_incomplete_request(client):
    response = client.post("/v1/websites:generate", json={"industry": "restaurant"})

    assert response.status_code == 422


def test_export_generated_website(client):
    website = client.post("/v1/websites:generate", json=REQUEST_BODY).json()

    response = client.post("/v1/websites:export", json={"website": website})

    assert response.status_code == 200
    exported = response.json()
    assert exported["html"].startswith("<!DOCTYPE html>")
    assert "Seasonal tasting menus" in exported["html"]
    assert "--color-primary: #f43f5e;" in exported["css"]
    assert isinstance(exported["assets"], list)


def test_export_website_as_json_document(client):
    website = client.post("/v1/websites:generate", json=REQUEST_BODY).json()
    website["sections"].reverse()

    response = client.post("/v1/websites:export?format=json", json={"website": website})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    document = response.json()
    assert [section["order"] for section in document["sections"]] == list(range(1, 9))
    assert document["sections"][1]["sectionType"] == "Hero"
    assert document["metadata"]["title"] == "Gourmet Haven"


def test_export_rejects_unknown_format(client):
    website = client.post("/v1/websites:generate", json=REQUEST_BODY).json()

    response = client.post("/v1/websites:export?format=pdf", json={"website": website})

    assert response.status_code == 422

def test_background_job_completes(client):
    created = client.post("/v1/jobs", json=REQUEST_BODY)

    assert created.status_code == 200
    job_id = created.json()["job_id"]

    job = client.get(f"/v1/jobs/{job_id}").json()
    assert job["status"] == "COMPLETED"
    assert job["progress"] == 1.0
    assert "Menu" in job["fallback_sections"]
    assert "Hero" not in job["fallback_sections"]
    assert job["website"]["metadata"]["title"] == "Gourmet Haven"


def test_unknown_job_is_404(client):
    assert client.get("/v1/jobs/job_missing").status_code == 404


def test_health_reports_backend(client):
    response = client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "llm": {"backend": "scripted", "available": True}}
    assert response.headers["X-Request-ID"] == "req-42"
