from __future__ import annotations

import logging
import uuid
from typing import Literal

from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from landing_page_builder.assembler import SectionAssembler
from landing_page_builder.config import AppConfig
from landing_page_builder.content_client import ContentClient
from landing_page_builder.export.html import ExportedWebsite, export_to_html_css
from landing_page_builder.export.json_export import export_json
from landing_page_builder.job_store import JobStore
from landing_page_builder.logging_config import set_request_id, setup_logging
from landing_page_builder.models.job import JobRecord, JobStatus
from landing_page_builder.models.request import GenerationRequest
from landing_page_builder.models.website import Website, WebsiteSettings


class ExportRequest(BaseModel):
    website: Website
    settings: WebsiteSettings | None = Field(default=None, description="Defaults to the website's own settings")


class CreateJobResponse(BaseModel):
    job_id: str
    status: JobStatus


class JobResponse(BaseModel):
    id: str
    status: JobStatus
    progress: float
    website: dict | None = None
    fallback_sections: list[str]
    errors: list[str]

    @staticmethod
    def from_record(record: JobRecord) -> "JobResponse":
        return JobResponse(
            id=record.id,
            status=record.status,
            progress=record.progress,
            website=dict(record.website) if record.website is not None else None,
            fallback_sections=list(record.fallback_sections),
            errors=list(record.errors),
        )


# Environment configuration
config = AppConfig.from_env()

# Setup logging
setup_logging(environment=config.environment, project_id=config.project_id)
logger = logging.getLogger(__name__)

app = FastAPI(title="Landing Page Builder API", version="0.1.0")

job_store = JobStore()
content_client = config.build_client()
section_assembler = SectionAssembler(content_client, concurrency=config.assembly_concurrency)


def get_content_client() -> ContentClient:
    return content_client


def get_assembler() -> SectionAssembler:
    return section_assembler


@app.middleware("http")
async def assign_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_request_id(request_id)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.post("/v1/websites:generate", response_model=Website)
async def generate_website(
    request: GenerationRequest,
    assembler: SectionAssembler = Depends(get_assembler),
) -> Website:
    website = await assembler.build_website(request)
    logger.info(
        "Generated website",
        extra={
            "industry": request.industry,
            "sections_count": len(website.sections),
            "fallback_sections": [s.section_type for s in website.sections if s.source == "fallback"],
        },
    )
    return website


@app.post("/v1/websites:export", response_model=ExportedWebsite)
async def export_website(
    request: ExportRequest,
    format: Literal["html", "json"] = "html",
) -> ExportedWebsite | Response:
    if format == "json":
        # The website document itself, for rendering clients
        website = request.website
        if request.settings is not None:
            website = website.model_copy(update={"settings": request.settings})
        return Response(content=export_json(website), media_type="application/json")
    return export_to_html_css(request.website, request.settings)


@app.post("/v1/jobs", response_model=CreateJobResponse)
async def create_job(
    request: GenerationRequest,
    background_tasks: BackgroundTasks,
    assembler: SectionAssembler = Depends(get_assembler),
) -> CreateJobResponse:
    job = job_store.create_job(industry=request.industry, website_name=request.website_name)
    background_tasks.add_task(_run_job, job.id, request, assembler)
    return CreateJobResponse(job_id=job.id, status=job.status)


@app.get("/v1/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: str) -> JobResponse:
    record = job_store.get_job(job_id)
    if not record:
        raise HTTPException(status_code=404, detail="Job not found")
    return JobResponse.from_record(record)


async def _run_job(job_id: str, request: GenerationRequest, assembler: SectionAssembler) -> None:
    job_store.update_job(job_id, status=JobStatus.in_progress, progress=0.1)
    try:
        website = await assembler.build_website(request)
    except Exception as exc:
        logger.error("Website generation job failed", exc_info=True, extra={"job_id": job_id})
        job_store.update_job(job_id, status=JobStatus.failed, progress=1.0, errors=[str(exc)])
        return
    job_store.update_job(
        job_id,
        status=JobStatus.completed,
        progress=1.0,
        website=website.model_dump(by_alias=True, mode="json"),
        fallback_sections=[s.section_type for s in website.sections if s.source == "fallback"],
    )
    logger.info("Website generation job completed", extra={"job_id": job_id})


@app.get("/health")
async def healthcheck(client: ContentClient = Depends(get_content_client)) -> JSONResponse:
    available = await client.check_availability()
    return JSONResponse(
        {
            "status": "ok",
            "llm": {"backend": client.backend.name, "available": available},
        }
    )
