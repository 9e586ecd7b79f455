import pytest

from landing_page_builder.backends.ollama import OllamaBackend
from landing_page_builder.config import AppConfig


def test_defaults_from_empty_environment():
    config = AppConfig.from_env({})

    assert config.environment == "dev"
    assert config.llm_backend == "ollama"
    assert config.llm_timeout_seconds == 10.0
    assert config.llm_max_attempts == 1
    assert config.assembly_concurrency == 1


def test_values_from_environment():
    config = AppConfig.from_env(
        {
            "ENVIRONMENT": "prod",
            "PROJECT_ID": "landing-pages",
            "LLM_BACKEND": "Vertex",
            "LLM_TIMEOUT_SECONDS": "2.5",
            "LLM_MAX_ATTEMPTS": "2",
            "ASSEMBLY_CONCURRENCY": "4",
        }
    )

    assert config.project_id == "landing-pages"
    assert config.llm_backend == "vertex"
    assert config.llm_timeout_seconds == 2.5
    assert config.llm_max_attempts == 2
    assert config.assembly_concurrency == 4


@pytest.mark.parametrize(
    "env",
    [
        {"LLM_BACKEND": "openai"},
        {"LLM_TIMEOUT_SECONDS": "soon"},
        {"LLM_TIMEOUT_SECONDS": "0"},
        {"LLM_MAX_ATTEMPTS": "0"},
        {"ASSEMBLY_CONCURRENCY": "many"},
    ],
)
def test_invalid_values_are_rejected(env):
    with pytest.raises(ValueError):
        AppConfig.from_env(env)


def test_build_client_for_ollama():
    config = AppConfig.from_env({"OLLAMA_BASE_URL": "http://gpu-box:11434/", "LLM_TIMEOUT_SECONDS": "3"})

    client = config.build_client()

    assert isinstance(client.backend, OllamaBackend)
    assert client.backend.base_url == "http://gpu-box:11434"
    assert client.timeout == 3.0


def test_vertex_backend_requires_project():
    with pytest.raises(ValueError):
        AppConfig(llm_backend="vertex").build_backend()
