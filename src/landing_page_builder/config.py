from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .backends.base import TextBackend
from .content_client import DEFAULT_TIMEOUT_SECONDS, ContentClient


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {raw!r}")
    return value


@dataclass(frozen=True)
class AppConfig:
    environment: str = "dev"
    project_id: str | None = None
    llm_backend: str = "ollama"
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "wizardlm2"
    vertex_location: str = "asia-northeast1"
    vertex_model: str = "gemini-1.5-pro"
    llm_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    llm_max_attempts: int = 1
    assembly_concurrency: int = 1

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "AppConfig":
        env = os.environ if env is None else env
        backend = env.get("LLM_BACKEND", "ollama").strip().lower()
        if backend not in ("ollama", "vertex"):
            raise ValueError(f"LLM_BACKEND must be 'ollama' or 'vertex', got {backend!r}")
        return cls(
            environment=env.get("ENVIRONMENT", "dev"),
            project_id=env.get("PROJECT_ID") or None,
            llm_backend=backend,
            ollama_base_url=env.get("OLLAMA_BASE_URL", "http://localhost:11434"),
            ollama_model=env.get("OLLAMA_MODEL", "wizardlm2"),
            vertex_location=env.get("VERTEX_LOCATION", "asia-northeast1"),
            vertex_model=env.get("VERTEX_MODEL", "gemini-1.5-pro"),
            llm_timeout_seconds=_float_env(env, "LLM_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            llm_max_attempts=_int_env(env, "LLM_MAX_ATTEMPTS", 1),
            assembly_concurrency=_int_env(env, "ASSEMBLY_CONCURRENCY", 1),
        )

    def build_backend(self) -> TextBackend:
        if self.llm_backend == "vertex":
            if not self.project_id:
                raise ValueError("PROJECT_ID is required for the vertex backend")
            # Imported lazily so the Vertex SDK is only initialised when selected.
            from .backends.vertex_ai import VertexAIBackend

            return VertexAIBackend(
                project_id=self.project_id,
                location=self.vertex_location,
                model_name=self.vertex_model,
            )
        from .backends.ollama import OllamaBackend

        return OllamaBackend(base_url=self.ollama_base_url, model=self.ollama_model)

    def build_client(self) -> ContentClient:
        return ContentClient(
            self.build_backend(),
            timeout=self.llm_timeout_seconds,
            max_attempts=self.llm_max_attempts,
        )


__all__ = ["AppConfig"]
