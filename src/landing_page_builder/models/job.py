from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobStatus(str, Enum):
    queued = "QUEUED"
    in_progress = "IN_PROGRESS"
    completed = "COMPLETED"
    failed = "FAILED"


class JobRecord(BaseModel):
    id: str
    status: JobStatus
    progress: float = 0.0
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    industry: str | None = None
    website_name: str | None = None
    errors: Sequence[str] = Field(default_factory=list)
    website: Mapping[str, Any] | None = None
    fallback_sections: Sequence[str] = Field(default_factory=list)


__all__ = ["JobRecord", "JobStatus"]
