from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Sequence

from .models.job import JobRecord, JobStatus


class JobStore:
    """In-memory registry of background website generation jobs."""

    def __init__(self) -> None:
        self._jobs: Dict[str, JobRecord] = {}
        self._lock = threading.Lock()

    def create_job(self, *, industry: str, website_name: str) -> JobRecord:
        with self._lock:
            job = JobRecord(
                id=f"job_{uuid.uuid4().hex[:12]}",
                status=JobStatus.queued,
                industry=industry,
                website_name=website_name,
            )
            self._jobs[job.id] = job
            return job

    def get_job(self, job_id: str) -> JobRecord | None:
        with self._lock:
            return self._jobs.get(job_id)

    def update_job(
        self,
        job_id: str,
        *,
        status: JobStatus | None = None,
        progress: float | None = None,
        website: Mapping[str, Any] | None = None,
        fallback_sections: Sequence[str] | None = None,
        errors: Sequence[str] | None = None,
    ) -> JobRecord:
        with self._lock:
            job = self._jobs[job_id]
            changes: dict[str, Any] = {"updated_at": datetime.now(timezone.utc)}
            if status is not None:
                changes["status"] = status
            if progress is not None:
                changes["progress"] = progress
            if website is not None:
                changes["website"] = website
            if fallback_sections is not None:
                changes["fallback_sections"] = list(fallback_sections)
            if errors is not None:
                changes["errors"] = list(errors)
            job = job.model_copy(update=changes)
            self._jobs[job_id] = job
            return job


__all__ = ["JobStore"]
