"""Fire-and-poll schedule solves.

A submitted request is validated, registered as a job and solved on a worker
thread; callers poll the job by id until it is Completed or Failed.
"""

from __future__ import annotations

import logging
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from .config import Settings, settings as default_settings
from .domain.models import JobRuntimeStatus, ScheduleJob, ScheduleRequest, ScheduleResponse
from .service import SchedulerService, scheduler_service
from .solver.validation import validate_request

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScheduleJobRunner:
    def __init__(
        self,
        service: Optional[SchedulerService] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or default_settings
        self._service = service or scheduler_service
        self._executor = ThreadPoolExecutor(
            max_workers=self._settings.max_concurrent_solves,
            thread_name_prefix="schedule-solve",
        )
        self._jobs: Dict[str, ScheduleJob] = {}
        self._lock = threading.Lock()

    def submit(self, request: ScheduleRequest) -> ScheduleJob:
        # Malformed requests are rejected here instead of becoming Failed jobs.
        validate_request(request)

        now = _utcnow()
        job = ScheduleJob(
            instance_id=uuid.uuid4().hex,
            runtime_status=JobRuntimeStatus.PENDING,
            created_time=now,
            last_updated_time=now,
        )
        with self._lock:
            self._purge_expired(now)
            self._jobs[job.instance_id] = job

        try:
            self._executor.submit(self._run, job.instance_id, request)
        except RuntimeError:
            # Pool already shut down; the job would never leave Pending.
            with self._lock:
                self._jobs.pop(job.instance_id, None)
            raise
        logger.info(f"Started schedule job {job.instance_id}")
        return job

    def get(self, instance_id: str) -> Optional[ScheduleJob]:
        with self._lock:
            return self._jobs.get(instance_id)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _run(self, instance_id: str, request: ScheduleRequest) -> None:
        self._update(instance_id, runtime_status=JobRuntimeStatus.RUNNING)
        try:
            result = self._service.generate_schedule(request)
        except Exception as exc:
            logger.exception(f"Schedule job {instance_id} failed")
            self._update(instance_id, runtime_status=JobRuntimeStatus.FAILED, error=str(exc))
            return

        self._update(
            instance_id,
            runtime_status=JobRuntimeStatus.COMPLETED,
            output=ScheduleResponse.from_result(result),
        )
        logger.info(f"Schedule job {instance_id} completed with {result.status.value}")

    def _update(self, instance_id: str, **changes) -> None:
        with self._lock:
            job = self._jobs.get(instance_id)
            if job is None:
                return
            self._jobs[instance_id] = job.model_copy(
                update={**changes, "last_updated_time": _utcnow()}
            )

    def _purge_expired(self, now: datetime) -> None:
        cutoff = now - timedelta(seconds=self._settings.job_retention_seconds)
        expired = [
            instance_id
            for instance_id, job in self._jobs.items()
            if job.runtime_status.is_finished and job.last_updated_time < cutoff
        ]
        for instance_id in expired:
            del self._jobs[instance_id]


schedule_jobs = ScheduleJobRunner()
