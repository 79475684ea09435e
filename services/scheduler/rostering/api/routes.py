from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ..domain.errors import ScheduleValidationError
from ..domain.models import ScheduleJob, ScheduleJobHandle, ScheduleRequest, ScheduleResponse
from ..jobs import ScheduleJobRunner, schedule_jobs
from ..service import SchedulerService, scheduler_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["schedule"])


def get_scheduler_service() -> SchedulerService:
    return scheduler_service


def get_job_runner() -> ScheduleJobRunner:
    return schedule_jobs


@router.post("/solve", response_model=ScheduleResponse)
def solve_schedule(
    request: ScheduleRequest,
    service: SchedulerService = Depends(get_scheduler_service),
) -> ScheduleResponse:
    try:
        return ScheduleResponse.from_result(service.generate_schedule(request))
    except ScheduleValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:  # pragma: no cover - safety net
        logger.exception("Schedule solve failed")
        raise HTTPException(status_code=500, detail=f"Solver failed: {exc}") from exc


@router.post(
    "/schedules",
    response_model=ScheduleJobHandle,
    status_code=status.HTTP_202_ACCEPTED,
)
def start_schedule(
    request: ScheduleRequest,
    http_request: Request,
    response: Response,
    runner: ScheduleJobRunner = Depends(get_job_runner),
) -> ScheduleJobHandle:
    try:
        job = runner.submit(request)
    except ScheduleValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except RuntimeError as exc:
        raise HTTPException(status_code=503, detail="Scheduler is not accepting new jobs") from exc

    status_uri = str(http_request.url_for("get_schedule", instance_id=job.instance_id))
    response.headers["Location"] = status_uri
    return ScheduleJobHandle(id=job.instance_id, status_query_get_uri=status_uri)


@router.get("/schedules/{instance_id}", response_model=ScheduleJob, name="get_schedule")
def get_schedule(
    instance_id: str,
    runner: ScheduleJobRunner = Depends(get_job_runner),
) -> ScheduleJob:
    job = runner.get(instance_id)
    if job is None:
        raise HTTPException(status_code=404, detail=f"Unknown schedule job {instance_id}")
    return job


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
