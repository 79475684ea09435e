from __future__ import annotations

import logging

from ..domain.models import ScheduleRequest, ScheduleResult
from .extraction import extract_result
from .formulation import build_model
from .optimizer import Optimizer
from .validation import validate_request

logger = logging.getLogger(__name__)

DEFAULT_TIME_LIMIT_SECONDS = 10.0


def solve_schedule(
    request: ScheduleRequest,
    optimizer: Optimizer,
    time_limit_seconds: float = DEFAULT_TIME_LIMIT_SECONDS,
) -> ScheduleResult:
    """Validate, formulate, solve and extract one schedule.

    Raises ScheduleValidationError before touching ``optimizer`` if the
    request's per-person arrays are the wrong length.
    """
    validate_request(request)
    logger.info(f"Solving schedule: {request.day_count} days, {request.person_count} people")

    matrix = build_model(request, optimizer)
    outcome = optimizer.solve(time_limit_seconds)
    result = extract_result(outcome, matrix)

    logger.info(f"Schedule solve finished: {result.status.value} (solver {outcome.status.value})")
    return result
