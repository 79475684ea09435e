from __future__ import annotations

from typing import Optional

from .config import Settings, settings as default_settings
from .domain.models import ScheduleRequest, ScheduleResult
from .solver.cpsat import CpSatOptimizer
from .solver.optimizer import Optimizer, OptimizerFactory
from .solver.pipeline import solve_schedule


class SchedulerService:
    """Application service running one fresh optimizer per schedule request."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        optimizer_factory: Optional[OptimizerFactory] = None,
    ) -> None:
        self._settings = settings or default_settings
        self._optimizer_factory = optimizer_factory or self._cpsat_optimizer

    def _cpsat_optimizer(self) -> Optimizer:
        return CpSatOptimizer(num_workers=self._settings.solver_num_workers)

    def generate_schedule(self, request: ScheduleRequest) -> ScheduleResult:
        return solve_schedule(
            request,
            self._optimizer_factory(),
            time_limit_seconds=self._settings.solver_time_limit_seconds,
        )


scheduler_service = SchedulerService()
