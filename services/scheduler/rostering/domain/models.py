from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScheduleStatus(str, Enum):
    OPTIMAL = "Optimal"
    INFEASIBLE = "Infeasible"
    OTHER = "Other"


class CamelModel(BaseModel):
    """Accepts camelCase JSON keys and snake_case field names alike."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Only the magnitude is limited. Inverted or out-of-range bounds are reported
# by the solver as infeasible rather than rejected up front.
Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class PersonSpec(CamelModel):
    minimum_assigned: Int32
    maximum_assigned: Int32


class DaySpec(CamelModel):
    minimum_assigned: Int32
    maximum_assigned: Int32
    availability: List[bool]
    preference: List[Int32]


class ScheduleRequest(CamelModel):
    days: List[DaySpec]
    people: List[PersonSpec]
    assignment_weight: Int32

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def person_count(self) -> int:
        return len(self.people)


@dataclass(frozen=True)
class OptimalSchedule:
    """A proven-optimal assignment; ``day_assignments[d][p]`` is True iff person p works day d."""

    day_assignments: Tuple[Tuple[bool, ...], ...]
    objective_value: int
    solver_status: str
    wall_time_ms: int

    @property
    def status(self) -> ScheduleStatus:
        return ScheduleStatus.OPTIMAL


@dataclass(frozen=True)
class NoSchedule:
    """Any non-optimal outcome. There is deliberately no assignment grid."""

    status: ScheduleStatus
    solver_status: str
    wall_time_ms: int


ScheduleResult = Union[OptimalSchedule, NoSchedule]


class SolveMetrics(CamelModel):
    solver_status: str
    objective_value: Optional[int] = None
    solver_wall_time_ms: Optional[int] = None


class ScheduleResponse(CamelModel):
    status: ScheduleStatus
    day_assignments: Optional[List[List[bool]]] = None
    metrics: SolveMetrics

    @classmethod
    def from_result(cls, result: ScheduleResult) -> "ScheduleResponse":
        if isinstance(result, OptimalSchedule):
            return cls(
                status=result.status,
                day_assignments=[list(day) for day in result.day_assignments],
                metrics=SolveMetrics(
                    solver_status=result.solver_status,
                    objective_value=result.objective_value,
                    solver_wall_time_ms=result.wall_time_ms,
                ),
            )
        return cls(
            status=result.status,
            day_assignments=None,
            metrics=SolveMetrics(
                solver_status=result.solver_status,
                solver_wall_time_ms=result.wall_time_ms,
            ),
        )


class JobRuntimeStatus(str, Enum):
    PENDING = "Pending"
    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"

    @property
    def is_finished(self) -> bool:
        return self in (JobRuntimeStatus.COMPLETED, JobRuntimeStatus.FAILED)


class ScheduleJob(CamelModel):
    instance_id: str
    runtime_status: JobRuntimeStatus
    created_time: datetime
    last_updated_time: datetime
    output: Optional[ScheduleResponse] = None
    error: Optional[str] = None


class ScheduleJobHandle(CamelModel):
    id: str
    status_query_get_uri: str
