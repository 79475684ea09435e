from __future__ import annotations

from ..domain.models import NoSchedule, OptimalSchedule, ScheduleResult, ScheduleStatus
from .formulation import AssignmentMatrix
from .optimizer import SolveOutcome, SolverStatus


def extract_result(outcome: SolveOutcome, matrix: AssignmentMatrix) -> ScheduleResult:
    """Turn a terminal solve into a result.

    Only a proven optimum yields an assignment grid. A feasible but unproven
    solution is reported as ``Other`` and its values are dropped.
    """
    wall_time_ms = int(outcome.wall_time_seconds * 1000)

    if outcome.status is SolverStatus.OPTIMAL:
        day_assignments = tuple(
            tuple(bool(outcome.boolean_value(assigned)) for assigned in day_vars)
            for day_vars in matrix.by_day()
        )
        return OptimalSchedule(
            day_assignments=day_assignments,
            objective_value=int(round(outcome.objective_value or 0)),
            solver_status=outcome.status.value,
            wall_time_ms=wall_time_ms,
        )

    if outcome.status is SolverStatus.INFEASIBLE:
        status = ScheduleStatus.INFEASIBLE
    else:
        status = ScheduleStatus.OTHER
    return NoSchedule(status=status, solver_status=outcome.status.value, wall_time_ms=wall_time_ms)
