"""
Shared fixtures and stub optimizers for scheduler tests.
"""

import itertools
from typing import Any, List, Optional, Sequence, Tuple

import pytest

from rostering.domain.models import DaySpec, PersonSpec, ScheduleRequest
from rostering.solver.optimizer import SolveOutcome, SolverStatus


def make_request(
    availability: List[List[bool]],
    preference: Optional[List[List[int]]] = None,
    day_bounds: Optional[List[Tuple[int, int]]] = None,
    person_bounds: Optional[List[Tuple[int, int]]] = None,
    assignment_weight: int = 0,
) -> ScheduleRequest:
    """Build a request from day-major availability/preference grids."""
    person_count = len(availability[0]) if availability else len(person_bounds or [])
    preference = preference or [[0] * len(row) for row in availability]
    day_bounds = day_bounds or [(0, len(row)) for row in availability]
    person_bounds = person_bounds or [(0, len(availability))] * person_count

    return ScheduleRequest(
        days=[
            DaySpec(
                minimum_assigned=low,
                maximum_assigned=high,
                availability=available,
                preference=prefs,
            )
            for (low, high), available, prefs in zip(day_bounds, availability, preference)
        ],
        people=[PersonSpec(minimum_assigned=low, maximum_assigned=high) for low, high in person_bounds],
        assignment_weight=assignment_weight,
    )


class ExhaustiveOptimizer:
    """Enumerates every 0/1 assignment. Only usable on tiny models."""

    def __init__(self) -> None:
        self.variables: List[str] = []
        self.ranges: List[Tuple[List[int], int, int]] = []
        self.fixed: List[Tuple[int, int]] = []
        self.objective: Optional[Tuple[List[int], List[int]]] = None
        self.solve_calls: List[float] = []

    def new_bool_var(self, name: str) -> int:
        self.variables.append(name)
        return len(self.variables) - 1

    def add_linear_range(self, variables: Sequence[int], lower: int, upper: int) -> None:
        self.ranges.append((list(variables), lower, upper))

    def fix(self, variable: int, value: int) -> None:
        self.fixed.append((variable, value))

    def maximize(self, variables: Sequence[int], coefficients: Sequence[int]) -> None:
        self.objective = (list(variables), list(coefficients))

    def _score(self, values: Tuple[int, ...]) -> int:
        if self.objective is None:
            return 0
        return sum(values[var] * coef for var, coef in zip(*self.objective))

    def _is_feasible(self, values: Tuple[int, ...]) -> bool:
        if any(values[var] != value for var, value in self.fixed):
            return False
        return all(lower <= sum(values[var] for var in group) <= upper for group, lower, upper in self.ranges)

    def solve(self, time_limit_seconds: float) -> SolveOutcome:
        self.solve_calls.append(time_limit_seconds)
        best: Optional[Tuple[int, ...]] = None
        for values in itertools.product((0, 1), repeat=len(self.variables)):
            if self._is_feasible(values) and (best is None or self._score(values) > self._score(best)):
                best = values

        if best is None:
            return SolveOutcome(SolverStatus.INFEASIBLE, None, 0.0, lambda var: False)
        return SolveOutcome(SolverStatus.OPTIMAL, float(self._score(best)), 0.001, lambda var: bool(best[var]))


class FixedStatusOptimizer(ExhaustiveOptimizer):
    """Accepts any model and reports a preset status with every variable set."""

    def __init__(self, status: SolverStatus) -> None:
        super().__init__()
        self.status = status

    def solve(self, time_limit_seconds: float) -> SolveOutcome:
        self.solve_calls.append(time_limit_seconds)
        return SolveOutcome(self.status, 42.0, 10.0, lambda var: True)


def assert_respects_request(request: ScheduleRequest, grid: Sequence[Sequence[Any]]) -> None:
    """Check availability, day-sum and person-sum invariants on an assignment grid."""
    assert len(grid) == len(request.days)
    for day, assigned in zip(request.days, grid):
        assert len(assigned) == len(request.people)
        assert day.minimum_assigned <= sum(assigned) <= day.maximum_assigned
        for works, available in zip(assigned, day.availability):
            assert available or not works

    for person_index, person in enumerate(request.people):
        total = sum(row[person_index] for row in grid)
        assert person.minimum_assigned <= total <= person.maximum_assigned


@pytest.fixture
def exhaustive_optimizer() -> ExhaustiveOptimizer:
    return ExhaustiveOptimizer()
