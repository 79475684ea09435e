"""Optimizer contract consumed by the model formulator.

Any engine that can declare boolean variables, bound linear sums, fix a
variable, maximize a weighted sum and solve under a time limit fits here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Sequence


class SolverStatus(str, Enum):
    """Terminal solver states, named after CP-SAT's."""

    OPTIMAL = "OPTIMAL"
    FEASIBLE = "FEASIBLE"
    INFEASIBLE = "INFEASIBLE"
    MODEL_INVALID = "MODEL_INVALID"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class SolveOutcome:
    status: SolverStatus
    objective_value: Optional[float]
    wall_time_seconds: float
    # Only meaningful when a solution exists.
    boolean_value: Callable[[Any], bool]


class Optimizer(Protocol):
    def new_bool_var(self, name: str) -> Any:
        ...

    def add_linear_range(self, variables: Sequence[Any], lower: int, upper: int) -> None:
        """Constrain ``lower <= sum(variables) <= upper``."""
        ...

    def fix(self, variable: Any, value: int) -> None:
        ...

    def maximize(self, variables: Sequence[Any], coefficients: Sequence[int]) -> None:
        ...

    def solve(self, time_limit_seconds: float) -> SolveOutcome:
        ...


OptimizerFactory = Callable[[], Optimizer]
