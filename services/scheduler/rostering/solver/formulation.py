from __future__ import annotations

import logging
from typing import Any, Iterator, List, Sequence, Tuple

from ..domain.models import ScheduleRequest
from .optimizer import Optimizer

logger = logging.getLogger(__name__)


class AssignmentMatrix:
    """Row-major days x people grid of boolean decision variables.

    ``by_person`` walks the same variables column-wise so the per-person
    constraints never see a copy of the grid.
    """

    def __init__(self, rows: List[List[Any]], person_count: int) -> None:
        self._rows = rows
        self._person_count = person_count

    @classmethod
    def create(cls, optimizer: Optimizer, day_count: int, person_count: int) -> "AssignmentMatrix":
        rows = [
            [optimizer.new_bool_var(f"assigned_d{day}_p{person}") for person in range(person_count)]
            for day in range(day_count)
        ]
        return cls(rows, person_count)

    @property
    def day_count(self) -> int:
        return len(self._rows)

    @property
    def person_count(self) -> int:
        return self._person_count

    def __getitem__(self, cell: Tuple[int, int]) -> Any:
        day, person = cell
        return self._rows[day][person]

    def day(self, day: int) -> Sequence[Any]:
        return self._rows[day]

    def person(self, person: int) -> List[Any]:
        return [row[person] for row in self._rows]

    def by_day(self) -> Iterator[Sequence[Any]]:
        return iter(self._rows)

    def by_person(self) -> Iterator[List[Any]]:
        return (self.person(person) for person in range(self._person_count))

    def cells(self) -> Iterator[Any]:
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return self.day_count * self._person_count


def build_model(request: ScheduleRequest, optimizer: Optimizer) -> AssignmentMatrix:
    """Declare the assignment grid, its constraints and the objective on ``optimizer``.

    The request is expected to have passed ``validate_request`` already.
    """
    matrix = AssignmentMatrix.create(optimizer, request.day_count, request.person_count)
    logger.info(f"Created {len(matrix)} decision variables")

    for day_vars, day in zip(matrix.by_day(), request.days):
        optimizer.add_linear_range(day_vars, day.minimum_assigned, day.maximum_assigned)

    for day_vars, day in zip(matrix.by_day(), request.days):
        for assigned, available in zip(day_vars, day.availability):
            if not available:
                optimizer.fix(assigned, 0)

    for person_vars, person in zip(matrix.by_person(), request.people):
        optimizer.add_linear_range(person_vars, person.minimum_assigned, person.maximum_assigned)

    # preference[d][p] * x + assignment_weight * x, folded into one coefficient per cell
    coefficients = [
        preference + request.assignment_weight
        for day in request.days
        for preference in day.preference
    ]
    optimizer.maximize(list(matrix.cells()), coefficients)

    return matrix
