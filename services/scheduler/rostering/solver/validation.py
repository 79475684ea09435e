from __future__ import annotations

from ..domain.errors import ScheduleValidationError
from ..domain.models import ScheduleRequest


def validate_request(request: ScheduleRequest) -> None:
    """Reject days whose per-person arrays disagree with the number of people.

    Bound values are left alone; the solver reports impossible bounds as
    infeasible.
    """
    person_count = request.person_count
    for day_index, day in enumerate(request.days):
        for array_name, values in (("availability", day.availability), ("preference", day.preference)):
            if len(values) != person_count:
                raise ScheduleValidationError(
                    f"Day {day_index}: {array_name} has {len(values)} entries, "
                    f"expected one per person ({person_count})"
                )
