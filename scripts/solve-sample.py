#!/usr/bin/env python3

"""
Solve a small sample roster directly through the scheduler service.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'services', 'scheduler'))

from rostering.domain.models import DaySpec, OptimalSchedule, PersonSpec, ScheduleRequest
from rostering.service import SchedulerService

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri"]
PEOPLE = ["Alice", "Bob", "Chloe", "Dries"]


def solve_sample():
    print("🧪 Solving sample roster...\n")

    request = ScheduleRequest(
        days=[
            # Two people every weekday, Dries is off on Wednesday
            DaySpec(minimum_assigned=2, maximum_assigned=2,
                    availability=[True, True, True, True], preference=[3, 1, 0, 2]),
            DaySpec(minimum_assigned=2, maximum_assigned=2,
                    availability=[True, True, True, True], preference=[0, 2, 3, 1]),
            DaySpec(minimum_assigned=2, maximum_assigned=2,
                    availability=[True, True, True, False], preference=[1, 1, 1, 0]),
            DaySpec(minimum_assigned=2, maximum_assigned=2,
                    availability=[False, True, True, True], preference=[0, 3, -1, 2]),
            DaySpec(minimum_assigned=1, maximum_assigned=2,
                    availability=[True, False, True, True], preference=[2, 0, 1, 3]),
        ],
        people=[
            PersonSpec(minimum_assigned=2, maximum_assigned=3),
            PersonSpec(minimum_assigned=2, maximum_assigned=3),
            PersonSpec(minimum_assigned=1, maximum_assigned=3),
            PersonSpec(minimum_assigned=2, maximum_assigned=3),
        ],
        assignment_weight=1,
    )

    result = SchedulerService().generate_schedule(request)

    print(f"📊 Status: {result.status.value} (solver {result.solver_status})")
    print(f"⏱️  Solve Time: {result.wall_time_ms}ms\n")

    if not isinstance(result, OptimalSchedule):
        print("⚠️  No schedule produced.")
        return

    print(f"📊 Objective: {result.objective_value}\n")
    print("📋 Roster:")
    for day_name, assigned in zip(DAY_NAMES, result.day_assignments):
        names = [person for person, works in zip(PEOPLE, assigned) if works]
        print(f"  {day_name}: {', '.join(names) or '-'}")


if __name__ == "__main__":
    solve_sample()
