from __future__ import annotations

import logging
from typing import Dict, Sequence

from ortools.sat.python import cp_model

from .optimizer import SolveOutcome, SolverStatus

logger = logging.getLogger(__name__)

_STATUS_BY_CODE: Dict[int, SolverStatus] = {
    cp_model.OPTIMAL: SolverStatus.OPTIMAL,
    cp_model.FEASIBLE: SolverStatus.FEASIBLE,
    cp_model.INFEASIBLE: SolverStatus.INFEASIBLE,
    cp_model.MODEL_INVALID: SolverStatus.MODEL_INVALID,
    cp_model.UNKNOWN: SolverStatus.UNKNOWN,
}


class CpSatOptimizer:
    """
    OR-Tools CP-SAT backed optimizer.

    One instance wraps one ``CpModel`` and is meant to be used for a single
    solve; build a new one per request.
    """

    def __init__(self, num_workers: int = 8, log_search_progress: bool = False) -> None:
        self._model = cp_model.CpModel()
        self._num_workers = num_workers
        self._log_search_progress = log_search_progress

    @property
    def model(self) -> cp_model.CpModel:
        return self._model

    def new_bool_var(self, name: str) -> cp_model.IntVar:
        return self._model.new_bool_var(name)

    def add_linear_range(self, variables: Sequence[cp_model.IntVar], lower: int, upper: int) -> None:
        variables = list(variables)
        if not variables or lower > upper:
            if not lower <= 0 <= upper:
                # Empty clause: the model is unsatisfiable and CP-SAT reports INFEASIBLE.
                self._model.add_bool_or([])
            return
        self._model.add_linear_constraint(cp_model.LinearExpr.sum(variables), lower, upper)

    def fix(self, variable: cp_model.IntVar, value: int) -> None:
        self._model.add(variable == value)

    def maximize(self, variables: Sequence[cp_model.IntVar], coefficients: Sequence[int]) -> None:
        if not variables:
            return
        self._model.maximize(cp_model.LinearExpr.weighted_sum(list(variables), list(coefficients)))

    def solve(self, time_limit_seconds: float) -> SolveOutcome:
        solver = cp_model.CpSolver()
        solver.parameters.max_time_in_seconds = float(time_limit_seconds)
        solver.parameters.num_workers = self._num_workers
        solver.parameters.log_search_progress = self._log_search_progress

        status = solver.solve(self._model)
        solver_status = _STATUS_BY_CODE.get(status, SolverStatus.UNKNOWN)

        logger.info(f"CP-SAT finished with {solver.status_name(status)} in {solver.wall_time:.2f}s")

        has_solution = solver_status in (SolverStatus.OPTIMAL, SolverStatus.FEASIBLE)
        return SolveOutcome(
            status=solver_status,
            objective_value=solver.objective_value if has_solution else None,
            wall_time_seconds=solver.wall_time,
            boolean_value=solver.boolean_value,
        )
