# -*- coding: utf-8 -*-
"""
Electre-TRI Sorting
===================

End-to-end sorting of a :class:`SortingProblem`: coalitions check,
outranking between alternatives and profiles cut at λ / Σw, then
assignment with the chosen rule.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Union

import pandas as pd

from ..analysis.consistency import ConsistencyChecker
from ..config import get_config
from ..logger import get_module_logger, timed_operation
from ..outranking import OutrankingFull
from ..structure import OrderedAssignments, OrderedAssignmentsToMultiple, RelationMatrix, SortingProblem
from .assigner import SortingAssigner, SortingMode

logger = get_module_logger('sorting.full')


@dataclass
class SortingResult:
    """Result container for Electre-TRI sorting."""
    assignments: Union[OrderedAssignments, OrderedAssignmentsToMultiple]
    mode: SortingMode
    outranking: RelationMatrix
    smallest_separation: Optional[float] = None

    def to_frame(self) -> pd.DataFrame:
        if isinstance(self.assignments, OrderedAssignmentsToMultiple):
            return self.assignments.to_frame()
        return self.assignments.to_series().to_frame()

    def category_counts(self) -> pd.Series:
        """Number of alternatives per assigned category (worst bound for intervals)."""
        frame = self.to_frame()
        column = 'Worst' if 'Worst' in frame.columns else 'Category'
        return frame[column].value_counts()

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            f"ELECTRE-TRI SORTING RESULTS ({self.mode.value})",
            f"{'='*60}",
            f"\nAlternatives: {len(self.assignments)}",
        ]
        if self.smallest_separation is not None:
            lines.append(f"Smallest separation: {self.smallest_separation:.6g}")
        lines.append("\nAssignments:")
        for alternative, assigned in self.assignments.items():
            if isinstance(assigned, list):
                label = assigned[0].id if len(assigned) == 1 else f"{assigned[0].id} .. {assigned[-1].id}"
            else:
                label = assigned.id
            lines.append(f"  {alternative.id}: {label}")
        lines.append("=" * 60)
        return "\n".join(lines)


class SortingFull:
    """
    Electre-TRI sorting in one call.

    Parameters
    ----------
    sharp_vetoes : bool, optional
        Use binary discordances. Defaults to the configured ``sharp_vetoes``.
    tolerance : float, optional
        Cut tolerance of the outranking relation.
    """

    def __init__(self, sharp_vetoes: Optional[bool] = None, tolerance: Optional[float] = None):
        self.sharp_vetoes = sharp_vetoes if sharp_vetoes is not None else get_config().sorting.sharp_vetoes
        self.tolerance = tolerance

    def assign(self, mode: Optional[SortingMode], problem: SortingProblem) -> SortingResult:
        """
        Sort the alternatives of ``problem``.

        Parameters
        ----------
        mode : SortingMode, optional
            Assignment rule; defaults to the configured ``default_mode``.
        problem : SortingProblem
            Problem with complete coalitions (λ set, λ <= Σw).

        Returns
        -------
        SortingResult
        """
        if problem is None:
            raise ValueError("Sorting problem is required")
        if mode is None:
            mode = get_config().sorting.default_mode
        mode = SortingMode(mode)
        ConsistencyChecker().assert_complete_coalitions(problem)

        with timed_operation(logger, f"Electre-TRI {mode.value} sorting", level=logging.DEBUG):
            outranking = OutrankingFull(sharp_vetoes=self.sharp_vetoes, tolerance=self.tolerance) \
                .outranking(problem.as_problem_data(), problem.thresholds, problem.coalitions)
            assignments = SortingAssigner().assign(mode, problem.alternatives, outranking.matrix,
                                                   problem.cats_and_profs)

        logger.info(f"Sorted {len(assignments)} alternatives into "
                    f"{len(problem.cats_and_profs)} categories ({mode.value})")
        return SortingResult(assignments=assignments, mode=mode, outranking=outranking.matrix,
                             smallest_separation=outranking.smallest_separation)

    def pessimistic(self, problem: SortingProblem) -> SortingResult:
        return self.assign(SortingMode.PESSIMISTIC, problem)

    def optimistic(self, problem: SortingProblem) -> SortingResult:
        return self.assign(SortingMode.OPTIMISTIC, problem)

    def both(self, problem: SortingProblem) -> SortingResult:
        return self.assign(SortingMode.BOTH, problem)

    def pessimistic_all(self, problems: Dict[Hashable, SortingProblem]) -> Dict[Hashable, OrderedAssignments]:
        """Pessimistic assignments for each decision maker's problem."""
        return {dm: self.pessimistic(problem).assignments for dm, problem in problems.items()}
