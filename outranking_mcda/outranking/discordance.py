# -*- coding: utf-8 -*-
"""
Discordance: Veto-Based Opposition to an Outranking
===================================================

For a pair (a, b) and a criterion j with a veto threshold v_j, let d be
how much b beats a on j, g_j(b) − g_j(a) seen from the preference
direction::

    d_j(a, b) = 0                      if d <= p_j
              = 1                      if d >  v_j
              = (d − p_j)/(v_j − p_j)  otherwise

Without a veto threshold the discordance is 0. With sharp vetoes the
index is binary: 1 iff d > v_j. In that mode the smallest distance
|d − v_j| seen during a run tells how far the binary outcome is from
flipping under a perturbation of the vetoes.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from ..analysis.consistency import ConsistencyChecker
from ..exceptions import ThresholdOrderError
from ..logger import get_module_logger
from ..structure import Criterion, PreferenceDirection, ProblemData, RelationMatrix, Thresholds

logger = get_module_logger('outranking.discordance')


@dataclass
class DiscordanceResult:
    """
    Result container for discordance computation.

    Attributes
    ----------
    matrices : dict
        Discordance matrix per criterion.
    smallest_separation : float or None
        Smallest |d − v| met in sharp mode; None when no veto was evaluated
        or vetoes are not sharp.
    """
    matrices: Dict[Criterion, RelationMatrix]
    smallest_separation: Optional[float] = None

    def __getitem__(self, criterion) -> RelationMatrix:
        return self.matrices[criterion]

    @property
    def criteria(self):
        return list(self.matrices)

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            "DISCORDANCE RESULTS",
            f"{'='*60}",
            f"\nCriteria: {len(self.matrices)}",
        ]
        for criterion, matrix in self.matrices.items():
            values = matrix.to_frame().to_numpy()
            lines.append(f"  {criterion}: max={np.nanmax(values) if values.size else 0:.4f}, "
                         f"vetoes={int((values >= 1).sum())}")
        if self.smallest_separation is not None:
            lines.append(f"\nSmallest veto separation: {self.smallest_separation:.6g}")
        lines.append("=" * 60)
        return "\n".join(lines)


class DiscordanceCalculator:
    """
    Per-criterion discordance matrices.

    Parameters
    ----------
    sharp_vetoes : bool
        Use binary discordance (step at the veto threshold).
    """

    def __init__(self, sharp_vetoes: bool = False):
        self.sharp_vetoes = sharp_vetoes

    @staticmethod
    def _gap(e1: float, e2: float, direction: PreferenceDirection) -> float:
        if direction is None:
            raise ValueError("Preference direction is required")
        return PreferenceDirection.parse(direction).orient(e2 - e1)

    def discordance_pairwise(self, e1: float, e2: float, direction: PreferenceDirection,
                             p: float, v: Optional[float]) -> float:
        """
        Discordance against the outranking of an alternative valued ``e1``
        over one valued ``e2``.

        Raises
        ------
        ThresholdOrderError
            If ``v < p``.
        """
        perf_diff = self._gap(e1, e2, direction)
        if v is None:
            return 0.0
        if v < p:
            raise ThresholdOrderError(f"Veto threshold ({v}) is lower than preference threshold ({p}).")
        if perf_diff <= p:
            return 0.0
        if perf_diff > v:
            return 1.0
        return (perf_diff - p) / (v - p)

    def discordance_pairwise_binary(self, e1: float, e2: float, direction: PreferenceDirection,
                                    v: Optional[float]) -> Tuple[bool, Optional[float]]:
        """Sharp veto: whether the gap exceeds ``v``, and the distance |gap − v|."""
        perf_diff = self._gap(e1, e2, direction)
        if v is None:
            return False, None
        return perf_diff > v, abs(perf_diff - v)

    def discordances(self, data: ProblemData, thresholds: Optional[Thresholds]) -> DiscordanceResult:
        """
        Discordance matrices over every pair of alternatives of ``data``.

        Parameters
        ----------
        data : ProblemData
            Complete evaluations with a preference direction on every criterion.
        thresholds : Thresholds
            Preference and veto thresholds.

        Returns
        -------
        DiscordanceResult
        """
        thresholds = thresholds if thresholds is not None else Thresholds()
        checker = ConsistencyChecker()
        checker.assert_complete_alternatives_evaluations(data)
        checker.assert_complete_preference_directions(data.scales, data.criteria)
        checker.assert_known_criteria(thresholds.criteria, data.criteria, what="thresholds")
        for criterion in data.criteria:
            v = thresholds.get_veto(criterion)
            p = thresholds.get_preference(criterion)
            if v is not None and not self.sharp_vetoes and v < p:
                raise ThresholdOrderError(
                    f"Veto threshold ({v}) is lower than preference threshold ({p}) on {criterion}.")

        alternatives = list(data.alternatives)
        values = data.evaluations.values(alternatives, data.criteria)
        n = len(alternatives)
        smallest: Optional[float] = None

        matrices = {}
        for j, criterion in enumerate(data.criteria):
            direction = data.direction(criterion)
            v = thresholds.get_veto(criterion)
            p = thresholds.get_preference(criterion)
            matrix = np.zeros((n, n))
            if v is not None:
                for r in range(n):
                    for s in range(n):
                        if self.sharp_vetoes:
                            vetoed, separation = self.discordance_pairwise_binary(
                                values[r, j], values[s, j], direction, v)
                            matrix[r, s] = 1.0 if vetoed else 0.0
                            if smallest is None or separation < smallest:
                                smallest = separation
                        else:
                            matrix[r, s] = self.discordance_pairwise(
                                values[r, j], values[s, j], direction, p, v)
            matrices[criterion] = RelationMatrix.from_array(alternatives, alternatives, matrix)
            logger.debug(f"Computed discordance matrix of {criterion}")

        return DiscordanceResult(matrices=matrices, smallest_separation=smallest)
