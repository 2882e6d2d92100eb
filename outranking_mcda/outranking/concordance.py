# -*- coding: utf-8 -*-
"""
Concordance: Electre Concordance and Promethee Preference Indices
=================================================================

For a pair (a, b) and a criterion j, with d the performance difference
g_j(a) − g_j(b) seen from the preference direction of j:

Electre concordance (is a at least as good as b?)::

    c_j(a, b) = 0                  if d <= −p_j
              = 1                  if d >= −q_j
              = (d + p_j)/(p_j − q_j)  otherwise

Promethee preference (is a strictly better than b?)::

    P_j(a, b) = 0                  if d <= q_j
              = 1                  if d >= p_j
              = (d − q_j)/(p_j − q_j)  otherwise

When p_j = q_j = d the concordance is 1 and the preference is 0.

Aggregation is the weighted mean::

    C(a, b) = Σ_j w_j · c_j(a, b) / Σ_j w_j

References
----------
[1] Roy, B. (1991). "The outranking approach and the foundations of ELECTRE
    methods." Theory and Decision, 31(1), 49–73.
[2] Brans, J.P., Vincke, Ph. (1985). "A Preference Ranking Organisation
    Method." Management Science, 31(6), 647–656.
"""

from typing import Dict, Iterable, Optional, Union

import numpy as np

from ..analysis.consistency import ConsistencyChecker
from ..config import get_config
from ..exceptions import IncompleteInputError, NumericInconsistencyError, ThresholdOrderError
from ..logger import get_module_logger
from ..structure import (
    Coalitions,
    Criterion,
    PreferenceDirection,
    ProblemData,
    RelationMatrix,
    Thresholds,
    as_alternative,
    as_criterion,
)

logger = get_module_logger('outranking.concordance')


class ConcordanceCalculator:
    """
    Concordance and preference matrices.

    Parameters
    ----------
    target_rows : iterable, optional
        Restrict the rows (first alternative of each pair) of the computed
        matrices. Defaults to all alternatives of the data.
    target_columns : iterable, optional
        Restrict the columns (second alternative of each pair).
    overshoot : float, optional
        Aggregated values in (1, overshoot] are clamped to 1; larger values
        raise :class:`NumericInconsistencyError`. Defaults to the configured
        ``concordance_overshoot``.
    """

    def __init__(self,
                 target_rows: Optional[Iterable] = None,
                 target_columns: Optional[Iterable] = None,
                 overshoot: Optional[float] = None):
        self.target_rows = None if target_rows is None else [as_alternative(a) for a in target_rows]
        self.target_columns = None if target_columns is None else [as_alternative(a) for a in target_columns]
        self.overshoot = overshoot

    # ------------------------------------------------------------------
    # Pairwise indices
    # ------------------------------------------------------------------

    def concordance_pairwise(self, e1: float, e2: float, direction: PreferenceDirection,
                             p: float, q: float) -> float:
        """Electre concordance of an alternative valued ``e1`` over one valued ``e2``."""
        return self._pairwise(e1, e2, direction, p, q, promethee_style=False)

    def preference_pairwise(self, e1: float, e2: float, direction: PreferenceDirection,
                            p: float, q: float) -> float:
        """Promethee preference of an alternative valued ``e1`` over one valued ``e2``."""
        return self._pairwise(e1, e2, direction, p, q, promethee_style=True)

    @staticmethod
    def _pairwise(e1: float, e2: float, direction: PreferenceDirection, p: float, q: float,
                  promethee_style: bool, criterion: Optional[Criterion] = None) -> float:
        if direction is None:
            raise ValueError("Preference direction is required")
        direction = PreferenceDirection.parse(direction)
        perf_diff = direction.orient(e1 - e2)

        if p < q:
            where = "" if criterion is None else f"Criterion {criterion} has "
            raise ThresholdOrderError(
                f"{where}Preference threshold ({p}) smaller than indifference threshold ({q}).")
        if p == q and perf_diff == p:
            return 0.0 if promethee_style else 1.0

        if promethee_style:
            first, second = q, p
        else:
            first, second = -p, -q

        if perf_diff <= first:
            return 0.0
        if perf_diff >= second:
            return 1.0
        return (perf_diff - first) / (second - first)

    # ------------------------------------------------------------------
    # Matrices
    # ------------------------------------------------------------------

    def concordance(self, data: ProblemData, thresholds: Optional[Thresholds],
                    weights: Union[Coalitions, Dict]) -> RelationMatrix:
        """
        Electre concordance matrix.

        Parameters
        ----------
        data : ProblemData
            Complete evaluations with a preference direction on every criterion.
        thresholds : Thresholds, optional
            Preference and indifference thresholds (missing read as 0).
        weights : Coalitions or dict
            Weight of every criterion.

        Returns
        -------
        RelationMatrix
            Values in [0, 1] for every (row, column) pair.
        """
        return self._compute_matrix(data, thresholds, weights, promethee_style=False)

    def preference(self, data: ProblemData, thresholds: Optional[Thresholds],
                   weights: Union[Coalitions, Dict]) -> RelationMatrix:
        """Promethee preference matrix, see :meth:`concordance`."""
        return self._compute_matrix(data, thresholds, weights, promethee_style=True)

    def concordances(self, data: ProblemData,
                     thresholds: Optional[Thresholds] = None) -> Dict[Criterion, RelationMatrix]:
        """Per-criterion (unweighted) concordance matrices."""
        thresholds = thresholds if thresholds is not None else Thresholds()
        rows, columns = self._check(data, thresholds)
        values = data.evaluations.values(data.alternatives, data.criteria)
        index = {a: i for i, a in enumerate(data.alternatives)}

        result = {}
        for j, criterion in enumerate(data.criteria):
            direction = data.direction(criterion)
            p = thresholds.get_preference(criterion)
            q = thresholds.get_indifference(criterion)
            matrix = np.empty((len(rows), len(columns)))
            for r, a in enumerate(rows):
                for s, b in enumerate(columns):
                    matrix[r, s] = self._pairwise(values[index[a], j], values[index[b], j],
                                                  direction, p, q, False, criterion)
            result[criterion] = RelationMatrix.from_array(rows, columns, matrix)
        logger.debug(f"Computed {len(result)} concordance matrices "
                     f"({len(rows)}x{len(columns)})")
        return result

    def _compute_matrix(self, data: ProblemData, thresholds: Optional[Thresholds],
                        weights: Union[Coalitions, Dict], promethee_style: bool) -> RelationMatrix:
        thresholds = thresholds if thresholds is not None else Thresholds()
        if isinstance(weights, Coalitions):
            weights = weights.weights
        weights = {as_criterion(c): float(w) for c, w in weights.items()}

        checker = ConsistencyChecker()
        checker.assert_known_criteria(weights, data.criteria, what="weights")
        checker.assert_complete_weights(data.criteria, weights)
        checker.assert_valid_weights(weights)
        rows, columns = self._check(data, thresholds)

        overshoot = self.overshoot if self.overshoot is not None \
            else get_config().tolerance.concordance_overshoot
        label = "preference" if promethee_style else "concordance"

        criteria = data.criteria
        values = data.evaluations.values(data.alternatives, criteria)
        index = {a: i for i, a in enumerate(data.alternatives)}
        w = np.array([weights[c] for c in criteria])
        total_weight = w.sum()
        params = [(data.direction(c), thresholds.get_preference(c), thresholds.get_indifference(c))
                  for c in criteria]

        result = np.empty((len(rows), len(columns)))
        for r, a in enumerate(rows):
            for s, b in enumerate(columns):
                total = 0.0
                for j, criterion in enumerate(criteria):
                    direction, p, q = params[j]
                    total += w[j] * self._pairwise(values[index[a], j], values[index[b], j],
                                                   direction, p, q, promethee_style, criterion)
                total = total / total_weight
                if total > 1.0:
                    if total > overshoot:
                        raise NumericInconsistencyError(
                            f"Aggregated {label} of {a} over {b} is {total}, should be <= 1.")
                    total = 1.0
                result[r, s] = total
        logger.debug(f"Computed {label} matrix ({len(rows)}x{len(columns)})")
        return RelationMatrix.from_array(rows, columns, result)

    def _check(self, data: ProblemData, thresholds: Thresholds):
        """Validate inputs, returning the rows and columns to compute."""
        if data is None:
            raise ValueError("Problem data is required")
        known = set(data.alternatives)
        if self.target_rows is not None and not set(self.target_rows) <= known:
            raise IncompleteInputError("Restriction on rows is not a subset of the given alternatives.")
        if self.target_columns is not None and not set(self.target_columns) <= known:
            raise IncompleteInputError("Restriction on columns is not a subset of the given alternatives.")

        checker = ConsistencyChecker()
        checker.assert_known_criteria(thresholds.criteria, data.criteria, what="thresholds")
        checker.assert_complete_alternatives_evaluations(data)
        checker.assert_complete_preference_directions(data.scales, data.criteria)
        for criterion in data.criteria:
            p, q = thresholds.get_preference(criterion), thresholds.get_indifference(criterion)
            if p < q:
                raise ThresholdOrderError(
                    f"Criterion {criterion} has preference threshold ({p}) "
                    f"smaller than indifference threshold ({q}).")

        rows = self.target_rows if self.target_rows is not None else list(data.alternatives)
        columns = self.target_columns if self.target_columns is not None else list(data.alternatives)
        return rows, columns
