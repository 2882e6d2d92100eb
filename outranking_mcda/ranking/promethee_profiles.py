# -*- coding: utf-8 -*-
"""
Promethee profiles: the net flow of each alternative on each criterion
taken alone,

    φ_j(a) = Σ_x (P_j(a, x) − P_j(x, a)) / (n − 1)

so that the weighted sum Σ_j w_j φ_j(a) is the net flow of a when the
weights sum to one.
"""

from typing import Optional

import numpy as np

from ..analysis.consistency import ConsistencyChecker
from ..exceptions import InvalidInputError
from ..structure import Evaluations, ProblemData, Thresholds
from ..outranking.concordance import ConcordanceCalculator


class PrometheeProfiles:
    """Per-criterion net flows."""

    def compute_profiles(self, data: ProblemData, thresholds: Optional[Thresholds] = None) -> Evaluations:
        """
        Parameters
        ----------
        data : ProblemData
            Complete evaluations of at least two alternatives.
        thresholds : Thresholds, optional
            Preference and indifference thresholds.

        Returns
        -------
        Evaluations
            φ_j(a) for every alternative a and criterion j.
        """
        thresholds = thresholds if thresholds is not None else Thresholds()
        checker = ConsistencyChecker()
        checker.assert_known_criteria(thresholds.criteria, data.criteria, what="thresholds")
        checker.assert_complete_alternatives_evaluations(data)
        checker.assert_complete_preference_directions(data.scales, data.criteria)
        alternatives, criteria = list(data.alternatives), list(data.criteria)
        n = len(alternatives)
        if n < 2:
            raise InvalidInputError("Profiles need at least two alternatives.")

        calculator = ConcordanceCalculator()
        values = data.evaluations.values(alternatives, criteria)
        profiles = np.zeros((n, len(criteria)))
        for j, criterion in enumerate(criteria):
            direction = data.direction(criterion)
            p = thresholds.get_preference(criterion)
            q = thresholds.get_indifference(criterion)
            for r in range(n):
                total = 0.0
                for s in range(n):
                    total += calculator.preference_pairwise(values[r, j], values[s, j], direction, p, q)
                    total -= calculator.preference_pairwise(values[s, j], values[r, j], direction, p, q)
                profiles[r, j] = total / (n - 1)
        return Evaluations.from_array(alternatives, criteria, profiles)
