# -*- coding: utf-8 -*-
"""
Progressive Pessimistic Assignment
==================================

Bound propagation for the Electre-TRI pessimistic rule when an
alternative's evaluations arrive one criterion at a time, each as an
uncertain half-open interval [min, max).

For every category k above the worst one, the session keeps a window
[low_k, high_k] of the weight of the coalition supporting "the alternative
is at least as good as the lower profile of k":

- ``min >= profile`` on a criterion adds its weight to low_k;
- ``max <= profile`` removes it from high_k.

Category k is certainly reached once low_k >= λ, and certainly out of
reach once high_k < λ. The feasible band [worst, best] narrows until both
ends meet. Vetoes and discrimination thresholds are not considered.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from ..config import get_config
from ..exceptions import (
    IncompleteInputError,
    InvalidInputError,
    NumericInconsistencyError,
    UnknownCriterionError,
)
from ..logger import get_module_logger
from ..structure import (
    Category,
    CatsAndProfs,
    Coalitions,
    Evaluations,
    PreferenceDirection,
    as_criterion,
)

logger = get_module_logger('sorting.progressive')


class ElectrePessimisticProgressive:
    """
    Incremental pessimistic assignment session for one alternative.

    Parameters
    ----------
    cats_and_profs : CatsAndProfs
        Complete categories and profiles.
    coalitions : Coalitions
        Weights and majority threshold λ (same scale as the weights).
    profiles_evaluations : Evaluations
        Evaluation of every profile on every weighted criterion.
    directions : dict, optional
        Preference direction per criterion; criteria default to MAXIMIZE.
    weight_bounds_tolerance : float, optional
        Allowed excess of a low bound over its high bound. Defaults to the
        configured ``weight_bounds_tolerance``.

    Examples
    --------
    >>> session = ElectrePessimisticProgressive(cats, coalitions, profiles)
    >>> session.set_evaluation('g1', 12.0, 14.0)
    >>> session.is_set_category()
    False
    """

    def __init__(self, cats_and_profs: CatsAndProfs, coalitions: Coalitions,
                 profiles_evaluations: Evaluations, directions: Optional[Dict] = None,
                 weight_bounds_tolerance: Optional[float] = None):
        if not cats_and_profs.is_complete():
            raise IncompleteInputError("Categories must be complete.")
        if not coalitions.contains_majority_threshold():
            raise IncompleteInputError("Missing majority threshold.")

        self.cats_and_profs = cats_and_profs
        self._categories = cats_and_profs.categories
        self._criteria = coalitions.criteria
        self._crit_index = {c: j for j, c in enumerate(self._criteria)}
        self._weights = np.array([coalitions.weight(c) for c in self._criteria])
        self._lambda = float(coalitions.majority_threshold)
        self._total_weight = float(self._weights.sum())
        if weight_bounds_tolerance is None:
            weight_bounds_tolerance = get_config().tolerance.weight_bounds_tolerance
        self._bounds_tolerance = weight_bounds_tolerance

        directions = {as_criterion(c): d for c, d in (directions or {}).items()}
        self._negated = np.array([
            PreferenceDirection.parse(directions.get(c, PreferenceDirection.MAXIMIZE))
            is PreferenceDirection.MINIMIZE
            for c in self._criteria
        ])

        profiles = cats_and_profs.profiles
        profs = profiles_evaluations.values(profiles, self._criteria)
        if np.isnan(profs).any():
            raise IncompleteInputError("Profiles evaluations are incomplete.")
        # profs[k, j]: upper profile of category k on criterion j, oriented
        self._profs = np.where(self._negated, -profs, profs)

        self._seen = set()
        self._bounds = np.zeros((len(self._categories), 2))
        self._band = [0, len(self._categories) - 1]
        self.reset()

    def reset(self) -> None:
        """Forget every submitted evaluation."""
        self._seen.clear()
        self._bounds[:, 0] = 0.0
        self._bounds[:, 1] = self._total_weight
        self._band = [0, len(self._categories) - 1]

    @property
    def worst_category(self) -> Category:
        """Worst category still possible."""
        return self._categories[self._band[0]]

    @property
    def best_category(self) -> Category:
        """Best category still possible."""
        return self._categories[self._band[1]]

    def is_set_category(self) -> bool:
        """Whether the assignment is determined."""
        return self._band[0] == self._band[1]

    def weight_bounds(self, category) -> Tuple[float, float]:
        """Current [low, high] coalition weight window of ``category``."""
        low, high = self._bounds[self.cats_and_profs.index_of(category)]
        return float(low), float(high)

    def set_evaluation(self, criterion, min_eval: float, max_eval: float) -> Tuple[Category, Category]:
        """
        Submit the evaluation interval [min_eval, max_eval) on ``criterion``.

        Returns
        -------
        tuple of Category
            The updated (worst, best) band.

        Raises
        ------
        UnknownCriterionError
            If the criterion carries no weight.
        InvalidInputError
            If the criterion was already submitted or min_eval > max_eval.
        NumericInconsistencyError
            If a low bound exceeds its high bound.
        """
        criterion = as_criterion(criterion)
        if criterion not in self._crit_index:
            raise UnknownCriterionError(f"Unknown criterion {criterion}.")
        if criterion in self._seen:
            raise InvalidInputError(f"Already set evaluation for {criterion}.")
        if min_eval > max_eval:
            raise InvalidInputError(f"Invalid interval [{min_eval}, {max_eval}) for {criterion}.")

        j = self._crit_index[criterion]
        if self._negated[j]:
            min_eval, max_eval = -max_eval, -min_eval
        weight = self._weights[j]

        # Updated on copies, committed once every category is consistent
        bounds = self._bounds.copy()
        band = list(self._band)
        cat = band[0]
        while cat <= band[1]:
            if cat == 0:
                bounds[cat, 0] += weight
            else:
                prof_below = self._profs[cat - 1, j]
                if min_eval >= prof_below:
                    bounds[cat, 0] += weight
                    if bounds[cat, 0] >= self._lambda:
                        band[0] = cat
                if max_eval <= prof_below:
                    bounds[cat, 1] -= weight
                    if bounds[cat, 1] < self._lambda:
                        band[1] = cat - 1
            logger.debug(f"Weight limits for {self._categories[cat]}: "
                         f"[{bounds[cat, 0]:.4g}, {bounds[cat, 1]:.4g}] (lambda={self._lambda})")
            if bounds[cat, 0] > bounds[cat, 1] + self._bounds_tolerance:
                raise NumericInconsistencyError(
                    f"Min weight greater than max weight for {self._categories[cat]}.")
            cat += 1

        self._bounds = bounds
        self._band = band
        self._seen.add(criterion)

        logger.debug(f"Evaluation [{min_eval}, {max_eval}) set for {criterion}, "
                     f"band [{self.worst_category}, {self.best_category}]")
        return self.worst_category, self.best_category
