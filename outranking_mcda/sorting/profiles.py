# -*- coding: utf-8 -*-
"""
Profiles on Discrete Scales
===========================

On a discrete scale (values ``minimum + k·step``) with true criteria (no
indifference or preference threshold, sharp vetoes only), every profile
value strictly between two steps gives the same assignments. The standard
form of a profile value is therefore a half step away from a step:

    pessimistic   nearest step at least as good as the value, moved half a
                  step towards the worse values
    optimistic    nearest step at most as good as the value, moved half a
                  step towards the better values
    both          unchanged on a step, otherwise the middle between the
                  two surrounding steps

Scale with step 10 from 9, to maximize::

    value        pessimistic  optimistic  both
    19           14           24          19
    40           44           44          44

Two sets of profiles are compared by the distance between their standard
forms, which is a whole number of steps (half steps for ``both``).

Example
-------
>>> std = StandardizeProfiles()
>>> std.standard_value(19.0, Scale(PreferenceDirection.MAXIMIZE, 9, 109, 10), 'pessimistic')
14.0
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Union

from ..exceptions import IncompleteInputError, InvalidInputError, NumericInconsistencyError
from ..logger import get_module_logger
from ..structure import Evaluations, Scale, as_criterion
from .assigner import SortingMode

logger = get_module_logger('sorting.profiles')

_STEP_ROUNDING = 1e-9
_DISTANCE_ROUNDING = 1e-6


def _steps(value: float, scale: Scale) -> float:
    """Number of steps between the scale origin and ``value``."""
    steps = (value - scale.minimum) / scale.step
    nearest = round(steps)
    return nearest if abs(steps - nearest) <= _STEP_ROUNDING else steps


def _check_scale(scale: Scale) -> None:
    if scale is None:
        raise ValueError("Scale is required")
    if scale.direction is None:
        raise IncompleteInputError("Standardizing needs the preference direction of the scale.")
    if scale.step is None or scale.minimum is None:
        raise InvalidInputError("Standardizing needs a discrete scale with a minimum and a step.")


def _scales_by_criterion(scales: Dict) -> Dict:
    return {as_criterion(c): s for c, s in scales.items()}


class StandardizeProfiles:
    """
    Standard form of profile evaluations.

    Parameters
    ----------
    cross_boundaries : bool
        When False (default), values outside the scale and values on the
        bound the mode cannot move past (the worst value when pessimistic,
        the best one when optimistic) are returned untouched. When True the
        half step move is applied to them too, which may leave the scale.
    """

    def __init__(self, cross_boundaries: bool = False):
        self.cross_boundaries = cross_boundaries

    def standard_value(self, value: float, scale: Scale, mode: Union[SortingMode, str]) -> float:
        """Standard form of one profile value on ``scale`` for ``mode``."""
        _check_scale(scale)
        mode = SortingMode(mode)

        at_bound = (not scale.in_bounds(value)
                    or (mode is SortingMode.PESSIMISTIC and value == scale.worst)
                    or (mode is SortingMode.OPTIMISTIC and value == scale.best))
        if at_bound and not self.cross_boundaries:
            logger.info(f"Value {value} is outside or on the boundary of the scale, left as is.")
            return value

        if mode is SortingMode.OPTIMISTIC:
            sign = scale.direction.sign
        elif mode is SortingMode.PESSIMISTIC:
            sign = -scale.direction.sign
        else:
            sign = 0 if scale.contains(value) else 1

        steps = _steps(value, scale)
        start = math.floor(steps) if sign >= 0 else math.ceil(steps)
        return start * scale.step + scale.minimum + sign * scale.step / 2.0

    def standardize(self, profiles_evaluations: Evaluations, scales: Dict,
                    mode: Union[SortingMode, str]) -> Evaluations:
        """
        Standard form of every profile evaluation.

        Parameters
        ----------
        profiles_evaluations : Evaluations
            Complete profile evaluations.
        scales : dict
            Discrete scale per criterion, on exactly the evaluated criteria.
        mode : SortingMode or str

        Returns
        -------
        Evaluations
            New matrix; the input is left unchanged.
        """
        scales = _scales_by_criterion(scales)
        if set(scales) != set(profiles_evaluations.columns):
            raise InvalidInputError("Scales must be on the same criteria as the profiles evaluations.")
        if not profiles_evaluations.is_complete():
            raise IncompleteInputError("Profiles evaluations should be complete.")

        standard = Evaluations()
        for profile in profiles_evaluations.rows:
            for criterion in profiles_evaluations.columns:
                value = profiles_evaluations.get(profile, criterion)
                standard.put(profile, criterion, self.standard_value(value, scales[criterion], mode))
        return standard


@dataclass
class ProfilesDistanceResult:
    """
    Distances between two sets of profiles.

    Attributes
    ----------
    sum_distance : float
        Sum over profiles and criteria of the distance between the standard
        forms of both evaluations.
    max_distance : float, optional
        Largest of these distances, None when nothing was compared.
    equals_by_approximation : dict
        For each approximation level l, the number of evaluations whose
        distance is at most l. Level 0 counts the equal ones.
    """
    sum_distance: float
    max_distance: Optional[float]
    equals_by_approximation: Dict[float, int] = field(default_factory=dict)

    def equals(self, approximation: float = 0.0) -> int:
        return self.equals_by_approximation[float(approximation)]

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            "PROFILES DISTANCE",
            f"{'='*60}",
            f"\nSum of distances: {self.sum_distance:.6g}",
            f"Max distance: {self.max_distance}",
            "\nEqual evaluations by approximation:",
        ]
        for level, count in sorted(self.equals_by_approximation.items()):
            lines.append(f"  <= {level:g}: {count}")
        lines.append("=" * 60)
        return "\n".join(lines)


class ProfilesDistance:
    """
    Distance between two sets of profiles for a sorting mode.

    Values outside their scale are accepted: they are standardized with
    ``cross_boundaries`` set.

    Parameters
    ----------
    approximations : iterable of float, optional
        Extra approximation levels to count equal evaluations at; level 0
        is always counted.
    """

    def __init__(self, approximations: Iterable[float] = ()):
        self.approximations = sorted({0.0, *(float(a) for a in approximations)})
        self._standardizer = StandardizeProfiles(cross_boundaries=True)

    def distance(self, value1: float, value2: float, scale: Scale,
                 mode: Union[SortingMode, str]) -> float:
        """Distance between the standard forms of two values, a multiple of the step."""
        mode = SortingMode(mode)
        std1 = self._standardizer.standard_value(value1, scale, mode)
        std2 = self._standardizer.standard_value(value2, scale, mode)
        diff_steps = abs(std2 - std1) / scale.step

        # Half steps remain possible when both
        unit = 2.0 if mode is SortingMode.BOTH else 1.0
        rounded = round(diff_steps * unit)
        if abs(rounded - diff_steps * unit) > _DISTANCE_ROUNDING:
            raise NumericInconsistencyError(
                f"Standardized values {std1} and {std2} are not a whole number of "
                f"{'half steps' if unit == 2.0 else 'steps'} apart.")
        return rounded / unit * scale.step

    def compute(self, profiles1: Evaluations, profiles2: Evaluations, scales: Dict,
                mode: Union[SortingMode, str]) -> ProfilesDistanceResult:
        """
        Compare two complete profile evaluations on the same profiles and criteria.

        Returns
        -------
        ProfilesDistanceResult
        """
        self._check_matching(profiles1, profiles2)
        scales = _scales_by_criterion(scales)
        mode = SortingMode(mode)

        total = 0.0
        largest = None
        equals = {level: 0 for level in self.approximations}
        for profile in profiles1.rows:
            for criterion in profiles1.columns:
                scale = scales.get(criterion)
                if scale is None:
                    raise IncompleteInputError(f"No scale for {criterion}.")
                dist = self.distance(profiles1.get(profile, criterion),
                                     profiles2.get(profile, criterion), scale, mode)
                total += dist
                largest = dist if largest is None else max(largest, dist)
                for level in self.approximations:
                    if dist <= level:
                        equals[level] += 1

        logger.debug(f"Profiles distance ({mode.value}): sum {total}, max {largest}")
        return ProfilesDistanceResult(sum_distance=total, max_distance=largest,
                                      equals_by_approximation=equals)

    def sum_distance(self, profiles1: Evaluations, profiles2: Evaluations, scales: Dict,
                     mode: Union[SortingMode, str]) -> float:
        return self.compute(profiles1, profiles2, scales, mode).sum_distance

    def max_distance(self, profiles1: Evaluations, profiles2: Evaluations, scales: Dict,
                     mode: Union[SortingMode, str]) -> Optional[float]:
        return self.compute(profiles1, profiles2, scales, mode).max_distance

    def distance_in_alternatives(self, profiles1: Evaluations, profiles2: Evaluations,
                                 alternatives: Evaluations) -> int:
        """
        Number of alternative evaluations lying between the two evaluations
        of the same profile on the same criterion (bounds included).
        """
        self._check_matching(profiles1, profiles2)
        if set(alternatives.columns) != set(profiles1.columns):
            raise InvalidInputError("Alternatives must be evaluated on the profiles criteria.")

        count = 0
        for criterion in profiles1.columns:
            values = [alternatives.get(a, criterion) for a in alternatives.rows]
            values = [v for v in values if v is not None]
            for profile in profiles1.rows:
                first = profiles1.get(profile, criterion)
                second = profiles2.get(profile, criterion)
                low, high = min(first, second), max(first, second)
                count += sum(1 for v in values if low <= v <= high)
        return count

    @staticmethod
    def _check_matching(profiles1: Evaluations, profiles2: Evaluations) -> None:
        if not profiles1.is_complete() or not profiles2.is_complete():
            raise IncompleteInputError("Profiles evaluations should be complete.")
        if set(profiles1.rows) != set(profiles2.rows) or set(profiles1.columns) != set(profiles2.columns):
            raise InvalidInputError("Both profiles evaluations must be on the same profiles and criteria.")
