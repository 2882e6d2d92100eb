# -*- coding: utf-8 -*-
"""
Problem containers handed to the calculators.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .base import Alternative, Criterion, PreferenceDirection, Scale, as_criterion
from .categories import CatsAndProfs
from .evaluations import Evaluations
from .preferences import Coalitions, Thresholds


@dataclass
class ProblemData:
    """
    Evaluations with the scales of the criteria.

    Parameters
    ----------
    evaluations : Evaluations
        Performances of the alternatives.
    scales : dict
        Scale (and preference direction) per criterion.
    alternatives, criteria : list, optional
        Declared sets; default to the rows / columns of the evaluations
        (criteria also include those with a scale).
    """
    evaluations: Evaluations = field(default_factory=Evaluations)
    scales: Dict[Criterion, Scale] = field(default_factory=dict)
    alternatives: Optional[List[Alternative]] = None
    criteria: Optional[List[Criterion]] = None

    def __post_init__(self):
        self.scales = {as_criterion(c): s for c, s in self.scales.items()}
        if self.alternatives is None:
            self.alternatives = self.evaluations.rows
        if self.criteria is None:
            criteria = self.evaluations.columns
            criteria += [c for c in self.scales if c not in set(criteria)]
            self.criteria = criteria

    @classmethod
    def from_directions(cls, evaluations: Evaluations, directions: Dict) -> 'ProblemData':
        """Shortcut for problems whose scales only carry a direction."""
        scales = {as_criterion(c): Scale(PreferenceDirection.parse(d)) for c, d in directions.items()}
        return cls(evaluations=evaluations, scales=scales)

    @property
    def directions(self) -> Dict[Criterion, PreferenceDirection]:
        """Known preference directions."""
        return {c: s.direction for c, s in self.scales.items() if s.direction is not None}

    def direction(self, criterion) -> Optional[PreferenceDirection]:
        scale = self.scales.get(as_criterion(criterion))
        return None if scale is None else scale.direction


@dataclass
class SortingProblem:
    """Everything an Electre-TRI sorting needs."""
    alternatives_evaluations: Evaluations
    profiles_evaluations: Evaluations
    scales: Dict[Criterion, Scale]
    thresholds: Thresholds
    coalitions: Coalitions
    cats_and_profs: CatsAndProfs

    def __post_init__(self):
        self.scales = {as_criterion(c): s for c, s in self.scales.items()}

    @property
    def alternatives(self) -> List[Alternative]:
        return self.alternatives_evaluations.rows

    @property
    def profiles(self) -> List[Alternative]:
        return self.cats_and_profs.profiles

    @property
    def criteria(self) -> List[Criterion]:
        return list(self.scales)

    @property
    def directions(self) -> Dict[Criterion, PreferenceDirection]:
        return {c: s.direction for c, s in self.scales.items() if s.direction is not None}

    def all_evaluations(self) -> Evaluations:
        """Alternatives and profiles evaluations in one matrix."""
        return self.alternatives_evaluations.merge(self.profiles_evaluations)

    def inverted(self) -> 'SortingProblem':
        """
        The same problem seen with every preference direction reversed.

        Categories and profiles are listed in reverse order and the scales
        keep their bounds but lose their steps. Evaluations, thresholds and
        coalitions are copied unchanged; profiles placed for a pessimistic
        sorting may need to move to the step above to give the same
        assignments (see :class:`~outranking_mcda.sorting.StandardizeProfiles`).
        """
        return SortingProblem(
            alternatives_evaluations=self.alternatives_evaluations.copy(),
            profiles_evaluations=self.profiles_evaluations.copy(),
            scales={c: s.inverted() for c, s in self.scales.items()},
            thresholds=Thresholds(dict(self.thresholds.preference),
                                  dict(self.thresholds.indifference),
                                  dict(self.thresholds.veto)),
            coalitions=Coalitions(dict(self.coalitions.weights), self.coalitions.majority_threshold),
            cats_and_profs=self.cats_and_profs.inverted(),
        )

    def as_problem_data(self) -> ProblemData:
        """Problem over alternatives and profiles together."""
        return ProblemData(
            evaluations=self.all_evaluations(),
            scales=dict(self.scales),
            alternatives=self.alternatives + [p for p in self.profiles if p not in set(self.alternatives)],
            criteria=self.criteria,
        )
