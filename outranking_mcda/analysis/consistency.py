# -*- coding: utf-8 -*-
"""
Consistency Checks
==================

Precondition checks shared by the calculators. Every ``assert_*`` method
returns ``None`` when the data are fine and raises an
:class:`~outranking_mcda.exceptions.InvalidInputError` subclass otherwise;
``is_consistent_problem`` turns the sorting checks into a boolean.

Example
-------
>>> checker = ConsistencyChecker()
>>> checker.assert_complete_coalitions(problem)
>>> checker.is_consistent_problem(problem)
True
"""

from typing import Dict, Iterable, Optional

import numpy as np

from ..exceptions import (
    InvalidInputError,
    IncompleteInputError,
    ThresholdOrderError,
    UnknownCriterionError,
)
from ..structure import (
    CatsAndProfs,
    Evaluations,
    OrderedAssignmentsToMultiple,
    PreferenceDirection,
    ProblemData,
    Scale,
    SortingProblem,
    Thresholds,
    as_criterion,
)


class ConsistencyChecker:
    """Checks completeness and coherence of decision problems."""

    # ------------------------------------------------------------------
    # Evaluations and directions
    # ------------------------------------------------------------------

    def assert_complete_evaluations(self, evaluations: Evaluations, alternatives: Iterable,
                                    criteria: Iterable, what: str = "alternatives") -> None:
        """Every given alternative has a value on every given criterion."""
        alternatives, criteria = list(alternatives), list(criteria)
        values = evaluations.values(alternatives, criteria)
        missing = int(np.isnan(values).sum())
        if missing:
            raise IncompleteInputError(
                f"Invalid number of evaluations provided for {what}: {values.size - missing} "
                f"values; {len(alternatives)} {what}; {len(criteria)} criteria.")

    def assert_complete_alternatives_evaluations(self, data: ProblemData) -> None:
        self.assert_complete_evaluations(data.evaluations, data.alternatives, data.criteria)

    def assert_complete_preference_directions(self, directions: Dict,
                                              criteria: Optional[Iterable] = None) -> None:
        """
        Every criterion has a known preference direction.

        Parameters
        ----------
        directions : dict
            Direction or :class:`Scale` per criterion.
        criteria : iterable, optional
            Criteria that need a direction; defaults to the keys of ``directions``.
        """
        normalized = {}
        for criterion, value in directions.items():
            if isinstance(value, Scale):
                value = value.direction
            elif value is not None:
                value = PreferenceDirection.parse(value)
            normalized[as_criterion(criterion)] = value

        required = normalized.keys() if criteria is None else [as_criterion(c) for c in criteria]
        for criterion in required:
            if normalized.get(criterion) is None:
                raise IncompleteInputError(f"Unknown preference direction for criterion {criterion}.")

    # ------------------------------------------------------------------
    # Weights and thresholds
    # ------------------------------------------------------------------

    def assert_complete_weights(self, criteria: Iterable, with_weights: Iterable) -> None:
        no_weights = {as_criterion(c) for c in criteria} - {as_criterion(c) for c in with_weights}
        if no_weights:
            names = sorted(c.id for c in no_weights)
            raise IncompleteInputError(f"Some criteria have no associated weights: {names}.")

    def assert_valid_weights(self, weights: Dict) -> None:
        """No negative weight, and a positive sum."""
        for criterion, weight in weights.items():
            if weight < 0:
                raise InvalidInputError(f"Negative weight {weight} on {criterion}.")
        if sum(weights.values()) <= 0:
            raise InvalidInputError("Weights sum to zero, no coalition can support an outranking.")

    def assert_known_criteria(self, referenced: Iterable, known: Iterable, what: str = "weights") -> None:
        unknown = {as_criterion(c) for c in referenced} - {as_criterion(c) for c in known}
        if unknown:
            names = sorted(c.id for c in unknown)
            raise UnknownCriterionError(f"Found {what} on unknown criteria: {names}.")

    def assert_threshold_order(self, thresholds: Thresholds, criteria: Optional[Iterable] = None) -> None:
        """q <= p and, where a veto is set, p <= v."""
        for criterion in (thresholds.criteria if criteria is None else criteria):
            thresholds.check_order(criterion)

    def assert_complete_coalitions(self, problem: SortingProblem) -> None:
        """
        Weights on exactly the problem criteria, and a majority threshold that
        some coalition can reach.
        """
        coalitions = problem.coalitions
        if set(coalitions.criteria) != set(problem.criteria):
            got = sorted(c.id for c in coalitions.criteria)
            expected = sorted(c.id for c in problem.criteria)
            raise IncompleteInputError(f"Incorrect coalitions: got {got} instead of {expected}.")
        self.assert_valid_weights(coalitions.weights)
        if not coalitions.contains_majority_threshold():
            raise IncompleteInputError("Missing majority threshold.")
        if coalitions.majority_threshold > coalitions.sum:
            raise ThresholdOrderError(
                "Meaningless coalitions: the majority threshold "
                f"{coalitions.majority_threshold} is greater than the sum of all weights {coalitions.sum}.")

    # ------------------------------------------------------------------
    # Categories and profiles
    # ------------------------------------------------------------------

    def assert_complete_cats_and_profs(self, cats_and_profs: CatsAndProfs) -> None:
        if not cats_and_profs.is_complete():
            raise IncompleteInputError("Categories are incomplete.")

    def assert_complete_profiles(self, problem: SortingProblem) -> None:
        """Every evaluated profile is placed in the categories structure."""
        evaluated = set(problem.profiles_evaluations.rows)
        if not evaluated <= set(problem.cats_and_profs.profiles):
            raise IncompleteInputError("Profiles do not match.")

    def assert_complete_profiles_evaluations(self, problem: SortingProblem) -> None:
        self.assert_complete_evaluations(problem.profiles_evaluations, problem.profiles,
                                         problem.criteria, what="profiles")

    def assert_dominance(self, problem: SortingProblem) -> None:
        """The profiles strictly dominate each other in their declared order."""
        from ..ranking.dominance import Dominance

        self.assert_complete_preference_directions(problem.scales)
        if not problem.profiles:
            order = []
        else:
            evaluations = problem.profiles_evaluations.restrict_rows(problem.profiles)
            order = Dominance().strict_dominance_order(evaluations, problem.directions)
        if order is None:
            raise InvalidInputError(
                "Profiles do not strictly dominate each other, according to their evaluations.")
        if order != problem.cats_and_profs.profiles:
            raise InvalidInputError(
                "Given profiles order is not the same as profiles order according to dominance.")

    # ------------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------------

    def assert_to_ordered_intervals(self, assignments: OrderedAssignmentsToMultiple) -> None:
        """Every alternative is assigned to a contiguous set of categories."""
        for alternative in assignments.alternatives:
            if not assignments.is_contiguous(alternative):
                raise InvalidInputError(f"Assignment of {alternative} is not an interval.")

    # ------------------------------------------------------------------
    # Whole problems
    # ------------------------------------------------------------------

    def assert_consistent_problem(self, problem: SortingProblem) -> None:
        self.assert_complete_cats_and_profs(problem.cats_and_profs)
        self.assert_complete_profiles(problem)
        self.assert_complete_preference_directions(problem.scales)
        self.assert_complete_evaluations(problem.alternatives_evaluations, problem.alternatives,
                                         problem.criteria)
        self.assert_complete_profiles_evaluations(problem)
        self.assert_known_criteria(problem.thresholds.criteria, problem.criteria, what="thresholds")
        self.assert_threshold_order(problem.thresholds)
        self.assert_complete_coalitions(problem)
        self.assert_dominance(problem)

    def is_consistent_problem(self, problem: SortingProblem) -> bool:
        """Whether ``problem`` passes every sorting precondition."""
        try:
            self.assert_consistent_problem(problem)
        except InvalidInputError:
            return False
        return True
