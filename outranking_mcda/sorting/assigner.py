# -*- coding: utf-8 -*-
"""
Electre-TRI Assignment Rules
============================

Assigns alternatives to ordered categories from a binary outranking
relation between alternatives and the category profiles.

Pessimistic (pseudo-conjunctive) rule
    Scan categories from the best one down; assign to the first category
    whose lower profile is outranked by the alternative. The worst
    category, having no lower profile, catches the rest.

Optimistic (pseudo-disjunctive) rule
    Scan categories from the worst one up; assign to the first category
    whose upper profile is strictly preferred to the alternative (the
    profile outranks it and it does not outrank the profile). The best
    category catches the rest.

Both
    Every category between the pessimistic and optimistic assignments.

References
----------
[1] Yu, W. (1992). "ELECTRE TRI: Aspects méthodologiques et manuel
    d'utilisation." Document du LAMSADE 74, Université Paris-Dauphine.
"""

from enum import Enum
from typing import Iterable, Optional, Union

from ..config import get_config
from ..exceptions import (
    IncompleteInputError,
    InvalidOutrankingValueError,
    MissingRelationEntryError,
)
from ..logger import get_module_logger
from ..structure import (
    Alternative,
    Category,
    CatsAndProfs,
    OrderedAssignments,
    OrderedAssignmentsToMultiple,
    RelationMatrix,
    as_alternative,
)

logger = get_module_logger('sorting.assigner')


class SortingMode(Enum):
    """Electre-TRI assignment rule."""
    PESSIMISTIC = "pessimistic"
    OPTIMISTIC = "optimistic"
    BOTH = "both"


class SortingAssigner:
    """
    Category assignment from a binary outranking relation.

    Parameters
    ----------
    binary_tolerance : float, optional
        Outranking values within this distance of 1 (resp. 0) read as
        "outranks" (resp. "does not outrank"). Defaults to the configured
        ``binary_tolerance``.
    """

    def __init__(self, binary_tolerance: Optional[float] = None):
        self.binary_tolerance = binary_tolerance

    def _tolerance(self) -> float:
        if self.binary_tolerance is not None:
            return self.binary_tolerance
        return get_config().tolerance.binary_tolerance

    def assign(self, mode: SortingMode, alternatives: Iterable, outranking: RelationMatrix,
               cats_and_profs: CatsAndProfs) -> Union[OrderedAssignments, OrderedAssignmentsToMultiple]:
        """Dispatch to :meth:`pessimistic`, :meth:`optimistic` or :meth:`both`."""
        mode = SortingMode(mode)
        if mode is SortingMode.PESSIMISTIC:
            return self.pessimistic(alternatives, outranking, cats_and_profs)
        if mode is SortingMode.OPTIMISTIC:
            return self.optimistic(alternatives, outranking, cats_and_profs)
        return self.both(alternatives, outranking, cats_and_profs)

    def pessimistic(self, alternatives: Iterable, outranking: RelationMatrix,
                    cats_and_profs: CatsAndProfs) -> OrderedAssignments:
        """
        Pessimistic assignment of every alternative.

        Parameters
        ----------
        alternatives : iterable
            Alternatives to assign.
        outranking : RelationMatrix
            Binary relation holding (alternative, profile) and (profile,
            alternative) cells.
        cats_and_profs : CatsAndProfs
            Complete categories and profiles.

        Returns
        -------
        OrderedAssignments
        """
        self._check(cats_and_profs)
        assignments = OrderedAssignments(cats_and_profs)
        for alternative in alternatives:
            assignments.assign(alternative, self._pessimistic_category(alternative, outranking, cats_and_profs))
        logger.debug(f"Pessimistic assignment of {len(assignments)} alternatives")
        return assignments

    def optimistic(self, alternatives: Iterable, outranking: RelationMatrix,
                   cats_and_profs: CatsAndProfs) -> OrderedAssignments:
        """Optimistic assignment of every alternative, see :meth:`pessimistic`."""
        self._check(cats_and_profs)
        assignments = OrderedAssignments(cats_and_profs)
        for alternative in alternatives:
            assignments.assign(alternative, self._optimistic_category(alternative, outranking, cats_and_profs))
        logger.debug(f"Optimistic assignment of {len(assignments)} alternatives")
        return assignments

    def both(self, alternatives: Iterable, outranking: RelationMatrix,
             cats_and_profs: CatsAndProfs) -> OrderedAssignmentsToMultiple:
        """Interval from the pessimistic to the optimistic category, inclusive."""
        self._check(cats_and_profs)
        assignments = OrderedAssignmentsToMultiple(cats_and_profs)
        for alternative in alternatives:
            pessimistic = self._pessimistic_category(alternative, outranking, cats_and_profs)
            optimistic = self._optimistic_category(alternative, outranking, cats_and_profs)
            assignments.assign_interval(alternative, pessimistic, optimistic)
        logger.debug(f"Interval assignment of {len(assignments)} alternatives")
        return assignments

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    @staticmethod
    def _check(cats_and_profs: CatsAndProfs) -> None:
        if not cats_and_profs.is_complete():
            raise IncompleteInputError(f"Given categories {cats_and_profs} are incomplete.")

    def _pessimistic_category(self, alternative, outranking: RelationMatrix,
                              cats_and_profs: CatsAndProfs) -> Category:
        alternative = as_alternative(alternative)
        for category in cats_and_profs.categories_from_best:
            profile_down = cats_and_profs.profile_down(category)
            if profile_down is None:
                return category
            if self._outranks(outranking, alternative, profile_down):
                return category
        raise IncompleteInputError("No category could be assigned.")

    def _optimistic_category(self, alternative, outranking: RelationMatrix,
                             cats_and_profs: CatsAndProfs) -> Category:
        alternative = as_alternative(alternative)
        for category in cats_and_profs.categories:
            profile_up = cats_and_profs.profile_up(category)
            if profile_up is None:
                return category
            if (self._outranks(outranking, profile_up, alternative)
                    and not self._outranks(outranking, alternative, profile_up)):
                return category
        raise IncompleteInputError("No category could be assigned.")

    def _outranks(self, outranking: RelationMatrix, first: Alternative, second: Alternative) -> bool:
        value = outranking.get(first, second)
        if value is None:
            raise MissingRelationEntryError(f"Missing outranking information for {first}, {second}.")
        tolerance = self._tolerance()
        outranks = abs(value - 1.0) <= tolerance
        not_outranks = abs(value) <= tolerance
        if not (outranks or not_outranks):
            raise InvalidOutrankingValueError(
                f"Non boolean outranking value={value} for {first}, {second}.")
        return outranks

