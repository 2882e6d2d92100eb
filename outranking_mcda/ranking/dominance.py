# -*- coding: utf-8 -*-
"""
Dominance
=========

Large dominance between alternatives: ``a`` dominates ``b`` when ``a`` is at
least as good as ``b`` on every criterion (alternatives with equal
evaluations dominate each other).

Each criterion ranks the alternatives by their oriented values; the
per-criterion preorders are then intersected. When two criteria disagree
about a strict order the intersection is not a complete preorder and the
result is ``None``.

References
----------
[1] Roy, B. (1996). "Multicriteria Methodology for Decision Aiding."
    Kluwer Academic Publishers.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Set

from ..analysis.consistency import ConsistencyChecker
from ..exceptions import IncompleteInputError
from ..logger import get_module_logger
from ..structure import Alternative, Evaluations, PreferenceDirection, as_criterion

logger = get_module_logger('ranking.dominance')


class Preorder:
    """
    Complete preorder stored as ranked sets of indifferent elements.

    Rank 1 holds the best elements.

    Parameters
    ----------
    ranked_sets : iterable of iterables
        Sets of mutually indifferent elements, from best to worst.
    """

    def __init__(self, ranked_sets: Iterable[Iterable[Hashable]]):
        self._sets: List[frozenset] = []
        self._ranks: Dict[Hashable, int] = {}
        for elements in ranked_sets:
            elements = frozenset(elements)
            if not elements:
                continue
            for element in elements:
                if element in self._ranks:
                    raise ValueError(f"Element {element} ranked twice")
            self._sets.append(elements)
            for element in elements:
                self._ranks[element] = len(self._sets)

    @classmethod
    def from_values(cls, values: Dict[Hashable, float]) -> 'Preorder':
        """Preorder where larger values are better and equal values are tied."""
        by_value: Dict[float, Set[Hashable]] = {}
        for element, value in values.items():
            by_value.setdefault(value, set()).add(element)
        return cls(by_value[v] for v in sorted(by_value, reverse=True))

    @property
    def ranks_count(self) -> int:
        return len(self._sets)

    @property
    def elements(self) -> Set[Hashable]:
        return set(self._ranks)

    def get(self, rank: int) -> Set[Hashable]:
        """Elements at ``rank`` (1-based)."""
        if not 1 <= rank <= len(self._sets):
            raise IndexError(f"Rank {rank} outside 1..{len(self._sets)}")
        return set(self._sets[rank - 1])

    def rank_of(self, element: Hashable) -> int:
        return self._ranks[element]

    def as_list_of_sets(self) -> List[Set[Hashable]]:
        """Ranked sets from best to worst."""
        return [set(s) for s in self._sets]

    def is_total(self) -> bool:
        return all(len(s) == 1 for s in self._sets)

    def total_order(self) -> Optional[List[Hashable]]:
        """Elements from worst to best, or None when some rank holds ties."""
        if not self.is_total():
            return None
        return [next(iter(s)) for s in reversed(self._sets)]

    def intersection(self, other: 'Preorder') -> Optional['Preorder']:
        """
        Pairs related in both preorders.

        Returns
        -------
        Preorder or None
            None when the intersection is not a complete preorder, that is
            when the two preorders strictly disagree on some pair.
        """
        if self.elements != other.elements:
            raise ValueError("Preorders over different elements")

        keyed = sorted(self._ranks, key=lambda e: (self._ranks[e], other._ranks[e]))
        previous_other = 0
        ranked: List[Set[Hashable]] = []
        previous_key = None
        for element in keyed:
            key = (self._ranks[element], other._ranks[element])
            if key[1] < previous_other:
                return None
            previous_other = key[1]
            if key != previous_key:
                ranked.append(set())
                previous_key = key
            ranked[-1].add(element)
        return Preorder(ranked)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Preorder):
            return NotImplemented
        return self._sets == other._sets

    def __repr__(self) -> str:
        ranks = ', '.join('{' + ', '.join(sorted(str(e) for e in s)) + '}' for s in self._sets)
        return f"Preorder([{ranks}])"


class Dominance:
    """Dominance relation and strict dominance order among alternatives."""

    def dominance_relation(self, evaluations: Evaluations,
                           directions: Dict) -> Optional[Preorder]:
        """
        Large dominance relation as a preorder, best alternatives first.

        Parameters
        ----------
        evaluations : Evaluations
            Complete, non-empty evaluations.
        directions : dict
            Preference direction for every evaluated criterion.

        Returns
        -------
        Preorder or None
            None when the criteria disagree (no dominance-consistent order).
        """
        criteria = evaluations.columns
        ConsistencyChecker().assert_complete_preference_directions(directions, criteria)
        if evaluations.is_empty():
            raise IncompleteInputError("Evaluations empty.")
        if not evaluations.is_complete():
            raise IncompleteInputError("Evaluations incomplete.")

        directions = {as_criterion(c): PreferenceDirection.parse(d) for c, d in directions.items()}
        alternatives = evaluations.rows
        values = evaluations.values(alternatives, criteria)

        preorder: Optional[Preorder] = None
        for j, criterion in enumerate(criteria):
            direction = directions[criterion]
            column = Preorder.from_values(
                {a: direction.orient(values[i, j]) for i, a in enumerate(alternatives)})
            preorder = column if preorder is None else preorder.intersection(column)
            if preorder is None:
                logger.debug(f"Dominance conflict on criterion {criterion}")
                return None
        return preorder

    def strict_dominance_order(self, evaluations: Evaluations,
                               directions: Dict) -> Optional[List[Alternative]]:
        """
        Alternatives from dominated to dominating, when they strictly dominate
        each other; None on conflict or ties.
        """
        dominance = self.dominance_relation(evaluations, directions)
        if dominance is None:
            return None
        return dominance.total_order()
