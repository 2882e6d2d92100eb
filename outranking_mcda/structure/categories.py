# -*- coding: utf-8 -*-
"""
Ordered categories with their boundary profiles, and assignments.

Categories are kept from worst to best. Profile ``i`` separates category
``i`` (below) from category ``i + 1`` (above)::

    worst                                     best
    cat_0 | prof_0 | cat_1 | prof_1 | ... | cat_n
"""

from typing import Dict, Iterable, List, Optional

import pandas as pd

from .base import Alternative, Category, as_alternative, as_category


class CatsAndProfs:
    """
    Categories ordered from worst to best, with the profiles between them.

    Parameters
    ----------
    categories : iterable, optional
        Categories (or ids) from worst to best.
    profiles : iterable, optional
        Profiles (or ids) from worst to best.
    """

    def __init__(self, categories: Optional[Iterable] = None, profiles: Optional[Iterable] = None):
        self._categories: List[Category] = []
        self._profiles: List[Alternative] = []
        for category in categories or []:
            self.add_category(category)
        for profile in profiles or []:
            self.add_profile(profile)

    def add_category(self, category) -> None:
        """Append a category above the current best one."""
        category = as_category(category)
        if category in self._categories:
            raise ValueError(f"Duplicate category {category}")
        self._categories.append(category)

    def add_profile(self, profile) -> None:
        """Append a profile above the current best one."""
        profile = as_alternative(profile)
        if profile in self._profiles:
            raise ValueError(f"Duplicate profile {profile}")
        self._profiles.append(profile)

    @property
    def categories(self) -> List[Category]:
        """Categories from worst to best."""
        return list(self._categories)

    @property
    def categories_from_best(self) -> List[Category]:
        return list(reversed(self._categories))

    @property
    def profiles(self) -> List[Alternative]:
        """Profiles from worst to best."""
        return list(self._profiles)

    @property
    def worst(self) -> Category:
        return self._categories[0]

    @property
    def best(self) -> Category:
        return self._categories[-1]

    def __len__(self) -> int:
        return len(self._categories)

    def contains_category(self, category) -> bool:
        return as_category(category) in self._categories

    def index_of(self, category) -> int:
        """Rank of ``category`` counted from the worst one (0)."""
        category = as_category(category)
        try:
            return self._categories.index(category)
        except ValueError:
            raise ValueError(f"Unknown category {category}") from None

    def category_at(self, index: int) -> Category:
        return self._categories[index]

    def profile_up(self, category) -> Optional[Alternative]:
        """Profile bounding ``category`` from above, None for the best category."""
        index = self.index_of(category)
        return self._profiles[index] if index < len(self._profiles) else None

    def profile_down(self, category) -> Optional[Alternative]:
        """Profile bounding ``category`` from below, None for the worst category."""
        index = self.index_of(category)
        if index == 0 or index - 1 >= len(self._profiles):
            return None
        return self._profiles[index - 1]

    def is_complete(self) -> bool:
        """At least one category and exactly one profile between consecutive categories."""
        return len(self._categories) >= 1 and len(self._profiles) == len(self._categories) - 1

    def inverted(self) -> 'CatsAndProfs':
        """Same structure seen with every preference direction reversed."""
        return CatsAndProfs(reversed(self._categories), reversed(self._profiles))

    def __eq__(self, other) -> bool:
        if not isinstance(other, CatsAndProfs):
            return NotImplemented
        return self._categories == other._categories and self._profiles == other._profiles

    def __repr__(self) -> str:
        parts = []
        for i, category in enumerate(self._categories):
            parts.append(category.id)
            if i < len(self._profiles):
                parts.append(f"[{self._profiles[i].id}]")
        return f"CatsAndProfs({' < '.join(parts)})"


class OrderedAssignments:
    """Assignment of each alternative to a single category."""

    def __init__(self, cats_and_profs: Optional[CatsAndProfs] = None):
        self.cats_and_profs = cats_and_profs
        self._assignments: Dict[Alternative, Category] = {}

    def assign(self, alternative, category) -> None:
        category = as_category(category)
        if self.cats_and_profs is not None and not self.cats_and_profs.contains_category(category):
            raise ValueError(f"Unknown category {category}")
        self._assignments[as_alternative(alternative)] = category

    def get(self, alternative) -> Optional[Category]:
        return self._assignments.get(as_alternative(alternative))

    @property
    def alternatives(self) -> List[Alternative]:
        return list(self._assignments)

    def items(self):
        return self._assignments.items()

    def __len__(self) -> int:
        return len(self._assignments)

    def __eq__(self, other) -> bool:
        if not isinstance(other, OrderedAssignments):
            return NotImplemented
        return self._assignments == other._assignments

    def to_series(self) -> pd.Series:
        """Category id per alternative id."""
        return pd.Series({a.id: c.id for a, c in self._assignments.items()},
                         name='Category', dtype=object)


class OrderedAssignmentsToMultiple:
    """Assignment of each alternative to an interval of categories."""

    def __init__(self, cats_and_profs: CatsAndProfs):
        self.cats_and_profs = cats_and_profs
        self._assignments: Dict[Alternative, List[Category]] = {}

    def assign(self, alternative, categories: Iterable) -> None:
        """Assign ``alternative`` to ``categories``, stored from worst to best."""
        categories = {as_category(c) for c in categories}
        if not categories:
            raise ValueError(f"Empty assignment for {alternative}")
        ordered = sorted(categories, key=self.cats_and_profs.index_of)
        self._assignments[as_alternative(alternative)] = ordered

    def assign_interval(self, alternative, worst, best) -> None:
        """Assign every category from ``worst`` to ``best`` inclusive."""
        low = self.cats_and_profs.index_of(worst)
        high = self.cats_and_profs.index_of(best)
        low, high = min(low, high), max(low, high)
        self._assignments[as_alternative(alternative)] = \
            self.cats_and_profs.categories[low:high + 1]

    def get(self, alternative) -> Optional[List[Category]]:
        categories = self._assignments.get(as_alternative(alternative))
        return None if categories is None else list(categories)

    @property
    def alternatives(self) -> List[Alternative]:
        return list(self._assignments)

    def items(self):
        return self._assignments.items()

    def __len__(self) -> int:
        return len(self._assignments)

    def is_contiguous(self, alternative) -> bool:
        indices = [self.cats_and_profs.index_of(c) for c in self._assignments[as_alternative(alternative)]]
        return indices == list(range(indices[0], indices[-1] + 1))

    def to_frame(self) -> pd.DataFrame:
        """Worst and best assigned category id per alternative id."""
        return pd.DataFrame(
            {'Worst': [cats[0].id for cats in self._assignments.values()],
             'Best': [cats[-1].id for cats in self._assignments.values()],
             'Count': [len(cats) for cats in self._assignments.values()]},
            index=[a.id for a in self._assignments],
        )
