# -*- coding: utf-8 -*-
"""
Sorting Module
==============

Electre-TRI assignment of alternatives to ordered categories.

Classes
-------
SortingAssigner, SortingMode
    Pessimistic, optimistic and interval assignment from a binary
    outranking relation.
ElectrePessimisticProgressive
    Incremental pessimistic assignment from interval evaluations.
SortingFull, SortingResult
    Outranking and assignment of a whole sorting problem.
StandardizeProfiles, ProfilesDistance, ProfilesDistanceResult
    Standard form of profiles on discrete scales and distances between
    sets of profiles.

Usage
-----
>>> from outranking_mcda.sorting import SortingFull, SortingMode
>>> result = SortingFull().assign(SortingMode.BOTH, problem)
>>> print(result.summary())
"""

from .assigner import SortingAssigner, SortingMode
from .progressive import ElectrePessimisticProgressive
from .full import SortingFull, SortingResult
from .profiles import StandardizeProfiles, ProfilesDistance, ProfilesDistanceResult

__all__ = [
    'SortingAssigner', 'SortingMode',
    'ElectrePessimisticProgressive',
    'SortingFull', 'SortingResult',
    'StandardizeProfiles', 'ProfilesDistance', 'ProfilesDistanceResult',
]
