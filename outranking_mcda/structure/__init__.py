# -*- coding: utf-8 -*-
"""
Problem Structures
==================

Value objects and containers consumed by the outranking calculators.

Classes
-------
Alternative, Criterion, Category
    Identifiers with identity equality.
PreferenceDirection, Scale
    Criterion scales.
Evaluations, RelationMatrix
    Labelled sparse matrices backed by pandas.
Thresholds, Coalitions
    Discrimination thresholds and weights with majority threshold.
CatsAndProfs, OrderedAssignments, OrderedAssignmentsToMultiple
    Ordered categories and assignment results.
ProblemData, SortingProblem
    Problem containers.
"""

from .base import (
    Alternative, Criterion, Category,
    PreferenceDirection, Scale,
    as_alternative, as_criterion, as_category,
)
from .evaluations import Evaluations, RelationMatrix
from .preferences import Thresholds, Coalitions
from .categories import CatsAndProfs, OrderedAssignments, OrderedAssignmentsToMultiple
from .problem import ProblemData, SortingProblem

__all__ = [
    'Alternative', 'Criterion', 'Category',
    'PreferenceDirection', 'Scale',
    'as_alternative', 'as_criterion', 'as_category',
    'Evaluations', 'RelationMatrix',
    'Thresholds', 'Coalitions',
    'CatsAndProfs', 'OrderedAssignments', 'OrderedAssignmentsToMultiple',
    'ProblemData', 'SortingProblem',
]
