# -*- coding: utf-8 -*-
"""
Outranking MCDA: Electre-Style Sorting and Ranking
==================================================

Outranking-based multi-criteria decision analysis: concordance,
discordance and outranking credibility between alternatives, Electre-TRI
assignment of alternatives to ordered categories, dominance checks and
Promethee-style flows.

Pipeline
--------
evaluations + thresholds + weights
  → concordance / discordance → outranking (cut at λ) → category assignment

Package Structure
-----------------
outranking_mcda/
├── structure/          # Alternatives, criteria, matrices, categories
│   ├── base.py         # Alternative, Criterion, Category, Scale
│   ├── evaluations.py  # Evaluations, RelationMatrix (pandas-backed)
│   ├── preferences.py  # Thresholds, Coalitions
│   ├── categories.py   # CatsAndProfs, assignments
│   └── problem.py      # ProblemData, SortingProblem
│
├── outranking/
│   ├── concordance.py  # Electre concordance, Promethee preference
│   ├── discordance.py  # Veto discordance, sharp vetoes
│   ├── outranking.py   # Credibility and cut
│   ├── cut.py          # Plain binarization
│   └── full.py         # Concordance → discordance → outranking
│
├── sorting/
│   ├── assigner.py     # Pessimistic / optimistic / both
│   ├── progressive.py  # Incremental pessimistic assignment
│   ├── profiles.py     # Standard form of profiles, profile distances
│   └── full.py         # End-to-end Electre-TRI
│
├── ranking/
│   ├── dominance.py    # Preorder, dominance relation
│   ├── flow.py         # Promethee flows
│   ├── distillation.py # Net-flow distillation
│   └── promethee_profiles.py
│
└── analysis/
    └── consistency.py  # Precondition checks

Quick Start
-----------
>>> from outranking_mcda import SortingFull, SortingMode, setup_logger
>>> setup_logger(level='INFO')
>>> result = SortingFull().assign(SortingMode.PESSIMISTIC, problem)
>>> print(result.summary())
"""

__version__ = '1.0.0'

from .config import Config, get_default_config, get_config, set_config, reset_config
from .logger import (
    setup_logger,
    setup_from_config,
    get_logger,
    get_module_logger,
    LoggerFactory,
    log_execution,
    timed_operation,
)
from .exceptions import (
    InvalidInputError,
    IncompleteInputError,
    ThresholdOrderError,
    UnknownCriterionError,
    MissingRelationEntryError,
    InvalidOutrankingValueError,
    NumericInconsistencyError,
)
from .structure import (
    Alternative, Criterion, Category,
    PreferenceDirection, Scale,
    Evaluations, RelationMatrix,
    Thresholds, Coalitions,
    CatsAndProfs, OrderedAssignments, OrderedAssignmentsToMultiple,
    ProblemData, SortingProblem,
)
from .analysis import ConsistencyChecker
from .outranking import (
    ConcordanceCalculator,
    DiscordanceCalculator, DiscordanceResult,
    OutrankingCalculator, OutrankingResult,
    OutrankingFull,
    cut_relation,
)
from .sorting import (
    SortingAssigner, SortingMode,
    ElectrePessimisticProgressive,
    SortingFull, SortingResult,
    StandardizeProfiles, ProfilesDistance, ProfilesDistanceResult,
)
from .ranking import (
    Preorder, Dominance,
    FlowCalculator, FlowType,
    SimpleDistillation,
    PrometheeProfiles,
)

__all__ = [
    '__version__',
    # Config & logging
    'Config', 'get_default_config', 'get_config', 'set_config', 'reset_config',
    'setup_logger', 'setup_from_config', 'get_logger', 'get_module_logger',
    'LoggerFactory', 'log_execution', 'timed_operation',
    # Errors
    'InvalidInputError', 'IncompleteInputError', 'ThresholdOrderError',
    'UnknownCriterionError', 'MissingRelationEntryError',
    'InvalidOutrankingValueError', 'NumericInconsistencyError',
    # Structures
    'Alternative', 'Criterion', 'Category', 'PreferenceDirection', 'Scale',
    'Evaluations', 'RelationMatrix', 'Thresholds', 'Coalitions',
    'CatsAndProfs', 'OrderedAssignments', 'OrderedAssignmentsToMultiple',
    'ProblemData', 'SortingProblem',
    # Computations
    'ConsistencyChecker',
    'ConcordanceCalculator', 'DiscordanceCalculator', 'DiscordanceResult',
    'OutrankingCalculator', 'OutrankingResult', 'OutrankingFull', 'cut_relation',
    'SortingAssigner', 'SortingMode', 'ElectrePessimisticProgressive',
    'SortingFull', 'SortingResult',
    'StandardizeProfiles', 'ProfilesDistance', 'ProfilesDistanceResult',
    'Preorder', 'Dominance', 'FlowCalculator', 'FlowType',
    'SimpleDistillation', 'PrometheeProfiles',
]
