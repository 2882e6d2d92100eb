# -*- coding: utf-8 -*-
"""
Ranking Module
==============

Dominance, Promethee flows and distillation.

Classes
-------
Preorder, Dominance
    Ranked sets and the dominance relation among alternatives.
FlowCalculator, FlowType
    Positive, negative and net flows of a preference matrix.
SimpleDistillation
    Ascending and descending net-flow distillation.
PrometheeProfiles
    Net flows criterion by criterion.
"""

from .dominance import Preorder, Dominance
from .flow import FlowCalculator, FlowType, ranks_from_flows
from .distillation import SimpleDistillation
from .promethee_profiles import PrometheeProfiles

__all__ = [
    'Preorder', 'Dominance',
    'FlowCalculator', 'FlowType', 'ranks_from_flows',
    'SimpleDistillation',
    'PrometheeProfiles',
]
