# -*- coding: utf-8 -*-
"""
Outranking Module
=================

Electre-style pairwise preference relations.

Classes
-------
ConcordanceCalculator
    Electre concordance and Promethee preference matrices.
DiscordanceCalculator, DiscordanceResult
    Veto-based discordance matrices, optionally sharp.
OutrankingCalculator, OutrankingResult
    Credibility of outranking, optionally cut into a binary relation.
OutrankingFull
    The three steps chained over a problem.

Usage
-----
>>> from outranking_mcda.outranking import OutrankingFull
>>> result = OutrankingFull(sharp_vetoes=True).outranking(data, thresholds, coalitions)
>>> result.matrix.get('a1', 'a2')
"""

from .concordance import ConcordanceCalculator
from .discordance import DiscordanceCalculator, DiscordanceResult
from .outranking import OutrankingCalculator, OutrankingResult
from .cut import cut_relation
from .full import OutrankingFull

__all__ = [
    'ConcordanceCalculator',
    'DiscordanceCalculator', 'DiscordanceResult',
    'OutrankingCalculator', 'OutrankingResult',
    'cut_relation',
    'OutrankingFull',
]
