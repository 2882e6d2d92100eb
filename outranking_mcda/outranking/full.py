# -*- coding: utf-8 -*-
"""
Full outranking pipeline: concordance, discordance and credibility, cut at
the normalized majority threshold.
"""

from typing import Optional

from ..config import get_config
from ..logger import get_module_logger
from ..structure import Coalitions, ProblemData, Thresholds
from .concordance import ConcordanceCalculator
from .discordance import DiscordanceCalculator
from .outranking import OutrankingCalculator, OutrankingResult

logger = get_module_logger('outranking.full')


class OutrankingFull:
    """
    Outranking relation of a problem in one call.

    Parameters
    ----------
    sharp_vetoes : bool
        Use binary discordances.
    tolerance : float, optional
        Cut tolerance, see :class:`OutrankingCalculator`.
    """

    def __init__(self, sharp_vetoes: bool = False, tolerance: Optional[float] = None):
        self.sharp_vetoes = sharp_vetoes
        self.tolerance = tolerance

    def outranking(self, data: ProblemData, thresholds: Optional[Thresholds],
                   coalitions: Coalitions) -> OutrankingResult:
        """
        Outranking over every pair of alternatives of ``data``.

        The relation is cut at λ / Σw when the coalitions hold a majority
        threshold, and left valued otherwise.

        Returns
        -------
        OutrankingResult
            The smallest separation is the smaller of the cut separation and
            the sharp veto separation.
        """
        concordance = ConcordanceCalculator().concordance(data, thresholds, coalitions)
        discordance = DiscordanceCalculator(sharp_vetoes=self.sharp_vetoes).discordances(data, thresholds)

        calculator = OutrankingCalculator(tolerance=self.tolerance)
        if not coalitions.contains_majority_threshold():
            matrix = calculator.outranking(data.alternatives, data.criteria,
                                           concordance, discordance.matrices)
            result = OutrankingResult(matrix=matrix)
        else:
            cut = coalitions.normalized_majority_threshold()
            if 1.0 < cut < 1.0 + get_config().tolerance.cut_rounding:
                cut = 1.0
            result = calculator.with_cut(data.alternatives, data.criteria,
                                         concordance, discordance.matrices, cut)

        veto_separation = discordance.smallest_separation
        if veto_separation is not None and (result.smallest_separation is None
                                            or veto_separation < result.smallest_separation):
            result.smallest_separation = veto_separation
        logger.debug(f"Outranking over {len(data.alternatives)} alternatives, "
                     f"smallest separation {result.smallest_separation}")
        return result
