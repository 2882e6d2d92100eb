# -*- coding: utf-8 -*-
"""
Outranking Credibility
======================

Electre credibility of "a outranks b"::

    σ(a, b) = C(a, b) · Π_{j : d_j(a, b) > C(a, b)} (1 − d_j(a, b)) / (1 − C(a, b))

and σ(a, b) = 0 as soon as some criterion has d_j(a, b) = 1.

With a cut threshold λ the credibility is turned into a binary relation:
1 iff σ(a, b) >= λ − tolerance.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import numpy as np

from ..config import get_config
from ..exceptions import MissingRelationEntryError
from ..logger import get_module_logger
from ..structure import Criterion, RelationMatrix, as_alternative, as_criterion

logger = get_module_logger('outranking.outranking')


@dataclass
class OutrankingResult:
    """
    Result container for an outranking computation.

    Attributes
    ----------
    matrix : RelationMatrix
        Credibilities, or 0/1 values when a cut threshold was applied.
    smallest_separation : float or None
        Smallest distance between a credibility and the cut threshold
        (combined with the veto separation for full computations).
    cut_threshold : float or None
        Threshold the matrix was cut at.
    """
    matrix: RelationMatrix
    smallest_separation: Optional[float] = None
    cut_threshold: Optional[float] = None

    @property
    def is_cut(self) -> bool:
        return self.cut_threshold is not None

    def to_frame(self):
        return self.matrix.to_frame(use_ids=True)

    def summary(self) -> str:
        frame = self.matrix.to_frame()
        lines = [
            f"\n{'='*60}",
            "OUTRANKING RESULTS",
            f"{'='*60}",
            f"\nAlternatives: {len(frame.index)}",
        ]
        if self.is_cut:
            lines.append(f"Cut threshold: {self.cut_threshold:.4f}")
            lines.append(f"Outranking pairs: {int(frame.to_numpy().sum())}")
        if self.smallest_separation is not None:
            lines.append(f"Smallest separation: {self.smallest_separation:.6g}")
        lines.append("=" * 60)
        return "\n".join(lines)


class OutrankingCalculator:
    """
    Combines concordance and discordances into outranking credibilities.

    Parameters
    ----------
    tolerance : float, optional
        Credibilities short of the cut threshold by at most this amount are
        cut to 1. Defaults to the configured ``cut_tolerance``.
    """

    def __init__(self, tolerance: Optional[float] = None):
        self.tolerance = tolerance

    def _tolerance(self) -> float:
        return self.tolerance if self.tolerance is not None else get_config().tolerance.cut_tolerance

    def outranking(self, alternatives: Iterable, criteria: Iterable,
                   concordance: RelationMatrix,
                   discordances: Dict[Criterion, RelationMatrix]) -> RelationMatrix:
        """Outranking credibility of every pair of ``alternatives``."""
        return self._compute(alternatives, criteria, concordance, discordances, None).matrix

    def with_cut(self, alternatives: Iterable, criteria: Iterable,
                 concordance: RelationMatrix,
                 discordances: Dict[Criterion, RelationMatrix],
                 threshold: float) -> OutrankingResult:
        """
        Binary outranking relation cut at ``threshold``.

        Parameters
        ----------
        threshold : float
            Cut level in [0, 1].

        Returns
        -------
        OutrankingResult
            0/1 matrix with the smallest |σ − threshold| met.
        """
        if threshold is None or not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Invalid cut threshold {threshold}.")
        return self._compute(alternatives, criteria, concordance, discordances, threshold)

    def _compute(self, alternatives, criteria, concordance, discordances,
                 threshold: Optional[float]) -> OutrankingResult:
        alternatives = [as_alternative(a) for a in alternatives]
        criteria = [as_criterion(c) for c in criteria]
        discordances = {as_criterion(c): m for c, m in discordances.items()}
        tolerance = self._tolerance()

        conc = concordance.values(alternatives, alternatives)
        missing = np.argwhere(np.isnan(conc))
        if len(missing):
            r, s = missing[0]
            raise MissingRelationEntryError(
                f"Missing concordance entry at {alternatives[r]}, {alternatives[s]}.")
        discs = []
        for criterion in criteria:
            if criterion not in discordances:
                raise MissingRelationEntryError(f"Missing discordance matrix for {criterion}.")
            disc = discordances[criterion].values(alternatives, alternatives)
            missing = np.argwhere(np.isnan(disc))
            if len(missing):
                r, s = missing[0]
                raise MissingRelationEntryError(
                    f"Missing discordance entry at {alternatives[r]}, {alternatives[s]}, {criterion}.")
            discs.append(disc)

        n = len(alternatives)
        result = np.empty((n, n))
        smallest: Optional[float] = None
        for r in range(n):
            for s in range(n):
                c = conc[r, s]
                outr = c
                for disc in discs:
                    d = disc[r, s]
                    if d > c:
                        outr = outr * (1.0 - d) / (1.0 - c)
                    elif d == 1.0:
                        outr = 0.0
                if threshold is None:
                    result[r, s] = outr
                else:
                    diff = outr - threshold
                    if smallest is None or abs(diff) < smallest:
                        smallest = abs(diff)
                    result[r, s] = 1.0 if diff >= -tolerance else 0.0

        if threshold is None:
            logger.debug(f"Computed outranking credibilities ({n}x{n})")
        else:
            logger.debug(f"Computed outranking cut at {threshold:.4f} ({n}x{n}), "
                         f"smallest separation {smallest}")
        matrix = RelationMatrix.from_array(alternatives, alternatives, result)
        return OutrankingResult(matrix=matrix, smallest_separation=smallest, cut_threshold=threshold)
