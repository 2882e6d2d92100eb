# -*- coding: utf-8 -*-
"""
Simple net-flow distillation of a valued relation.

The descending distillation repeatedly extracts the alternatives with the
highest net flow in the relation restricted to the remaining ones; the
ascending distillation repeatedly extracts those with the lowest net flow
and ranks them from the last extracted. Alternatives tied at exactly the
same net flow are extracted together.
"""

from typing import List, Set

import numpy as np

from ..exceptions import InvalidInputError
from ..logger import get_module_logger
from ..structure import Alternative, RelationMatrix
from .dominance import Preorder
from .flow import FlowCalculator

logger = get_module_logger('ranking.distillation')


class SimpleDistillation:
    """
    Parameters
    ----------
    source : RelationMatrix
        Complete square valued relation (typically outranking credibilities).
    """

    def __init__(self, source: RelationMatrix):
        if not source.is_complete() or not source.is_square():
            raise InvalidInputError("Distillation needs a complete square relation.")
        self.source = source
        self._flows = FlowCalculator()

    def _extract(self, best: bool) -> List[Set[Alternative]]:
        remaining = list(self.source.rows)
        extracted = []
        while remaining:
            if len(remaining) == 1:
                extracted.append(set(remaining))
                break
            flows = self._flows.net_flows(self.source.restrict(remaining))
            target = flows.max() if best else flows.min()
            group = {a for a, flow in flows.items() if flow == target}
            extracted.append(group)
            remaining = [a for a in remaining if a not in group]
            logger.debug(f"Extracted {sorted(a.id for a in group)} at net flow {target:.4f}")
        return extracted

    def descending(self) -> Preorder:
        """Preorder built by extracting the best alternatives first."""
        return Preorder(self._extract(best=True))

    def ascending(self) -> Preorder:
        """Preorder built by extracting the worst alternatives first."""
        return Preorder(reversed(self._extract(best=False)))

    def intersection(self) -> RelationMatrix:
        """
        Binary relation holding (a, b) iff a is ranked at least as well as b
        in both the ascending and descending preorders.
        """
        ascending, descending = self.ascending(), self.descending()
        alternatives = self.source.rows
        n = len(alternatives)
        values = np.zeros((n, n))
        for r, a in enumerate(alternatives):
            for s, b in enumerate(alternatives):
                if (ascending.rank_of(a) <= ascending.rank_of(b)
                        and descending.rank_of(a) <= descending.rank_of(b)):
                    values[r, s] = 1.0
        return RelationMatrix.from_array(alternatives, alternatives, values)
