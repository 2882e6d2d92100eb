# -*- coding: utf-8 -*-
"""
Promethee Flows
===============

From a preference matrix π over n alternatives:

    φ+(a) = Σ_x π(a, x) / (n − 1)        positive (leaving) flow
    φ−(a) = Σ_x π(x, a) / (n − 1)        negative (entering) flow
    φ(a)  = φ+(a) − φ−(a)                net flow

References
----------
[1] Brans, J.P., Mareschal, B. (2005). "PROMETHEE Methods." In Multiple
    Criteria Decision Analysis: State of the Art Surveys, Springer.
"""

from enum import Enum

import pandas as pd

from ..exceptions import InvalidInputError
from ..structure import RelationMatrix


class FlowType(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NET = "net"


class FlowCalculator:
    """Promethee flows of a complete square relation."""

    @staticmethod
    def _square(matrix: RelationMatrix):
        if not matrix.is_complete():
            raise InvalidInputError("Given matrix is not complete.")
        if not matrix.is_square():
            raise InvalidInputError("Given matrix is not square.")
        alternatives = matrix.rows
        if len(alternatives) < 2:
            raise InvalidInputError("Flows need at least two alternatives.")
        return alternatives, matrix.values(alternatives, alternatives)

    def positive_flows(self, matrix: RelationMatrix) -> pd.Series:
        alternatives, values = self._square(matrix)
        flows = values.sum(axis=1) / (len(alternatives) - 1)
        return pd.Series(flows, index=pd.Index(alternatives, dtype=object), name='Positive_Flow')

    def negative_flows(self, matrix: RelationMatrix) -> pd.Series:
        alternatives, values = self._square(matrix)
        flows = values.sum(axis=0) / (len(alternatives) - 1)
        return pd.Series(flows, index=pd.Index(alternatives, dtype=object), name='Negative_Flow')

    def net_flows_not_divided(self, matrix: RelationMatrix) -> pd.Series:
        """Σ_x π(a, x) − π(x, a), without the 1 / (n − 1) factor."""
        alternatives, values = self._square(matrix)
        flows = values.sum(axis=1) - values.sum(axis=0)
        return pd.Series(flows, index=pd.Index(alternatives, dtype=object), name='Net_Flow')

    def net_flows(self, matrix: RelationMatrix) -> pd.Series:
        flows = self.net_flows_not_divided(matrix)
        return flows / (len(flows) - 1)

    def flows(self, flow_type: FlowType, matrix: RelationMatrix) -> pd.Series:
        flow_type = FlowType(flow_type)
        if flow_type is FlowType.POSITIVE:
            return self.positive_flows(matrix)
        if flow_type is FlowType.NEGATIVE:
            return self.negative_flows(matrix)
        return self.net_flows(matrix)


def ranks_from_flows(flows: pd.Series) -> pd.Series:
    """Dense ranks (1 = highest flow); equal flows share a rank."""
    return flows.rank(ascending=False, method='dense').astype(int)
