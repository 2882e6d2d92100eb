# -*- coding: utf-8 -*-
"""
Preference parameters: discrimination thresholds and criteria coalitions.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .base import Criterion, as_criterion
from ..exceptions import IncompleteInputError, InvalidInputError, ThresholdOrderError


@dataclass
class Thresholds:
    """
    Per-criterion discrimination thresholds.

    Parameters
    ----------
    preference : dict
        Preference threshold ``p`` per criterion (missing reads as 0).
    indifference : dict
        Indifference threshold ``q`` per criterion (missing reads as 0).
    veto : dict
        Veto threshold ``v`` per criterion (missing means no veto).
    """
    preference: Dict[Criterion, float] = field(default_factory=dict)
    indifference: Dict[Criterion, float] = field(default_factory=dict)
    veto: Dict[Criterion, float] = field(default_factory=dict)

    def __post_init__(self):
        self.preference = {as_criterion(c): float(v) for c, v in self.preference.items()}
        self.indifference = {as_criterion(c): float(v) for c, v in self.indifference.items()}
        self.veto = {as_criterion(c): float(v) for c, v in self.veto.items()}

    def set_preference(self, criterion, value: float) -> None:
        self.preference[as_criterion(criterion)] = float(value)

    def set_indifference(self, criterion, value: float) -> None:
        self.indifference[as_criterion(criterion)] = float(value)

    def set_veto(self, criterion, value: float) -> None:
        self.veto[as_criterion(criterion)] = float(value)

    def contains_preference(self, criterion) -> bool:
        return as_criterion(criterion) in self.preference

    def contains_indifference(self, criterion) -> bool:
        return as_criterion(criterion) in self.indifference

    def contains_veto(self, criterion) -> bool:
        return as_criterion(criterion) in self.veto

    def get_preference(self, criterion) -> float:
        return self.preference.get(as_criterion(criterion), 0.0)

    def get_indifference(self, criterion) -> float:
        return self.indifference.get(as_criterion(criterion), 0.0)

    def get_veto(self, criterion) -> Optional[float]:
        return self.veto.get(as_criterion(criterion))

    @property
    def criteria(self) -> Set[Criterion]:
        """Criteria on which at least one threshold is set."""
        return set(self.preference) | set(self.indifference) | set(self.veto)

    def check_order(self, criterion) -> None:
        """Raise :class:`ThresholdOrderError` unless q <= p <= v on ``criterion``."""
        criterion = as_criterion(criterion)
        p = self.get_preference(criterion)
        q = self.get_indifference(criterion)
        if p < q:
            raise ThresholdOrderError(
                f"Preference threshold {p} below indifference threshold {q} on {criterion}")
        v = self.get_veto(criterion)
        if v is not None and v < p:
            raise ThresholdOrderError(
                f"Veto threshold {v} below preference threshold {p} on {criterion}")


@dataclass
class Coalitions:
    """
    Criteria weights with an optional majority threshold.

    Parameters
    ----------
    weights : dict
        Non-negative weight per criterion.
    majority_threshold : float, optional
        Weight (on the same scale as the weights) a coalition needs to
        support an outranking.
    """
    weights: Dict[Criterion, float] = field(default_factory=dict)
    majority_threshold: Optional[float] = None

    def __post_init__(self):
        self.weights = {as_criterion(c): float(w) for c, w in self.weights.items()}
        for criterion, weight in self.weights.items():
            if weight < 0:
                raise ValueError(f"Negative weight {weight} on {criterion}")

    def set_weight(self, criterion, weight: float) -> None:
        if weight < 0:
            raise ValueError(f"Negative weight {weight} on {criterion}")
        self.weights[as_criterion(criterion)] = float(weight)

    def contains_weight(self, criterion) -> bool:
        return as_criterion(criterion) in self.weights

    def weight(self, criterion) -> float:
        criterion = as_criterion(criterion)
        if criterion not in self.weights:
            raise IncompleteInputError(f"No weight on {criterion}")
        return self.weights[criterion]

    @property
    def criteria(self) -> List[Criterion]:
        return list(self.weights)

    @property
    def sum(self) -> float:
        return float(sum(self.weights.values()))

    def contains_majority_threshold(self) -> bool:
        return self.majority_threshold is not None

    def normalized_majority_threshold(self) -> float:
        """Majority threshold divided by the sum of weights."""
        if self.majority_threshold is None:
            raise IncompleteInputError("Majority threshold not set")
        return self.majority_threshold / self._positive_sum()

    def normalized_weights(self) -> Dict[Criterion, float]:
        total = self._positive_sum()
        return {c: w / total for c, w in self.weights.items()}

    def _positive_sum(self) -> float:
        total = self.sum
        if total <= 0:
            raise InvalidInputError(f"Weights sum to {total}, cannot normalize.")
        return total

    def scaled(self, factor: float) -> 'Coalitions':
        """Copy with every weight and the majority threshold multiplied by ``factor``."""
        if factor <= 0:
            raise ValueError(f"Scaling factor must be positive, got {factor}")
        threshold = None if self.majority_threshold is None else self.majority_threshold * factor
        return Coalitions({c: w * factor for c, w in self.weights.items()}, threshold)
