# -*- coding: utf-8 -*-
"""
Basic value objects: alternatives, criteria, categories and scales.

Identity is carried by the string id only. A profile (category boundary)
is an ordinary :class:`Alternative`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True, order=True)
class Alternative:
    """An alternative (or a boundary profile) identified by its id."""
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, order=True)
class Criterion:
    """A criterion identified by its id."""
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, order=True)
class Category:
    """An ordered category identified by its id."""
    id: str

    def __str__(self) -> str:
        return self.id


class PreferenceDirection(Enum):
    """Whether larger or smaller values are preferred on a criterion."""
    MAXIMIZE = "max"
    MINIMIZE = "min"

    def orient(self, diff: float) -> float:
        """Return ``diff`` seen from this direction (negated for MINIMIZE)."""
        return diff if self is PreferenceDirection.MAXIMIZE else -diff

    @property
    def sign(self) -> int:
        return 1 if self is PreferenceDirection.MAXIMIZE else -1

    def inverted(self) -> 'PreferenceDirection':
        if self is PreferenceDirection.MAXIMIZE:
            return PreferenceDirection.MINIMIZE
        return PreferenceDirection.MAXIMIZE

    @classmethod
    def parse(cls, value) -> 'PreferenceDirection':
        """Accept an enum member, 'max'/'min' or a 'benefit'/'cost' criterion type."""
        if isinstance(value, cls):
            return value
        key = str(value).lower()
        if key in ('max', 'maximize', 'benefit'):
            return cls.MAXIMIZE
        if key in ('min', 'minimize', 'cost'):
            return cls.MINIMIZE
        raise ValueError(f"Unknown preference direction: {value!r}")


@dataclass(frozen=True)
class Scale:
    """
    Evaluation scale of a criterion.

    Parameters
    ----------
    direction : PreferenceDirection, optional
        Preference direction; required by every preference computation.
    minimum, maximum : float, optional
        Bounds of the scale.
    step : float, optional
        Set for discrete scales: valid values are ``minimum + k * step``.
    """
    direction: Optional[PreferenceDirection] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    step: Optional[float] = None

    def __post_init__(self):
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError(f"Scale minimum {self.minimum} exceeds maximum {self.maximum}")
        if self.step is not None and self.step <= 0:
            raise ValueError(f"Scale step must be positive, got {self.step}")

    @property
    def is_discrete(self) -> bool:
        return self.step is not None

    @property
    def worst(self) -> Optional[float]:
        """Least preferred bound (the minimum for a scale to maximize)."""
        return self.minimum if self.direction is PreferenceDirection.MAXIMIZE else self.maximum

    @property
    def best(self) -> Optional[float]:
        return self.maximum if self.direction is PreferenceDirection.MAXIMIZE else self.minimum

    def in_bounds(self, value: float) -> bool:
        """Whether ``value`` lies between the bounds, steps ignored."""
        if self.minimum is not None and value < self.minimum:
            return False
        return self.maximum is None or value <= self.maximum

    def contains(self, value: float, tolerance: float = 1e-9) -> bool:
        """Whether ``value`` lies in the scale (and on a step, for discrete scales)."""
        if self.minimum is not None and value < self.minimum - tolerance:
            return False
        if self.maximum is not None and value > self.maximum + tolerance:
            return False
        if self.step is not None:
            origin = self.minimum if self.minimum is not None else 0.0
            steps = (value - origin) / self.step
            return abs(steps - round(steps)) <= tolerance
        return True

    def inverted(self) -> 'Scale':
        """Same bounds, opposite preference direction, no steps."""
        direction = None if self.direction is None else self.direction.inverted()
        return Scale(direction, self.minimum, self.maximum)


def as_alternative(value) -> Alternative:
    return value if isinstance(value, Alternative) else Alternative(str(value))


def as_criterion(value) -> Criterion:
    return value if isinstance(value, Criterion) else Criterion(str(value))


def as_category(value) -> Category:
    return value if isinstance(value, Category) else Category(str(value))
