# -*- coding: utf-8 -*-
"""
Input validation errors.

Every precondition violated by the data handed to a calculator is reported
as an :class:`InvalidInputError`. Subclasses tell the caller which kind of
problem was found so that it can be handled selectively::

    InvalidInputError
    ├── IncompleteInputError          missing evaluations, directions, weights,
    │                                 categories or profiles
    ├── ThresholdOrderError           p < q, v < p, or λ > Σw
    ├── UnknownCriterionError         weights / thresholds on foreign criteria
    ├── MissingRelationEntryError     absent concordance / discordance /
    │                                 outranking cell
    ├── InvalidOutrankingValueError   value used as binary is neither ~0 nor ~1
    └── NumericInconsistencyError     value out of its range beyond the
                                      numeric-error allowance
"""


class InvalidInputError(ValueError):
    """Base class for all invalid input conditions."""


class IncompleteInputError(InvalidInputError):
    """Required evaluations, directions, weights or categories are missing."""


class ThresholdOrderError(InvalidInputError):
    """Thresholds are not ordered (q <= p <= v) or λ exceeds the weights sum."""


class UnknownCriterionError(InvalidInputError):
    """A criterion is referenced that the problem does not declare."""


class MissingRelationEntryError(InvalidInputError):
    """A relation cell required by a downstream computation is absent."""


class InvalidOutrankingValueError(InvalidInputError):
    """A value used as a binary outranking oracle is neither 0 nor 1."""


class NumericInconsistencyError(InvalidInputError):
    """An aggregated value exceeds its range by more than the allowance."""


__all__ = [
    'InvalidInputError',
    'IncompleteInputError',
    'ThresholdOrderError',
    'UnknownCriterionError',
    'MissingRelationEntryError',
    'InvalidOutrankingValueError',
    'NumericInconsistencyError',
]
