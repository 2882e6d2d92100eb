# -*- coding: utf-8 -*-
"""Configuration management for outranking computations."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union
import json

SORTING_MODES = ("pessimistic", "optimistic", "both")


@dataclass
class ToleranceConfig:
    """
    Numeric tolerances used by the calculators.

    Each component keeps its own value so that results stay identical to
    reference outputs computed with these historical constants.

    Parameters
    ----------
    binary_tolerance : float
        Allowed distance between an outranking value and 0 or 1 when the
        matrix is used as a binary relation by the sorting assigner.
    cut_tolerance : float
        A credibility that falls short of the cut threshold by no more than
        this amount is still cut to 1.
    weight_bounds_tolerance : float
        Allowed excess of the low weight bound over the high weight bound in
        progressive assignment.
    cut_rounding : float
        Normalized majority thresholds in (1, 1 + cut_rounding) are rounded
        down to 1.
    concordance_overshoot : float
        Aggregated concordances above 1 but not above this value are clamped
        to 1; larger values are an error.
    """
    binary_tolerance: float = 1e-3
    cut_tolerance: float = 1e-5
    weight_bounds_tolerance: float = 1e-6
    cut_rounding: float = 1e-6
    concordance_overshoot: float = 1.1


@dataclass
class SortingConfig:
    """
    Electre-TRI sorting configuration.

    ``default_mode`` is one of "pessimistic", "optimistic" or "both"; it is
    parsed into a ``SortingMode`` by the sorting calculators.
    """
    sharp_vetoes: bool = True
    default_mode: str = "pessimistic"

    def __post_init__(self):
        self.default_mode = str(getattr(self.default_mode, "value", self.default_mode)).lower()
        if self.default_mode not in SORTING_MODES:
            raise ValueError(f"Unknown sorting mode {self.default_mode!r}, expected one of {SORTING_MODES}")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console: bool = True
    log_file: Optional[Path] = None


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    tolerance: ToleranceConfig = field(default_factory=ToleranceConfig)
    sorting: SortingConfig = field(default_factory=SortingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict:
        def _to_dict(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _to_dict(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, list):
                return [_to_dict(i) for i in obj]
            elif isinstance(obj, dict):
                return {k: _to_dict(v) for k, v in obj.items()}
            return obj
        return _to_dict(self)

    @classmethod
    def from_dict(cls, values: Dict) -> 'Config':
        """Build a configuration from a (possibly partial) dictionary."""
        tolerance = ToleranceConfig(**values.get('tolerance', {}))

        sorting = SortingConfig(**values.get('sorting', {}))

        logging_values = dict(values.get('logging', {}))
        if logging_values.get('log_file') is not None:
            logging_values['log_file'] = Path(logging_values['log_file'])
        logging_config = LoggingConfig(**logging_values)

        return cls(tolerance=tolerance, sorting=sorting, logging=logging_config)

    def save(self, filepath: Union[str, Path]) -> None:
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Union[str, Path]) -> 'Config':
        with open(filepath) as f:
            return cls.from_dict(json.load(f))

    def summary(self) -> str:
        return f"""
{'='*60}
CONFIGURATION SUMMARY - Outranking MCDA
{'='*60}

TOLERANCES:
  Binary outranking tolerance: {self.tolerance.binary_tolerance}
  Cut tolerance: {self.tolerance.cut_tolerance}
  Weight bounds tolerance: {self.tolerance.weight_bounds_tolerance}
  Cut rounding: {self.tolerance.cut_rounding}
  Concordance overshoot: {self.tolerance.concordance_overshoot}

SORTING:
  Sharp vetoes: {self.sorting.sharp_vetoes}
  Default mode: {self.sorting.default_mode}

LOGGING:
  Level: {self.logging.level}
  Log file: {self.logging.log_file}
{'='*60}
"""


_config: Optional[Config] = None

def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config

def get_default_config() -> Config:
    """Get a fresh default configuration."""
    return Config()

def set_config(config: Config) -> None:
    global _config
    _config = config

def reset_config() -> None:
    global _config
    _config = Config()
