from __future__ import annotations
import logging
from dataclasses import dataclass, fields
from fractions import Fraction
from pathlib import Path
from typing import Any, Callable, Dict

from pascals_triangle.utils.yaml_io import read_yaml

# Number of positions pre-computed on each side of a lazy cache miss.
PRECALC_NUMBER = 5

VALUE_TYPES: Dict[str, Callable[[Any], Any]] = {
    "int": int,
    "float": float,
    "fraction": Fraction,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class TriangleConfig:
    """
    Settings read by the command-line tools.

    Lazy containers take their pre-computation size per instance
    (`precalc_number`, defaulting to `PRECALC_NUMBER`) rather than from here.

    Attributes
    ----------
    value_type : str
        Name of the numeric type used for computed values: "int" (exact,
        arbitrary precision), "float" or "fraction".
    log_level : str
        Logging level name used when no `-v` flag is given.
    """
    value_type: str = "int"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.value_type not in VALUE_TYPES:
            raise ValueError(f"Unknown value_type {self.value_type!r}; expected one of {sorted(VALUE_TYPES)}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log_level {self.log_level!r}")

    def resolve_value_type(self) -> Callable[[Any], Any]:
        """Returns the Python numeric type named by `value_type`."""
        return VALUE_TYPES[self.value_type]

    def resolve_log_level(self) -> int:
        """Returns the numeric `logging` level named by `log_level`."""
        return getattr(logging, self.log_level.upper())


def load_config(path: str | Path) -> TriangleConfig:
    """
    Builds a `TriangleConfig` from a YAML file.

    Keys missing from the file keep their defaults.

    Raises
    ------
    ValueError
        If the file is not YAML, contains keys that are not configuration
        fields, or holds invalid values.
    """
    data = read_yaml(path)
    known = {f.name for f in fields(TriangleConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
    return TriangleConfig(**data)
