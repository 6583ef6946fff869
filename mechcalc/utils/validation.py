"""Input normalisation and validation for MechCalc.

Raw field values arrive from a form-like front end (strings, numbers or
nothing at all). Formulas only ever see finite floats: anything that cannot be
read as a number becomes 0 and is reported as a warning, never raised.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Raw value coercion ---


def parse_number(raw: Any) -> float | None:
    """Read *raw* as a finite float, or return None if it is not one.

    Accepts ints, floats and numeric strings (surrounding whitespace and
    thousands separators are ignored). Booleans, blanks, NaN and infinities
    are rejected.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip().replace(",", "")
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def coerce_number(
    name: str,
    raw: Any,
    result: ValidationResult | None = None,
    default: float = 0.0,
) -> float:
    """Return *raw* as a finite float, falling back to *default*.

    Blank input falls back silently; anything else that is not a number is
    recorded as a warning in *result* when one is given.
    """
    value = parse_number(raw)
    if value is not None:
        return value
    blank = raw is None or (isinstance(raw, str) and not raw.strip())
    if not blank:
        logger.debug("Field %s: %r is not a number, using %s", name, raw, default)
        if result is not None:
            result.warning(name, f"{name} = {raw!r} is not a number, using {default}", value=raw)
    return default


# --- Common validators ---


def validate_non_negative(
    name: str,
    value: float,
    result: ValidationResult,
    severity: Severity = Severity.WARNING,
) -> None:
    """Flag negative values (calculators accept them, results may be meaningless)."""
    if value < 0:
        result.add(severity, name, f"{name} should not be negative, got {value}", value=value)


def validate_choice(
    name: str,
    value: str,
    choices: Iterable[str],
    result: ValidationResult,
    fallback: str = "multiplier 1",
) -> None:
    """Warn when *value* is not one of *choices*."""
    choices = list(choices)
    if value not in choices:
        result.warning(
            name,
            f"{name} = {value!r} is not one of {choices}, using {fallback}",
            value=value,
            limit=choices,
        )
