"""One-at-a-time parameter sweeps.

Evaluates a calculator repeatedly while one numeric input steps through a
range of values and the others stay at a base point.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from mechcalc.core.base import Calculator, CalculatorOutput

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Outputs of a sweep, one row per swept value."""

    calculator: str
    field: str
    values: list[float] = field(default_factory=list)
    outputs: list[CalculatorOutput] = field(default_factory=list)

    @property
    def n_points(self) -> int:
        return len(self.values)

    @property
    def n_not_computable(self) -> int:
        return sum(1 for out in self.outputs if not out.computable)

    def rows(self) -> list[tuple[float, CalculatorOutput]]:
        return list(zip(self.values, self.outputs))

    def series(self, key: str) -> np.ndarray:
        """Output quantity *key* across the sweep; NaN where not computable.

        Raises:
            KeyError: If the outputs have no quantity *key*.
        """
        data = []
        for out in self.outputs:
            value = out.as_dict()[key]
            data.append(np.nan if value is None else float(value))
        return np.asarray(data, dtype=float)


def linspace_values(start: float, stop: float, steps: int) -> list[float]:
    """Evenly spaced sweep values, both ends included.

    Raises:
        ValueError: If *steps* < 1.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    return [float(v) for v in np.linspace(start, stop, steps)]


def sweep(
    calculator: Calculator,
    base: Any,
    field_name: str,
    values: Iterable[float],
) -> SweepResult:
    """Evaluate *calculator* at *base* with *field_name* set to each value.

    Args:
        calculator: Calculator to evaluate.
        base: Input record holding the fixed values (``None`` = defaults).
        field_name: Numeric field to vary (name or front-end alias).
        values: Values to assign to the field.

    Returns:
        SweepResult with one output per value.

    Raises:
        KeyError: If the field does not exist.
        ValueError: If the field is not numeric.
    """
    spec = calculator.field_spec(field_name)
    if not spec.is_numeric:
        raise ValueError(f"Cannot sweep non-numeric field '{spec.name}'")
    if base is None:
        base = calculator.defaults()

    result = SweepResult(calculator=calculator.name, field=spec.name)
    for value in values:
        inputs = dataclasses.replace(base, **{spec.name: float(value)})
        result.values.append(float(value))
        result.outputs.append(calculator.compute(inputs))

    logger.debug(
        "Swept %s.%s over %d points (%d not computable)",
        calculator.name,
        spec.name,
        result.n_points,
        result.n_not_computable,
    )
    return result
