"""Unit conversion utilities for MechCalc.

The calculators work from small, fixed conversion tables (unit symbol to SI
multiplier). pint is used as the reference registry to cross-check those
tables and for general-purpose conversions in the CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

import pint

from mechcalc.utils.constants import (
    CM_TO_M,
    FT_TO_M,
    INCH_TO_M,
    KG_M3_TO_KG_M3,
    LB_FT3_TO_KG_M3,
    M_TO_M,
    MM_TO_M,
)

logger = logging.getLogger(__name__)

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


@dataclass(frozen=True)
class UnitDef:
    """One row of a conversion table.

    ``pint_unit`` is the pint expression for the same unit; it may be empty
    for user-supplied units that pint does not know.
    """

    symbol: str
    multiplier: float
    pint_unit: str = ""


class ConversionTable(Mapping):
    """Read-only mapping from unit symbol to SI multiplier.

    ``1 <symbol> = multiplier × <base>``. The base unit always maps to
    exactly 1.

    Raises:
        ValueError: If the base unit is missing or not 1, or a multiplier is
            not positive.
    """

    def __init__(self, quantity: str, base: str, units: Iterable[UnitDef]):
        defs = {u.symbol: u for u in units}
        if base not in defs or defs[base].multiplier != 1.0:
            raise ValueError(f"{quantity} table must map base unit '{base}' to 1")
        for u in defs.values():
            if u.multiplier <= 0:
                raise ValueError(
                    f"{quantity} multiplier for '{u.symbol}' must be positive, got {u.multiplier}"
                )
        self.quantity = quantity
        self.base = base
        self._defs = MappingProxyType(defs)
        self._multipliers = MappingProxyType({s: u.multiplier for s, u in defs.items()})

    @classmethod
    def from_dict(
        cls,
        quantity: str,
        base: str,
        multipliers: Mapping[str, float],
        pint_units: Mapping[str, str] | None = None,
    ) -> ConversionTable:
        """Build a table from a plain ``{symbol: multiplier}`` mapping."""
        pint_units = pint_units or {}
        return cls(
            quantity,
            base,
            [UnitDef(s, float(m), pint_units.get(s, "")) for s, m in multipliers.items()],
        )

    def __getitem__(self, symbol: str) -> float:
        return self._multipliers[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._multipliers)

    def __len__(self) -> int:
        return len(self._multipliers)

    def __repr__(self) -> str:
        return f"ConversionTable({self.quantity!r}, base={self.base!r}, {dict(self._multipliers)})"

    def unit_def(self, symbol: str) -> UnitDef:
        return self._defs[symbol]

    @property
    def symbols(self) -> list[str]:
        return list(self._multipliers)

    def to_dict(self) -> dict[str, float]:
        return dict(self._multipliers)


LENGTH_UNITS = ConversionTable(
    "length",
    "m",
    [
        UnitDef("m", M_TO_M, "m"),
        UnitDef("cm", CM_TO_M, "cm"),
        UnitDef("mm", MM_TO_M, "mm"),
        UnitDef("ft", FT_TO_M, "ft"),
        UnitDef("in", INCH_TO_M, "inch"),
    ],
)

DENSITY_UNITS = ConversionTable(
    "density",
    "kg/m³",
    [
        UnitDef("kg/m³", KG_M3_TO_KG_M3, "kg/m**3"),
        UnitDef("lb/ft³", LB_FT3_TO_KG_M3, "lb/ft**3"),
    ],
)


def to_si(value: float, unit: str, table: Mapping[str, float]) -> float:
    """Convert *value* in *unit* to the table's SI base unit.

    Unknown unit symbols are treated as multiplier 1 and the value is
    returned unchanged.
    """
    multiplier = table.get(unit)
    if multiplier is None:
        logger.debug("Unknown unit %r, treating as multiplier 1", unit)
        return value
    return value * multiplier


def from_si(value_si: float, unit: str, table: Mapping[str, float]) -> float:
    """Convert a value in the SI base unit to *unit* (multiplier 1 if unknown)."""
    multiplier = table.get(unit)
    if multiplier is None:
        logger.debug("Unknown unit %r, treating as multiplier 1", unit)
        return value_si
    return value_si / multiplier


def table_deviation(table: ConversionTable) -> dict[str, float]:
    """Relative deviation of each multiplier from pint's definition.

    Units without a pint expression are skipped.

    Returns:
        ``{symbol: |multiplier - reference| / reference}``.
    """
    base_pint = table.unit_def(table.base).pint_unit
    deviations: dict[str, float] = {}
    if not base_pint:
        return deviations
    for symbol in table:
        pint_unit = table.unit_def(symbol).pint_unit
        if not pint_unit:
            continue
        reference = Q_(1.0, pint_unit).to(base_pint).magnitude
        deviations[symbol] = abs(table[symbol] - reference) / reference
    return deviations


def pint_unit_for(symbol: str, tables: Iterable[ConversionTable]) -> str:
    """Pint expression for a table symbol; other strings pass through unchanged."""
    for table in tables:
        if symbol in table and table.unit_def(symbol).pint_unit:
            return table.unit_def(symbol).pint_unit
    return symbol


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string (pint syntax).
        to_unit: Target unit string (pint syntax).

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
