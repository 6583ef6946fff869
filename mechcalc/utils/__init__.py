"""Utility modules for MechCalc."""

from mechcalc.utils.constants import BTU_PER_TON, MINUTES_PER_HOUR, NOT_AVAILABLE
from mechcalc.utils.formatting import round2, round_half_up
from mechcalc.utils.units import DENSITY_UNITS, LENGTH_UNITS, convert, get_unit_registry, to_si

__all__ = [
    "BTU_PER_TON",
    "MINUTES_PER_HOUR",
    "NOT_AVAILABLE",
    "DENSITY_UNITS",
    "LENGTH_UNITS",
    "convert",
    "get_unit_registry",
    "round2",
    "round_half_up",
    "to_si",
]
