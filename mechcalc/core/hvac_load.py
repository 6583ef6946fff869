"""HVAC load calculator.

A rule-of-thumb cooling load: room volume plus fixed allowances for
occupants, windows and doors, scaled by an insulation factor. Tonnage is the
load divided by 12,000 BTU/h.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from mechcalc.core.base import (
    Calculator,
    CalculatorOutput,
    choice_field,
    number_field,
    output_field,
)
from mechcalc.utils.constants import (
    BTU_PER_DOOR,
    BTU_PER_OCCUPANT,
    BTU_PER_TON,
    BTU_PER_WINDOW,
)
from mechcalc.utils.formatting import format_fixed, round2, round_half_up


class InsulationLevel(Enum):
    """Building insulation quality."""

    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXCELLENT = "excellent"


INSULATION_FACTORS: Mapping[str, float] = MappingProxyType(
    {
        InsulationLevel.POOR.value: 1.2,
        InsulationLevel.AVERAGE.value: 1.0,
        InsulationLevel.GOOD.value: 0.85,
        InsulationLevel.EXCELLENT.value: 0.75,
    }
)


@dataclass(frozen=True)
class HVACLoadInput:
    square_footage: float = number_field(label="Total Square Footage", unit="ft²", alias="squareFootage")
    ceiling_height: float = number_field(label="Ceiling Height", unit="ft", alias="ceilingHeight")
    occupants: float = number_field(label="Number of Occupants")
    windows: float = number_field(label="Number of Windows")
    doors: float = number_field(label="Number of Doors")
    insulation_level: str = choice_field(
        InsulationLevel.AVERAGE.value,
        label="Insulation Quality",
        choices=tuple(level.value for level in InsulationLevel),
        alias="insulation",
    )


@dataclass(frozen=True)
class HVACLoadOutput(CalculatorOutput):
    raw_btu: float = output_field("Base Load", "BTU/h")
    total_btu: int = output_field("Total BTU", "BTU/h")
    tonnage: float | None = output_field("HVAC Size", "tons")

    @property
    def computable(self) -> bool:
        return self.tonnage is not None

    def display(self) -> dict[str, str]:
        return {
            "raw_btu": f"{self.raw_btu:,.0f}",
            "total_btu": f"{self.total_btu:,d}",
            "tonnage": format_fixed(self.tonnage, 2),
        }


def raw_btu(
    square_footage: float,
    ceiling_height: float,
    occupants: float,
    windows: float,
    doors: float,
) -> float:
    """Base load [BTU/h] before the insulation factor."""
    return (
        square_footage * ceiling_height
        + occupants * BTU_PER_OCCUPANT
        + windows * BTU_PER_WINDOW
        + doors * BTU_PER_DOOR
    )


def total_btu(
    square_footage: float,
    ceiling_height: float,
    occupants: float,
    windows: float,
    doors: float,
    insulation_level: str = InsulationLevel.AVERAGE.value,
    insulation_factors: Mapping[str, float] = INSULATION_FACTORS,
) -> int:
    """Total load [BTU/h], rounded half-up to a whole number.

    An insulation level missing from *insulation_factors* uses factor 1.
    """
    factor = insulation_factors.get(insulation_level, 1.0)
    load = raw_btu(square_footage, ceiling_height, occupants, windows, doors)
    return int(round_half_up(load * factor))


def tonnage(total: float) -> float | None:
    """Cooling capacity [tons] for a load; None when the load is not positive."""
    if total > 0:
        return round2(total / BTU_PER_TON)
    return None


class HVACLoadCalculator(Calculator):
    """BTU load and equipment tonnage.

    Args:
        insulation_factors: Insulation level to load multiplier.
    """

    name = "hvac-load"
    title = "Simple HVAC Load Calculator"
    description = "Rule-of-thumb cooling load and equipment size for a room or small building."
    formula = (
        "BTU = (ft² × ceiling height + occupants × 100 + windows × 1000 + doors × 1000) "
        "× insulation factor;  tons = BTU ÷ 12,000"
    )
    notes = (
        "Each occupant adds about 100 BTU/h; each window and door adds about 1,000 BTU/h.",
        "Insulation factors: poor ×1.2, average ×1.0, good ×0.85, excellent ×0.75.",
        "One ton of cooling capacity equals 12,000 BTU per hour. For equipment selection "
        "use a full Manual J load calculation.",
    )
    input_type = HVACLoadInput
    output_type = HVACLoadOutput

    def __init__(self, insulation_factors: Mapping[str, float] = INSULATION_FACTORS):
        self.insulation_factors = MappingProxyType(dict(insulation_factors))

    def choices(self, field_name: str) -> tuple[str, ...]:
        if field_name == "insulation_level":
            return tuple(self.insulation_factors)
        return super().choices(field_name)

    def compute(self, inputs: HVACLoadInput) -> HVACLoadOutput:
        base = raw_btu(
            inputs.square_footage,
            inputs.ceiling_height,
            inputs.occupants,
            inputs.windows,
            inputs.doors,
        )
        total = total_btu(
            inputs.square_footage,
            inputs.ceiling_height,
            inputs.occupants,
            inputs.windows,
            inputs.doors,
            inputs.insulation_level,
            self.insulation_factors,
        )
        return HVACLoadOutput(raw_btu=base, total_btu=total, tonnage=tonnage(total))
