"""Pipe volume calculator.

Internal volume of a straight pipe and the mass of liquid that fills it.
Inputs may be given in any unit of the injected length and density tables;
everything is converted to SI before the formula is applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from mechcalc.core.base import (
    Calculator,
    CalculatorOutput,
    choice_field,
    number_field,
    output_field,
)
from mechcalc.utils.constants import PI, RHO_WATER
from mechcalc.utils.formatting import format_positive
from mechcalc.utils.units import DENSITY_UNITS, LENGTH_UNITS, to_si


@dataclass(frozen=True)
class PipeVolumeInput:
    diameter: float = number_field(label="Pipe Diameter")
    diameter_unit: str = choice_field(
        "in", label="Diameter Unit", choices=tuple(LENGTH_UNITS), alias="diameterUnit"
    )
    length: float = number_field(label="Pipe Length")
    length_unit: str = choice_field(
        "ft", label="Length Unit", choices=tuple(LENGTH_UNITS), alias="lengthUnit"
    )
    density: float = number_field(RHO_WATER, label="Liquid Density")
    density_unit: str = choice_field(
        "kg/m³", label="Density Unit", choices=tuple(DENSITY_UNITS), alias="densityUnit"
    )


@dataclass(frozen=True)
class PipeVolumeOutput(CalculatorOutput):
    diameter_m: float = output_field("Diameter", "m")
    length_m: float = output_field("Length", "m")
    density_si: float = output_field("Density", "kg/m³")
    volume: float = output_field("Volume", "m³")
    liquid_mass: float = output_field("Liquid Mass", "kg")

    def display(self) -> dict[str, str]:
        return {
            "diameter_m": f"{self.diameter_m:.4f}",
            "length_m": f"{self.length_m:.4f}",
            "density_si": f"{self.density_si:.2f}",
            "volume": format_positive(self.volume, 4),
            "liquid_mass": format_positive(self.liquid_mass, 2),
        }


def pipe_volume(diameter_m: float, length_m: float) -> float:
    """Cylinder volume [m³] from diameter and length in metres."""
    radius = diameter_m / 2.0
    return PI * radius**2 * length_m


def liquid_mass(volume_m3: float, density_kg_m3: float) -> float:
    """Mass [kg] of liquid filling *volume_m3*."""
    return volume_m3 * density_kg_m3


class PipeVolumeCalculator(Calculator):
    """Pipe volume and liquid mass with unit conversion.

    Args:
        length_units: Length unit symbol to metres.
        density_units: Density unit symbol to kg/m³.
    """

    name = "pipe-volume"
    title = "Pipe Volume Calculator"
    description = "Internal volume of a pipe and the mass of the liquid it holds."
    formula = "volume = π × (diameter/2)² × length;  liquid mass = volume × density"
    notes = (
        "Diameter and length are converted to metres and density to kg/m³ before the "
        "calculation, so results are always in m³ and kg.",
        "The default density of 997 kg/m³ is water; enter the density of any other fluid "
        "and pick its unit to calculate its mass.",
    )
    input_type = PipeVolumeInput
    output_type = PipeVolumeOutput

    def __init__(
        self,
        length_units: Mapping[str, float] = LENGTH_UNITS,
        density_units: Mapping[str, float] = DENSITY_UNITS,
    ):
        self.length_units = length_units
        self.density_units = density_units

    def choices(self, field_name: str) -> tuple[str, ...]:
        if field_name in ("diameter_unit", "length_unit"):
            return tuple(self.length_units)
        if field_name == "density_unit":
            return tuple(self.density_units)
        return super().choices(field_name)

    def compute(self, inputs: PipeVolumeInput) -> PipeVolumeOutput:
        diameter_m = to_si(inputs.diameter, inputs.diameter_unit, self.length_units)
        length_m = to_si(inputs.length, inputs.length_unit, self.length_units)
        density_si = to_si(inputs.density, inputs.density_unit, self.density_units)

        volume = pipe_volume(diameter_m, length_m)
        return PipeVolumeOutput(
            diameter_m=diameter_m,
            length_m=length_m,
            density_si=density_si,
            volume=volume,
            liquid_mass=liquid_mass(volume, density_si),
        )
