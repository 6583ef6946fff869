"""CFM (airflow) calculator.

Required airflow to achieve a target number of air changes per hour in a
room: CFM = floor area × ceiling height × ACH / 60.
"""

from __future__ import annotations

from dataclasses import dataclass

from mechcalc.core.base import Calculator, CalculatorOutput, number_field, output_field
from mechcalc.utils.constants import MINUTES_PER_HOUR
from mechcalc.utils.formatting import format_grouped, round2


@dataclass(frozen=True)
class CFMInput:
    floor_area: float = number_field(label="Room Floor Area", unit="ft²", alias="floorArea")
    ceiling_height: float = number_field(label="Ceiling Height", unit="ft", alias="ceilingHeight")
    ach: float = number_field(label="Air Changes per Hour (ACH)", unit="1/h")


@dataclass(frozen=True)
class CFMOutput(CalculatorOutput):
    required_cfm: float = output_field("Required CFM", "CFM")

    def display(self) -> dict[str, str]:
        if self.required_cfm > 0:
            return {"required_cfm": format_grouped(self.required_cfm, 2)}
        return {"required_cfm": "0.00"}


def required_cfm(floor_area: float, ceiling_height: float, ach: float) -> float:
    """Airflow [CFM] that replaces the room volume *ach* times per hour.

    Args:
        floor_area: Room floor area [ft²].
        ceiling_height: Ceiling height [ft].
        ach: Air changes per hour.

    Returns:
        Required airflow rounded to 2 decimals.
    """
    return round2(floor_area * ceiling_height * ach / MINUTES_PER_HOUR)


class CFMCalculator(Calculator):
    """Room ventilation airflow from floor area, height and ACH."""

    name = "cfm"
    title = "CFM Calculator"
    description = "Required airflow for a room from its volume and target air changes per hour."
    formula = "airflow (CFM) = (floor area × ceiling height × ACH) / 60"
    notes = (
        "CFM (cubic feet per minute) is a measure of volumetric airflow. This calculator "
        "determines the required CFM for a room, given its floor area, ceiling height, "
        "and the desired air changes per hour (ACH).",
        "To achieve a certain ACH, the entire volume of the room must be replaced "
        "that many times per hour.",
        "In practice, choosing the right ventilation system is crucial for maintaining "
        "indoor air quality, comfortable humidity levels, and temperature.",
    )
    input_type = CFMInput
    output_type = CFMOutput

    def compute(self, inputs: CFMInput) -> CFMOutput:
        return CFMOutput(
            required_cfm=required_cfm(inputs.floor_area, inputs.ceiling_height, inputs.ach)
        )
