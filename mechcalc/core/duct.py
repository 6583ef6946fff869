"""Simple duct sizing calculator.

Reports the friction rate implied by the available static pressure and the
total effective length, plus a rough round-duct diameter for the system CFM.

The diameter rule, sqrt(CFM / 10), is a placeholder that only shows how duct
size scales with airflow. It is not a duct-sizing method; use ACCA Manual D
for real designs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from mechcalc.core.base import Calculator, CalculatorOutput, number_field, output_field
from mechcalc.utils.constants import DIAMETER_CFM_DIVISOR, FRICTION_RATE_RUN


@dataclass(frozen=True)
class DuctInput:
    available_static_pressure: float = number_field(
        0.5, "Available Static Pressure", "in.wc", alias="availableStaticPressure"
    )
    total_effective_length: float = number_field(
        150.0, "Total Effective Length", "ft", alias="totalEffectiveLength"
    )
    system_cfm: float = number_field(800.0, "System CFM", "CFM", alias="systemCFM")
    # Entered by the user; not derived from the two fields above
    friction_rate: float = number_field(
        0.05, "Friction Rate", "in.wc/100ft", alias="frictionRate"
    )


@dataclass(frozen=True)
class DuctOutput(CalculatorOutput):
    friction_rate: float = output_field("Friction Rate (entered)", "in.wc/100ft")
    # None when the effective length is not positive
    computed_friction_rate: float | None = output_field("Friction Rate", "in.wc/100ft")
    recommended_diameter: float = output_field("Recommended Diameter (approx.)", "in")

    def display(self) -> dict[str, str]:
        return {
            "friction_rate": f"{self.friction_rate:g}",
            "computed_friction_rate": (
                "0" if self.computed_friction_rate is None else f"{self.computed_friction_rate:.3f}"
            ),
            "recommended_diameter": (
                f"{self.recommended_diameter:.2f}" if self.recommended_diameter else "0"
            ),
        }


def friction_rate(available_static_pressure: float, total_effective_length: float) -> float:
    """Allowed static pressure drop per 100 ft [in.wc/100ft].

    Returns 0 when the effective length is not positive.
    """
    if total_effective_length > 0:
        return available_static_pressure * FRICTION_RATE_RUN / total_effective_length
    return 0.0


def recommended_diameter(system_cfm: float) -> float:
    """Illustrative round duct diameter [in], sqrt(CFM / 10); 0 if CFM <= 0."""
    if system_cfm > 0:
        return math.sqrt(system_cfm / DIAMETER_CFM_DIVISOR)
    return 0.0


class DuctCalculator(Calculator):
    """Friction rate and rough duct diameter."""

    name = "duct"
    title = "Simple Duct Sizing Calculator"
    description = "Rough duct sizing from total effective length, available static pressure and CFM."
    formula = "friction rate = (available static pressure × 100) ÷ TEL;  diameter ≈ √(CFM ÷ 10)"
    notes = (
        "Friction Rate: computed as (Available Static Pressure × 100) ÷ TEL to show how much "
        "static pressure drop is allowed per 100 feet of duct.",
        "Recommended Diameter: example placeholder formula to give a rough idea of duct "
        "size for the system CFM.",
        "For real-world accuracy, always refer to ACCA Manual D or other official guidelines, "
        "factoring in fittings, material type, velocity, and pressure drops through filters, "
        "coils, etc.",
    )
    input_type = DuctInput
    output_type = DuctOutput

    def compute(self, inputs: DuctInput) -> DuctOutput:
        return DuctOutput(
            friction_rate=inputs.friction_rate,
            computed_friction_rate=(
                friction_rate(inputs.available_static_pressure, inputs.total_effective_length)
                if inputs.total_effective_length > 0
                else None
            ),
            recommended_diameter=recommended_diameter(inputs.system_cfm),
        )
