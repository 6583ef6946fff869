"""Pipe slope calculator: slope [%] = fall ÷ length × 100."""

from __future__ import annotations

from dataclasses import dataclass

from mechcalc.core.base import Calculator, CalculatorOutput, number_field, output_field
from mechcalc.utils.formatting import format_fixed, round2


@dataclass(frozen=True)
class PipeSlopeInput:
    pipe_fall: float = number_field(label="Pipe Fall", unit="ft", alias="pipeFall")
    pipe_length: float = number_field(label="Pipe Length", unit="ft", alias="pipeLength")


@dataclass(frozen=True)
class PipeSlopeOutput(CalculatorOutput):
    slope: float | None = output_field("Pipe Slope", "%")

    @property
    def computable(self) -> bool:
        return self.slope is not None

    def display(self) -> dict[str, str]:
        text = format_fixed(self.slope, 2)
        return {"slope": text if self.slope is None else f"{text}%"}


def pipe_slope(pipe_fall: float, pipe_length: float) -> float | None:
    """Slope in percent, rounded to 2 decimals.

    Returns None unless both the fall and the length are positive.
    """
    if pipe_fall > 0 and pipe_length > 0:
        return round2(pipe_fall / pipe_length * 100.0)
    return None


class PipeSlopeCalculator(Calculator):
    name = "pipe-slope"
    title = "Pipe Slope Calculator"
    description = "Slope of a pipe run as a percentage of its length."
    formula = "PS = (Pipe Fall ÷ Pipe Length) × 100"
    notes = (
        "Pipe slope is the vertical drop of a pipe over its horizontal run, expressed as "
        "a percentage.",
        "For example, if the pipe fall is 25 ft and the pipe length is 97 ft: "
        "PS = (25 ÷ 97) × 100 ≈ 25.77%.",
    )
    input_type = PipeSlopeInput
    output_type = PipeSlopeOutput

    def compute(self, inputs: PipeSlopeInput) -> PipeSlopeOutput:
        return PipeSlopeOutput(slope=pipe_slope(inputs.pipe_fall, inputs.pipe_length))
