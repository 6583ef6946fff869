"""Calculator session: the state a front end keeps for one calculator form.

A session owns the current input record and the last output. Depending on
its evaluation mode it recomputes after every field update (``"live"``) or
only when the form is submitted (``"on_submit"``).

Usage::

    session = CalculatorSession(HVACLoadCalculator(), evaluation_mode="on_submit")
    session.update("square_footage", "1000")
    session.update("ceiling_height", "8")
    out = session.submit()

"""

from __future__ import annotations

import logging
from typing import Any

from mechcalc.core.base import Calculator, CalculatorOutput
from mechcalc.core.config import EVALUATION_MODES, LIVE, CalculatorOptions

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Input state and evaluation trigger for one calculator.

    Args:
        calculator: The calculator to drive.
        heading_text: Heading shown above the form; defaults to the
            calculator title.
        evaluation_mode: ``"live"`` or ``"on_submit"``.

    Raises:
        ValueError: If *evaluation_mode* is not recognised.
    """

    def __init__(
        self,
        calculator: Calculator,
        heading_text: str | None = None,
        evaluation_mode: str = LIVE,
    ):
        if evaluation_mode not in EVALUATION_MODES:
            raise ValueError(
                f"evaluation_mode must be one of {EVALUATION_MODES}, got {evaluation_mode!r}"
            )
        self.calculator = calculator
        self.heading_text = heading_text or calculator.title
        self.evaluation_mode = evaluation_mode
        self.inputs: Any = calculator.defaults()
        self.dirty = False
        self._output: CalculatorOutput | None = None
        if self.is_live:
            self._output = calculator.compute(self.inputs)

    @classmethod
    def from_options(cls, calculator: Calculator, options: CalculatorOptions) -> CalculatorSession:
        return cls(
            calculator,
            heading_text=options.heading_text,
            evaluation_mode=options.evaluation_mode,
        )

    @property
    def is_live(self) -> bool:
        return self.evaluation_mode == LIVE

    @property
    def output(self) -> CalculatorOutput | None:
        """Last computed output (None before the first on-submit evaluation)."""
        return self._output

    def update(self, field_name: str, raw: Any) -> CalculatorOutput | None:
        """Set one field from a raw value.

        Returns:
            The new output in live mode, None in on-submit mode.

        Raises:
            KeyError: If the calculator has no such field.
        """
        self.inputs = self.calculator.update(self.inputs, field_name, raw)
        if self.is_live:
            self._output = self.calculator.compute(self.inputs)
            return self._output
        self.dirty = True
        logger.debug("%s: %s updated, awaiting submit", self.calculator.name, field_name)
        return None

    def submit(self) -> CalculatorOutput:
        """Evaluate the current inputs regardless of mode."""
        self._output = self.calculator.compute(self.inputs)
        self.dirty = False
        return self._output

    def reset(self) -> None:
        """Restore default inputs."""
        self.inputs = self.calculator.defaults()
        self.dirty = False
        self._output = self.calculator.compute(self.inputs) if self.is_live else None

    def __repr__(self) -> str:
        return (
            f"CalculatorSession({self.calculator.name!r}, heading={self.heading_text!r}, "
            f"mode={self.evaluation_mode!r})"
        )
