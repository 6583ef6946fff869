"""Calculator registry for MechCalc.

Maps calculator names (``"cfm"``, ``"hvac-load"``, ...) to configured
calculator instances.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mechcalc.core.base import Calculator, CalculatorOutput
from mechcalc.core.cfm import CFMCalculator
from mechcalc.core.config import EngineConfig, default_config
from mechcalc.core.duct import DuctCalculator
from mechcalc.core.hvac_load import HVACLoadCalculator
from mechcalc.core.pipe_slope import PipeSlopeCalculator
from mechcalc.core.pipe_volume import PipeVolumeCalculator

logger = logging.getLogger(__name__)


class CalculatorRegistry:
    """Holds calculator instances by name.

    Usage::

        registry = build_registry()
        out = registry.evaluate("cfm", {"floor_area": "500", "ceiling_height": 8, "ach": 4})

    """

    def __init__(self) -> None:
        self._registry: dict[str, Calculator] = {}

    def register(self, calculator: Calculator | type[Calculator]) -> Calculator:
        """Register a calculator instance (or a class, instantiated with defaults).

        Raises:
            TypeError: If *calculator* is not a Calculator.
            ValueError: If a calculator with the same name is already registered.
        """
        if isinstance(calculator, type) and issubclass(calculator, Calculator):
            calculator = calculator()
        if not isinstance(calculator, Calculator):
            raise TypeError(f"{calculator!r} is not a Calculator")

        name = calculator.name
        if name in self._registry:
            raise ValueError(f"Calculator '{name}' is already registered")

        self._registry[name] = calculator
        logger.debug("Registered calculator: %s", name)
        return calculator

    def get(self, name: str) -> Calculator:
        """Return the calculator registered as *name*.

        Raises:
            KeyError: If no such calculator is registered.
        """
        try:
            return self._registry[name]
        except KeyError:
            raise KeyError(
                f"Calculator '{name}' not found. Available: {self.list_calculators()}"
            ) from None

    def list_calculators(self) -> list[str]:
        return list(self._registry.keys())

    def evaluate(self, name: str, raw: Mapping[str, Any]) -> CalculatorOutput:
        """Parse raw field values and compute with calculator *name*."""
        return self.get(name).evaluate(raw)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)


def build_registry(config: EngineConfig | None = None) -> CalculatorRegistry:
    """Registry with the five built-in calculators configured from *config*."""
    config = config or default_config()
    registry = CalculatorRegistry()
    registry.register(CFMCalculator())
    registry.register(DuctCalculator())
    registry.register(HVACLoadCalculator(insulation_factors=config.insulation_factors))
    registry.register(PipeSlopeCalculator())
    registry.register(
        PipeVolumeCalculator(
            length_units=config.length_units,
            density_units=config.density_units,
        )
    )
    return registry
