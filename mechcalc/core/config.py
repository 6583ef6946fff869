"""Engine configuration for MechCalc.

Holds the lookup tables the calculators depend on and the per-calculator
presentation options (heading text, evaluation mode). Configuration is
immutable once built and can be loaded from / saved to JSON.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from mechcalc.core.hvac_load import INSULATION_FACTORS
from mechcalc.utils.units import DENSITY_UNITS, LENGTH_UNITS, ConversionTable

logger = logging.getLogger(__name__)

LIVE = "live"
ON_SUBMIT = "on_submit"
EVALUATION_MODES = (LIVE, ON_SUBMIT)


@dataclass(frozen=True)
class CalculatorOptions:
    """Presentation options for one calculator."""

    heading_text: str | None = None  # None = calculator title
    evaluation_mode: str = LIVE

    def __post_init__(self) -> None:
        if self.evaluation_mode not in EVALUATION_MODES:
            raise ValueError(
                f"evaluation_mode must be one of {EVALUATION_MODES}, got {self.evaluation_mode!r}"
            )


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration.

    Tables are injected into the calculators built from this config.
    """

    insulation_factors: Mapping[str, float] = field(default_factory=lambda: INSULATION_FACTORS)
    length_units: ConversionTable = field(default_factory=lambda: LENGTH_UNITS)
    density_units: ConversionTable = field(default_factory=lambda: DENSITY_UNITS)
    calculators: Mapping[str, CalculatorOptions] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def options_for(self, name: str) -> CalculatorOptions:
        """Options for calculator *name* (defaults if not configured)."""
        return self.calculators.get(name, CalculatorOptions())


def default_config() -> EngineConfig:
    return EngineConfig()


# --- JSON serialization ---


def config_to_dict(config: EngineConfig) -> dict[str, Any]:
    return {
        "insulation_factors": dict(config.insulation_factors),
        "length_units": config.length_units.to_dict(),
        "density_units": config.density_units.to_dict(),
        "calculators": {
            name: {"heading_text": opts.heading_text, "evaluation_mode": opts.evaluation_mode}
            for name, opts in config.calculators.items()
        },
    }


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is not None and not isinstance(value, Mapping):
        raise ValueError(f"'{key}' must be an object, got {type(value).__name__}")
    return value


def config_from_dict(data: Mapping[str, Any]) -> EngineConfig:
    """Build a config from a plain dictionary; missing sections use defaults.

    Raises:
        ValueError: If a section is not an object, or a table or evaluation
            mode is invalid.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"config must be an object, got {type(data).__name__}")
    kwargs: dict[str, Any] = {}

    factors = _section(data, "insulation_factors")
    if factors is not None:
        kwargs["insulation_factors"] = MappingProxyType(
            {str(k): float(v) for k, v in factors.items()}
        )

    length = _section(data, "length_units")
    if length is not None:
        pint_units = {s: LENGTH_UNITS.unit_def(s).pint_unit for s in LENGTH_UNITS}
        kwargs["length_units"] = ConversionTable.from_dict("length", "m", length, pint_units)

    density = _section(data, "density_units")
    if density is not None:
        pint_units = {s: DENSITY_UNITS.unit_def(s).pint_unit for s in DENSITY_UNITS}
        kwargs["density_units"] = ConversionTable.from_dict(
            "density", DENSITY_UNITS.base, density, pint_units
        )

    calculators = _section(data, "calculators")
    if calculators is not None:
        kwargs["calculators"] = MappingProxyType(
            {name: CalculatorOptions(**opts) for name, opts in calculators.items()}
        )

    return EngineConfig(**kwargs)


def save_config_json(config: EngineConfig, path: str | Path) -> None:
    """Save configuration to a JSON file."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_dict(config), f, indent=2, ensure_ascii=False)
    logger.info("Saved config to %s", path)


def load_config_json(path: str | Path) -> EngineConfig:
    """Load configuration from a JSON file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    config = config_from_dict(data)
    logger.info("Loaded config from %s", path)
    return config
