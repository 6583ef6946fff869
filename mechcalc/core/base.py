"""Base classes for MechCalc calculators.

Every calculator takes a typed, immutable input record and produces an
immutable output record through a pure ``compute`` method. Raw front-end
values become input records through ``parse`` (whole form) or ``update``
(one field at a time).
"""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from mechcalc.utils.validation import (
    ValidationResult,
    coerce_number,
    validate_choice,
    validate_non_negative,
)

logger = logging.getLogger(__name__)

NUMBER = "number"
CHOICE = "choice"


def number_field(default: float = 0.0, label: str = "", unit: str = "", alias: str = "") -> Any:
    """Declare a numeric input field."""
    return dataclasses.field(
        default=default,
        metadata={"kind": NUMBER, "label": label, "unit": unit, "alias": alias},
    )


def choice_field(
    default: str,
    label: str = "",
    choices: tuple[str, ...] = (),
    alias: str = "",
) -> Any:
    """Declare an enumerated input field."""
    return dataclasses.field(
        default=default,
        metadata={"kind": CHOICE, "label": label, "unit": "", "alias": alias, "choices": choices},
    )


def output_field(label: str = "", unit: str = "") -> Any:
    """Attach display metadata to an output quantity."""
    return dataclasses.field(metadata={"label": label, "unit": unit})


@dataclass(frozen=True)
class FieldSpec:
    """Description of one accepted input field."""

    name: str
    kind: str
    label: str
    unit: str
    default: Any
    alias: str = ""
    choices: tuple[str, ...] = ()

    @property
    def is_numeric(self) -> bool:
        return self.kind == NUMBER


class CalculatorOutput(ABC):
    """Common behaviour of calculator output records."""

    @property
    def computable(self) -> bool:
        """False when a guard condition failed ("not computable")."""
        return True

    @abstractmethod
    def display(self) -> dict[str, str]:
        """Formatted strings, keyed by output field name, as shown to the user."""
        ...

    def as_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["computable"] = self.computable
        return data

    @classmethod
    def labels(cls) -> dict[str, tuple[str, str]]:
        """``{field: (label, unit)}`` for every output quantity."""
        return {
            f.name: (f.metadata.get("label", f.name), f.metadata.get("unit", ""))
            for f in dataclasses.fields(cls)
        }


class Calculator(ABC):
    """Abstract base class for a calculator.

    Subclasses set the metadata attributes and implement ``compute``.
    Conversion and factor tables are passed to the constructor, never read
    from mutable module state.
    """

    # Calculator metadata — override in subclasses
    name: ClassVar[str] = ""
    title: ClassVar[str] = ""
    description: ClassVar[str] = ""
    formula: ClassVar[str] = ""
    notes: ClassVar[tuple[str, ...]] = ()
    input_type: ClassVar[type] = object
    output_type: ClassVar[type] = CalculatorOutput

    @abstractmethod
    def compute(self, inputs: Any) -> CalculatorOutput:
        """Evaluate the formula.

        Args:
            inputs: An instance of ``input_type``.

        Returns:
            An instance of ``output_type``. Never raises for any input
            record.
        """
        ...

    # --- Field enumeration ---

    def choices(self, field_name: str) -> tuple[str, ...]:
        """Allowed values for a choice field. Override for injected tables."""
        for f in dataclasses.fields(self.input_type):
            if f.name == field_name:
                return tuple(f.metadata.get("choices", ()))
        raise KeyError(field_name)

    def fields(self) -> list[FieldSpec]:
        """Every accepted input field, in form order."""
        specs = []
        for f in dataclasses.fields(self.input_type):
            kind = f.metadata.get("kind", NUMBER)
            specs.append(
                FieldSpec(
                    name=f.name,
                    kind=kind,
                    label=f.metadata.get("label", f.name),
                    unit=f.metadata.get("unit", ""),
                    default=f.default,
                    alias=f.metadata.get("alias", ""),
                    choices=self.choices(f.name) if kind == CHOICE else (),
                )
            )
        return specs

    def field_spec(self, name: str) -> FieldSpec:
        """Look up a field by name or front-end alias.

        Raises:
            KeyError: If the calculator has no such field.
        """
        for spec in self.fields():
            if name in (spec.name, spec.alias):
                return spec
        raise KeyError(
            f"{self.name} has no field '{name}'. Available: {[s.name for s in self.fields()]}"
        )

    # --- Raw input handling ---

    def defaults(self) -> Any:
        """Input record holding every field's default."""
        return self.input_type()

    def update(self, inputs: Any, field_name: str, raw: Any) -> Any:
        """Return a copy of *inputs* with one field set from a raw value.

        Numeric fields that cannot be read as numbers become 0.

        Raises:
            KeyError: If *field_name* is not a field of this calculator.
        """
        spec = self.field_spec(field_name)
        if spec.is_numeric:
            value: Any = coerce_number(spec.name, raw)
        else:
            value = spec.default if raw is None else str(raw).strip()
        return dataclasses.replace(inputs, **{spec.name: value})

    def parse(self, raw: Mapping[str, Any]) -> Any:
        """Build an input record from a mapping of raw field values.

        Fields absent from *raw* keep their defaults.
        """
        inputs = self.defaults()
        for key, value in raw.items():
            inputs = self.update(inputs, key, value)
        return inputs

    def evaluate(self, raw: Mapping[str, Any]) -> CalculatorOutput:
        """Parse *raw* and compute in one step."""
        return self.compute(self.parse(raw))

    def validate(self, raw: Mapping[str, Any]) -> ValidationResult:
        """Report what ``parse`` would silently normalise.

        Unparseable numbers, negative numbers and unknown choices are
        warnings; unknown field names are errors.
        """
        result = ValidationResult()
        for key, value in raw.items():
            try:
                spec = self.field_spec(key)
            except KeyError:
                result.error(key, f"{self.name} has no field '{key}'", value=value)
                continue
            if spec.is_numeric:
                number = coerce_number(spec.name, value, result)
                validate_non_negative(spec.name, number, result)
            elif value is not None:
                validate_choice(spec.name, str(value).strip(), spec.choices, result)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.name}')"
