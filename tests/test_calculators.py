"""Tests for the five calculators."""

import math

import pytest

from mechcalc.core.cfm import CFMCalculator, CFMInput, required_cfm
from mechcalc.core.duct import DuctCalculator, DuctInput, friction_rate, recommended_diameter
from mechcalc.core.hvac_load import (
    INSULATION_FACTORS,
    HVACLoadCalculator,
    HVACLoadInput,
    InsulationLevel,
    raw_btu,
    tonnage,
    total_btu,
)
from mechcalc.core.pipe_slope import PipeSlopeCalculator, PipeSlopeInput, pipe_slope
from mechcalc.core.pipe_volume import PipeVolumeCalculator, PipeVolumeInput, pipe_volume
from mechcalc.utils.units import ConversionTable


class TestCFM:
    def test_all_zero(self):
        assert required_cfm(0, 0, 0) == 0.0

    def test_basic(self):
        """500 ft² × 8 ft × 4 ACH / 60 = 266.67 CFM."""
        assert required_cfm(500, 8, 4) == pytest.approx(266.67)

    def test_rounded_to_two_decimals(self):
        value = required_cfm(1000, 10, 8)
        assert value == pytest.approx(1333.33)
        assert round(value, 2) == value

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_monotonic_in_each_argument(self, index):
        base = [300.0, 9.0, 5.0]
        previous = -1.0
        for x in [0, 1, 2, 5, 10, 50]:
            args = list(base)
            args[index] = x
            value = required_cfm(*args)
            assert value >= previous
            previous = value

    def test_any_zero_gives_zero(self):
        calc = CFMCalculator()
        out = calc.compute(CFMInput(floor_area=500, ceiling_height=0, ach=4))
        assert out.required_cfm == 0.0
        assert out.computable
        assert out.display() == {"required_cfm": "0.00"}

    def test_display_grouped(self):
        out = CFMCalculator().compute(CFMInput(1000, 10, 8))
        assert out.display()["required_cfm"] == "1,333.33"


class TestDuct:
    def test_defaults(self):
        calc = DuctCalculator()
        out = calc.compute(calc.defaults())
        assert out.computed_friction_rate == pytest.approx(0.5 * 100 / 150)
        assert out.recommended_diameter == pytest.approx(math.sqrt(80))
        assert out.friction_rate == pytest.approx(0.05)
        assert out.display() == {
            "friction_rate": "0.05",
            "computed_friction_rate": "0.333",
            "recommended_diameter": "8.94",
        }

    def test_friction_rate_not_derived(self):
        """The entered friction rate is echoed, not replaced by the computed one."""
        out = DuctCalculator().compute(DuctInput(friction_rate=0.08))
        assert out.friction_rate == pytest.approx(0.08)
        assert out.computed_friction_rate == pytest.approx(0.3333, rel=1e-3)

    def test_zero_length(self):
        assert friction_rate(0.5, 0) == 0.0
        out = DuctCalculator().compute(DuctInput(total_effective_length=0))
        assert out.computed_friction_rate is None
        assert out.display()["computed_friction_rate"] == "0"

    def test_zero_static_pressure_keeps_decimals(self):
        """With a positive length a zero friction rate still shows 3 decimals."""
        out = DuctCalculator().compute(DuctInput(available_static_pressure=0))
        assert out.computed_friction_rate == 0.0
        assert out.display()["computed_friction_rate"] == "0.000"

    def test_zero_cfm(self):
        assert recommended_diameter(0) == 0.0
        assert recommended_diameter(-100) == 0.0
        out = DuctCalculator().compute(DuctInput(system_cfm=0))
        assert out.display()["recommended_diameter"] == "0"

    def test_placeholder_diameter_formula(self):
        assert recommended_diameter(1000) == pytest.approx(10.0)


class TestHVACLoad:
    def test_raw_btu(self):
        assert raw_btu(1000, 8, 4, 4, 2) == pytest.approx(14400)

    def test_average(self):
        assert total_btu(1000, 8, 4, 4, 2, "average") == 14400

    @pytest.mark.parametrize(
        "level, expected",
        [("poor", 17280), ("average", 14400), ("good", 12240), ("excellent", 10800)],
    )
    def test_insulation_levels(self, level, expected):
        assert total_btu(1000, 8, 4, 4, 2, level) == expected

    def test_unknown_level_uses_factor_one(self):
        assert total_btu(1000, 8, 4, 4, 2, "superb") == 14400

    def test_rounds_half_up(self):
        # 5 × 1 × 0.75 = 3.75 -> 4 ; 2 × 1 × 0.75 = 1.5 -> 2
        assert total_btu(5, 1, 0, 0, 0, "excellent") == 4
        assert total_btu(2, 1, 0, 0, 0, "excellent") == 2

    def test_tonnage(self):
        assert tonnage(14400) == pytest.approx(1.2)
        assert tonnage(0) is None

    def test_compute(self):
        calc = HVACLoadCalculator()
        out = calc.compute(HVACLoadInput(1000, 8, 4, 4, 2, "poor"))
        assert out.total_btu == 17280
        assert out.display()["tonnage"] == "1.44"
        assert out.computable

    def test_tonnage_display(self):
        out = HVACLoadCalculator().compute(HVACLoadInput(1000, 8, 4, 4, 2))
        assert out.display()["tonnage"] == "1.20"
        assert out.display()["total_btu"] == "14,400"

    def test_blank_inputs_not_computable(self):
        calc = HVACLoadCalculator()
        out = calc.compute(calc.defaults())
        assert out.total_btu == 0
        assert out.tonnage is None
        assert not out.computable
        assert out.display()["tonnage"] == "N/A"

    def test_injected_factors(self):
        calc = HVACLoadCalculator(insulation_factors={"average": 1.0, "leaky": 2.0})
        out = calc.compute(HVACLoadInput(100, 10, insulation_level="leaky"))
        assert out.total_btu == 2000
        assert calc.choices("insulation_level") == ("average", "leaky")

    def test_default_factor_table(self):
        assert dict(INSULATION_FACTORS) == {
            "poor": 1.2,
            "average": 1.0,
            "good": 0.85,
            "excellent": 0.75,
        }
        assert [lvl.value for lvl in InsulationLevel] == list(INSULATION_FACTORS)


class TestPipeSlope:
    def test_example(self):
        assert pipe_slope(25, 97) == pytest.approx(25.77)

    @pytest.mark.parametrize("fall", [0, 1, 25, 100])
    def test_zero_length_not_computable(self, fall):
        assert pipe_slope(fall, 0) is None

    @pytest.mark.parametrize("length", [1, 97, 1000])
    def test_zero_fall_not_computable(self, length):
        assert pipe_slope(0, length) is None

    def test_negative_not_computable(self):
        assert pipe_slope(-1, 10) is None

    def test_compute_display(self):
        calc = PipeSlopeCalculator()
        out = calc.compute(PipeSlopeInput(25, 97))
        assert out.display() == {"slope": "25.77%"}
        blank = calc.compute(calc.defaults())
        assert not blank.computable
        assert blank.slope is None
        assert blank.display() == {"slope": "N/A"}


class TestPipeVolume:
    def test_water_example(self):
        """6 in × 10 ft of water."""
        out = PipeVolumeCalculator().compute(PipeVolumeInput(diameter=6, length=10))
        assert out.diameter_m == pytest.approx(0.1524)
        assert out.length_m == pytest.approx(3.048)
        assert out.volume == pytest.approx(math.pi * 0.0762**2 * 3.048)
        assert out.display()["volume"] == "0.0556"
        assert out.liquid_mass == pytest.approx(out.volume * 997)
        assert out.liquid_mass == pytest.approx(55.43, abs=0.01)

    def test_defaults(self):
        calc = PipeVolumeCalculator()
        inputs = calc.defaults()
        assert inputs.diameter_unit == "in"
        assert inputs.length_unit == "ft"
        assert inputs.density == 997
        assert inputs.density_unit == "kg/m³"
        out = calc.compute(inputs)
        assert out.display()["volume"] == "0.0000"
        assert out.display()["liquid_mass"] == "0.00"

    def test_unknown_diameter_unit_treated_as_meters(self):
        out = PipeVolumeCalculator().compute(
            PipeVolumeInput(diameter=0.1, diameter_unit="furlong", length=1, length_unit="m")
        )
        assert out.diameter_m == pytest.approx(0.1)
        assert out.volume == pytest.approx(math.pi * 0.05**2)

    def test_imperial_density(self):
        out = PipeVolumeCalculator().compute(
            PipeVolumeInput(diameter=1, diameter_unit="m", length=1, length_unit="m",
                            density=1, density_unit="lb/ft³")
        )
        assert out.density_si == pytest.approx(16.018463)
        assert out.liquid_mass == pytest.approx(math.pi / 4 * 16.018463)

    def test_injected_table(self):
        table = ConversionTable.from_dict("length", "m", {"m": 1.0, "yd": 0.9144})
        calc = PipeVolumeCalculator(length_units=table)
        assert calc.choices("length_unit") == ("m", "yd")
        out = calc.compute(PipeVolumeInput(diameter=1, diameter_unit="m", length=1, length_unit="yd"))
        assert out.length_m == pytest.approx(0.9144)

    def test_pipe_volume_function(self):
        assert pipe_volume(2.0, 1.0) == pytest.approx(math.pi)


class TestPurity:
    @pytest.mark.parametrize(
        "calc, inputs",
        [
            (CFMCalculator(), CFMInput(500, 8, 4)),
            (DuctCalculator(), DuctInput()),
            (HVACLoadCalculator(), HVACLoadInput(1000, 8, 4, 4, 2, "good")),
            (PipeSlopeCalculator(), PipeSlopeInput(25, 97)),
            (PipeVolumeCalculator(), PipeVolumeInput(6, "in", 10, "ft")),
        ],
    )
    def test_idempotent(self, calc, inputs):
        assert calc.compute(inputs) == calc.compute(inputs)

    @pytest.mark.parametrize(
        "calc",
        [CFMCalculator(), DuctCalculator(), HVACLoadCalculator(), PipeSlopeCalculator(), PipeVolumeCalculator()],
    )
    def test_all_zero_inputs_never_raise(self, calc):
        raw = {spec.name: 0 for spec in calc.fields() if spec.is_numeric}
        out = calc.evaluate(raw)
        for value in out.as_dict().values():
            if isinstance(value, float):
                assert not math.isnan(value)
