"""Tests for the default-value library."""

import pytest

from pydam import calculate_stability
from pydam.materials import (
    FRICTION_COEFFICIENT,
    default_concrete_density,
    default_inputs,
    default_water_density,
)
from pydam.statics import DamInputs
from pydam.units import DensityUnit, UnitSystem, convert_water_density


class TestLibrary:
    def test_concrete(self):
        assert default_concrete_density("metric") == 23.5
        assert default_concrete_density(UnitSystem.IMPERIAL) == 149.76

    def test_water(self):
        assert default_water_density() == 9.81
        assert default_water_density("kg/m³") == 1000.0
        assert default_water_density(DensityUnit.LB_PER_FT3) == 62.4

    def test_water_defaults_consistent(self):
        assert convert_water_density(
            default_water_density("kg/m³"), "kg/m³", "kN/m³"
        ) == pytest.approx(default_water_density("kN/m³"))

    def test_friction(self):
        assert FRICTION_COEFFICIENT == 0.7


class TestDefaultInputs:
    def test_metric_seed(self):
        seed = default_inputs("rectangle")
        assert seed["concrete_density"] == 23.5
        assert seed["water_density_unit"] is DensityUnit.KN_PER_M3

    def test_imperial_seed(self):
        seed = default_inputs("triangle", "imperial")
        assert seed["water_density"] == 62.4
        assert seed["water_density_unit"] is DensityUnit.LB_PER_FT3

    def test_seed_completes_inputs(self):
        seed = default_inputs("rectangle")
        inputs = DamInputs(base_width=10.0, height=8.0, water_level=6.0, **seed)
        r = calculate_stability(inputs)
        assert r.safety_factor_sliding == pytest.approx(7.4527, abs=1e-3)
