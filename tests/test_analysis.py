"""Tests for the end-to-end calculation pipeline."""

import pytest

from pydam import calculate_stability
from pydam.exceptions import MissingDimensionError, UnsupportedProfileError
from pydam.statics import DamInputs, SolveFor, SolveRequest, evaluate


def _rectangle_dam(**changes):
    inputs = DamInputs(
        profile="rectangle",
        base_width=10.0,
        height=8.0,
        water_level=6.0,
        concrete_density=23.5,
        water_density=9.81,
        friction_coefficient=0.7,
    )
    return inputs.replace(**changes)


class TestDirectMode:
    def test_same_as_evaluate(self):
        inputs = _rectangle_dam()
        assert calculate_stability(inputs) == evaluate(inputs)

    def test_no_solved_parameter(self):
        r = calculate_stability(_rectangle_dam())
        assert r.solved_parameter is None
        assert len(r.steps) == 14

    def test_trapezoid_without_crest(self):
        with pytest.raises(MissingDimensionError):
            calculate_stability(_rectangle_dam(profile="trapezoid"))

    def test_unsupported_profile(self):
        with pytest.raises(UnsupportedProfileError):
            calculate_stability(_rectangle_dam(profile="arch"))


class TestSolveMode:
    def test_water_level(self):
        inputs = _rectangle_dam(
            water_level=None, solve=SolveRequest(SolveFor.WATER_LEVEL, 15.0)
        )
        r = calculate_stability(inputs)
        sp = r.solved_parameter
        assert sp.name is SolveFor.WATER_LEVEL
        assert sp.method == "bisection"
        assert sp.converged
        assert sp.target_safety_factor == 15.0
        assert r.safety_factor_overturning == pytest.approx(15.0, abs=1e-3)

    def test_results_reflect_substituted_value(self):
        inputs = _rectangle_dam(
            water_level=2.0, solve=SolveRequest(SolveFor.WATER_LEVEL, 15.0)
        )
        r = calculate_stability(inputs)
        expected = evaluate(inputs.replace(water_level=r.solved_parameter.value))
        assert r.hydrostatic_pressure == expected.hydrostatic_pressure
        assert r.overturning_moment == expected.overturning_moment
        assert r.hydrostatic_pressure != evaluate(inputs).hydrostatic_pressure

    def test_base_width(self):
        inputs = _rectangle_dam(
            base_width=None, solve=SolveRequest(SolveFor.BASE_WIDTH, 2.0)
        )
        r = calculate_stability(inputs)
        assert r.safety_factor_overturning == pytest.approx(2.0, abs=1e-3)
        assert r.volume == pytest.approx(r.solved_parameter.value * 8.0)

    def test_friction_coefficient(self):
        inputs = _rectangle_dam(
            friction_coefficient=None,
            solve=SolveRequest(SolveFor.FRICTION_COEFFICIENT, 1.5),
        )
        r = calculate_stability(inputs)
        assert r.solved_parameter.method == "closed_form"
        assert r.safety_factor_sliding == pytest.approx(1.5, rel=1e-12)

    def test_method_step_prepended(self):
        inputs = _rectangle_dam(solve=SolveRequest(SolveFor.BASE_WIDTH, 2.0))
        r = calculate_stability(inputs)
        assert len(r.steps) == 15
        assert r.steps[0].title == "Solve for Base Width"
        assert "Bisection" in r.steps[0].explanation
        assert r.steps[0].value == r.solved_parameter.value
        assert r.steps[1].title == "Volume of Dam Section"

    def test_friction_method_step(self):
        inputs = _rectangle_dam(
            solve=SolveRequest(SolveFor.FRICTION_COEFFICIENT, 1.5)
        )
        r = calculate_stability(inputs)
        assert r.steps[0].title == "Solve for Friction Coefficient"
        assert r.steps[0].unit == ""

    def test_friction_without_water_thrust(self):
        inputs = _rectangle_dam(
            water_level=0.0,
            friction_coefficient=None,
            solve=SolveRequest(SolveFor.FRICTION_COEFFICIENT, 1.5),
        )
        r = calculate_stability(inputs)
        assert r.safety_factor_sliding is None
        assert not r.solved_parameter.converged
        assert "not applicable" in r.steps[0].explanation
        assert "Safety Factor against Sliding" not in [s.title for s in r.steps]

    def test_brentq(self):
        inputs = _rectangle_dam(solve=SolveRequest(SolveFor.WATER_LEVEL, 15.0))
        r = calculate_stability(inputs, method="brentq")
        assert r.solved_parameter.method == "brentq"
        assert "Brent" in r.steps[0].explanation
        assert r.safety_factor_overturning == pytest.approx(15.0, abs=1e-3)

    def test_unreachable_target_still_returns(self):
        inputs = _rectangle_dam(solve=SolveRequest(SolveFor.WATER_LEVEL, 2.0))
        r = calculate_stability(inputs)
        assert not r.solved_parameter.converged
        assert r.solved_parameter.value == pytest.approx(8.0)
        assert "did not reach" in r.steps[0].explanation

    def test_trapezoid_without_crest_aborts(self):
        inputs = _rectangle_dam(
            profile="trapezoid", solve=SolveRequest(SolveFor.BASE_WIDTH, 2.0)
        )
        with pytest.raises(MissingDimensionError):
            calculate_stability(inputs)


class TestSerialization:
    def test_to_dict(self):
        inputs = _rectangle_dam(solve=SolveRequest(SolveFor.WATER_LEVEL, 15.0))
        d = calculate_stability(inputs).to_dict()
        assert d["self_weight"] == pytest.approx(1880.0)
        assert d["unit_system"] == "metric"
        assert d["solved_parameter"]["name"] == "water_level"
        assert d["steps"][0]["title"] == "Solve for Water Level"
        assert isinstance(d["steps"], list)

    def test_to_dict_without_sliding(self):
        d = calculate_stability(_rectangle_dam(friction_coefficient=None)).to_dict()
        assert d["safety_factor_sliding"] is None
        assert d["solved_parameter"] is None
