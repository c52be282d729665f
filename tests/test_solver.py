"""Tests for the inverse solver."""

import logging

import pytest

from pydam.exceptions import DegenerateReactionError, MissingDimensionError
from pydam.solver import SolveResult, find_parameter, solve
from pydam.statics import DamInputs, SolveFor, evaluate


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


class TestWaterLevel:
    def test_round_trip(self):
        inputs = _rectangle_dam(water_level=None)
        h_w = solve(inputs, SolveFor.WATER_LEVEL, 15.0)
        assert 0 < h_w < 8
        r = evaluate(inputs.replace(water_level=h_w))
        assert abs(r.safety_factor_overturning - 15.0) < 1e-3

    def test_analytical_value(self):
        # FS = 9400 / (9.81 h³ / 6)  →  h = (9400 × 6 / (9.81 × 15))^(1/3)
        expected = (9400 * 6 / (9.81 * 15)) ** (1 / 3)
        h_w = solve(_rectangle_dam(), "water_level", 15.0)
        assert h_w == pytest.approx(expected, rel=1e-3)

    def test_trapezoid_round_trip(self):
        inputs = _rectangle_dam(profile="trapezoid", crest_width=3.0, water_level=None)
        result = find_parameter(inputs, SolveFor.WATER_LEVEL, 8.0)
        assert result.converged
        r = evaluate(inputs.replace(water_level=result.value))
        assert r.safety_factor_overturning == pytest.approx(8.0, abs=1e-3)

    def test_unreachable_target_converges_to_bracket_end(self, caplog):
        # Even a full reservoir leaves FS ≈ 11.2, so 2.0 is unreachable.
        with caplog.at_level(logging.WARNING, logger="pydam.solver.inverse"):
            result = find_parameter(_rectangle_dam(), SolveFor.WATER_LEVEL, 2.0)
        assert not result.converged
        assert result.iterations == 100
        assert result.value == pytest.approx(8.0)
        assert "not reached" in caplog.text

    def test_missing_height(self):
        with pytest.raises(MissingDimensionError):
            solve(_rectangle_dam(height=None), SolveFor.WATER_LEVEL, 2.0)


class TestBaseWidth:
    def test_round_trip(self):
        inputs = _rectangle_dam(base_width=None)
        b = solve(inputs, SolveFor.BASE_WIDTH, 2.0)
        r = evaluate(inputs.replace(base_width=b))
        assert abs(r.safety_factor_overturning - 2.0) < 1e-3

    def test_analytical_value(self):
        # FS = 23.5 × 8 × b² / 2 / 353.16
        expected = (2.0 * 353.16 * 2 / (23.5 * 8)) ** 0.5
        result = find_parameter(_rectangle_dam(), "base_width", 2.0)
        assert result.converged
        assert result.method == "bisection"
        assert result.value == pytest.approx(expected, rel=1e-3)

    def test_triangle_round_trip(self):
        inputs = _rectangle_dam(profile="triangle", base_width=None)
        b = solve(inputs, SolveFor.BASE_WIDTH, 1.5)
        r = evaluate(inputs.replace(base_width=b))
        assert r.safety_factor_overturning == pytest.approx(1.5, abs=1e-3)

    def test_unreachable_target(self):
        result = find_parameter(_rectangle_dam(), SolveFor.BASE_WIDTH, 1e6)
        assert not result.converged
        assert result.value == pytest.approx(80.0)


class TestFrictionCoefficient:
    def test_closed_form(self):
        result = find_parameter(_rectangle_dam(friction_coefficient=None),
                                SolveFor.FRICTION_COEFFICIENT, 1.5)
        assert result.method == "closed_form"
        assert result.iterations == 0
        assert result.converged
        assert result.value == pytest.approx(1.5 * 176.58 / 1880.0)

    def test_round_trip_is_exact(self):
        inputs = _rectangle_dam(heel_uplift=2.0, toe_uplift=1.0)
        mu = solve(inputs, SolveFor.FRICTION_COEFFICIENT, 1.3)
        r = evaluate(inputs.replace(friction_coefficient=mu))
        assert r.safety_factor_sliding == pytest.approx(1.3, rel=1e-12)

    def test_zero_vertical_reaction(self):
        inputs = DamInputs(
            profile="rectangle", base_width=2.0, height=1.0, water_level=0.5,
            concrete_density=10.0, water_density=10.0,
            heel_uplift=1.0, toe_uplift=1.0,
        )
        with pytest.raises(DegenerateReactionError):
            solve(inputs, SolveFor.FRICTION_COEFFICIENT, 1.5)

    def test_no_water_thrust(self, caplog):
        inputs = _rectangle_dam(water_level=0.0, friction_coefficient=None)
        with caplog.at_level(logging.WARNING, logger="pydam.solver.inverse"):
            result = find_parameter(inputs, SolveFor.FRICTION_COEFFICIENT, 1.5)
        assert result.value == 0.0
        assert result.safety_factor is None
        assert not result.converged
        assert "not applicable" in caplog.text

    def test_negative_coefficient_not_converged(self, caplog):
        inputs = _rectangle_dam(heel_uplift=30.0, toe_uplift=30.0)
        with caplog.at_level(logging.WARNING, logger="pydam.solver.inverse"):
            result = find_parameter(inputs, SolveFor.FRICTION_COEFFICIENT, 1.5)
        assert result.value == pytest.approx(1.5 * 176.58 / (1880.0 - 2943.0))
        assert result.value < 0
        assert not result.converged
        assert "not physical" in caplog.text


class TestBrent:
    def test_matches_bisection(self):
        inputs = _rectangle_dam()
        bis = find_parameter(inputs, SolveFor.WATER_LEVEL, 15.0)
        brent = find_parameter(inputs, SolveFor.WATER_LEVEL, 15.0, method="brentq")
        assert brent.method == "brentq"
        assert brent.converged
        assert brent.value == pytest.approx(bis.value, abs=1e-3)

    def test_unbracketed_returns_nearer_end(self):
        result = find_parameter(_rectangle_dam(), SolveFor.WATER_LEVEL, 2.0, method="brentq")
        assert not result.converged
        assert result.value == 8.0


class TestArguments:
    @pytest.mark.parametrize("target", [0.0, -1.0, None])
    def test_non_positive_target(self, target):
        with pytest.raises(ValueError, match="target_safety_factor"):
            find_parameter(_rectangle_dam(), SolveFor.BASE_WIDTH, target)

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown method"):
            find_parameter(_rectangle_dam(), SolveFor.BASE_WIDTH, 2.0, method="newton")

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            find_parameter(_rectangle_dam(), "height", 2.0)

    def test_result_type(self):
        assert isinstance(find_parameter(_rectangle_dam(), "base_width", 2.0), SolveResult)
