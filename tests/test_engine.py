"""Tests for beams/engine.py spacing computation."""
import math
import pytest
from shared.types import AngleMode
from beams.engine import SpacingResult, compute_spacing


# --- Scenarios ---

class TestScenarios:
    def test_a_touching(self, scenario_a):
        assert scenario_a.mounting_height == 72
        assert scenario_a.half_angle_deg == 15
        assert abs(scenario_a.touch_spacing - 38.585) < 0.001
        assert abs(scenario_a.chosen_spacing - 38.585) < 0.001
        assert scenario_a.overlap == 0
        assert scenario_a.overlap_pct == 0

    def test_b_ten_percent_overlap(self, scenario_b):
        assert abs(scenario_b.chosen_spacing - 34.726) < 0.001
        assert abs(scenario_b.overlap - 3.858) < 0.001
        assert abs(scenario_b.overlap_pct - 10.0) < 1e-9

    def test_c_half_matches_full(self, scenario_a, scenario_c):
        assert scenario_c.half_angle_deg == 15
        assert abs(scenario_c.touch_spacing - scenario_a.touch_spacing) < 0.01

    def test_radius_is_half_touch(self, scenario_b):
        assert abs(scenario_b.radius * 2 - scenario_b.touch_spacing) < 1e-12


# --- Properties ---

@pytest.mark.parametrize("C, D, B", [
    (108, 36, 30), (120, 30, 60), (144, 0, 10), (96, 95, 170), (240, 36, 1),
])
def test_touch_spacing_formula(C, D, B):
    res = compute_spacing(C, D, B, AngleMode.FULL, 1.0)
    expected = 2 * (C - D) * math.tan(math.radians(B / 2))
    assert abs(res.touch_spacing - expected) < 1e-9 * max(1.0, expected)


@pytest.mark.parametrize("k", [0.5, 5, 15, 30, 45, 60, 85])
def test_half_full_equivalence(k):
    full = compute_spacing(108, 36, 2 * k, AngleMode.FULL, 1)
    half = compute_spacing(108, 36, k, AngleMode.HALF, 1)
    assert math.isclose(full.touch_spacing, half.touch_spacing, rel_tol=1e-12)


def test_chosen_spacing_increases_with_factor():
    factors = [0.1, 0.6, 0.75, 0.9, 1.0, 1.2, 2.0]
    chosen = [compute_spacing(108, 36, 30, AngleMode.FULL, s).chosen_spacing for s in factors]
    assert all(a < b for a, b in zip(chosen, chosen[1:]))


def test_chosen_is_factor_times_touch():
    res = compute_spacing(130, 30, 40, AngleMode.FULL, 0.83)
    assert math.isclose(res.chosen_spacing, 0.83 * res.touch_spacing)


def test_gap_when_factor_above_one():
    res = compute_spacing(108, 36, 30, AngleMode.FULL, 1.2)
    assert res.chosen_spacing > res.touch_spacing
    assert res.overlap == 0
    assert res.overlap_pct == 0


# --- Degenerate and out-of-domain inputs ---

@pytest.mark.parametrize("C, D", [(36, 108), (50, 50)])
def test_work_plane_at_or_above_ceiling(C, D):
    res = compute_spacing(C, D, 30, AngleMode.FULL, 0.9)
    assert res.mounting_height == 0
    assert res.radius == 0
    assert res.touch_spacing == 0
    assert res.chosen_spacing == 0
    assert res.overlap == 0
    assert res.overlap_pct == 0


def test_half_angle_past_90_gives_negative_radius():
    res = compute_spacing(108, 36, 120, AngleMode.HALF, 0.9)
    assert res.radius < 0
    assert res.touch_spacing < 0
    assert res.overlap == 0
    assert res.overlap_pct == 0


def test_half_angle_90_does_not_raise():
    res = compute_spacing(108, 36, 180, AngleMode.FULL, 1.0)
    assert abs(res.radius) > 1e12


def test_negative_heights_propagate():
    res = compute_spacing(-10, -40, 30)
    assert res.mounting_height == 30


# --- Angle mode handling ---

def test_string_angle_mode():
    assert compute_spacing(108, 36, 15, "half") == compute_spacing(108, 36, 15, AngleMode.HALF)


def test_unknown_angle_mode():
    with pytest.raises(ValueError):
        compute_spacing(108, 36, 30, "quarter")


def test_default_mode_is_full(scenario_a):
    assert compute_spacing(108, 36, 30) == scenario_a


def test_result_is_immutable(scenario_a):
    assert isinstance(scenario_a, SpacingResult)
    with pytest.raises(AttributeError):
        scenario_a.radius = 0


def test_recompute_is_deterministic():
    assert compute_spacing(108, 36, 30, AngleMode.FULL, 0.9) == compute_spacing(108, 36, 30, AngleMode.FULL, 0.9)
