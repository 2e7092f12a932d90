"""Tests for beams/sweep.py factor sweep."""
import numpy as np
from shared.types import AngleMode
from beams.sweep import SpacingSweep, spacing_sweep, sweep_rows


def test_default_factor_range():
    sw = spacing_sweep(108, 36, 30)
    assert isinstance(sw, SpacingSweep)
    assert len(sw.factors) == 13
    assert np.isclose(sw.factors[0], 0.60)
    assert np.isclose(sw.factors[-1], 1.20)


def test_matches_engine(scenario_a, scenario_b):
    sw = spacing_sweep(108, 36, 30, AngleMode.FULL, factors=[0.9, 1.0])
    assert np.isclose(sw.touch_spacing, scenario_a.touch_spacing)
    assert np.allclose(sw.chosen_spacing, [scenario_b.chosen_spacing, scenario_a.chosen_spacing])
    assert np.allclose(sw.overlap, [scenario_b.overlap, 0.0])
    assert np.allclose(sw.overlap_pct, [10.0, 0.0])


def test_no_overlap_above_one():
    sw = spacing_sweep(108, 36, 30, factors=[1.05, 1.2])
    assert np.all(sw.overlap == 0)


def test_zero_mounting_height():
    sw = spacing_sweep(36, 108, 30)
    assert np.all(sw.chosen_spacing == 0)
    assert np.all(sw.overlap_pct == 0)


def test_rows():
    rows = sweep_rows(spacing_sweep(108, 36, 15, "half"))
    assert len(rows) == 14
    assert rows[0].split()[0] == "s"
    assert "3'-2 5/8\"" in rows[9]  # s = 1.00
