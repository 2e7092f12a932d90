"""Spacing over a range of spacing factors, vectorised with numpy."""
from typing import NamedTuple

import numpy as np

from shared.types import AngleMode
from shared.geometry import fmt_ft_in
from beams.engine import compute_spacing
from beams.constants import FACTOR_MIN, FACTOR_MAX, SWEEP_STEPS


class SpacingSweep(NamedTuple):
    touch_spacing: float
    factors: np.ndarray
    chosen_spacing: np.ndarray
    overlap: np.ndarray
    overlap_pct: np.ndarray


def spacing_sweep(ceiling_h, work_plane_h, beam_angle,
                  angle_mode=AngleMode.FULL, factors=None) -> SpacingSweep:
    """Chosen spacing and overlap for each spacing factor.

    Touch spacing does not depend on the factor, so it is computed once by
    the engine and scaled here.
    """
    if factors is None:
        factors = np.linspace(FACTOR_MIN, FACTOR_MAX, SWEEP_STEPS)
    factors = np.asarray(factors, dtype=float)
    touch = compute_spacing(ceiling_h, work_plane_h, beam_angle, angle_mode).touch_spacing
    chosen = factors * touch
    overlap = np.maximum(0.0, touch - chosen)
    if touch > 0:
        overlap_pct = overlap / touch * 100
    else:
        overlap_pct = np.zeros_like(factors)
    return SpacingSweep(touch, factors, chosen, overlap, overlap_pct)


def sweep_rows(sweep: SpacingSweep) -> list[str]:
    """Printable table: factor, spacing (in and ft-in), overlap."""
    rows = [f"{'s':>5s}  {'A (in)':>8s}  {'A':>10s}  {'overlap':>8s}  {'%':>5s}"]
    for s, a, ov, pct in zip(sweep.factors, sweep.chosen_spacing,
                             sweep.overlap, sweep.overlap_pct):
        rows.append(f"{s:5.2f}  {a:8.2f}  {fmt_ft_in(float(a)):>10s}  {ov:8.2f}  {pct:5.1f}")
    return rows
