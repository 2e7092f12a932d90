"""Fixture spacing from mounting geometry and beam angle."""
import math
from typing import NamedTuple

from shared.types import AngleMode
from shared.geometry import to_radians


class SpacingResult(NamedTuple):
    """Derived spacing values. All lengths in inches."""
    mounting_height: float
    half_angle_deg: float
    radius: float           # beam footprint radius at the work plane
    touch_spacing: float    # beam edges just meet
    chosen_spacing: float   # touch_spacing * spacing factor
    overlap: float
    overlap_pct: float


def compute_spacing(
    ceiling_h: float,
    work_plane_h: float,
    beam_angle: float,
    angle_mode: AngleMode | str = AngleMode.FULL,
    factor: float = 1.0,
) -> SpacingResult:
    """Compute spacing for two adjacent fixtures.

    Never raises for numeric input: out-of-range values give consistent but
    non-physical results (negative radius past 90 degrees, near-infinite
    radius at 90). Mounting height is floored at 0 so a work plane above the
    ceiling gives zero spacing.
    """
    mode = AngleMode(angle_mode)
    mh = max(0.0, ceiling_h - work_plane_h)
    half_deg = mode.half_angle(beam_angle)
    r = mh * math.tan(to_radians(half_deg))
    touch = 2 * r
    chosen = factor * touch
    overlap = max(0.0, touch - chosen)
    overlap_pct = overlap / touch * 100 if touch > 0 else 0.0
    return SpacingResult(
        mounting_height=mh, half_angle_deg=half_deg, radius=r,
        touch_spacing=touch, chosen_spacing=chosen,
        overlap=overlap, overlap_pct=overlap_pct,
    )
