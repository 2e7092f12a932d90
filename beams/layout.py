"""Diagram layout: pixel coordinates for fixtures, beam edges, and dimensions."""
from typing import NamedTuple

from shared.types import Point
from beams.engine import SpacingResult
from beams.constants import (
    CANVAS_W, CANVAS_H, MARGIN, MH_PX, BREATHING, MIN_TOTAL_WIDTH_IN,
    SPACING_DIM_DROP, OVERLAP_DIM_RISE, MH_NOTE_INSET,
)


class CanvasConfig(NamedTuple):
    width: float = CANVAS_W
    height: float = CANVAS_H
    margin_top: float = MARGIN
    margin_right: float = MARGIN
    margin_bottom: float = MARGIN
    margin_left: float = MARGIN
    mh_px: float = MH_PX
    breathing: float = BREATHING


class BeamEdge(NamedTuple):
    top: Point      # fixture point on the ceiling
    foot: Point     # landing point on the work plane


class DimLine(NamedTuple):
    """Straight dimension from (x1, y1) to (x2, y2)."""
    x1: float; y1: float; x2: float; y2: float


class DiagramLayout(NamedTuple):
    """Schematic coordinates: vertical scale fixed, horizontal auto-fit."""
    canvas: CanvasConfig
    y_ceil: float
    y_work: float
    x_scale: float              # px per inch, horizontal only
    center: float
    x_left: float               # left fixture
    x_right: float              # right fixture
    fixtures: list[Point]
    # Footprint extents on the work plane: left beam L/R, right beam L/R
    foot_left_l: float
    foot_left_r: float
    foot_right_l: float
    foot_right_r: float
    beam_edges: list[BeamEdge]
    spacing_dim: DimLine
    overlap_dim: DimLine | None  # only when overlap > 0
    mh_dim: DimLine


def layout_diagram(result: SpacingResult, canvas: CanvasConfig = CanvasConfig()) -> DiagramLayout:
    """Lay out two fixtures and their beam cones for a SpacingResult.

    Does not raise for zero, huge, or non-finite lengths; coordinates may
    then be degenerate (off-canvas or NaN).
    """
    A = result.chosen_spacing; r = result.radius
    y_ceil = canvas.margin_top
    y_work = canvas.margin_top + canvas.mh_px

    total_width_in = max(MIN_TOTAL_WIDTH_IN, A + 2 * r)
    drawable_w = canvas.width - canvas.margin_left - canvas.margin_right
    x_scale = drawable_w / (total_width_in * canvas.breathing)

    center = canvas.margin_left + drawable_w / 2
    x_left = center - (A / 2) * x_scale
    x_right = center + (A / 2) * x_scale

    r_px = r * x_scale
    foot_left_l, foot_left_r = x_left - r_px, x_left + r_px
    foot_right_l, foot_right_r = x_right - r_px, x_right + r_px

    beam_edges = [
        BeamEdge((x_left, y_ceil), (foot_left_l, y_work)),
        BeamEdge((x_left, y_ceil), (foot_left_r, y_work)),
        BeamEdge((x_right, y_ceil), (foot_right_l, y_work)),
        BeamEdge((x_right, y_ceil), (foot_right_r, y_work)),
    ]

    y_dim = y_ceil + SPACING_DIM_DROP
    spacing_dim = DimLine(x_left, y_dim, x_right, y_dim)

    overlap_dim = None
    if result.overlap > 0:
        y_ov = y_work - OVERLAP_DIM_RISE
        overlap_dim = DimLine(foot_left_r, y_ov, foot_right_l, y_ov)

    x_mh = canvas.width - canvas.margin_right - MH_NOTE_INSET
    mh_dim = DimLine(x_mh, y_ceil, x_mh, y_work)

    return DiagramLayout(
        canvas=canvas, y_ceil=y_ceil, y_work=y_work, x_scale=x_scale,
        center=center, x_left=x_left, x_right=x_right,
        fixtures=[(x_left, y_ceil), (x_right, y_ceil)],
        foot_left_l=foot_left_l, foot_left_r=foot_left_r,
        foot_right_l=foot_right_l, foot_right_r=foot_right_r,
        beam_edges=beam_edges,
        spacing_dim=spacing_dim, overlap_dim=overlap_dim, mh_dim=mh_dim,
    )
