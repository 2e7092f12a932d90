"""Generate the beam spacing diagram SVG and print the results.

Usage: python -m beams.gen_diagram [--preset NAME] [--ceiling 9'] [--work-plane 36]
       [--beam-angle 30] [--angle-mode full|half] [--factor 0.9] [--sweep] [-o out.svg]
"""
import os, sys, argparse, datetime
from typing import NamedTuple

from shared.types import AngleMode
from shared.geometry import clamp, fmt_ft_in, fmt_deg, parse_ft_in
from shared.svg import svg_open, git_describe
from beams.engine import SpacingResult, compute_spacing
from beams.layout import CanvasConfig, DiagramLayout, layout_diagram
from beams.sweep import spacing_sweep, sweep_rows
from beams.constants import (
    ARROW_HEAD, FIXTURE_DOT_R, FACTOR_MIN, FACTOR_MAX, PRESETS,
)

ADVISORY_MH = "Work plane D must be less than ceiling height C."
CAPTION = ("The drawing is schematic: vertical scale is fixed; horizontal scale "
           "auto-fits to your A and beam diameter at the work plane.")
TIP = ("Tip: For smoother uniformity, many lighting layouts use s ≈ 0.80–0.95. "
       "Always verify with photometrics for the actual fixture and reflectances.")

# ============================================================
# SVG Helpers
# ============================================================

def dim_arrow(out, x1, x2, y, label):
    """Horizontal dimension line with open arrowheads at both ends."""
    ah = ARROW_HEAD
    out.append(f'<line x1="{x1:.1f}" y1="{y:.1f}" x2="{x2:.1f}" y2="{y:.1f}" stroke="#333" stroke-width="1.5"/>')
    out.append(f'<path d="M{x1:.1f},{y:.1f} l{ah},-{ah/2} M{x1:.1f},{y:.1f} l{ah},{ah/2}" stroke="#333" fill="none"/>')
    out.append(f'<path d="M{x2:.1f},{y:.1f} l-{ah},-{ah/2} M{x2:.1f},{y:.1f} l-{ah},{ah/2}" stroke="#333" fill="none"/>')
    out.append(f'<text x="{(x1+x2)/2:.1f}" y="{y-8:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="11" fill="#333">{label}</text>')

def h_line(out, x1, x2, y, width, dash=None):
    d = f' stroke-dasharray="{dash}"' if dash else ""
    out.append(f'<line x1="{x1:.1f}" y1="{y:.1f}" x2="{x2:.1f}" y2="{y:.1f}"'
               f' stroke="#333" stroke-width="{width}"{d}/>')

def label(out, x, y, text, anchor="start", size=11, fill="#333"):
    out.append(f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="{anchor}" font-family="Arial"'
               f' font-size="{size}" fill="{fill}">{text}</text>')

# ============================================================
# Computation
# ============================================================

class DiagramData(NamedTuple):
    ceiling_h: float
    work_plane_h: float
    beam_angle: float
    angle_mode: AngleMode
    factor: float
    result: SpacingResult
    layout: DiagramLayout


def build_diagram_data(ceiling_h, work_plane_h, beam_angle,
                       angle_mode=AngleMode.FULL, factor=1.0,
                       canvas=CanvasConfig()) -> DiagramData:
    """Recompute spacing and diagram layout for one input tuple."""
    mode = AngleMode(angle_mode)
    result = compute_spacing(ceiling_h, work_plane_h, beam_angle, mode, factor)
    return DiagramData(ceiling_h, work_plane_h, beam_angle, mode, factor,
                       result, layout_diagram(result, canvas))


def advisory(result: SpacingResult) -> str | None:
    """Advisory text when the inputs give no usable geometry."""
    return ADVISORY_MH if result.mounting_height <= 0 else None


def report_lines(result: SpacingResult) -> list[str]:
    """Results panel as text lines."""
    mh = result.mounting_height; A = result.chosen_spacing
    return [
        f"Mounting height, MH = C - D:               {mh:.1f} in ({fmt_ft_in(mh)})",
        f"Half-angle used for trig:                  {fmt_deg(result.half_angle_deg)}",
        f"Beam radius at work plane, r = MH*tan(θ):  {result.radius:.2f} in",
        f"Touch spacing, A_touch = 2*MH*tan(θ):      {result.touch_spacing:.2f} in"
        f" ({fmt_ft_in(result.touch_spacing)})",
        f"Chosen spacing, A = s*A_touch:             {A:.2f} in ({fmt_ft_in(A)})",
        f"Linear overlap on work plane:              {result.overlap:.2f} in"
        f" ({result.overlap_pct:.1f}%)",
    ]

# ============================================================
# SVG rendering
# ============================================================

def render_diagram_svg(data: DiagramData, stamp: bool = True) -> str:
    """Render the schematic diagram. Returns SVG string."""
    res = data.result; lay = data.layout; cv = lay.canvas
    x0 = cv.margin_left; x1 = cv.width - cv.margin_right
    y_ceil = lay.y_ceil; y_work = lay.y_work

    out = svg_open(cv.width, cv.height)

    # Ceiling and work plane
    h_line(out, x0, x1, y_ceil, 2)
    label(out, x0, y_ceil - 8, "Ceiling")
    h_line(out, x0, x1, y_work, 1.5, dash="4 3")
    label(out, x0, y_work + 14, "Work plane")

    # Fixtures
    for fx, fy in lay.fixtures:
        out.append(f'<circle cx="{fx:.1f}" cy="{fy:.1f}" r="{FIXTURE_DOT_R}" fill="#333"/>')

    # Beam edges (cone outlines)
    for edge in lay.beam_edges:
        (tx, ty), (fx, fy) = edge
        out.append(f'<line x1="{tx:.1f}" y1="{ty:.1f}" x2="{fx:.1f}" y2="{fy:.1f}"'
                   f' stroke="#333" stroke-width="1.25"/>')

    # Spacing dimension
    sd = lay.spacing_dim
    dim_arrow(out, sd.x1, sd.x2, sd.y1, f'A = {res.chosen_spacing:.2f}"')

    # MH note
    md = lay.mh_dim
    out.append(f'<line x1="{md.x1:.1f}" y1="{md.y1:.1f}" x2="{md.x2:.1f}" y2="{md.y2:.1f}"'
               f' stroke="#333" stroke-width="1"/>')
    _lx, _ly = md.x1 - 4, (md.y1 + md.y2) / 2
    out.append(f'<text x="{_lx:.1f}" y="{_ly:.1f}" font-family="Arial" font-size="11" fill="#333"'
               f' transform="rotate(-90,{_lx:.1f},{_ly:.1f})">MH = {res.mounting_height:.1f}"</text>')

    # Overlap between footprints
    od = lay.overlap_dim
    if od is not None:
        dim_arrow(out, od.x1, od.x2, od.y1,
                  f'overlap = {res.overlap:.2f}" ({res.overlap_pct:.0f}%)')

    for fx, fy in lay.fixtures:
        label(out, fx, fy - 8, "Fixture", anchor="middle")

    label(out, x0, cv.height - 8, CAPTION, size=9, fill="#777")

    if stamp:
        _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        label(out, x1, y_ceil - 8, f"Generated {_now} from {git_describe()}",
              anchor="end", size=7.5, fill="#999")

    out.append('</svg>')
    return "\n".join(out)


def write_diagram(data: DiagramData, path: str) -> str:
    """Write the rendered SVG to path. Returns the absolute path."""
    path = os.path.abspath(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_diagram_svg(data))
    return path

# ============================================================
# Command line
# ============================================================

def _factor(text):
    """Spacing factor from the command line, clamped like manual entry."""
    return clamp(float(text), FACTOR_MIN, FACTOR_MAX)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Fixture spacing from ceiling height, work plane, and beam angle.")
    p.add_argument("--preset", choices=sorted(PRESETS), default="default",
                   help="starting input values (explicit options override)")
    p.add_argument("--ceiling", type=parse_ft_in, help="ceiling height C, e.g. 108 or 9'")
    p.add_argument("--work-plane", type=parse_ft_in, help="work plane height D")
    p.add_argument("--beam-angle", type=float, help="beam angle B in degrees (1-170)")
    p.add_argument("--angle-mode", choices=[m.value for m in AngleMode],
                   help="B is the full included angle or the half-angle")
    p.add_argument("--factor", type=_factor,
                   help=f"spacing factor s ({FACTOR_MIN:.2f}-{FACTOR_MAX:.2f}); "
                        "1.00 = beams just meet, <1 adds overlap")
    p.add_argument("--sweep", action="store_true", help="also print spacing over the factor range")
    p.add_argument("-o", "--output", default="beam_spacing.svg", help="SVG output path")
    return p


def resolve_inputs(args) -> tuple:
    """Preset tuple with any explicit options applied on top."""
    c, d, b, mode, s = PRESETS[args.preset]
    return (
        c if args.ceiling is None else args.ceiling,
        d if args.work_plane is None else args.work_plane,
        b if args.beam_angle is None else args.beam_angle,
        mode if args.angle_mode is None else AngleMode(args.angle_mode),
        s if args.factor is None else args.factor,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    c, d, b, mode, s = resolve_inputs(args)
    data = build_diagram_data(c, d, b, mode, s)
    _mode_txt = "full included" if mode is AngleMode.FULL else "half-angle"
    print(f"C = {c:.1f} in, D = {d:.1f} in, B = {fmt_deg(b)} ({_mode_txt}), s = {s:.2f}")
    print()
    for line in report_lines(data.result):
        print(line)
    note = advisory(data.result)
    if note:
        print()
        print(note)
    if args.sweep:
        print()
        for line in sweep_rows(spacing_sweep(c, d, b, mode)):
            print(line)
    print()
    print(f"Diagram written to {write_diagram(data, args.output)}")
    print(TIP)
    return 0


if __name__ == "__main__":
    sys.exit(main())
