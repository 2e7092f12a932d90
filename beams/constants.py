"""Named constants for the spacing calculator and its diagram.

Lengths in inches, angles in degrees, canvas values in SVG px.
"""
from shared.types import AngleMode

# Canvas (schematic diagram)
CANVAS_W = 760
CANVAS_H = 360
MARGIN = 24                       # same on all four sides
MH_PX = 240                       # mounting height always drawn this tall
BREATHING = 1.1                   # 10% horizontal room around beams + spacing
MIN_TOTAL_WIDTH_IN = 1.0          # floor for the auto-fit width

# Annotation placement (px)
SPACING_DIM_DROP = 24             # spacing dimension below the ceiling line
OVERLAP_DIM_RISE = 14             # overlap dimension above the work plane
MH_NOTE_INSET = 32                # MH line left of the right margin
ARROW_HEAD = 8
FIXTURE_DOT_R = 5

# Input ranges
FACTOR_MIN = 0.60
FACTOR_MAX = 1.20
BEAM_ANGLE_MIN = 1.0              # advisory range only, values are not clamped
BEAM_ANGLE_MAX = 170.0

# Sweep table
SWEEP_STEPS = 13                  # 0.60..1.20 in 0.05 steps

# Default inputs
CEILING_H = 108.0                 # 9'
WORK_PLANE_H = 36.0               # 3' desk height
BEAM_ANGLE = 30.0
SPACING_FACTOR = 0.9

# Presets: (ceiling, work plane, beam angle, angle mode, spacing factor)
PRESETS = {
    "default":    (CEILING_H, WORK_PLANE_H, BEAM_ANGLE, AngleMode.FULL, SPACING_FACTOR),
    "no-overlap": (108.0, 36.0, 30.0, AngleMode.FULL, 1.0),
    "overlap-10": (108.0, 36.0, 30.0, AngleMode.FULL, 0.9),
    "half-angle": (108.0, 36.0, 15.0, AngleMode.HALF, 1.0),
}
