"""Shared types, unit conversion/formatting, and SVG utilities."""

from .types import Point, AngleMode
from .geometry import (
    UnitsError,
    to_radians, clamp,
    fmt_ft_in, parse_ft_in, fmt_deg,
    PLACEHOLDER,
)
from .svg import svg_open, git_describe
