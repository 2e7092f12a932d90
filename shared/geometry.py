"""Angle and length helpers: unit conversion, clamping, and feet-inch formatting."""
import math
import re

# ============================================================
# Error Type
# ============================================================
class UnitsError(ValueError):
    """Raised for length text that cannot be read as feet and inches."""

# Shown in place of a length that has no finite value (e.g. tan at 90 degrees).
PLACEHOLDER = "–"

# ============================================================
# Numeric Helpers
# ============================================================
def to_radians(deg: float) -> float:
    return deg * math.pi / 180

def clamp(v: float, lo: float, hi: float) -> float:
    """Limit v to the closed range [lo, hi]."""
    return min(max(v, lo), hi)

# ============================================================
# Formatting Helpers
# ============================================================
def fmt_ft_in(inches: float) -> str:
    """Format a length in inches to feet-inches rounded to 1/8 inch, e.g. 3'-2 5/8".

    Eighths are not reduced (4/8 stays 4/8). A fraction that rounds up to 8/8
    carries into the whole inch, and 12" carries into the feet.
    """
    if not math.isfinite(inches):
        return PLACEHOLDER
    neg = inches < 0; x = abs(inches)
    feet = math.floor(x / 12)
    eighths = math.floor((x - feet*12) * 8 + 0.5)  # round half up
    whole, num = divmod(eighths, 8)
    if whole >= 12:
        feet += whole // 12; whole %= 12
    in_str = f"{whole} {num}/8" if num else f"{whole}"
    s = f"{feet}'-{in_str}\""
    return f"-{s}" if neg else s

def fmt_deg(deg: float) -> str:
    """Format an angle in degrees with two decimals, e.g. '15.00°'."""
    return f"{deg:.2f}°"

# ============================================================
# Parsing
# ============================================================
_NUM = r"(?:\d+(?:\.\d*)?|\.\d+)"
_FT_IN_RE = re.compile(rf"""
    ^\s*(?P<sign>-)?\s*
    (?:(?P<ft>{_NUM})\s*')?            # feet, e.g. 9'
    \s*-?\s*
    (?:(?P<inch>{_NUM})(?:\s+(?P<num>\d+)/(?P<den>\d+))?  # 2, 2.5, 2 5/8
      |(?P<fnum>\d+)/(?P<fden>\d+))?                      # 5/8
    \s*"?\s*$
""", re.VERBOSE)

def _fraction(num: str, den: str, text: str) -> float:
    if int(den) == 0:
        raise UnitsError(f"Zero denominator in {text!r}")
    return int(num) / int(den)

def parse_ft_in(text: str) -> float:
    """Parse feet-inches text to inches. Bare numbers are inches.

    Accepts the forms written by fmt_ft_in plus shorthands such as
    9', 108 or 2'-6. Raises UnitsError otherwise.
    """
    m = _FT_IN_RE.match(text)
    if m is None or not any(m.group(g) for g in ("ft", "inch", "fnum")):
        raise UnitsError(f"Not a feet-inches length: {text!r}")
    total = 0.0
    if m.group("ft"):
        total += float(m.group("ft")) * 12
    if m.group("inch"):
        total += float(m.group("inch"))
    if m.group("num"):
        total += _fraction(m.group("num"), m.group("den"), text)
    if m.group("fnum"):
        total += _fraction(m.group("fnum"), m.group("fden"), text)
    return -total if m.group("sign") else total
