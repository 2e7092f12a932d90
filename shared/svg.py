"""SVG document envelope and version stamp."""
import os, subprocess

# Cache file written by gen_all.py so all SVGs embed the same git describe.
_GIT_DESCRIBE_CACHE = os.path.join(os.path.dirname(__file__), os.pardir, ".git_describe")


def git_describe() -> str:
    """Return git describe string, preferring a cached value from gen_all.py.

    Falls back to "unknown" outside a git checkout.
    """
    try:
        with open(_GIT_DESCRIBE_CACHE) as f:
            return f.read().strip()
    except FileNotFoundError:
        pass
    try:
        return subprocess.check_output(
            ["git", "describe", "--always", "--dirty=-DEV"], text=True,
            stderr=subprocess.DEVNULL,
        ).strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"


def svg_open(w: float, h: float) -> list[str]:
    """Opening lines of an SVG document: root element and white background."""
    return [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}"'
        f' viewBox="0 0 {w} {h}">',
        f'<rect x="0" y="0" width="{w}" height="{h}" fill="white"/>',
    ]
