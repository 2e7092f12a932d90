"""Regenerate the diagram SVG for every preset with a consistent git describe stamp.

Captures `git describe --always --dirty=-DEV` once before any SVG is
written, so that all diagrams show the same version string even though
writing the first SVG makes the working tree dirty.
"""
import os

from shared.svg import git_describe, _GIT_DESCRIBE_CACHE
from beams.gen_diagram import build_diagram_data, write_diagram, advisory
from beams.constants import PRESETS

_DIR = os.path.dirname(os.path.abspath(__file__))
_OUT_DIR = os.path.join(_DIR, "diagrams")


def main(out_dir=_OUT_DIR):
    # 1. Capture git describe before any SVG is written
    desc = git_describe()
    with open(_GIT_DESCRIBE_CACHE, "w") as f:
        f.write(desc)
    print(f"git describe: {desc}")

    os.makedirs(out_dir, exist_ok=True)
    written = []
    try:
        # 2. Render each preset
        for name, inputs in PRESETS.items():
            data = build_diagram_data(*inputs)
            path = write_diagram(data, os.path.join(out_dir, f"{name}.svg"))
            note = advisory(data.result)
            print(f"  {name:<11s} A = {data.result.chosen_spacing:7.2f} in -> "
                  f"{os.path.relpath(path, out_dir)}" + (f"  ({note})" if note else ""))
            written.append(path)
    finally:
        # 3. Always clean up the cache file
        if os.path.exists(_GIT_DESCRIBE_CACHE):
            os.remove(_GIT_DESCRIBE_CACHE)

    print("done.")
    return written


if __name__ == "__main__":
    main()
