"""
Print a contrast-targeted shade scale for one or more base colors.

Usage (from repo root):
    python scripts/print_scale.py "#d93025"
    python scripts/print_scale.py "#d93025" "#1a73e8" --space oklch
    python scripts/print_scale.py "#1a73e8" --curve ease-out --range 1.1 15 --format json

Notes:
    - Steps come from configs/default.yaml unless --steps is given, in which
      case targets are distributed over --range with --curve.
    - Contrast columns are measured against white and black.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add src/ to sys.path to allow `from shades import ...` from a plain checkout
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from common import settings  # noqa: E402
from common.logging import setup_default_logging  # noqa: E402
from shades import (  # noqa: E402
    ColorSpaceMode,
    ContrastCurve,
    PaletteSession,
    ScaleStep,
    ValueRange,
    export_palette,
)

logger = logging.getLogger("print_scale")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    ap.add_argument("colors", nargs="+", help="base colors as #rrggbb")
    ap.add_argument(
        "--space",
        choices=[m.value for m in ColorSpaceMode],
        default=None,
        help="color space to hold hue/chroma in (default: from config)",
    )
    ap.add_argument("--steps", type=int, default=None, help="number of evenly named steps")
    ap.add_argument(
        "--curve",
        choices=[c.value for c in ContrastCurve],
        default=None,
        help="contrast distribution curve (used with --steps)",
    )
    ap.add_argument("--range", nargs=2, type=float, metavar=("MIN", "MAX"), default=None)
    ap.add_argument("--opacity", action="store_true", help="vary alpha instead of lightness")
    ap.add_argument("--format", choices=["table", "json"], default="table")
    ap.add_argument("--log-level", default=None)
    return ap.parse_args(argv)


def build_session(args: argparse.Namespace) -> PaletteSession:
    session = PaletteSession()
    if args.space is not None:
        session.set_color_space(args.space)
    for hex_value in args.colors:
        base = session.add_base_color(hex_value)
        if args.opacity:
            session.toggle_base_opacity(base.id)

    if args.steps is not None:
        n = max(1, min(args.steps, settings.get().MAX_SCALE_STEPS))
        names = [str((n - i) * 10) for i in range(n)]
        session.set_scale_steps([ScaleStep(id=name, name=name) for name in names])
    if args.curve is not None:
        session.set_curve_type(args.curve)
    if args.range is not None:
        session.set_contrast_range(ValueRange(min=args.range[0], max=args.range[1]))
    if args.steps is not None or args.curve is not None or args.range is not None:
        session.apply_contrast_curve()
    return session


def _print_table(session: PaletteSession) -> None:
    names = {b.id: b.color.hex for b in session.base_colors}
    step_names = {s.id: s.name for s in session.scale_steps}
    for row in session.palette:
        print(f"{names[row.base_color_id]}  (closest: {step_names.get(row.closest_step_id, '-')})")
        for s in row.steps:
            L, C, h = s.lch
            print(
                f"  {step_names[s.step_id]:>5}  {s.hex:<10} "
                f"L={L:6.2f} C={C:6.2f} h={h:6.1f}  "
                f"white={s.contrast_white:5.2f}  black={s.contrast_black:5.2f}"
            )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_default_logging(args.log_level)
    try:
        session = build_session(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    if args.format == "json":
        print(export_palette(session.palette, "json"))
    else:
        _print_table(session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
