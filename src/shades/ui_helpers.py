from __future__ import annotations

"""Helper utilities for integrating shades into external UIs.

This module exposes label/enum pairs for curve and color-space choices, and
an `export_palette` helper turning generated results into plain HEX / LCh
lists or a JSON token document.
"""

import json
from enum import Enum
from typing import Dict, List, Sequence

from .curves import ContrastCurve, CurveShape, EasingDirection
from .engine import ColorSpaceMode
from .palette import PaletteResult


class ExportFormat(Enum):
    """Supported output formats for exported palettes."""

    HEX = "hex"
    LCH = "lch"
    JSON = "json"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
CONTRAST_CURVE_OPTIONS: List[tuple[str, ContrastCurve]] = [
    ("Linear", ContrastCurve.LINEAR),
    ("Ease In", ContrastCurve.EASE_IN),
    ("Ease Out", ContrastCurve.EASE_OUT),
    ("Ease In-Out", ContrastCurve.EASE_IN_OUT),
]
CURVE_SHAPE_OPTIONS: List[tuple[str, CurveShape]] = [
    ("Linear", CurveShape.LINEAR),
    ("Quadratic", CurveShape.QUADRATIC),
    ("Cubic", CurveShape.CUBIC),
    ("Sine", CurveShape.SINE),
    ("Exponential", CurveShape.EXPONENTIAL),
]
EASING_DIRECTION_OPTIONS: List[tuple[str, EasingDirection]] = [
    ("Ease In", EasingDirection.EASE_IN),
    ("Ease Out", EasingDirection.EASE_OUT),
    ("Ease In-Out", EasingDirection.EASE_IN_OUT),
]
COLOR_SPACE_OPTIONS: List[tuple[str, ColorSpaceMode]] = [
    ("LCh", ColorSpaceMode.LCH),
    ("OKLCH", ColorSpaceMode.OKLCH),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("LCh", ExportFormat.LCH),
    ("JSON", ExportFormat.JSON),
]

CONTRAST_CURVE_LABEL_MAP: Dict[str, ContrastCurve] = {
    label: value for label, value in CONTRAST_CURVE_OPTIONS
}
CURVE_SHAPE_LABEL_MAP: Dict[str, CurveShape] = {
    label: value for label, value in CURVE_SHAPE_OPTIONS
}
EASING_DIRECTION_LABEL_MAP: Dict[str, EasingDirection] = {
    label: value for label, value in EASING_DIRECTION_OPTIONS
}


def palette_to_tokens(results: Sequence[PaletteResult]) -> Dict[str, Dict[str, str]]:
    """Nest hex values as ``{"color-<id prefix>": {step_id: hex}}``."""
    tokens: Dict[str, Dict[str, str]] = {}
    for row in results:
        tokens[f"color-{row.base_color_id[:4]}"] = {s.step_id: s.hex for s in row.steps}
    return tokens


def export_palette(results: Sequence[PaletteResult], fmt: ExportFormat | str) -> object:
    """Convert generated palettes to the desired format.

    ``hex`` and ``lch`` give one list per base color; ``json`` gives a JSON
    string of :func:`palette_to_tokens`.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return [[s.hex for s in row.steps] for row in results]
    if export_fmt == ExportFormat.LCH:
        return [[s.lch for s in row.steps] for row in results]
    if export_fmt == ExportFormat.JSON:
        return json.dumps(palette_to_tokens(results), indent=2)
    raise ValueError(f"Unsupported export format: {fmt}")
