"""Public entrypoint for the shades palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``shades`` instead of individual
submodules.
"""

from .color_types import BLACK, WHITE, Color
from .curves import (
    ChannelCurve,
    ChannelCurveSettings,
    ContrastCurve,
    ContrastRange,
    CurveShape,
    EasingDirection,
    ValueRange,
    distribute_contrasts,
    ease,
    interpolate_channel,
)
from .engine import ColorEngine, ColorSpaceMode, DefaultColorEngine
from .palette import BaseColor, PaletteResult, PaletteStepResult, ScaleStep
from .solver import SolveStrategy, solve_alpha_for_contrast, solve_for_contrast
from .api import find_closest_step, generate_palette
from .session import PaletteSession
from .ui_helpers import (
    COLOR_SPACE_OPTIONS,
    CONTRAST_CURVE_OPTIONS,
    CURVE_SHAPE_OPTIONS,
    EASING_DIRECTION_OPTIONS,
    EXPORT_FORMAT_OPTIONS,
    ExportFormat,
    export_palette,
)

__all__ = [
    "Color",
    "WHITE",
    "BLACK",
    "ColorEngine",
    "DefaultColorEngine",
    "ColorSpaceMode",
    "ValueRange",
    "ContrastRange",
    "ChannelCurve",
    "ChannelCurveSettings",
    "CurveShape",
    "EasingDirection",
    "ContrastCurve",
    "ease",
    "interpolate_channel",
    "distribute_contrasts",
    "BaseColor",
    "ScaleStep",
    "PaletteStepResult",
    "PaletteResult",
    "SolveStrategy",
    "solve_for_contrast",
    "solve_alpha_for_contrast",
    "generate_palette",
    "find_closest_step",
    "PaletteSession",
    "ExportFormat",
    "export_palette",
    "CONTRAST_CURVE_OPTIONS",
    "CURVE_SHAPE_OPTIONS",
    "EASING_DIRECTION_OPTIONS",
    "COLOR_SPACE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
