from __future__ import annotations

"""Colorimetry engine used by the solver and the orchestrator.

This module defines the :class:`ColorEngine` protocol, the narrow set of
colorimetry primitives the palette code depends on, and a default
implementation backed by ``coloraide``.
"""

import math
from enum import Enum
from typing import Protocol

from coloraide import Color as _CAColor

from .color_types import LCH, Color


class ColorSpaceMode(Enum):
    """Cylindrical space in which hue/chroma are held and lightness is solved."""

    LCH = "lch"
    OKLCH = "oklch"

    @classmethod
    def from_value(cls, value: "ColorSpaceMode | str") -> "ColorSpaceMode":
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(f"Unknown color space: {value}")

    @property
    def lightness_max(self) -> float:
        """Upper bound of the lightness axis (LCh: 100, OKLCH: 1)."""
        return 100.0 if self is ColorSpaceMode.LCH else 1.0


# coloraide space names; CIE LCh is taken relative to D65 white.
_SPACE_NAMES = {
    ColorSpaceMode.LCH: "lch-d65",
    ColorSpaceMode.OKLCH: "oklch",
}


class ColorEngine(Protocol):
    """Protocol abstracting the colorimetry primitives."""

    def to_lch(self, color: Color) -> LCH: ...

    def to_oklch(self, color: Color) -> LCH: ...

    def from_lch(self, L: float, C: float, h: float, alpha: float = 1.0) -> Color: ...

    def from_oklch(self, L: float, C: float, h: float, alpha: float = 1.0) -> Color: ...

    def luminance(self, color: Color) -> float: ...

    def contrast(self, a: Color, b: Color) -> float: ...

    def perceptual_distance(self, a: Color, b: Color) -> float: ...

    def is_in_gamut(self, color: Color) -> bool: ...

    def composite_over(self, fg: Color, bg: Color, alpha: float) -> Color: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation delegating to coloraide (sRGB, D65)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360); undefined hues map to 0."""
        if math.isnan(h):
            return 0.0
        return (h % 360.0 + 360.0) % 360.0

    def to_lch(self, color: Color) -> LCH:
        return self._to_cylindrical(color, ColorSpaceMode.LCH)

    def to_oklch(self, color: Color) -> LCH:
        return self._to_cylindrical(color, ColorSpaceMode.OKLCH)

    def from_lch(self, L: float, C: float, h: float, alpha: float = 1.0) -> Color:
        return self._from_cylindrical(ColorSpaceMode.LCH, L, C, h, alpha)

    def from_oklch(self, L: float, C: float, h: float, alpha: float = 1.0) -> Color:
        return self._from_cylindrical(ColorSpaceMode.OKLCH, L, C, h, alpha)

    def luminance(self, color: Color) -> float:
        """WCAG relative luminance (CIE Y, D65) of the color, alpha ignored."""
        return float(_to_coloraide(color.opaque()).luminance())

    def contrast(self, a: Color, b: Color) -> float:
        """WCAG 2.1 contrast ratio, alpha ignored."""
        return float(
            _to_coloraide(a.opaque()).contrast(_to_coloraide(b.opaque()), method="wcag21")
        )

    def perceptual_distance(self, a: Color, b: Color) -> float:
        """CIEDE2000 color difference."""
        return float(_to_coloraide(a).delta_e(_to_coloraide(b), method="2000"))

    def is_in_gamut(self, color: Color) -> bool:
        return bool(_to_coloraide(color).in_gamut("srgb"))

    def composite_over(self, fg: Color, bg: Color, alpha: float) -> Color:
        """Blend ``fg`` over ``bg`` at ``alpha`` in gamma-encoded sRGB."""
        alpha = max(0.0, min(1.0, alpha))
        mixed = (
            _to_coloraide(bg.opaque())
            .mix(_to_coloraide(fg.opaque()), alpha, space="srgb")
            .convert("srgb")
        )
        r, g, b = (float(v) for v in mixed.coords()[:3])
        return Color(srgb=(r, g, b))

    def _to_cylindrical(self, color: Color, mode: ColorSpaceMode) -> LCH:
        L, C, h = (float(v) for v in _to_coloraide(color).convert(_SPACE_NAMES[mode]).coords()[:3])
        if math.isnan(C):
            C = 0.0
        return (L, C, self.normalize_hue(h))

    def _from_cylindrical(
        self, mode: ColorSpaceMode, L: float, C: float, h: float, alpha: float
    ) -> Color:
        L = max(0.0, min(mode.lightness_max, L))
        C = max(0.0, C)
        src = _CAColor(_SPACE_NAMES[mode], [L, C, self.normalize_hue(h)], alpha)
        r, g, b = (float(v) for v in src.convert("srgb").coords()[:3])
        return Color(srgb=(r, g, b), alpha=max(0.0, min(1.0, alpha)))


def _to_coloraide(color: Color) -> _CAColor:
    r, g, b = color.srgb
    return _CAColor("srgb", [r, g, b], color.alpha)
