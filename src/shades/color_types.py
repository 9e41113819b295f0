from __future__ import annotations

"""Core color value used by the shades library.

This module defines a small immutable sRGB(+alpha) value. Coordinates are
kept unclipped so that gamut checks can still see a color that was built
from LCh/OKLCH outside the displayable range; clipping only happens when the
color is rendered to hex.
"""

from dataclasses import dataclass, replace
from typing import Tuple


SRGB = Tuple[float, float, float]
LCH = Tuple[float, float, float]


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


@dataclass(frozen=True)
class Color:
    """sRGB color with straight (non-premultiplied) alpha.

    Attributes
    ----------
    srgb:
        Tuple of (r, g, b). Nominally in [0, 1]; values outside that range
        mark an out-of-gamut color.
    alpha:
        Opacity in [0, 1].
    """

    srgb: SRGB
    alpha: float = 1.0

    def __post_init__(self) -> None:
        if not (0.0 <= self.alpha <= 1.0):
            raise ValueError("alpha must be in [0, 1].")

    @property
    def hex(self) -> str:
        """Clipped hex representation, ``#rrggbb`` or ``#rrggbbaa``."""
        r, g, b = (int(round(_clamp01(v) * 255)) for v in self.srgb)
        out = f"#{r:02x}{g:02x}{b:02x}"
        if self.alpha < 1.0:
            out += f"{int(round(self.alpha * 255)):02x}"
        return out

    @property
    def is_translucent(self) -> bool:
        return self.alpha < 1.0

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=_clamp01(alpha))

    def opaque(self) -> "Color":
        return replace(self, alpha=1.0)

    def quantized(self) -> "Color":
        """Return the color as it will actually be rendered (8-bit hex)."""
        return Color.from_hex(self.hex)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from ``#rrggbb`` / ``#rrggbbaa`` (``#`` optional)."""
        s = hex_str.strip()
        if s.startswith("#"):
            s = s[1:]
        if len(s) not in (6, 8):
            raise ValueError("HEX string must be 6 or 8 hex digits.")
        try:
            values = [int(s[i : i + 2], 16) for i in range(0, len(s), 2)]
        except ValueError as exc:
            raise ValueError("HEX string must contain only hex digits.") from exc
        r, g, b = (v / 255.0 for v in values[:3])
        alpha = values[3] / 255.0 if len(values) == 4 else 1.0
        return cls(srgb=(r, g, b), alpha=alpha)


WHITE = Color(srgb=(1.0, 1.0, 1.0))
BLACK = Color(srgb=(0.0, 0.0, 0.0))
