from __future__ import annotations

"""Input and result containers for shade palettes.

Inputs (:class:`BaseColor`, :class:`ScaleStep`) are user-owned; results
(:class:`PaletteStepResult`, :class:`PaletteResult`) are derived, disposable
values regenerated wholesale on every input change.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .color_types import LCH, Color


@dataclass(frozen=True)
class BaseColor:
    """User-chosen source color of one palette column.

    Attributes
    ----------
    id:
        Stable identifier for the object's lifetime.
    color:
        Source color. Its alpha, if any, is carried into solved shades.
    use_opacity:
        Generate shades by varying alpha instead of lightness.
    """

    id: str
    color: Color
    name: str = "New Color"
    locked: bool = False
    use_opacity: bool = False

    def evolve(self, **changes) -> "BaseColor":
        return replace(self, **changes)


@dataclass(frozen=True)
class ScaleStep:
    """One rung of the scale, shared by every base color.

    ``target_contrast`` is the ratio against white; ``None`` means the step
    falls back to the default lightness (or alpha) spread.
    """

    id: str
    name: str
    target_contrast: Optional[float] = None

    def evolve(self, **changes) -> "ScaleStep":
        return replace(self, **changes)


@dataclass(frozen=True)
class PaletteStepResult:
    """Generated shade, re-measured from the color actually produced."""

    step_id: str
    color: Color
    lch: LCH
    contrast_white: float
    contrast_black: float

    @property
    def hex(self) -> str:
        return self.color.hex


@dataclass(frozen=True)
class PaletteResult:
    """All shades generated for one base color, in scale order."""

    base_color_id: str
    steps: List[PaletteStepResult] = field(default_factory=list)
    closest_step_id: Optional[str] = None
