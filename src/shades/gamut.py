from __future__ import annotations

"""sRGB gamut handling for LCh/OKLCH colors.

Two strategies are provided, both holding lightness and hue fixed:

* :func:`shrink_chroma_to_gamut` multiplies chroma by a constant factor until
  the color is representable (used by the lightness bisection).
* :func:`bisect_chroma_to_gamut` binary-searches the largest representable
  chroma below the requested one (used by the analytic LCh path).
"""

from typing import Optional, Tuple

from common import settings

from .color_types import Color
from .engine import ColorEngine, ColorSpaceMode


# Below this chroma a color is treated as neutral and no longer reduced.
MIN_CHROMA = 0.001
REDUCTION_FACTOR = 0.9


def build_color(
    engine: ColorEngine,
    mode: ColorSpaceMode,
    L: float,
    C: float,
    h: float,
    alpha: float = 1.0,
) -> Color:
    """Construct a (possibly out-of-gamut) color from cylindrical coordinates."""
    if mode is ColorSpaceMode.OKLCH:
        return engine.from_oklch(L, C, h, alpha)
    return engine.from_lch(L, C, h, alpha)


def shrink_chroma_to_gamut(
    engine: ColorEngine,
    mode: ColorSpaceMode,
    L: float,
    C: float,
    h: float,
    alpha: float = 1.0,
    reduction_factor: float = REDUCTION_FACTOR,
    max_iter: Optional[int] = None,
) -> Tuple[Color, float]:
    """Reduce C by ``reduction_factor`` until in gamut or negligible.

    Returns ``(color, C_adj)``. The loop is bounded; if it runs out the last
    candidate is returned as is.
    """
    if max_iter is None:
        max_iter = settings.get().CHROMA_REDUCTION_MAX_ITER
    C_curr = max(0.0, C)
    color = build_color(engine, mode, L, C_curr, h, alpha)
    for _ in range(max_iter):
        if C_curr <= MIN_CHROMA or engine.is_in_gamut(color):
            break
        C_curr *= reduction_factor
        color = build_color(engine, mode, L, C_curr, h, alpha)
    return color, C_curr


def bisect_chroma_to_gamut(
    engine: ColorEngine,
    mode: ColorSpaceMode,
    L: float,
    C: float,
    h: float,
    alpha: float = 1.0,
    iterations: Optional[int] = None,
) -> Tuple[Color, float]:
    """Binary-search the largest in-gamut chroma in ``[0, C]``.

    Returns ``(color, C_adj)``; ``C_adj`` is 0 when no probed midpoint fits.
    """
    if iterations is None:
        iterations = settings.get().CHROMA_BISECTION_ITERATIONS
    color = build_color(engine, mode, L, C, h, alpha)
    if engine.is_in_gamut(color):
        return color, C

    low, high = 0.0, max(0.0, C)
    best_C = 0.0
    for _ in range(iterations):
        mid = (low + high) / 2.0
        if engine.is_in_gamut(build_color(engine, mode, L, mid, h, alpha)):
            best_C = mid
            low = mid
        else:
            high = mid
    return build_color(engine, mode, L, best_C, h, alpha), best_C


def to_gamut_safe(
    engine: ColorEngine,
    mode: ColorSpaceMode,
    L: float,
    C: float,
    h: float,
    alpha: float = 1.0,
) -> Color:
    """Gamut-map by chroma reduction, then clip whatever is left over."""
    color, _ = shrink_chroma_to_gamut(engine, mode, L, C, h, alpha)
    r, g, b = (_clip01(v) for v in color.srgb)
    return Color(srgb=(r, g, b), alpha=color.alpha)


def _clip01(x: float) -> float:
    return max(0.0, min(1.0, x))
