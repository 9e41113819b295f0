from __future__ import annotations

"""Contrast-target solver.

Given a fixed hue/chroma pair, find the lightness whose color reaches a
target WCAG contrast ratio against a background; in opacity mode, find the
alpha instead. Unreachable targets are not errors: the nearest achievable
extreme is returned.

Strategy selection is a small table lookup (:class:`SolveStrategy`):

``ANALYTIC``
    Opaque CIE LCh. The luminance/contrast relation is inverted in closed
    form, then chroma is bisected down into gamut.
``BISECTION``
    OKLCH, or any translucent color. Lightness is binary-searched with the
    candidate composited over the background before measuring.
"""

import logging
from enum import Enum, auto
from typing import Callable, Dict, Optional

from common import settings

from .color_types import BLACK, WHITE, Color
from .engine import ColorEngine, ColorSpaceMode, DefaultColorEngine
from .gamut import bisect_chroma_to_gamut, shrink_chroma_to_gamut

logger = logging.getLogger(__name__)


OPAQUE_THRESHOLD = 0.999
# CIE L* above which a background counts as light.
LIGHT_BACKGROUND_L = 50.0

# CIE Y -> L* (piecewise cube root / linear).
_CIE_EPSILON = 0.008856
_CIE_KAPPA = 903.3


class SolveStrategy(Enum):
    ANALYTIC = auto()
    BISECTION = auto()


def select_strategy(color_space: ColorSpaceMode, alpha: float) -> SolveStrategy:
    if color_space is ColorSpaceMode.LCH and alpha >= OPAQUE_THRESHOLD:
        return SolveStrategy.ANALYTIC
    return SolveStrategy.BISECTION


def is_light_background(background: Color, engine: ColorEngine) -> bool:
    return engine.to_lch(background)[0] > LIGHT_BACKGROUND_L


def luminance_to_lightness(Y: float) -> float:
    """CIE L* (0..100) for relative luminance ``Y``."""
    if Y <= _CIE_EPSILON:
        return Y * _CIE_KAPPA
    return Y ** (1.0 / 3.0) * 116.0 - 16.0


def target_luminance(background_luminance: float, target_ratio: float, light: bool) -> float:
    """Luminance a foreground needs to sit ``target_ratio`` away from the background."""
    if light:
        return (background_luminance + 0.05) / target_ratio - 0.05
    return target_ratio * (background_luminance + 0.05) - 0.05


def _extreme_for(light: bool) -> Color:
    return BLACK if light else WHITE


def _solve_analytic(
    engine: ColorEngine,
    background: Color,
    target_ratio: float,
    hue: float,
    chroma: float,
    color_space: ColorSpaceMode,
    alpha: float,
) -> Color:
    light = is_light_background(background, engine)
    Y = target_luminance(engine.luminance(background), target_ratio, light)
    if Y <= 0.0 or Y > 1.0:
        logger.debug("contrast %.2f unreachable analytically (Y=%.4f)", target_ratio, Y)
        return _extreme_for(light).with_alpha(alpha)

    L = luminance_to_lightness(Y)
    color, _ = bisect_chroma_to_gamut(engine, ColorSpaceMode.LCH, L, chroma, hue, alpha)
    return color


def _measure(engine: ColorEngine, candidate: Color, background: Color, alpha: float) -> float:
    if alpha < 1.0:
        candidate = engine.composite_over(candidate, background, alpha)
    return engine.contrast(candidate, background)


def _solve_bisection(
    engine: ColorEngine,
    background: Color,
    target_ratio: float,
    hue: float,
    chroma: float,
    color_space: ColorSpaceMode,
    alpha: float,
) -> Color:
    light = is_light_background(background, engine)
    extreme = _extreme_for(light)
    if target_ratio > engine.contrast(extreme, background):
        logger.debug("contrast %.2f exceeds the solid extreme; clamping", target_ratio)
        return extreme.with_alpha(alpha)

    best = extreme.with_alpha(alpha)
    best_err = abs(_measure(engine, best, background, alpha) - target_ratio)

    low, high = 0.0, color_space.lightness_max
    for _ in range(settings.get().LIGHTNESS_BISECTION_ITERATIONS):
        mid = (low + high) / 2.0
        candidate, _ = shrink_chroma_to_gamut(engine, color_space, mid, chroma, hue, alpha)
        current = _measure(engine, candidate, background, alpha)

        err = abs(current - target_ratio)
        if err < best_err:
            best, best_err = candidate, err

        # Lower lightness raises contrast on a light background, lowers it on a dark one.
        if (current < target_ratio) == light:
            high = mid
        else:
            low = mid

    return best


_STRATEGIES: Dict[SolveStrategy, Callable[..., Color]] = {
    SolveStrategy.ANALYTIC: _solve_analytic,
    SolveStrategy.BISECTION: _solve_bisection,
}


def solve_for_contrast(
    background: Color,
    target_ratio: float,
    hue: float,
    chroma: float,
    color_space: ColorSpaceMode | str = ColorSpaceMode.LCH,
    alpha: float = 1.0,
    engine: Optional[ColorEngine] = None,
) -> Color:
    """Find the color of fixed ``hue``/``chroma`` at ``target_ratio`` against ``background``.

    Parameters
    ----------
    background:
        Opaque reference background (usually white or black).
    target_ratio:
        Desired WCAG contrast ratio, >= 1.
    hue, chroma:
        Held fixed in ``color_space`` (chroma may be reduced to fit sRGB).
    color_space:
        ``lch`` (CIE LCh, D65) or ``oklch``.
    alpha:
        Opacity of the produced color. Translucent colors are measured after
        compositing over ``background``.
    engine:
        ColorEngine for colorimetry. If None, DefaultColorEngine is used.

    Returns
    -------
    Color
        In-gamut (or near-neutral) color carrying ``alpha`` on the bisection
        path. Unreachable targets yield black on a light background and white
        on a dark one.
    """
    if engine is None:
        engine = DefaultColorEngine()
    color_space = ColorSpaceMode.from_value(color_space)
    strategy = select_strategy(color_space, alpha)
    logger.debug(
        "solve contrast=%.2f h=%.1f c=%.3f space=%s alpha=%.3f via %s",
        target_ratio,
        hue,
        chroma,
        color_space.value,
        alpha,
        strategy.name,
    )
    return _STRATEGIES[strategy](
        engine, background, target_ratio, hue, chroma, color_space, alpha
    )


def solve_alpha_for_contrast(
    base: Color,
    target_ratio: float,
    background: Color = WHITE,
    engine: Optional[ColorEngine] = None,
) -> float:
    """Alpha at which ``base`` over ``background`` reaches ``target_ratio``.

    Luminance is blended linearly: ``Y = Y_base * a + Y_bg * (1 - a)``.
    Transparency only moves the result toward the background, so a base that
    is already below the target when solid gets ``1.0``.
    """
    if engine is None:
        engine = DefaultColorEngine()
    solid = base.opaque()
    if engine.contrast(solid, background) < target_ratio:
        logger.debug("solid contrast below %.2f; keeping base opaque", target_ratio)
        return 1.0

    Y_bg = engine.luminance(background)
    Y_base = engine.luminance(solid)
    if Y_base == Y_bg:
        return 1.0
    Y = target_luminance(Y_bg, target_ratio, Y_bg > Y_base)
    alpha = (Y - Y_bg) / (Y_base - Y_bg)
    return max(0.0, min(1.0, alpha))
