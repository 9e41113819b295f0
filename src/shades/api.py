from __future__ import annotations

"""High-level public API for generating shade palettes.

This module provides :func:`generate_palette`, which walks every
(base color x scale step) pair, derives the step's hue/chroma and target,
calls the contrast solver and re-measures the produced color, and
:func:`find_closest_step`, which flags the shade nearest the base color.
"""

from typing import List, Optional, Sequence

from .color_types import BLACK, LCH, WHITE, Color
from .curves import ChannelCurveSettings, interpolate_channel, step_position
from .defaults import FALLBACK_CHANNEL_SETTINGS
from .engine import ColorEngine, ColorSpaceMode, DefaultColorEngine
from .gamut import to_gamut_safe
from .palette import BaseColor, PaletteResult, PaletteStepResult, ScaleStep
from .solver import solve_alpha_for_contrast, solve_for_contrast


def generate_palette(
    base_colors: Sequence[BaseColor],
    steps: Sequence[ScaleStep],
    color_space: ColorSpaceMode | str = ColorSpaceMode.LCH,
    channel_settings: Optional[ChannelCurveSettings] = None,
    engine: Optional[ColorEngine] = None,
) -> List[PaletteResult]:
    """Generate one :class:`PaletteResult` per base color.

    Parameters
    ----------
    base_colors:
        Base colors in display order.
    steps:
        Scale steps, light to dark. Steps with a ``target_contrast`` are
        solved against white; the others use a default spread.
    color_space:
        ``lch`` keeps each base color's CIE LCh chroma/hue. ``oklch`` takes
        chroma from ``channel_settings.chroma`` and offsets the base hue by
        ``channel_settings.hue``.
    channel_settings:
        OKLCH channel curves. If None, a gentle linear chroma ramp is used.
    engine:
        Optional ColorEngine. If None, DefaultColorEngine is used.

    Returns
    -------
    list of PaletteResult
        Fresh results; inputs are never mutated.
    """
    if engine is None:
        engine = DefaultColorEngine()
    color_space = ColorSpaceMode.from_value(color_space)
    if channel_settings is None:
        channel_settings = FALLBACK_CHANNEL_SETTINGS

    results: List[PaletteResult] = []
    for base in base_colors:
        step_results = [
            _generate_step(engine, base, step, step_position(i, len(steps)), color_space, channel_settings)
            for i, step in enumerate(steps)
        ]
        results.append(
            PaletteResult(
                base_color_id=base.id,
                steps=step_results,
                closest_step_id=find_closest_step(engine.to_lch(base.color), step_results, engine),
            )
        )
    return results


def _generate_step(
    engine: ColorEngine,
    base: BaseColor,
    step: ScaleStep,
    t: float,
    color_space: ColorSpaceMode,
    channel_settings: ChannelCurveSettings,
) -> PaletteStepResult:
    if color_space is ColorSpaceMode.OKLCH:
        _, _, h_base = engine.to_oklch(base.color)
        chroma = interpolate_channel(t, channel_settings.chroma)
        hue = (h_base + interpolate_channel(t, channel_settings.hue)) % 360.0
    else:
        _, chroma, hue = engine.to_lch(base.color)

    target = step.target_contrast
    if base.use_opacity:
        if target:
            alpha = solve_alpha_for_contrast(base.color, target, WHITE, engine)
        else:
            alpha = 0.1 + t * 0.9
        color = base.color.with_alpha(alpha)
    elif target:
        color = solve_for_contrast(WHITE, target, hue, chroma, color_space, base.color.alpha, engine)
    else:
        color = _default_spread(engine, t, hue, chroma, color_space, base.color.alpha)

    return measure_step(engine, step.id, color)


def _default_spread(
    engine: ColorEngine,
    t: float,
    hue: float,
    chroma: float,
    color_space: ColorSpaceMode,
    alpha: float,
) -> Color:
    # Near-white to near-black; no contrast guarantee.
    L = (0.95 - t * 0.85) * color_space.lightness_max
    return to_gamut_safe(engine, color_space, L, chroma, hue, alpha)


def measure_step(engine: ColorEngine, step_id: str, color: Color) -> PaletteStepResult:
    """Build a step result from what will actually be rendered.

    The color is quantized to 8-bit first; a translucent color is composited
    over each background before its contrast against it is measured.
    """
    rendered = color.quantized()
    if rendered.is_translucent:
        over_white = engine.composite_over(rendered, WHITE, rendered.alpha)
        over_black = engine.composite_over(rendered, BLACK, rendered.alpha)
    else:
        over_white = over_black = rendered
    return PaletteStepResult(
        step_id=step_id,
        color=rendered,
        lch=engine.to_lch(rendered),
        contrast_white=engine.contrast(over_white, WHITE),
        contrast_black=engine.contrast(over_black, BLACK),
    )


def find_closest_step(
    original_lch: LCH,
    steps: Sequence[PaletteStepResult],
    engine: Optional[ColorEngine] = None,
) -> Optional[str]:
    """Return the id of the step perceptually nearest ``original_lch``.

    Distance is the engine's perceptual metric (CIEDE2000 by default) between
    colors rebuilt from the LCh triples. Ties keep the earliest step; an empty
    sequence gives None.
    """
    if engine is None:
        engine = DefaultColorEngine()
    original = engine.from_lch(*original_lch)
    best_id: Optional[str] = None
    best_dist = float("inf")
    for step in steps:
        dist = engine.perceptual_distance(original, engine.from_lch(*step.lch))
        if dist < best_dist:
            best_dist = dist
            best_id = step.step_id
    return best_id
