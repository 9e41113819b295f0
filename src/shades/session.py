from __future__ import annotations

"""Editable palette session.

:class:`PaletteSession` owns the user inputs (base colors, scale steps,
mode and curve settings) and keeps :attr:`PaletteSession.palette` in sync by
calling :func:`shades.api.generate_palette` after every relevant mutation.
The palette functions themselves stay stateless; this class is the only
place that holds state.
"""

import logging
import uuid
from typing import Dict, List, Optional, Sequence, Tuple

from common import settings

from .api import generate_palette
from .color_types import Color
from .curves import ChannelCurve, ChannelCurveSettings, ContrastCurve, ValueRange, distribute_contrasts
from .defaults import PaletteDefaults, load_defaults
from .engine import ColorEngine, ColorSpaceMode, DefaultColorEngine
from .palette import BaseColor, PaletteResult, ScaleStep

logger = logging.getLogger(__name__)

_UNSET = object()


def _generate_id() -> str:
    return uuid.uuid4().hex[:7]


class PaletteSession:
    """In-memory editing state with an always-current generated palette."""

    def __init__(
        self,
        defaults: Optional[PaletteDefaults] = None,
        engine: Optional[ColorEngine] = None,
    ) -> None:
        if defaults is None:
            defaults = load_defaults()
        self._defaults = defaults
        self._engine = engine if engine is not None else DefaultColorEngine()

        self._base_colors: List[BaseColor] = []
        self._scale_steps: List[ScaleStep] = list(defaults.scale_steps)
        self._color_space = defaults.color_space
        self._curve_type = defaults.curve_type
        self._contrast_range = defaults.contrast_range
        self._channel_settings = defaults.channel_settings
        self._palette: List[PaletteResult] = []

    # --- read-only views ---
    @property
    def base_colors(self) -> Tuple[BaseColor, ...]:
        return tuple(self._base_colors)

    @property
    def scale_steps(self) -> Tuple[ScaleStep, ...]:
        return tuple(self._scale_steps)

    @property
    def palette(self) -> Tuple[PaletteResult, ...]:
        return tuple(self._palette)

    @property
    def color_space(self) -> ColorSpaceMode:
        return self._color_space

    @property
    def curve_type(self) -> ContrastCurve:
        return self._curve_type

    @property
    def contrast_range(self) -> ValueRange:
        return self._contrast_range

    @property
    def channel_settings(self) -> ChannelCurveSettings:
        return self._channel_settings

    def regenerate(self) -> None:
        """Recompute the whole palette from the current inputs."""
        self._palette = generate_palette(
            self._base_colors,
            self._scale_steps,
            self._color_space,
            self._channel_settings,
            self._engine,
        )

    # --- base colors ---
    def add_base_color(self, hex_value: str, name: str = "New Color") -> BaseColor:
        base = BaseColor(id=_generate_id(), color=Color.from_hex(hex_value), name=name)
        self._base_colors.append(base)
        self.regenerate()
        return base

    def remove_base_color(self, base_id: str) -> None:
        self._base_colors.pop(self._base_index(base_id))
        self.regenerate()

    def update_base_color(self, base_id: str, hex_value: str) -> None:
        idx = self._base_index(base_id)
        base = self._base_colors[idx]
        if base.locked:
            logger.warning("base color %s is locked; update ignored", base_id)
            return
        self._base_colors[idx] = base.evolve(color=Color.from_hex(hex_value))
        self.regenerate()

    def rename_base_color(self, base_id: str, name: str) -> None:
        idx = self._base_index(base_id)
        self._base_colors[idx] = self._base_colors[idx].evolve(name=name)

    def toggle_base_opacity(self, base_id: str) -> None:
        idx = self._base_index(base_id)
        base = self._base_colors[idx]
        self._base_colors[idx] = base.evolve(use_opacity=not base.use_opacity)
        self.regenerate()

    def toggle_base_lock(self, base_id: str) -> None:
        idx = self._base_index(base_id)
        base = self._base_colors[idx]
        self._base_colors[idx] = base.evolve(locked=not base.locked)

    def set_base_colors(self, colors: Sequence[BaseColor]) -> None:
        self._base_colors = list(colors)
        self.regenerate()

    # --- scale steps ---
    def add_scale_step(self) -> Optional[ScaleStep]:
        """Append an untargeted step; returns None when the scale is full."""
        if len(self._scale_steps) >= settings.get().MAX_SCALE_STEPS:
            logger.warning("scale already has %d steps", len(self._scale_steps))
            return None
        step = ScaleStep(id=_generate_id(), name="New", target_contrast=None)
        self._scale_steps.append(step)
        self.regenerate()
        return step

    def remove_scale_step(self, step_id: str) -> None:
        idx = self._step_index(step_id)
        if len(self._scale_steps) <= 1:
            logger.warning("refusing to remove the last scale step")
            return
        self._scale_steps.pop(idx)
        self.regenerate()

    def update_scale_step(
        self,
        step_id: str,
        *,
        name: Optional[str] = None,
        target_contrast: object = _UNSET,
    ) -> None:
        """Rename a step and/or change its target (``None`` clears it)."""
        idx = self._step_index(step_id)
        changes: Dict[str, object] = {}
        if name is not None:
            changes["name"] = name
        if target_contrast is not _UNSET:
            changes["target_contrast"] = target_contrast
        self._scale_steps[idx] = self._scale_steps[idx].evolve(**changes)
        self.regenerate()

    def move_scale_step(self, step_id: str, new_index: int) -> None:
        step = self._scale_steps.pop(self._step_index(step_id))
        new_index = max(0, min(len(self._scale_steps), new_index))
        self._scale_steps.insert(new_index, step)
        self.regenerate()

    def reset_scales(self) -> None:
        self._scale_steps = list(self._defaults.scale_steps)
        self.regenerate()

    def set_scale_steps(self, steps: Sequence[ScaleStep]) -> None:
        self._scale_steps = list(steps)
        self.regenerate()

    # --- mode and curves ---
    def set_color_space(self, mode: ColorSpaceMode | str) -> None:
        self._color_space = ColorSpaceMode.from_value(mode)
        self.regenerate()

    def set_curve_type(self, curve: ContrastCurve | str) -> None:
        """Select the contrast curve; takes effect on :meth:`apply_contrast_curve`."""
        self._curve_type = ContrastCurve.from_value(curve)

    def set_contrast_range(self, contrast_range: ValueRange) -> None:
        """Set the contrast bounds; takes effect on :meth:`apply_contrast_curve`."""
        self._contrast_range = contrast_range

    def apply_contrast_curve(self) -> None:
        """Overwrite every step's target with the distributed contrasts."""
        contrasts = distribute_contrasts(
            len(self._scale_steps), self._contrast_range, self._curve_type
        )
        self._scale_steps = [
            step.evolve(target_contrast=value)
            for step, value in zip(self._scale_steps, contrasts)
        ]
        self.regenerate()

    def set_chroma_curve(self, curve: ChannelCurve) -> None:
        self._channel_settings = ChannelCurveSettings(chroma=curve, hue=self._channel_settings.hue)
        self.regenerate()

    def set_hue_curve(self, curve: ChannelCurve) -> None:
        self._channel_settings = ChannelCurveSettings(chroma=self._channel_settings.chroma, hue=curve)
        self.regenerate()

    # --- lookup ---
    def _base_index(self, base_id: str) -> int:
        for i, base in enumerate(self._base_colors):
            if base.id == base_id:
                return i
        raise KeyError(f"unknown base color: {base_id}")

    def _step_index(self, step_id: str) -> int:
        for i, step in enumerate(self._scale_steps):
            if step.id == step_id:
                return i
        raise KeyError(f"unknown scale step: {step_id}")
