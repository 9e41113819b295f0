from __future__ import annotations

"""Default scale, contrast range and channel curves.

Built-in values can be overridden by the ``shades`` section of
``configs/default.yaml`` / ``config.yaml`` (see :func:`load_defaults`).
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple

from util.utils import load_section

from .curves import (
    ChannelCurve,
    ChannelCurveSettings,
    ContrastCurve,
    CurveShape,
    EasingDirection,
    ValueRange,
)
from .engine import ColorSpaceMode
from .palette import ScaleStep

logger = logging.getLogger(__name__)


_DEFAULT_TARGETS: Tuple[Tuple[str, float], ...] = (
    ("160", 1.08),
    ("150", 1.24),
    ("140", 1.48),
    ("130", 1.76),
    ("120", 2.12),
    ("110", 2.56),
    ("100", 3.08),
    ("90", 3.80),
    ("80", 4.72),
    ("70", 5.72),
    ("60", 6.92),
    ("50", 8.36),
    ("40", 10.16),
    ("30", 12.08),
    ("20", 14.44),
    ("10", 16.44),
)

DEFAULT_SCALES: Tuple[ScaleStep, ...] = tuple(
    ScaleStep(id=name, name=name, target_contrast=target) for name, target in _DEFAULT_TARGETS
)

DEFAULT_CONTRAST_RANGE = ValueRange(min=1.1, max=15.0)
DEFAULT_CONTRAST_CURVE = ContrastCurve.LINEAR

# Session defaults for OKLCH mode.
DEFAULT_CHANNEL_SETTINGS = ChannelCurveSettings(
    chroma=ChannelCurve(
        range=ValueRange(min=0.01, max=0.2),
        shape=CurveShape.EXPONENTIAL,
        direction=EasingDirection.EASE_OUT,
    ),
    hue=ChannelCurve(
        range=ValueRange(min=0.0, max=0.0),
        shape=CurveShape.LINEAR,
        direction=EasingDirection.EASE_IN_OUT,
    ),
)

# Used by generate_palette when the caller passes no settings.
FALLBACK_CHANNEL_SETTINGS = ChannelCurveSettings(
    chroma=ChannelCurve(
        range=ValueRange(min=0.05, max=0.15),
        shape=CurveShape.LINEAR,
        direction=EasingDirection.EASE_OUT,
    ),
    hue=ChannelCurve(
        range=ValueRange(min=0.0, max=0.0),
        shape=CurveShape.LINEAR,
        direction=EasingDirection.EASE_IN_OUT,
    ),
)


@dataclass(frozen=True)
class PaletteDefaults:
    """Resolved defaults for a new session."""

    scale_steps: Tuple[ScaleStep, ...] = DEFAULT_SCALES
    contrast_range: ValueRange = DEFAULT_CONTRAST_RANGE
    curve_type: ContrastCurve = DEFAULT_CONTRAST_CURVE
    color_space: ColorSpaceMode = ColorSpaceMode.LCH
    channel_settings: ChannelCurveSettings = DEFAULT_CHANNEL_SETTINGS


def _parse_steps(raw: Any) -> List[ScaleStep]:
    steps: List[ScaleStep] = []
    for item in raw:
        step_id = str(item["id"])
        target = item.get("target_contrast")
        steps.append(
            ScaleStep(
                id=step_id,
                name=str(item.get("name", step_id)),
                target_contrast=None if target is None else float(target),
            )
        )
    return steps


def defaults_from_mapping(section: Mapping[str, Any]) -> PaletteDefaults:
    """Build :class:`PaletteDefaults` from a config mapping.

    Missing keys keep the built-in value; malformed ones raise ``ValueError``
    (or ``KeyError`` / ``TypeError`` for broken step entries).
    """
    base = PaletteDefaults()
    scale_steps = base.scale_steps
    if section.get("scale_steps"):
        scale_steps = tuple(_parse_steps(section["scale_steps"]))

    contrast_range = base.contrast_range
    raw_range = section.get("contrast_range")
    if isinstance(raw_range, Mapping):
        contrast_range = ValueRange(
            min=float(raw_range.get("min", contrast_range.min)),
            max=float(raw_range.get("max", contrast_range.max)),
        )

    curve_type = base.curve_type
    if section.get("curve_type") is not None:
        curve_type = ContrastCurve.from_value(section["curve_type"])

    color_space = base.color_space
    if section.get("color_space") is not None:
        color_space = ColorSpaceMode.from_value(section["color_space"])

    return PaletteDefaults(
        scale_steps=scale_steps,
        contrast_range=contrast_range,
        curve_type=curve_type,
        color_space=color_space,
    )


def load_defaults() -> PaletteDefaults:
    """Resolve defaults from the project configuration (fail-soft)."""
    section = load_section("shades")
    if not section:
        return PaletteDefaults()
    try:
        return defaults_from_mapping(section)
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("ignoring invalid 'shades' config: %s", exc)
        return PaletteDefaults()
