from __future__ import annotations

"""Easing curves for channel modulation and contrast distribution.

Two curve families live here:

* Channel curves (:class:`CurveShape` x :class:`EasingDirection`) shape how
  OKLCH chroma and hue shift evolve across the scale.
* Contrast curves (:class:`ContrastCurve`) spread target contrast ratios
  over the scale steps between a minimum and a maximum.

Everything in this module is pure and total on ``t`` in [0, 1].
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List

import numpy as np


class _ValueEnum(Enum):
    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown {cls.__name__}: {value}")


class CurveShape(_ValueEnum):
    """Base shapes for channel curves (unit domain and range)."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    SINE = "sine"
    EXPONENTIAL = "exponential"


class EasingDirection(_ValueEnum):
    """How a base shape is applied over [0, 1]."""

    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"


class ContrastCurve(_ValueEnum):
    """One-dimensional curves used to distribute contrast targets."""

    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"


@dataclass(frozen=True)
class ValueRange:
    """Closed interval ``[min, max]``. ``min > max`` yields a descending map."""

    min: float
    max: float

    def lerp(self, y: float) -> float:
        return self.min + (self.max - self.min) * y


ContrastRange = ValueRange


@dataclass(frozen=True)
class ChannelCurve:
    """Eased mapping from step position to a channel value."""

    range: ValueRange
    shape: CurveShape = CurveShape.LINEAR
    direction: EasingDirection = EasingDirection.EASE_IN


@dataclass(frozen=True)
class ChannelCurveSettings:
    """Chroma and hue-shift curves applied in OKLCH mode."""

    chroma: ChannelCurve
    hue: ChannelCurve


def _exponential(t: float) -> float:
    # The literal formula gives 2**-10 at t=0; curve previews expect exactly 0.
    if t == 0:
        return 0.0
    return 2.0 ** (10.0 * (t - 1.0))


_SHAPE_FUNCS: Dict[CurveShape, Callable[[float], float]] = {
    CurveShape.LINEAR: lambda t: t,
    CurveShape.QUADRATIC: lambda t: t * t,
    CurveShape.CUBIC: lambda t: t * t * t,
    CurveShape.SINE: lambda t: 1.0 - math.cos((t * math.pi) / 2.0),
    CurveShape.EXPONENTIAL: _exponential,
}

_CONTRAST_FUNCS: Dict[ContrastCurve, Callable[[float], float]] = {
    ContrastCurve.LINEAR: lambda t: t,
    ContrastCurve.EASE_IN: lambda t: t * t,
    ContrastCurve.EASE_OUT: lambda t: 1.0 - (1.0 - t) ** 2,
    ContrastCurve.EASE_IN_OUT: lambda t: (
        2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0
    ),
}


def ease(shape: CurveShape | str, direction: EasingDirection | str, t: float) -> float:
    """Evaluate ``shape`` eased in ``direction`` at position ``t``."""
    f = _SHAPE_FUNCS[CurveShape.from_value(shape)]
    direction = EasingDirection.from_value(direction)
    if direction is EasingDirection.EASE_IN:
        return f(t)
    if direction is EasingDirection.EASE_OUT:
        return 1.0 - f(1.0 - t)
    if t < 0.5:
        return f(t * 2.0) / 2.0
    return 1.0 - f((1.0 - t) * 2.0) / 2.0


def interpolate_channel(t: float, curve: ChannelCurve) -> float:
    """Map normalized step position ``t`` to a channel value through ``curve``."""
    return curve.range.lerp(ease(curve.shape, curve.direction, t))


def step_position(index: int, step_count: int) -> float:
    """Normalized position of step ``index`` in a scale of ``step_count``."""
    return index / (step_count - 1) if step_count > 1 else 0.0


def _round2(x: float) -> float:
    # Half-up, so 2.345 -> 2.35 regardless of banker's rounding.
    return math.floor(x * 100.0 + 0.5) / 100.0


def distribute_contrasts(
    step_count: int,
    contrast_range: ValueRange,
    curve: ContrastCurve | str = ContrastCurve.LINEAR,
) -> List[float]:
    """Spread target contrasts over ``step_count`` steps.

    Values run from ``contrast_range.min`` (first step) to
    ``contrast_range.max`` (last step), rounded to 2 decimals. A single step
    gets ``min``; zero steps give an empty list.
    """
    if step_count < 0:
        raise ValueError("step_count must be non-negative.")
    f = _CONTRAST_FUNCS[ContrastCurve.from_value(curve)]
    return [
        _round2(contrast_range.lerp(f(step_position(i, step_count))))
        for i in range(step_count)
    ]


def channel_curve_points(curve: ChannelCurve, point_count: int = 20) -> np.ndarray:
    """Sample the unit eased curve for previews.

    Returns an array of shape ``(point_count + 1, 2)`` holding ``(x, y)``
    with ``x`` evenly spaced over [0, 1]. The range is not applied.
    """
    xs = np.linspace(0.0, 1.0, point_count + 1)
    ys = np.array([ease(curve.shape, curve.direction, float(x)) for x in xs])
    return np.column_stack([xs, ys])


def contrast_curve_points(curve: ContrastCurve | str, point_count: int = 20) -> np.ndarray:
    """Sample a contrast curve on [0, 1] for previews, shape ``(point_count + 1, 2)``."""
    f = _CONTRAST_FUNCS[ContrastCurve.from_value(curve)]
    xs = np.linspace(0.0, 1.0, point_count + 1)
    ys = np.array([f(float(x)) for x in xs])
    return np.column_stack([xs, ys])
