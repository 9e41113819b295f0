from __future__ import annotations

"""shades.api（generate_palette / find_closest_step）のテスト。"""

import pytest

from shades import (
    BLACK,
    WHITE,
    BaseColor,
    ChannelCurve,
    ChannelCurveSettings,
    Color,
    PaletteStepResult,
    ScaleStep,
    ValueRange,
    find_closest_step,
    generate_palette,
)
from shades.defaults import DEFAULT_SCALES


def _base(hex_value: str, *, base_id: str = "b1", use_opacity: bool = False) -> BaseColor:
    return BaseColor(id=base_id, color=Color.from_hex(hex_value), use_opacity=use_opacity)


def _const_settings(chroma: float, hue_shift: float = 0.0) -> ChannelCurveSettings:
    return ChannelCurveSettings(
        chroma=ChannelCurve(range=ValueRange(chroma, chroma)),
        hue=ChannelCurve(range=ValueRange(hue_shift, hue_shift)),
    )


def test_empty_inputs() -> None:
    assert generate_palette([], DEFAULT_SCALES) == []
    (result,) = generate_palette([_base("#ff0000")], [])
    assert result.base_color_id == "b1"
    assert result.steps == []
    assert result.closest_step_id is None


def test_grid_shape_and_order() -> None:
    bases = [_base("#ff0000", base_id="r"), _base("#1a73e8", base_id="b")]
    results = generate_palette(bases, DEFAULT_SCALES)
    assert [r.base_color_id for r in results] == ["r", "b"]
    for r in results:
        assert [s.step_id for s in r.steps] == [s.id for s in DEFAULT_SCALES]
        assert r.closest_step_id in {s.id for s in DEFAULT_SCALES}


def test_targets_are_met_after_quantization(engine) -> None:
    steps = [ScaleStep(id="aa", name="AA", target_contrast=4.5)]
    (result,) = generate_palette([_base("#ff0000")], steps, "lch", engine=engine)
    (step,) = result.steps
    assert step.contrast_white == pytest.approx(4.5, abs=0.05)
    assert engine.is_in_gamut(step.color)


def test_metrics_are_remeasured_from_output(engine) -> None:
    (result,) = generate_palette([_base("#2e7d32")], DEFAULT_SCALES, engine=engine)
    for step in result.steps:
        assert step.color == Color.from_hex(step.hex)
        assert step.contrast_white == pytest.approx(engine.contrast(step.color, WHITE))
        assert step.contrast_black == pytest.approx(engine.contrast(step.color, BLACK))
        assert step.lch == pytest.approx(engine.to_lch(step.color))


def test_generate_is_idempotent() -> None:
    bases = [_base("#ff0000"), _base("#00000080", base_id="t"), _base("#444444", base_id="o", use_opacity=True)]
    steps = list(DEFAULT_SCALES[:6]) + [ScaleStep(id="free", name="free")]
    first = generate_palette(bases, steps, "oklch")
    second = generate_palette(bases, steps, "oklch")
    assert first == second


def test_default_spread_without_targets(engine) -> None:
    steps = [ScaleStep(id=str(i), name=str(i)) for i in range(3)]
    (result,) = generate_palette([_base("#808080")], steps, "lch", engine=engine)
    lightness = [s.lch[0] for s in result.steps]
    assert lightness[0] == pytest.approx(95.0, abs=0.5)
    assert lightness[1] == pytest.approx(52.5, abs=0.5)
    assert lightness[2] == pytest.approx(10.0, abs=0.5)


def test_single_step_uses_start_of_spread(engine) -> None:
    (result,) = generate_palette([_base("#808080")], [ScaleStep(id="x", name="x")], engine=engine)
    assert result.steps[0].lch[0] == pytest.approx(95.0, abs=0.5)


def test_oklch_mode_replaces_chroma_and_shifts_hue(engine) -> None:
    base = _base("#3366cc")
    _, _, h_base = engine.to_oklch(base.color)
    steps = [ScaleStep(id="aa", name="AA", target_contrast=4.5)]

    (shifted,) = generate_palette([base], steps, "oklch", _const_settings(0.1, 30.0), engine)
    _, C, h = engine.to_oklch(shifted.steps[0].color)
    assert C == pytest.approx(0.1, abs=0.01)
    dh = (h - (h_base + 30.0) + 180.0) % 360.0 - 180.0
    assert abs(dh) < 3.0

    (muted,) = generate_palette([base], steps, "oklch", _const_settings(0.03), engine)
    assert engine.to_oklch(muted.steps[0].color)[1] == pytest.approx(0.03, abs=0.01)
    assert muted.steps[0].contrast_white == pytest.approx(4.5, abs=0.05)


def test_lch_mode_ignores_channel_settings(engine) -> None:
    steps = [ScaleStep(id="aa", name="AA", target_contrast=4.5)]
    a = generate_palette([_base("#ff0000")], steps, "lch", _const_settings(0.01))
    b = generate_palette([_base("#ff0000")], steps, "lch", _const_settings(0.3, 90.0))
    assert a == b


def test_opacity_mode(engine) -> None:
    steps = [
        ScaleStep(id="aa", name="AA", target_contrast=4.5),
        ScaleStep(id="free", name="free"),
    ]
    (result,) = generate_palette([_base("#000000", use_opacity=True)], steps, engine=engine)
    solved, spread = result.steps
    assert solved.color.alpha == pytest.approx(1.0 - (1.05 / 4.5 - 0.05), abs=0.005)
    assert spread.color.alpha == 1.0
    # Translucent shades are measured over the background they sit on.
    over_white = engine.composite_over(solved.color, WHITE, solved.color.alpha)
    assert solved.contrast_white == pytest.approx(engine.contrast(over_white, WHITE))


def test_opacity_mode_keeps_light_base_solid(engine) -> None:
    steps = [ScaleStep(id="aa", name="AA", target_contrast=4.5)]
    (result,) = generate_palette([_base("#b3b3b3", use_opacity=True)], steps, engine=engine)
    assert result.steps[0].color.alpha == 1.0
    assert result.steps[0].hex == "#b3b3b3"


def test_translucent_base_is_solved_by_bisection(engine) -> None:
    steps = [ScaleStep(id="t", name="t", target_contrast=3.0)]
    (result,) = generate_palette([_base("#99666680")], steps, "lch", engine=engine)
    step = result.steps[0]
    assert step.color.alpha == pytest.approx(128 / 255)
    assert step.contrast_white == pytest.approx(3.0, abs=0.1)


def _step(step_id: str, lch) -> PaletteStepResult:
    return PaletteStepResult(
        step_id=step_id, color=BLACK, lch=lch, contrast_white=21.0, contrast_black=1.0
    )


def test_find_closest_step(engine) -> None:
    steps = [
        _step("light", (90.0, 10.0, 30.0)),
        _step("near", (52.0, 38.0, 31.0)),
        _step("dark", (20.0, 30.0, 30.0)),
    ]
    assert find_closest_step((50.0, 40.0, 30.0), steps, engine) == "near"
    assert find_closest_step((50.0, 40.0, 30.0), [], engine) is None


def test_find_closest_step_prefers_first_on_tie(engine) -> None:
    steps = [_step("a", (50.0, 0.0, 0.0)), _step("b", (50.0, 0.0, 0.0))]
    assert find_closest_step((40.0, 0.0, 0.0), steps, engine) == "a"
