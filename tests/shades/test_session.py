from __future__ import annotations

"""PaletteSession（編集状態 + 再生成）のテスト。"""

import pytest

from shades import (
    ChannelCurve,
    ColorSpaceMode,
    ContrastCurve,
    CurveShape,
    PaletteSession,
    ScaleStep,
    ValueRange,
)


@pytest.fixture()
def session(builtin_defaults) -> PaletteSession:
    return PaletteSession(defaults=builtin_defaults)


def _targets(session: PaletteSession):
    return [s.target_contrast for s in session.scale_steps]


def test_add_and_remove_base_color(session) -> None:
    assert session.palette == ()
    base = session.add_base_color("#1a73e8")
    assert base.name == "New Color"
    assert not base.use_opacity and not base.locked
    assert len(session.palette) == 1
    assert session.palette[0].base_color_id == base.id
    assert len(session.palette[0].steps) == 16

    other = session.add_base_color("#ff0000")
    assert base.id != other.id
    assert [r.base_color_id for r in session.palette] == [base.id, other.id]

    session.remove_base_color(base.id)
    assert [r.base_color_id for r in session.palette] == [other.id]


def test_update_respects_lock(session) -> None:
    base = session.add_base_color("#1a73e8")
    session.update_base_color(base.id, "#ff0000")
    assert session.base_colors[0].color.hex == "#ff0000"
    before = session.palette

    session.toggle_base_lock(base.id)
    session.update_base_color(base.id, "#00ff00")
    assert session.base_colors[0].color.hex == "#ff0000"
    assert session.palette == before

    session.rename_base_color(base.id, "Brand")
    assert session.base_colors[0].name == "Brand"


def test_toggle_opacity_regenerates(session) -> None:
    base = session.add_base_color("#000000")
    assert all(s.color.alpha == 1.0 for s in session.palette[0].steps)
    session.toggle_base_opacity(base.id)
    assert session.base_colors[0].use_opacity
    assert any(s.color.alpha < 1.0 for s in session.palette[0].steps)


def test_unknown_ids_raise(session) -> None:
    with pytest.raises(KeyError):
        session.remove_base_color("missing")
    with pytest.raises(KeyError):
        session.update_scale_step("missing", name="x")


def test_add_scale_step_is_capped(session) -> None:
    session.add_base_color("#1a73e8")
    added = [session.add_scale_step() for _ in range(4)]
    assert all(step is not None for step in added)
    assert len(session.scale_steps) == 20
    assert added[0].target_contrast is None
    assert session.add_scale_step() is None
    assert len(session.palette[0].steps) == 20


def test_cap_follows_settings(monkeypatch, session) -> None:
    from common import settings

    monkeypatch.setenv("SHADES_MAX_SCALE_STEPS", "16")
    settings.reload_from_env()
    assert session.add_scale_step() is None


def test_last_step_cannot_be_removed(session) -> None:
    session.set_scale_steps([ScaleStep(id="only", name="only", target_contrast=4.5)])
    session.remove_scale_step("only")
    assert [s.id for s in session.scale_steps] == ["only"]


def test_update_and_clear_target(session) -> None:
    session.update_scale_step("100", target_contrast=4.5, name="AA")
    step = session.scale_steps[6]
    assert (step.id, step.name, step.target_contrast) == ("100", "AA", 4.5)
    session.update_scale_step("100", target_contrast=None)
    assert session.scale_steps[6].target_contrast is None
    assert session.scale_steps[6].name == "AA"


def test_move_and_reset_steps(session) -> None:
    session.move_scale_step("10", 0)
    assert session.scale_steps[0].id == "10"
    session.move_scale_step("10", 99)
    assert session.scale_steps[-1].id == "10"
    session.move_scale_step("160", 3)
    assert session.scale_steps[3].id == "160"
    session.reset_scales()
    assert [s.id for s in session.scale_steps][:2] == ["160", "150"]


def test_contrast_curve_applies_only_on_request(session) -> None:
    session.set_scale_steps([ScaleStep(id=str(i), name=str(i)) for i in range(5)])
    session.set_contrast_range(ValueRange(1.0, 9.0))
    session.set_curve_type("linear")
    assert _targets(session) == [None] * 5

    session.apply_contrast_curve()
    assert _targets(session) == [1.0, 3.0, 5.0, 7.0, 9.0]

    session.set_curve_type(ContrastCurve.EASE_IN)
    assert session.curve_type is ContrastCurve.EASE_IN
    session.apply_contrast_curve()
    assert _targets(session) == [1.0, 1.5, 3.0, 5.5, 9.0]


def test_color_space_and_channel_curves(session) -> None:
    session.add_base_color("#1a73e8")
    lch_palette = session.palette

    session.set_color_space("oklch")
    assert session.color_space is ColorSpaceMode.OKLCH
    oklch_palette = session.palette
    assert oklch_palette != lch_palette

    session.set_chroma_curve(ChannelCurve(range=ValueRange(0.02, 0.02), shape=CurveShape.SINE))
    assert session.channel_settings.chroma.range == ValueRange(0.02, 0.02)
    assert session.palette != oklch_palette

    session.set_hue_curve(ChannelCurve(range=ValueRange(0.0, 60.0)))
    assert session.channel_settings.hue.range.max == 60.0
    assert session.channel_settings.chroma.shape is CurveShape.SINE

    with pytest.raises(ValueError):
        session.set_color_space("hsl")
