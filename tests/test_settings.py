from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from shifted_grid import EdgeFadeEffect, InvalidArgumentError, MagnificationEffect
from shifted_grid import settings as settings_module
from shifted_grid.settings import (
    SETTINGS_FILENAME,
    EffectSettings,
    GridSettings,
    PreviewSettings,
    cell_effect_stack,
    default_settings_path,
    load_settings,
    save_settings,
)


def test_defaults_build_a_grid_and_effect_stack():
    settings = PreviewSettings()
    grid = settings.grid.build()
    assert grid.space_size == pytest.approx(45.0)
    assert len(settings.effects.build_stack()) == 2


def test_disabled_effects_are_not_stacked():
    effects = EffectSettings(magnify=False)
    assert len(effects.build_stack()) == 1
    assert len(EffectSettings(magnify=False, fade=False).build_stack()) == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"item_radius": 0.0},
        {"item_spacing": -1.0},
        {"stretch_x": 0.0},
        {"unknown": 1},
    ],
)
def test_invalid_grid_settings_are_rejected(kwargs):
    with pytest.raises(ValidationError):
        GridSettings(**kwargs)


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "missing.json") == PreviewSettings()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "nested" / SETTINGS_FILENAME
    settings = PreviewSettings(
        grid=GridSettings(item_radius=12.0, item_spacing=2.0),
        effects=EffectSettings(effect_radius=80.0, fade=False),
    )

    written = save_settings(settings, path)

    assert written == path
    assert not path.with_suffix(".json.tmp").exists()
    assert load_settings(path) == settings


def test_corrupt_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / SETTINGS_FILENAME
    path.write_text('{"grid": {"item_radius": -3}}', encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="shifted_grid.settings"):
        loaded = load_settings(path)

    assert loaded == PreviewSettings()
    assert "Ignoring unreadable settings file" in caplog.text


def test_default_path_uses_user_config_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings_module, "user_config_dir", lambda name: str(tmp_path / name))

    path = default_settings_path()

    assert path == tmp_path / "shifted_grid" / SETTINGS_FILENAME
    assert path.parent.is_dir()


def test_default_path_falls_back_to_local_config(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setattr(settings_module, "user_config_dir", lambda name: str(blocker / name))
    monkeypatch.chdir(tmp_path)

    path = default_settings_path()

    assert str(path) == str(settings_module.Path("config") / SETTINGS_FILENAME)
    assert (tmp_path / "config").is_dir()


def test_effect_stack_is_scaled_into_units():
    stack = EffectSettings().build_stack(50.0)

    magnify, fade = stack.effects
    assert isinstance(magnify, MagnificationEffect)
    assert magnify.effect_radius == pytest.approx(3.0)
    assert magnify.max_scale == pytest.approx(1.0)
    assert isinstance(fade, EdgeFadeEffect)
    assert fade.start_fade_out_distance == pytest.approx(6.0)
    assert fade.fade_drop_off_distance == pytest.approx(2.0)


def test_effect_stack_rejects_non_positive_unit():
    with pytest.raises(InvalidArgumentError):
        EffectSettings().build_stack(0.0)


def test_cell_effect_stack_uses_grid_space_size():
    settings = PreviewSettings(grid=GridSettings(item_radius=10.0, item_spacing=10.0))
    (magnify, fade) = cell_effect_stack(settings).effects
    assert magnify.effect_radius == pytest.approx(5.0)
    assert fade.start_fade_out_distance == pytest.approx(10.0)

    disabled = PreviewSettings(effects=EffectSettings(fade=False, magnify=False))
    assert len(cell_effect_stack(disabled)) == 0
