"""Validated preview settings and their per-user persistence.

Settings are stored as JSON in the per-user configuration directory given by
:func:`platformdirs.user_config_dir`, falling back to a relative ``config``
folder when that directory cannot be created.  Writes go to a temporary
file first and are then renamed over the target.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .coords import ORIGIN, Point2D, Scale2D
from .effects import EdgeFadeEffect, EffectStack, MagnificationEffect
from .errors import InvalidArgumentError
from .projection import Y_AXIS_COMPRESSION, ShiftedGridConfig, shifted_grid_config

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "preview.json"


class GridSettings(BaseModel):
    """Sizing of grid items on screen."""

    model_config = ConfigDict(extra="forbid")

    item_radius: float = Field(default=20.0, gt=0.0)
    item_spacing: float = Field(default=5.0, ge=0.0)
    stretch_x: float = 1.0
    stretch_y: float = Y_AXIS_COMPRESSION

    @field_validator("stretch_x", "stretch_y")
    @classmethod
    def _non_zero(cls, value: float) -> float:
        if value == 0:
            raise ValueError("stretch must be non-zero")
        return float(value)

    def build(self, offset: Point2D = ORIGIN) -> ShiftedGridConfig:
        return shifted_grid_config(
            self.item_radius,
            self.item_spacing,
            offset,
            Scale2D(self.stretch_x, self.stretch_y),
        )


class EffectSettings(BaseModel):
    """Parameters of the magnification and edge-fade fields."""

    model_config = ConfigDict(extra="forbid")

    effect_radius: float = Field(default=150.0, gt=0.0)
    max_scale: float = Field(default=1.0, ge=0.0)
    fade_start: float = Field(default=300.0, ge=0.0)
    fade_drop_off: float = Field(default=100.0, gt=0.0)
    magnify: bool = True
    fade: bool = True

    def build_stack(self, unit_size: float = 1.0) -> EffectStack:
        """Build the enabled effects with all distances divided by ``unit_size``."""
        if not unit_size > 0:
            raise InvalidArgumentError("unit_size", f"must be positive, got {unit_size!r}")
        stack = EffectStack()
        if self.magnify:
            stack.register(MagnificationEffect(self.effect_radius / unit_size, self.max_scale))
        if self.fade:
            stack.register(
                EdgeFadeEffect(self.fade_start / unit_size, self.fade_drop_off / unit_size)
            )
        return stack


class PreviewSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    grid: GridSettings = Field(default_factory=GridSettings)
    effects: EffectSettings = Field(default_factory=EffectSettings)


def cell_effect_stack(settings: PreviewSettings) -> EffectStack:
    """Effects of ``settings`` measured in grid cells instead of pixels."""
    return settings.effects.build_stack(settings.grid.build().space_size)


def default_settings_path() -> Path:
    """Resolve where settings live, creating the directory if needed."""
    try:
        base = Path(user_config_dir("shifted_grid"))
        base.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Cannot use user config directory (%s); falling back to ./config", exc)
        base = Path("config")
        base.mkdir(parents=True, exist_ok=True)
    return base / SETTINGS_FILENAME


def load_settings(path: Path | None = None) -> PreviewSettings:
    """Load settings from ``path``; missing or invalid files give defaults."""
    path = default_settings_path() if path is None else path
    if not path.exists():
        logger.debug("No settings at %s, using defaults", path)
        return PreviewSettings()
    try:
        return PreviewSettings.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return PreviewSettings()


def save_settings(settings: PreviewSettings, path: Path | None = None) -> Path:
    """Atomically write ``settings`` to ``path`` and return the path written."""
    path = default_settings_path() if path is None else path
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.dumps(settings.model_dump(), indent=2)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(data, encoding="utf-8")
    temp_path.replace(path)
    logger.debug("Saved settings to %s", path)
    return path
