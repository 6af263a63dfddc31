"""Pointer-reactive style fields for items laid out on the grid.

An effect maps an item position, a focus position (usually the pointer) and
an optional centre position to a :class:`Transform`.  Several effects are
combined by :class:`EffectStack`, which composes their transforms instead of
letting later effects overwrite earlier ones: translations add up, scales and
opacities multiply.

Both fields are 1-D curves applied per axis.  The magnification field uses
the smaller of the two axis scales, so its zone of effect is cross shaped
rather than circular.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from .coords import ORIGIN, Point2D
from .errors import InvalidArgumentError
from .lines import cartesian_distance

FloatArray = npt.NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class Transform:
    """Render transform of a single item."""

    translate: Point2D = ORIGIN
    scale: float = 1.0
    opacity: float = 1.0

    def compose(self, other: Transform) -> Transform:
        return Transform(
            translate=self.translate + other.translate,
            scale=self.scale * other.scale,
            opacity=self.opacity * other.opacity,
        )

    def __matmul__(self, other: Transform) -> Transform:
        return self.compose(other)

    def to_css(self) -> dict[str, str | float]:
        """Return CSS-like style properties for this transform."""
        x, y, s = self.translate.x, self.translate.y, self.scale
        return {
            "transform": f"translate({x}px, {y}px) scale({s}, {s})",
            "opacity": self.opacity,
        }


IDENTITY = Transform()


def _as_positions(items: npt.ArrayLike) -> FloatArray:
    positions = np.asarray(items, dtype=np.float64)
    # an empty frame is valid and has no shape to check
    if positions.size == 0:
        return positions.reshape(0, 2)
    if positions.ndim != 2 or positions.shape[1] != 2:
        raise InvalidArgumentError("items", f"expected an (n, 2) array, got shape {positions.shape}")
    return positions


class ItemStyleEffect(ABC):
    """A pure function of item, focus and centre positions."""

    @abstractmethod
    def get_style(
        self,
        item_position: Point2D,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> Transform:
        """Return this effect's contribution to the item's transform."""

    def get_styles(
        self,
        items: npt.ArrayLike,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> tuple[FloatArray, FloatArray, FloatArray]:
        """Evaluate a whole frame at once.

        Returns ``(translations, scales, opacities)`` with shapes ``(n, 2)``,
        ``(n,)`` and ``(n,)``.  Subclasses override this with vectorised math.
        """
        positions = _as_positions(items)
        styles = [
            self.get_style(Point2D(float(x), float(y)), focus_position, center_position)
            for x, y in positions
        ]
        translations = np.array(
            [(t.translate.x, t.translate.y) for t in styles], dtype=np.float64
        ).reshape(-1, 2)
        scales = np.array([t.scale for t in styles], dtype=np.float64)
        opacities = np.array([t.opacity for t in styles], dtype=np.float64)
        return translations, scales, opacities


class MagnificationEffect(ItemStyleEffect):
    """Magnify and push apart items near the focus point.

    Along one axis the scale is ``1 + (s/2)(cos(pi/r * (t - p)) + 1)`` inside
    the effect radius and ``1`` outside.  The displacement is the
    antiderivative of that curve, continued linearly outside the radius so
    that value and slope match at ``t = p +/- r``.  The translation of the
    returned transform is the displaced item position.
    """

    __slots__ = (
        "effect_radius",
        "max_scale",
        "_half_scale",
        "_a",
        "_b",
        "_c",
        "_r1a",
        "_bsincr",
    )

    def __init__(self, effect_radius: float, max_scale: float) -> None:
        if not effect_radius > 0:
            raise InvalidArgumentError(
                "effect_radius", f"must be positive, got {effect_radius!r}"
            )
        if not max_scale >= 0:
            raise InvalidArgumentError("max_scale", f"must not be negative, got {max_scale!r}")

        r = float(effect_radius)
        s = float(max_scale)
        self.effect_radius = r
        self.max_scale = s

        self._half_scale = 0.5 * s
        self._a = (2.0 + s) / 2.0
        self._b = (r * s) / (2.0 * math.pi)
        self._c = math.pi / r
        self._r1a = r * (1.0 - self._a)
        self._bsincr = self._b * math.sin(self._c * r)

    def axis_scale(self, t: float, p: float) -> float:
        d = t - p
        if abs(d) < self.effect_radius:
            return 1.0 + self._half_scale * (math.cos(self._c * d) + 1.0)
        return 1.0

    def axis_displacement(self, t: float, p: float) -> float:
        d = t - p
        if d < -self.effect_radius:
            return t + self._r1a - self._bsincr
        if d > self.effect_radius:
            return t - self._r1a + self._bsincr
        return self._a * d + self._b * math.sin(self._c * d) + p

    def scale_at(self, item_position: Point2D, focus_position: Point2D) -> float:
        return min(
            self.axis_scale(item_position.x, focus_position.x),
            self.axis_scale(item_position.y, focus_position.y),
        )

    def displacement_at(self, item_position: Point2D, focus_position: Point2D) -> Point2D:
        return Point2D(
            self.axis_displacement(item_position.x, focus_position.x),
            self.axis_displacement(item_position.y, focus_position.y),
        )

    def get_style(
        self,
        item_position: Point2D,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> Transform:
        if focus_position is None:
            return Transform(translate=item_position)
        return Transform(
            translate=self.displacement_at(item_position, focus_position),
            scale=self.scale_at(item_position, focus_position),
        )

    def _axis_scales(self, t: FloatArray, p: float) -> FloatArray:
        d = t - p
        inner = 1.0 + self._half_scale * (np.cos(self._c * d) + 1.0)
        return np.where(np.abs(d) < self.effect_radius, inner, 1.0)

    def _axis_displacements(self, t: FloatArray, p: float) -> FloatArray:
        d = t - p
        inner = self._a * d + self._b * np.sin(self._c * d) + p
        below = t + self._r1a - self._bsincr
        above = t - self._r1a + self._bsincr
        return np.where(
            d < -self.effect_radius, below, np.where(d > self.effect_radius, above, inner)
        )

    def get_styles(
        self,
        items: npt.ArrayLike,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> tuple[FloatArray, FloatArray, FloatArray]:
        positions = _as_positions(items)
        count = positions.shape[0]
        if focus_position is None:
            return positions.copy(), np.ones(count), np.ones(count)

        xs, ys = positions[:, 0], positions[:, 1]
        translations = np.column_stack(
            (
                self._axis_displacements(xs, focus_position.x),
                self._axis_displacements(ys, focus_position.y),
            )
        )
        scales = np.minimum(
            self._axis_scales(xs, focus_position.x),
            self._axis_scales(ys, focus_position.y),
        )
        return translations, scales, np.ones(count)


class EdgeFadeEffect(ItemStyleEffect):
    """Fade items out linearly with their distance from the centre position.

    Opacity is ``1`` up to ``start_fade_out_distance`` and then drops to ``0``
    over ``fade_drop_off_distance``.
    """

    __slots__ = ("start_fade_out_distance", "fade_drop_off_distance")

    def __init__(self, start_fade_out_distance: float, fade_drop_off_distance: float) -> None:
        if not start_fade_out_distance >= 0:
            raise InvalidArgumentError(
                "start_fade_out_distance",
                f"must not be negative, got {start_fade_out_distance!r}",
            )
        if not fade_drop_off_distance > 0:
            raise InvalidArgumentError(
                "fade_drop_off_distance", f"must be positive, got {fade_drop_off_distance!r}"
            )
        self.start_fade_out_distance = float(start_fade_out_distance)
        self.fade_drop_off_distance = float(fade_drop_off_distance)

    def opacity_at(self, distance: float) -> float:
        if distance <= self.start_fade_out_distance:
            return 1.0
        return max(
            0.0,
            1.0 + (self.start_fade_out_distance - distance) / self.fade_drop_off_distance,
        )

    def get_style(
        self,
        item_position: Point2D,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> Transform:
        center = ORIGIN if center_position is None else center_position
        return Transform(opacity=self.opacity_at(cartesian_distance(item_position, center)))

    def get_styles(
        self,
        items: npt.ArrayLike,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> tuple[FloatArray, FloatArray, FloatArray]:
        positions = _as_positions(items)
        count = positions.shape[0]
        center = ORIGIN if center_position is None else center_position
        distances = np.hypot(positions[:, 0] - center.x, positions[:, 1] - center.y)
        faded = np.maximum(
            0.0,
            1.0 + (self.start_fade_out_distance - distances) / self.fade_drop_off_distance,
        )
        opacities = np.where(distances <= self.start_fade_out_distance, 1.0, faded)
        return np.zeros((count, 2)), np.ones(count), opacities


class EffectStack:
    """Ordered effects whose transforms are composed per item."""

    def __init__(self, effects: Iterable[ItemStyleEffect] = ()) -> None:
        self._effects: list[ItemStyleEffect] = list(effects)

    @property
    def effects(self) -> Sequence[ItemStyleEffect]:
        return tuple(self._effects)

    def register(self, effect: ItemStyleEffect) -> None:
        self._effects.append(effect)

    def __len__(self) -> int:
        return len(self._effects)

    def apply(
        self,
        item_position: Point2D,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> Transform:
        result = IDENTITY
        for effect in self._effects:
            result = result @ effect.get_style(item_position, focus_position, center_position)
        return result

    def apply_many(
        self,
        items: npt.ArrayLike,
        focus_position: Point2D | None = None,
        center_position: Point2D | None = None,
    ) -> tuple[FloatArray, FloatArray, FloatArray]:
        positions = _as_positions(items)
        count = positions.shape[0]
        translations = np.zeros((count, 2))
        scales = np.ones(count)
        opacities = np.ones(count)
        for effect in self._effects:
            t, s, o = effect.get_styles(positions, focus_position, center_position)
            translations = translations + t
            scales = scales * s
            opacities = opacities * o
        return translations, scales, opacities


def create_magnification_effect(effect_radius: float, max_scale: float) -> MagnificationEffect:
    return MagnificationEffect(effect_radius, max_scale)


def create_edge_fade_effect(
    start_fade_out_distance: float, fade_drop_off_distance: float
) -> EdgeFadeEffect:
    return EdgeFadeEffect(start_fade_out_distance, fade_drop_off_distance)
