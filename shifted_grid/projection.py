"""Conversions between grid, cartesian and screen space.

Cartesian space is grid-up: one grid row is one cartesian unit and cartesian
``y`` equals grid ``y``.  Odd rows are shifted by half a unit along ``x``.
Screen space is cartesian space scaled by the grid's unit size and moved by
its offset; a negative ``stretch.y`` flips the grid for y-down screens.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache

from .coords import ORIGIN, AxialCoordinate, Point2D, Scale2D, Size2D
from .errors import InvalidArgumentError

# Row pitch of a hexagonal packing of unit circles.
Y_AXIS_COMPRESSION = math.sqrt(3.0) / 2.0

DEFAULT_STRETCH = Scale2D(1.0, Y_AXIS_COMPRESSION)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def grid_to_cart(coord: AxialCoordinate) -> Point2D:
    """Cartesian centre of ``coord``; odd rows sit half a unit to the right."""
    return Point2D(coord.x + 0.5 * (coord.y % 2), float(coord.y))


def cart_to_grid(point: Point2D) -> AxialCoordinate:
    """Return the grid cell nearest to a cartesian point.

    The row is resolved first; the column then accounts for the half-unit
    shift of odd rows.
    """
    row = _round_half_up(point.y)
    return AxialCoordinate(_round_half_up(point.x - 0.5 * (row % 2)), row)


@dataclass(frozen=True, slots=True)
class ShiftedGridConfig:
    """Immutable sizing of a shifted grid on screen.

    Build a new instance whenever radius, spacing, offset or stretch change;
    :func:`shifted_grid_config` memoises construction for callers that
    rebuild every frame.
    """

    item_radius: float
    item_spacing: float
    offset: Point2D = ORIGIN
    stretch: Scale2D = DEFAULT_STRETCH
    space_size: float = field(init=False, compare=False)
    unit_size: Size2D = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not self.item_radius > 0:
            raise InvalidArgumentError("item_radius", f"must be positive, got {self.item_radius!r}")
        if self.item_spacing < 0:
            raise InvalidArgumentError(
                "item_spacing", f"must not be negative, got {self.item_spacing!r}"
            )
        if self.stretch.x == 0 or self.stretch.y == 0:
            raise InvalidArgumentError("stretch", f"components must be non-zero, got {self.stretch}")

        space_size = 2.0 * self.item_radius + self.item_spacing
        object.__setattr__(self, "space_size", space_size)
        object.__setattr__(
            self,
            "unit_size",
            Size2D(self.stretch.x * space_size, self.stretch.y * space_size),
        )

    def coord_to_screen(self, coord: AxialCoordinate) -> Point2D:
        cart = grid_to_cart(coord)
        return Point2D(
            self.offset.x + self.unit_size.width * cart.x,
            self.offset.y + self.unit_size.height * cart.y,
        )

    def screen_to_cart(self, point: Point2D) -> Point2D:
        return (point - self.offset).normalize(self.unit_size)

    def screen_to_coord(self, point: Point2D) -> AxialCoordinate:
        return cart_to_grid(self.screen_to_cart(point))


@lru_cache(maxsize=64)
def shifted_grid_config(
    item_radius: float,
    item_spacing: float,
    offset: Point2D = ORIGIN,
    stretch: Scale2D = DEFAULT_STRETCH,
) -> ShiftedGridConfig:
    return ShiftedGridConfig(item_radius, item_spacing, offset, stretch)


def grid_coord_to_screen_point(coord: AxialCoordinate, config: ShiftedGridConfig) -> Point2D:
    """Screen position of the centre of ``coord`` under ``config``."""
    return config.coord_to_screen(coord)


def screen_point_to_grid_coord(point: Point2D, config: ShiftedGridConfig) -> AxialCoordinate:
    """Grid cell nearest to a screen position under ``config``."""
    return config.screen_to_coord(point)
