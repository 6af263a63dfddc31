"""Sector classification and grid rays used by the inverse spiral lookup."""

from __future__ import annotations

from dataclasses import dataclass

from .coords import (
    GRID_ORIGIN,
    AxialCoordinate,
    GridDirection,
    GridQuadrant,
    RingCorner,
    SlopeInterceptLine,
)
from .errors import InvalidArgumentError
from .projection import grid_to_cart
from .traversal import traverse

# Cartesian slope of a line along each direction (grid-up).
CARTESIAN_SLOPE: dict[GridDirection, float] = {
    GridDirection.NX: 0.0,
    GridDirection.PX: 0.0,
    GridDirection.NXNY: 2.0,
    GridDirection.NXPY: -2.0,
    GridDirection.PXNY: -2.0,
    GridDirection.PXPY: 2.0,
}

CORNER_FOR_QUADRANT: dict[GridQuadrant, RingCorner] = {
    quadrant: RingCorner(int(quadrant)) for quadrant in GridQuadrant
}

# Direction from a coordinate back along its ring edge towards the leading corner.
INTERSECTOR_DIRECTION_FOR_QUADRANT: dict[GridQuadrant, GridDirection] = {
    GridQuadrant.PXPY: GridDirection.PXNY,
    GridQuadrant.PY: GridDirection.PX,
    GridQuadrant.NXPY: GridDirection.PXPY,
    GridQuadrant.NXNY: GridDirection.NXPY,
    GridQuadrant.NY: GridDirection.NX,
    GridQuadrant.PXNY: GridDirection.NXNY,
}


def classify_quadrant(coord: AxialCoordinate) -> GridQuadrant:
    """Return the sector of ``coord``; every non-origin cell has exactly one.

    ``u`` is twice the cartesian x of the cell, i.e. ``ceil(2 * cart_x)``,
    which keeps all boundary tests in integers.
    """
    if coord == GRID_ORIGIN:
        raise InvalidArgumentError("coord", "the origin belongs to no quadrant")

    y = coord.y
    u = 2 * coord.x + (y % 2)

    if 0 <= y < u:
        return GridQuadrant.PXPY
    if y > 0 and u > -y:
        return GridQuadrant.PY
    if y > 0:
        return GridQuadrant.NXPY
    if u < y:
        return GridQuadrant.NXNY
    if u <= -y:
        return GridQuadrant.NY
    return GridQuadrant.PXNY


@dataclass(frozen=True, slots=True)
class GridRay:
    """Half-line of cells starting at ``start`` and stepping along ``direction``."""

    start: AxialCoordinate
    direction: GridDirection

    def contains(self, coord: AxialCoordinate) -> bool:
        return ray_contains(self, coord)

    def as_cart_line(self) -> SlopeInterceptLine:
        return ray_to_line(self)


def ray_contains(ray: GridRay, coord: AxialCoordinate) -> bool:
    """Whether ``coord`` is exactly one of the cells on ``ray``."""
    start, direction = ray.start, ray.direction

    if direction is GridDirection.NX:
        return coord.y == start.y and coord.x <= start.x
    if direction is GridDirection.PX:
        return coord.y == start.y and coord.x >= start.x

    if direction in (GridDirection.NXPY, GridDirection.PXPY):
        magnitude = coord.y - start.y
    else:
        magnitude = start.y - coord.y
    if magnitude < 0:
        return False
    return traverse(start, direction, magnitude) == coord


def ray_to_line(ray: GridRay) -> SlopeInterceptLine:
    slope = CARTESIAN_SLOPE[ray.direction]
    cart = grid_to_cart(ray.start)
    return SlopeInterceptLine(slope, cart.y - slope * cart.x)
