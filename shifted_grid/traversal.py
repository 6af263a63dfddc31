"""Stepping along grid directions and measuring distances between cells."""

from __future__ import annotations

from .coords import NOT_COLINEAR, AxialCoordinate, GridDirection, NotColinear
from .errors import InvalidArgumentError
from .lines import EPSILON
from .projection import grid_to_cart


def x_component_adjustment(from_y: int, magnitude: int) -> int:
    """Column change for a diagonal move of ``magnitude`` rows.

    Even rows round the half-steps up and odd rows round them down, which
    keeps diagonal lines straight across the row shift.
    """
    if from_y % 2 == 0:
        return (magnitude + 1) // 2
    return magnitude // 2


def traverse(coord: AxialCoordinate, direction: GridDirection, magnitude: int) -> AxialCoordinate:
    """Move ``magnitude`` cells from ``coord`` along ``direction``."""
    if magnitude < 0:
        raise InvalidArgumentError("magnitude", f"must not be negative, got {magnitude!r}")

    x, y = coord.x, coord.y
    if direction is GridDirection.NX:
        return AxialCoordinate(x - magnitude, y)
    if direction is GridDirection.PX:
        return AxialCoordinate(x + magnitude, y)

    dx = x_component_adjustment(y, magnitude)
    if direction is GridDirection.NXNY:
        return AxialCoordinate(x - dx, y - magnitude)
    if direction is GridDirection.NXPY:
        return AxialCoordinate(x - dx, y + magnitude)
    if direction is GridDirection.PXNY:
        return AxialCoordinate(x + magnitude - dx, y - magnitude)
    if direction is GridDirection.PXPY:
        return AxialCoordinate(x + magnitude - dx, y + magnitude)
    raise InvalidArgumentError("direction", f"unknown grid direction {direction!r}")


def distance_between(a: AxialCoordinate, b: AxialCoordinate) -> int | NotColinear:
    """Number of steps between two colinear coordinates.

    Coordinates that do not share a row or one of the four diagonals yield
    :data:`NOT_COLINEAR`.  The grid never stacks cells directly above one
    another, so a vertical pair is never colinear.
    """
    if a.y == b.y:
        return abs(a.x - b.x)

    cart_a = grid_to_cart(a)
    cart_b = grid_to_cart(b)
    dx = cart_a.x - cart_b.x
    dy = cart_a.y - cart_b.y

    if abs(dx) < EPSILON:
        return NOT_COLINEAR
    if abs(2.0 - abs(dy / dx)) > EPSILON:
        return NOT_COLINEAR

    # every diagonal step crosses exactly one row
    return abs(a.y - b.y)


def unreliable_distance_between(a: AxialCoordinate, b: AxialCoordinate) -> int:
    """Like :func:`distance_between`, but reports ``0`` for non-colinear input.

    Only use this when the coordinates are known to be colinear: a logic
    error upstream turns into a silent zero here and will be hard to find.
    """
    distance = distance_between(a, b)
    if distance is NOT_COLINEAR:
        return 0
    return distance


def are_coords_colinear(a: AxialCoordinate, b: AxialCoordinate) -> bool:
    """Whether ``a`` and ``b`` share a row or one of the four diagonals."""
    return distance_between(a, b) is not NOT_COLINEAR


def is_coord_between(p: AxialCoordinate, a: AxialCoordinate, b: AxialCoordinate) -> bool:
    """Whether ``p`` lies in the axis-aligned rectangle spanned by ``a`` and ``b``."""
    return min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)


def _to_cube(coord: AxialCoordinate) -> tuple[int, int, int]:
    # odd rows are shoved right, i.e. an "odd-r" offset layout
    q = coord.x - (coord.y - (coord.y & 1)) // 2
    r = coord.y
    return q, -q - r, r


def hex_distance(a: AxialCoordinate, b: AxialCoordinate) -> int:
    """Fewest single steps between two cells, along any mix of directions."""
    ax, ay, az = _to_cube(a)
    bx, by, bz = _to_cube(b)
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))
