"""Closed-form properties of the hexagonal spiral laid over the grid.

Indices spiral outwards from the origin one ring at a time.  Ring ``n``
starts on its corner 0 at ``(n, 0)``, walks counter-clockwise past corners
1 through 5 and then climbs back towards corner 0 of ring ``n + 1``, so it
holds ``6n + 1`` indices for ``n > 0``.
"""

from __future__ import annotations

import math
import operator

from .coords import GRID_ORIGIN, AxialCoordinate, GridDirection, RingCorner
from .errors import InvalidArgumentError, InvalidIndexError
from .projection import grid_to_cart
from .traversal import traverse

# Direction to travel from the origin to reach each corner of a ring.
CORNER_DIRECTION: dict[RingCorner, GridDirection] = {
    RingCorner.FIRST: GridDirection.PX,
    RingCorner.SECOND: GridDirection.PXPY,
    RingCorner.THIRD: GridDirection.NXPY,
    RingCorner.FOURTH: GridDirection.NX,
    RingCorner.FIFTH: GridDirection.NXNY,
    # plus one step along +x, see CORNER_RAY_ORIGIN
    RingCorner.SIXTH: GridDirection.PXNY,
}

# Direction of the ring edge that leaves each corner.
EDGE_DIRECTION: dict[RingCorner, GridDirection] = {
    RingCorner.FIRST: GridDirection.NXPY,
    RingCorner.SECOND: GridDirection.NX,
    RingCorner.THIRD: GridDirection.NXNY,
    RingCorner.FOURTH: GridDirection.PXNY,
    RingCorner.FIFTH: GridDirection.PX,
    RingCorner.SIXTH: GridDirection.PXPY,  # towards corner 0 of the next ring
}

# Start of the ray through all corners of one kind.
CORNER_RAY_ORIGIN: dict[RingCorner, AxialCoordinate] = {
    corner: GRID_ORIGIN for corner in RingCorner
}
CORNER_RAY_ORIGIN[RingCorner.SIXTH] = AxialCoordinate(1, 0)


def _check_ring(ring: int) -> None:
    if ring < 0:
        raise InvalidArgumentError("ring", f"must not be negative, got {ring!r}")


def sum_of_nodes_including(ring: int) -> int:
    """Count of all indices in rings ``0..ring``."""
    _check_ring(ring)
    return (ring + 1) * (3 * ring + 1)


def first_index_in_ring(ring: int) -> int:
    _check_ring(ring)
    return ring * (3 * ring - 2)


def ring_size(ring: int) -> int:
    _check_ring(ring)
    return 1 if ring == 0 else 6 * ring + 1


def ring_index(index: int) -> int:
    """Ring holding spiral ``index``; the inverse of :func:`first_index_in_ring`."""
    try:
        index = operator.index(index)
    except TypeError:
        raise InvalidIndexError(index) from None
    if index < 0:
        raise InvalidIndexError(index)
    return (1 + math.isqrt(1 + 3 * index)) // 3


def leading_ring_corner(ring: int, sub_index: int) -> RingCorner:
    """Last corner at or before ``sub_index`` when walking the ring."""
    if sub_index < 5 * ring + 1:
        return RingCorner(min(4, sub_index // max(1, ring)))
    return RingCorner.SIXTH


def ring_corner_sub_index(ring: int, corner: RingCorner) -> int:
    # corner 5 is one cell further along than 5 * ring
    return corner * ring + max(0, corner - 4)


def ring_corner_index(ring: int, corner: RingCorner) -> int:
    """Spiral index of a ring corner.

    Algebraically ``first_index_in_ring(ring) + ring_corner_sub_index(ring, corner)``.
    """
    return ring * (3 * ring + corner - 2) + max(0, corner - 4)


def ring_corner_coord(ring: int, corner: RingCorner) -> AxialCoordinate:
    _check_ring(ring)
    corner = RingCorner(corner)
    return traverse(CORNER_RAY_ORIGIN[corner], CORNER_DIRECTION[corner], ring)


def ring_corner_of_corner_coord(coord: AxialCoordinate) -> RingCorner:
    """Identify which corner ``coord`` is.

    Only meaningful for coordinates that are ring corners.  The sign test uses
    the cartesian ``x`` because corner 1 of ring 1 sits on grid column 0.
    """
    cart_x = grid_to_cart(coord).x
    if coord.y == 0:
        return RingCorner.FOURTH if cart_x < 0 else RingCorner.FIRST
    if coord.y > 0:
        return RingCorner.SECOND if cart_x > 0 else RingCorner.THIRD
    return RingCorner.SIXTH if cart_x > 0 else RingCorner.FIFTH
