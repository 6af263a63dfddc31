"""Bidirectional mapping between spiral indices and grid coordinates.

``GridIndexer`` owns the six corner rays the inverse lookup intersects
against.  Build one and pass it to whatever needs hit testing; the module
level :func:`index_to_coord` and :func:`coord_to_index` helpers build a
throwaway indexer per call.
"""

from __future__ import annotations

from collections.abc import Iterator

from .coords import GRID_ORIGIN, NOT_COLINEAR, NOT_INTERSECTING, AxialCoordinate, RingCorner
from .errors import InternalConsistencyError, InvalidArgumentError
from .lines import get_line_intersection
from .projection import cart_to_grid
from .quadrants import (
    CORNER_FOR_QUADRANT,
    INTERSECTOR_DIRECTION_FOR_QUADRANT,
    GridRay,
    classify_quadrant,
)
from .rings import (
    CORNER_DIRECTION,
    CORNER_RAY_ORIGIN,
    EDGE_DIRECTION,
    first_index_in_ring,
    leading_ring_corner,
    ring_corner_coord,
    ring_corner_index,
    ring_corner_of_corner_coord,
    ring_corner_sub_index,
    ring_index,
)
from .traversal import distance_between, traverse


class GridIndexer:
    """Spiral addressing over an unbounded shifted grid."""

    __slots__ = ("_corner_rays",)

    def __init__(self) -> None:
        self._corner_rays: tuple[GridRay, ...] = tuple(
            GridRay(CORNER_RAY_ORIGIN[corner], CORNER_DIRECTION[corner]) for corner in RingCorner
        )

    @property
    def corner_rays(self) -> tuple[GridRay, ...]:
        return self._corner_rays

    def index_to_coord(self, index: int) -> AxialCoordinate:
        """Grid coordinate of spiral ``index``, in constant time."""
        ring = ring_index(index)
        sub_index = index - first_index_in_ring(ring)

        corner = leading_ring_corner(ring, sub_index)
        corner_sub_index = ring_corner_sub_index(ring, corner)
        corner_coord = ring_corner_coord(ring, corner)

        return traverse(corner_coord, EDGE_DIRECTION[corner], sub_index - corner_sub_index)

    def coord_to_index(self, coord: AxialCoordinate) -> int:
        """Spiral index of ``coord``; the inverse of :meth:`index_to_coord`.

        Cells on a corner ray are resolved directly.  Any other cell is
        projected back along its ring edge onto the corner ray bounding its
        quadrant, which lands exactly on the ring corner preceding it.
        """
        if coord == GRID_ORIGIN:
            return 0

        for corner, ray in zip(RingCorner, self._corner_rays):
            if ray.contains(coord):
                ring = distance_between(ray.start, coord)
                if ring is NOT_COLINEAR or ring == 0:
                    continue
                return ring_corner_index(ring, corner)

        quadrant = classify_quadrant(coord)
        corner = CORNER_FOR_QUADRANT[quadrant]
        corner_ray = self._corner_rays[corner]
        intersector = GridRay(coord, INTERSECTOR_DIRECTION_FOR_QUADRANT[quadrant])

        point = get_line_intersection(intersector.as_cart_line(), corner_ray.as_cart_line())
        if point is NOT_INTERSECTING:
            raise InternalConsistencyError(
                coord, f"intersector of quadrant {quadrant.name} is parallel to its corner ray"
            )

        corner_coord = cart_to_grid(point)
        if ring_corner_of_corner_coord(corner_coord) is not corner:
            raise InternalConsistencyError(
                coord, f"{corner_coord} is not corner {int(corner)} of quadrant {quadrant.name}"
            )

        ring = distance_between(corner_ray.start, corner_coord)
        steps = distance_between(coord, corner_coord)
        if ring is NOT_COLINEAR or steps is NOT_COLINEAR:
            raise InternalConsistencyError(coord, f"{corner_coord} is off the expected ring edge")

        return ring_corner_index(ring, corner) + steps

    def ring_of(self, coord: AxialCoordinate) -> int:
        """Spiral ring that ``coord`` belongs to."""
        return ring_index(self.coord_to_index(coord))

    def spiral(self, start: int = 0, stop: int | None = None) -> Iterator[AxialCoordinate]:
        """Yield consecutive coordinates of the spiral from index ``start``.

        Runs forever when ``stop`` is ``None``.
        """
        if stop is not None and stop < start:
            raise InvalidArgumentError("stop", f"must not precede start ({start}), got {stop!r}")
        index = start
        while stop is None or index < stop:
            yield self.index_to_coord(index)
            index += 1


def index_to_coord(index: int) -> AxialCoordinate:
    """Grid coordinate of spiral ``index`` using a fresh :class:`GridIndexer`."""
    return GridIndexer().index_to_coord(index)


def coord_to_index(coord: AxialCoordinate) -> int:
    """Spiral index of ``coord`` using a fresh :class:`GridIndexer`."""
    return GridIndexer().coord_to_index(coord)
