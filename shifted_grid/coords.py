"""Points, grid cells, directions and sentinels shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True, slots=True)
class Point2D:
    x: float
    y: float

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point2D:
        return Point2D(-self.x, -self.y)

    def scaled(self, scale: Scale2D) -> Point2D:
        return Point2D(self.x * scale.x, self.y * scale.y)

    def normalize(self, size: Size2D) -> Point2D:
        """Express this point in units of ``size`` along each axis."""
        return Point2D(self.x / size.width, self.y / size.height)


@dataclass(frozen=True, slots=True)
class Scale2D:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Size2D:
    width: float
    height: float


ORIGIN = Point2D(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class AxialCoordinate:
    """A cell of the row-shifted grid.  Odd rows sit half a cell to the right."""

    x: int
    y: int

    def __add__(self, other: AxialCoordinate) -> AxialCoordinate:
        return AxialCoordinate(self.x + other.x, self.y + other.y)

    @property
    def is_odd_row(self) -> bool:
        return self.y % 2 == 1


GRID_ORIGIN = AxialCoordinate(0, 0)


class GridDirection(Enum):
    """The six directions towards the adjacent cells of a grid coordinate."""

    NX = "nx"  # negative x
    PX = "px"  # positive x
    NXNY = "nxny"
    NXPY = "nxpy"
    PXNY = "pxny"
    PXPY = "pxpy"

    @property
    def is_horizontal(self) -> bool:
        return self in (GridDirection.NX, GridDirection.PX)


class RingCorner(IntEnum):
    """Corners of a hexagonal ring, counter-clockwise from the +x axis.

    .. code-block:: text

        +y
         |      p2 . p1
         |     .       .
         |    p3       p0
         |     .         .
         |      p4 . . . p5
         +-----------------> +x

    Corner 5 sits one cell further along +x than the other five suggest.
    """

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5


class GridQuadrant(IntEnum):
    """One of the six angular sectors of the grid, one per ring corner."""

    PXPY = 0
    PY = 1
    NXPY = 2
    NXNY = 3
    NY = 4
    PXNY = 5


@dataclass(frozen=True, slots=True)
class SlopeInterceptLine:
    slope: float
    intercept: float

    def y_at(self, x: float) -> float:
        return self.slope * x + self.intercept


class NotColinear(Enum):
    """Sentinel returned by distance queries between non-colinear coordinates."""

    NOT_COLINEAR = "not_colinear"


class NotIntersecting(Enum):
    """Sentinel returned by intersection queries on parallel lines."""

    NOT_INTERSECTING = "not_intersecting"


NOT_COLINEAR = NotColinear.NOT_COLINEAR
NOT_INTERSECTING = NotIntersecting.NOT_INTERSECTING
