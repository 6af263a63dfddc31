"""Enumerate the grid cells visible through a scrolled viewport."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from .coords import ORIGIN, AxialCoordinate, Point2D
from .indexer import GridIndexer
from .projection import ShiftedGridConfig

# Extra cells enumerated past each viewport edge so items do not pop in while scrolling.
MARGIN_CELLS = 1


@dataclass(frozen=True, slots=True)
class BoundingRect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point2D:
        return Point2D(self.left + 0.5 * self.width, self.top + 0.5 * self.height)

    @classmethod
    def from_size(cls, width: float, height: float) -> BoundingRect:
        return cls(0.0, 0.0, width, height)


class VisibleCoordinates:
    """Finite, restartable sequence of the cells covering a viewport.

    Every cell whose centre falls inside ``bounds`` is produced once, row by
    row, together with a margin of :data:`MARGIN_CELLS` around them.
    Iteration is lazy and each call to ``iter`` starts over.
    """

    def __init__(
        self,
        bounds: BoundingRect,
        grid: ShiftedGridConfig,
        scroll_offset: Point2D = ORIGIN,
    ) -> None:
        self.bounds = bounds
        self.grid = grid
        self.scroll_offset = scroll_offset

        corners = [
            grid.screen_to_cart(Point2D(x, y) - scroll_offset)
            for x in (bounds.left, bounds.right)
            for y in (bounds.top, bounds.bottom)
        ]
        self._min_x = min(p.x for p in corners)
        self._max_x = max(p.x for p in corners)
        self._rows = range(
            math.ceil(min(p.y for p in corners)) - MARGIN_CELLS,
            math.floor(max(p.y for p in corners)) + MARGIN_CELLS + 1,
        )

    @property
    def rows(self) -> range:
        return self._rows

    def columns(self, row: int) -> range:
        shift = 0.5 * (row % 2)
        return range(
            math.ceil(self._min_x - shift) - MARGIN_CELLS,
            math.floor(self._max_x - shift) + MARGIN_CELLS + 1,
        )

    def __iter__(self) -> Iterator[AxialCoordinate]:
        for row in self._rows:
            for x in self.columns(row):
                yield AxialCoordinate(x, row)

    def __len__(self) -> int:
        return sum(len(self.columns(row)) for row in self._rows)

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, AxialCoordinate):
            return False
        return coord.y in self._rows and coord.x in self.columns(coord.y)


def visible_coordinates(
    bounds: BoundingRect,
    grid: ShiftedGridConfig,
    scroll_offset: Point2D = ORIGIN,
) -> VisibleCoordinates:
    return VisibleCoordinates(bounds, grid, scroll_offset)


def visible_indices(
    bounds: BoundingRect,
    grid: ShiftedGridConfig,
    indexer: GridIndexer | None = None,
    scroll_offset: Point2D = ORIGIN,
) -> Iterator[tuple[int, AxialCoordinate]]:
    """Yield ``(spiral index, coordinate)`` for every visible cell."""
    indexer = GridIndexer() if indexer is None else indexer
    for coord in visible_coordinates(bounds, grid, scroll_offset):
        yield indexer.coord_to_index(coord), coord
