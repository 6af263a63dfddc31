"""Standalone demo printing the spiral around the origin and one effect frame."""

from __future__ import annotations

from shifted_grid import (
    BoundingRect,
    GridIndexer,
    Point2D,
    create_edge_fade_effect,
    create_magnification_effect,
    visible_indices,
)
from shifted_grid.settings import PreviewSettings

indexer = GridIndexer()
grid = PreviewSettings().grid.build(offset=Point2D(200.0, 150.0))
bounds = BoundingRect.from_size(400.0, 300.0)
focus = Point2D(230.0, 150.0)

magnify = create_magnification_effect(150.0, 1.0)
fade = create_edge_fade_effect(120.0, 100.0)


if __name__ == "__main__":
    for index, coord in enumerate(indexer.spiral(0, 21)):
        print(f"{index:3d} -> ({coord.x}, {coord.y})")

    for index, coord in sorted(visible_indices(bounds, grid, indexer))[:12]:
        point = grid.coord_to_screen(coord)
        style = magnify.get_style(point, focus) @ fade.get_style(point, center_position=bounds.center)
        print(index, style.to_css())
