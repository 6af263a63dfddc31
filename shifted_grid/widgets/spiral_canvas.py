"""Textual widget previewing spiral indices on the shifted grid."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from shifted_grid.coords import GRID_ORIGIN, AxialCoordinate, GridDirection, Point2D, Scale2D
from shifted_grid.effects import EffectStack, Transform
from shifted_grid.indexer import GridIndexer
from shifted_grid.projection import ShiftedGridConfig, grid_to_cart
from shifted_grid.settings import PreviewSettings, cell_effect_stack
from shifted_grid.traversal import traverse
from shifted_grid.windowing import BoundingRect, visible_indices

logger = logging.getLogger(__name__)

# Terminal cells are roughly twice as tall as wide: one cell is four columns by one line.
CELL_WIDTH = 4
FALLBACK_SIZE = (48, 13)
# Labels fainter than this are drawn as a dot.
MIN_LABEL_OPACITY = 0.35
# Labels magnified at least this much are drawn in bold.
MAGNIFIED_LABEL_SCALE = 1.5

KEY_DIRECTIONS: dict[str, GridDirection] = {
    "right": GridDirection.PX,
    "l": GridDirection.PX,
    "left": GridDirection.NX,
    "h": GridDirection.NX,
    "u": GridDirection.PXPY,
    "y": GridDirection.NXPY,
    "b": GridDirection.NXNY,
    "n": GridDirection.PXNY,
}


class ItemSelected(Message):
    """Message emitted when the user clicks or confirms the cursor cell."""

    def __init__(self, index: int, coord: AxialCoordinate) -> None:
        self.index = index
        self.coord = coord
        super().__init__()


@dataclass
class Viewport:
    """Grid cell drawn at the middle of the widget."""

    center: AxialCoordinate = GRID_ORIGIN


class SpiralCanvas(Widget):
    """ASCII renderer labelling every visible cell with its spiral index."""

    DEFAULT_CSS = """
    SpiralCanvas {
        height: 100%;
        width: 100%;
    }
    """

    def __init__(
        self,
        indexer: GridIndexer | None = None,
        *,
        effects: EffectStack | None = None,
    ) -> None:
        super().__init__()
        self.indexer = GridIndexer() if indexer is None else indexer
        self.effects = cell_effect_stack(PreviewSettings()) if effects is None else effects
        self.viewport = Viewport()
        self.cursor: AxialCoordinate = GRID_ORIGIN

    # ---------------------------------------------------------------------
    # Interaction

    async def on_key(self, event: events.Key) -> None:  # pragma: no cover - UI glue
        if event.key in ("enter", "return"):
            self._select_cursor()
            return
        direction = KEY_DIRECTIONS.get(event.key)
        if direction is None:
            return
        self.move_cursor(direction)
        self.refresh()

    async def on_mouse_move(self, event: events.MouseMove) -> None:  # pragma: no cover - UI glue
        width, height = self._canvas_size()
        coord = self.screen_to_coord(event.x, event.y, width, height)
        if coord != self.cursor:
            self.cursor = coord
            self.refresh()

    async def on_click(self, event: events.Click) -> None:  # pragma: no cover - UI glue
        self._select_cursor()

    def _select_cursor(self) -> None:
        index = self.indexer.coord_to_index(self.cursor)
        logger.debug("Selected index %d at %s", index, self.cursor)
        self.post_message(ItemSelected(index, self.cursor))

    def move_cursor(self, direction: GridDirection) -> None:
        self.cursor = traverse(self.cursor, direction, 1)

    def jump_to(self, index: int) -> None:
        """Centre the view on spiral ``index`` and put the cursor there."""
        coord = self.indexer.index_to_coord(index)
        self.cursor = coord
        self.viewport.center = coord

    # ---------------------------------------------------------------------
    # Geometry

    def _canvas_size(self) -> tuple[int, int]:
        width, height = self.size.width, self.size.height
        if width <= 0 or height <= 0:
            return FALLBACK_SIZE
        return width, height

    def grid_config(self, width: int, height: int) -> ShiftedGridConfig:
        """Grid mapping cells to character positions, rows growing upwards."""
        center = grid_to_cart(self.viewport.center)
        offset = Point2D(width // 2 - CELL_WIDTH * center.x, height // 2 + center.y)
        # space size 2 * 1.5 + 1 == CELL_WIDTH; stretch y maps one row to one line
        return ShiftedGridConfig(1.5, 1.0, offset, Scale2D(1.0, -1.0 / CELL_WIDTH))

    def screen_to_coord(self, x: int, y: int, width: int, height: int) -> AxialCoordinate:
        grid = self.grid_config(width, height)
        return grid.screen_to_coord(Point2D(float(x), float(y)))

    # ---------------------------------------------------------------------
    # Rendering

    def render(self) -> Text:
        return self.render_styled(*self._canvas_size())

    def _placements(self, width: int, height: int) -> Iterator[tuple[int, int, str, Transform]]:
        """Yield ``(row, column, label, transform)`` for every drawn label."""
        grid = self.grid_config(width, height)
        bounds = BoundingRect.from_size(width, height)
        cursor_point = grid_to_cart(self.cursor)

        for index, coord in visible_indices(bounds, grid, self.indexer):
            point = grid.coord_to_screen(coord)
            row = round(point.y)
            if not 0 <= row < height:
                continue

            # effects are evaluated in cell units around the cursor
            style = self.effects.apply(grid_to_cart(coord), cursor_point, cursor_point)
            if coord == self.cursor:
                label = f"[{index}]"
            elif style.opacity < MIN_LABEL_OPACITY:
                label = "."
            else:
                label = str(index)
            yield row, round(point.x) - len(label) // 2, label, style

    def _draw(self, width: int, height: int) -> tuple[list[str], list[tuple[int, int, int]]]:
        buffer = [[" "] * width for _ in range(height)]
        magnified: list[tuple[int, int, int]] = []
        for row, start, label, style in self._placements(width, height):
            for offset, char in enumerate(label):
                col = start + offset
                if 0 <= col < width:
                    buffer[row][col] = char
            if style.scale >= MAGNIFIED_LABEL_SCALE:
                magnified.append((row, max(0, start), min(width, start + len(label))))
        return ["".join(line).rstrip() for line in buffer], magnified

    def render_text(self, width: int, height: int) -> str:
        lines, _ = self._draw(width, height)
        return "\n".join(lines)

    def render_styled(self, width: int, height: int) -> Text:
        """Render like :meth:`render_text` with magnified labels in bold."""
        lines, magnified = self._draw(width, height)
        texts = [Text(line) for line in lines]
        for row, start, end in magnified:
            end = min(end, len(lines[row]))
            if start < end:
                texts[row].stylize("bold", start, end)
        return Text("\n").join(texts)
