"""Textual application hosting the spiral preview."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header

from .effects import EffectStack
from .indexer import GridIndexer
from .settings import PreviewSettings, cell_effect_stack
from .widgets import ItemSelected, SpiralCanvas


class SpiralPreviewApp(App[None]):
    """Browse spiral indices with the keyboard or the mouse."""

    TITLE = "shifted-grid"
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, settings: PreviewSettings | None = None, *, start_index: int = 0) -> None:
        super().__init__()
        self.settings = PreviewSettings() if settings is None else settings
        self.start_index = start_index

    def _canvas_effects(self) -> EffectStack:
        # the canvas measures in cells, so pixel distances are divided by the grid unit
        return cell_effect_stack(self.settings)

    def compose(self) -> ComposeResult:  # pragma: no cover - UI glue
        yield Header(show_clock=False)
        canvas = SpiralCanvas(GridIndexer(), effects=self._canvas_effects())
        canvas.jump_to(self.start_index)
        yield canvas
        yield Footer()

    def on_item_selected(self, message: ItemSelected) -> None:  # pragma: no cover - UI glue
        self.sub_title = f"index {message.index} at ({message.coord.x}, {message.coord.y})"
