"""UI widgets for previewing the shifted grid."""

from .spiral_canvas import ItemSelected, SpiralCanvas, Viewport

__all__ = ["ItemSelected", "SpiralCanvas", "Viewport"]
