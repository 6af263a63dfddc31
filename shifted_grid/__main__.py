"""Command line entry point: spiral tables, index lookup and the Textual preview."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .coords import AxialCoordinate
from .errors import ShiftedGridError
from .indexer import GridIndexer
from .rings import first_index_in_ring, leading_ring_corner, ring_corner_sub_index, ring_index
from .settings import PreviewSettings, load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shifted-grid", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--settings", type=Path, default=None, help="settings file to load")
    commands = parser.add_subparsers(dest="command", required=True)

    table = commands.add_parser("table", help="print coordinates of consecutive indices")
    table.add_argument("--start", type=int, default=0)
    table.add_argument("--count", type=int, default=20)

    locate = commands.add_parser("locate", help="print the spiral index of a grid cell")
    locate.add_argument("x", type=int)
    locate.add_argument("y", type=int)

    preview = commands.add_parser("preview", help="open the interactive preview")
    preview.add_argument("--start", type=int, default=0, help="index to centre on")
    return parser


def _corner_label(index: int) -> str:
    ring = ring_index(index)
    sub_index = index - first_index_in_ring(ring)
    corner = leading_ring_corner(ring, sub_index)
    if ring == 0 or ring_corner_sub_index(ring, corner) != sub_index:
        return ""
    return f"p{int(corner)}"


def render_table(start: int, count: int, settings: PreviewSettings, indexer: GridIndexer) -> Table:
    grid = settings.grid.build()
    table = Table(title=f"Spiral indices {start}..{start + count - 1}")
    table.add_column("index", justify="right")
    table.add_column("coord")
    table.add_column("ring", justify="right")
    table.add_column("corner")
    table.add_column("screen point")

    for index, coord in enumerate(indexer.spiral(start, start + count), start=start):
        point = grid.coord_to_screen(coord)
        table.add_row(
            str(index),
            f"({coord.x}, {coord.y})",
            str(ring_index(index)),
            _corner_label(index),
            f"({point.x:.1f}, {point.y:.1f})",
        )
    return table


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console() if console is None else console
    settings = load_settings(args.settings)
    indexer = GridIndexer()

    try:
        if args.command == "table":
            console.print(render_table(args.start, args.count, settings, indexer))
        elif args.command == "locate":
            coord = AxialCoordinate(args.x, args.y)
            console.print(f"({coord.x}, {coord.y}) -> index {indexer.coord_to_index(coord)}")
        elif args.command == "preview":  # pragma: no cover - interactive
            from .app import SpiralPreviewApp

            SpiralPreviewApp(settings, start_index=args.start).run()
    except ShiftedGridError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"[red]error:[/red] {exc}")
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
