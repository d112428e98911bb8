"""A character-cell framebuffer for drawing in a terminal."""

from __future__ import annotations

import sys
from typing import BinaryIO, Optional

from .vector import Vec2

# Width-to-height ratio of a typical terminal character cell.
_CELL_ASPECT = 11.0 / 24.0


class ConsoleWindow:
    """A width x height grid of characters followed by a newline byte."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.aspect_window = width / height
        self.aspect = self.aspect_window * _CELL_ASPECT
        self.screen = bytearray(b" " * (width * height) + b"\n")

    def render_screen(self, stream: Optional[BinaryIO] = None) -> None:
        """Write the grid cells (without the trailing newline) to ``stream``."""
        out = stream if stream is not None else sys.stdout.buffer
        out.write(bytes(self.screen[: self.width * self.height]))
        out.flush()

    def _coords(self, x, y) -> tuple[float, float]:
        if y is None:
            if not isinstance(x, Vec2):
                raise TypeError("expected a Vec2 or two coordinates")
            return x.x, x.y
        return x, y

    def normalized_coord(self, x, y=None) -> Vec2:
        """Map a cell position to the range -1..1 on both axes."""
        px, py = self._coords(x, y)
        return Vec2(2 * (px / self.width) - 1, 2 * (py / self.height) - 1)

    def normalized_coord_aspect(self, x, y=None) -> Vec2:
        """Like normalized_coord, with x corrected for the cell aspect ratio."""
        base = self.normalized_coord(x, y)
        return Vec2(base.x * self.aspect, base.y)