"""RGBA texture loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from PIL import Image


@dataclass
class _LoadSettings:
    flip_vertically: bool = False


_SETTINGS = _LoadSettings()


def set_flip_vertically(value: bool) -> None:
    """Choose whether textures loaded afterwards are flipped top to bottom."""
    _SETTINGS.flip_vertically = bool(value)


class Texture2D:
    """An image decoded to 8-bit RGBA pixels; empty if loading failed."""

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.data: Optional[bytes] = None
        self.width = 0
        self.height = 0
        try:
            with Image.open(path) as image:
                rgba = image.convert("RGBA")
        except (OSError, ValueError):
            return
        if _SETTINGS.flip_vertically:
            rgba = rgba.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        self.width, self.height = rgba.size
        self.data = rgba.tobytes()

    def empty(self) -> bool:
        return self.data is None or self.width == 0 or self.height == 0