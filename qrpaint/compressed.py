"""Small two-colour palette PNG output for a module grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from PIL import Image, ImageDraw

from .writer import IterDirection, ModuleGrid, Writer

_BACKGROUND = (0xFF, 0xFF, 0xFF)
_FOREGROUND = (0x00, 0x00, 0x00)


@dataclass
class CompressedOption:
    padding: int = 0
    block_size: int = 1


def render_compressed(mat: ModuleGrid, option: CompressedOption) -> Image.Image:
    """Draw the grid into a palette image with index 0 background, 1 foreground."""
    bw, pad = option.block_size, option.padding
    size = mat.width() * bw + 2 * pad
    img = Image.new("P", (size, size), 0)
    img.putpalette([*_BACKGROUND, *_FOREGROUND])
    draw = ImageDraw.Draw(img)
    if bw > 0:
        for x, y, module in mat.iterate(IterDirection.COLUMN):
            if module.is_set:
                sx, sy = x * bw + pad, y * bw + pad
                draw.rectangle([sx, sy, sx + bw - 1, sy + bw - 1], fill=1)
    return img


class CompressedWriter(Writer):
    """Writes the grid as a maximally compressed PNG."""

    def __init__(self, stream: BinaryIO, option: CompressedOption) -> None:
        self.stream = stream
        self.option = option

    @classmethod
    def open(cls, filename: str, option: CompressedOption) -> "CompressedWriter":
        return cls(open(filename, "wb"), option)

    def write(self, mat: ModuleGrid) -> None:
        img = render_compressed(mat, self.option)
        img.save(self.stream, format="PNG", optimize=True, compress_level=9)

    def close(self) -> None:
        self.stream.close()