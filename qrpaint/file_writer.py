"""Render a module grid as text using half-block characters."""

from __future__ import annotations

from typing import TextIO

from .writer import ModuleGrid, Writer

_UP = "\u2580"
_DOWN = "\u2584"
_FULL = "\u2588"
_SPACE = " "


def render_half_blocks(mat: ModuleGrid) -> str:
    """Return the grid as text, two module rows per line of output."""
    bm = mat.bitmap()
    lines = []
    for top_idx in range(0, len(bm), 2):
        top = bm[top_idx]
        bottom = bm[top_idx + 1] if top_idx + 1 < len(bm) else [False] * len(top)
        chars = []
        for t, b in zip(top, bottom):
            if t and b:
                chars.append(_FULL)
            elif t:
                chars.append(_UP)
            elif b:
                chars.append(_DOWN)
            else:
                chars.append(_SPACE)
        lines.append("".join(chars) + "\n")
    return "".join(lines)


class FileWriter(Writer):
    """Writes the half-block rendering to a text stream."""

    def __init__(self, out: TextIO | None) -> None:
        self.out = out

    def write(self, mat: ModuleGrid) -> None:
        if self.out is None:
            raise ValueError("nil file")
        self.out.write(render_half_blocks(mat))

    def close(self) -> None:
        return None