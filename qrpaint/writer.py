"""Module grid model and the writer interface that renders it."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Sequence


class ModuleKind(enum.Enum):
    """What part of a QR symbol a module belongs to."""

    INIT = "init"
    DATA = "data"
    VERSION = "version"
    FORMAT = "format"
    FINDER = "finder"
    DARK = "dark"
    SPLITTER = "splitter"
    TIMING = "timing"


@dataclass(frozen=True)
class Module:
    """A single cell of the symbol: its kind and whether it is dark."""

    kind: ModuleKind = ModuleKind.INIT
    is_set: bool = False


class IterDirection(enum.Enum):
    """Traversal order for :meth:`ModuleGrid.iterate`."""

    ROW = "row"
    COLUMN = "column"


class ModuleGrid:
    """A rectangular grid of modules addressed as (x, y)."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        self._rows = [[Module() for _ in range(width)] for _ in range(height)]
        self._width = width

    @classmethod
    def from_bitmap(
        cls, rows: Sequence[Sequence[bool]], kind: ModuleKind = ModuleKind.DATA
    ) -> "ModuleGrid":
        """Build a grid from rows of booleans, each cell given ``kind``."""
        rows = [list(r) for r in rows]
        width = len(rows[0]) if rows else 0
        if any(len(r) != width for r in rows):
            raise ValueError("all rows must have the same length")
        grid = cls(width, len(rows))
        grid._rows = [[Module(kind, bool(v)) for v in r] for r in rows]
        return grid

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return len(self._rows)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < len(self._rows)):
            raise IndexError(f"position ({x}, {y}) out of range")

    def get(self, x: int, y: int) -> Module:
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, module: Module) -> None:
        self._check(x, y)
        self._rows[y][x] = module

    def bitmap(self) -> list[list[bool]]:
        """Dark/light values as a fresh list of rows, indexed ``[y][x]``."""
        return [[m.is_set for m in row] for row in self._rows]

    def iterate(
        self, direction: IterDirection = IterDirection.ROW
    ) -> Iterator[tuple[int, int, Module]]:
        """Yield ``(x, y, module)`` row by row or column by column."""
        if direction is IterDirection.ROW:
            for y, row in enumerate(self._rows):
                for x, module in enumerate(row):
                    yield x, y, module
        else:
            for x in range(self._width):
                for y, row in enumerate(self._rows):
                    yield x, y, row[x]


class Writer(ABC):
    """Renders a module grid to some output."""

    @abstractmethod
    def write(self, mat: ModuleGrid) -> None:
        """Render ``mat`` to the writer's output."""

    @abstractmethod
    def close(self) -> None:
        """Release the writer's output."""

    def __enter__(self) -> "Writer":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class NonWriter(Writer):
    """A writer that discards everything."""

    def write(self, mat: ModuleGrid) -> None:
        return None

    def close(self) -> None:
        return None