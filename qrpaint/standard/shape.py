"""Drawing canvas, per-block draw context and the built-in block shapes."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image, ImageDraw

Color = tuple


class Neighbour(enum.IntFlag):
    """Bits for the 3x3 neighbourhood of a block."""

    TOP_LEFT = 1 << 0
    TOP = 1 << 1
    TOP_RIGHT = 1 << 2
    LEFT = 1 << 3
    SELF = 1 << 4
    RIGHT = 1 << 5
    BOT_LEFT = 1 << 6
    BOT = 1 << 7
    BOT_RIGHT = 1 << 8


_CURVE_STEPS = 16


def _rgba(color: Color) -> tuple[int, int, int, int]:
    c = tuple(int(v) for v in color)
    return c if len(c) == 4 else (*c[:3], 255)


class Canvas:
    """A path-based RGBA drawing surface."""

    def __init__(self, width: int, height: int) -> None:
        self._img = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._color = (0, 0, 0, 255)
        self._rects: list[tuple[float, float, float, float]] = []
        self._polys: list[list[tuple[float, float]]] = []
        self._current: list[tuple[float, float]] | None = None

    @property
    def width(self) -> int:
        return self._img.width

    @property
    def height(self) -> int:
        return self._img.height

    def set_color(self, color: Color) -> None:
        self._color = _rgba(color)

    def _finish(self) -> None:
        if self._current:
            self._polys.append(self._current)
        self._current = None

    def move_to(self, x: float, y: float) -> None:
        self._finish()
        self._current = [(x, y)]

    def line_to(self, x: float, y: float) -> None:
        if self._current is None:
            self._current = []
        self._current.append((x, y))

    def quadratic_to(self, x1: float, y1: float, x2: float, y2: float) -> None:
        if not self._current:
            self.move_to(x1, y1)
        x0, y0 = self._current[-1]
        for i in range(1, _CURVE_STEPS + 1):
            t = i / _CURVE_STEPS
            u = 1 - t
            self._current.append(
                (u * u * x0 + 2 * u * t * x1 + t * t * x2,
                 u * u * y0 + 2 * u * t * y1 + t * t * y2)
            )

    def close_path(self) -> None:
        self._finish()

    def draw_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        self._finish()
        self._rects.append((x, y, w, h))

    def draw_circle(self, x: float, y: float, r: float) -> None:
        self._finish()
        steps = max(16, int(2 * math.pi * r))
        self._polys.append(
            [(x + r * math.cos(2 * math.pi * i / steps),
              y + r * math.sin(2 * math.pi * i / steps)) for i in range(steps)]
        )

    def fill(self) -> None:
        """Fill every pending subpath with the current colour and clear the path."""
        self._finish()
        mask = Image.new("L", self._img.size, 0)
        draw = ImageDraw.Draw(mask)
        for x, y, w, h in self._rects:
            x0, y0 = round(x), round(y)
            x1, y1 = round(x + w) - 1, round(y + h) - 1
            if x1 >= x0 and y1 >= y0:
                draw.rectangle([x0, y0, x1, y1], fill=255)
        for poly in self._polys:
            if len(poly) >= 3:
                draw.polygon(poly, fill=255)
        self._rects, self._polys = [], []
        alpha = self._color[3]
        if alpha == 0:
            return
        if alpha != 255:
            mask = mask.point(lambda v: v * alpha // 255)
        overlay = Image.new("RGBA", self._img.size, (*self._color[:3], 255))
        overlay.putalpha(mask)
        self._img.alpha_composite(overlay)

    def draw_image(self, img: Image.Image, x: int, y: int) -> None:
        self._img.alpha_composite(img.convert("RGBA"), dest=(int(x), int(y)))

    def image(self) -> Image.Image:
        return self._img.copy()


@dataclass
class DrawContext:
    """The area and colour one block is drawn into."""

    canvas: Canvas
    x: float = 0.0
    y: float = 0.0
    w: int = 0
    h: int = 0
    color: Color = (0, 0, 0, 255)
    neighbours: Neighbour = Neighbour(0)

    def upper_left(self) -> tuple[float, float]:
        return self.x, self.y

    def edge(self) -> tuple[int, int]:
        return self.w, self.h


class Shape(ABC):
    """How a block and a finder block are drawn."""

    @abstractmethod
    def draw(self, ctx: DrawContext) -> None:
        """Draw an ordinary block."""

    @abstractmethod
    def draw_finder(self, ctx: DrawContext) -> None:
        """Draw a block of a finder pattern."""


class Rectangle(Shape):
    def draw(self, ctx: DrawContext) -> None:
        ctx.canvas.draw_rectangle(ctx.x, ctx.y, float(ctx.w), float(ctx.h))
        ctx.canvas.set_color(ctx.color)
        ctx.canvas.fill()

    def draw_finder(self, ctx: DrawContext) -> None:
        self.draw(ctx)


class Circle(Shape):
    def draw(self, ctx: DrawContext) -> None:
        radius = min(ctx.w // 2, ctx.h // 2)
        cx, cy = ctx.x + ctx.w / 2.0, ctx.y + ctx.h / 2.0
        ctx.canvas.draw_circle(cx, cy, float(radius))
        ctx.canvas.set_color(ctx.color)
        ctx.canvas.fill()

    def draw_finder(self, ctx: DrawContext) -> None:
        self.draw(ctx)