"""Composable block and finder shapes that react to neighbouring blocks."""

from __future__ import annotations

from typing import Callable

from .shape import DrawContext, Neighbour, Shape

DrawFunc = Callable[[DrawContext], None]

N = Neighbour


class ComposableShape(Shape):
    """A shape whose block and finder drawing are supplied as functions."""

    def __init__(self, on_draw_finder: DrawFunc, on_draw: DrawFunc) -> None:
        self.on_draw_finder = on_draw_finder
        self.on_draw = on_draw

    def draw(self, ctx: DrawContext) -> None:
        self.on_draw(ctx)

    def draw_finder(self, ctx: DrawContext) -> None:
        self.on_draw_finder(ctx)


def assemble(draw_finder: DrawFunc, draw_block: DrawFunc) -> Shape:
    """Build a shape from a finder drawing function and a block drawing function."""
    return ComposableShape(draw_finder, draw_block)


def _has(mask: int, bits: int) -> bool:
    return int(mask) & int(bits) == int(bits)


def _rect_filler(ctx: DrawContext) -> Callable[[float, float, float, float], None]:
    def draw_rect(x: float, y: float, w: float, h: float) -> None:
        ctx.canvas.draw_rectangle(x, y, w, h)
        ctx.canvas.fill()

    return draw_rect


def liquid_block() -> DrawFunc:
    """Blocks that flow into their neighbours with rounded inner corners."""

    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        fw, fh = float(w), float(h)
        x, y = ctx.upper_left()
        cx, cy = x + fw / 2, y + fh / 2
        r = fw / 2
        ln = fw / 2
        c = ctx.canvas
        c.set_color(ctx.color)

        def ang_top_right() -> None:
            c.move_to(cx, cy + r)
            c.line_to(cx - r, cy)
            c.line_to(cx - r, y)
            c.line_to(cx + r, y - ln)
            c.quadratic_to(cx + r, cy - r, x + fw + ln, cy - r)
            c.line_to(x + fw, cy + r)
            c.close_path()

        def ang_top_left() -> None:
            c.move_to(cx, cy + r)
            c.line_to(cx + r, cy)
            c.line_to(cx + r, y - ln)
            c.line_to(cx - r, y - ln)
            c.quadratic_to(cx - r, cy - r, x - ln, cy - r)
            c.line_to(x - ln, cy + r)
            c.close_path()

        def ang_bot_left() -> None:
            c.move_to(cx, cy - r)
            c.line_to(cx + r, cy)
            c.line_to(cx + r, y + fh + ln)
            c.line_to(cx - r, y + fh + ln)
            c.quadratic_to(cx - r, cy + r, x - ln, cy + r)
            c.line_to(x - ln, cy - r)
            c.close_path()

        def ang_bot_right() -> None:
            c.move_to(cx, cy - r)
            c.line_to(cx - r, cy)
            c.line_to(cx - r, y + fh + ln)
            c.line_to(cx + r, y + fh + ln)
            c.quadratic_to(cx + r, cy + r, x + fw + ln, cy + r)
            c.line_to(x + fw, cy - r)
            c.close_path()

        mask = int(ctx.neighbours)
        draw_rect = _rect_filler(ctx)

        exact = {
            int(N.RIGHT | N.SELF): (cx, cy - r, fw / 2, 2 * r),
            int(N.TOP | N.SELF): (cx - r, y, 2 * r, fh / 2),
            int(N.LEFT | N.SELF): (x, cy - r, fw / 2, 2 * r),
            int(N.BOT | N.SELF): (cx - r, y + fh / 2, 2 * r, fh / 2),
            int(N.LEFT | N.SELF | N.RIGHT): (x - fw / 2, cy - r, 2 * fw, 2 * r),
        }
        if mask in exact:
            draw_rect(*exact[mask])

        if _has(mask, N.LEFT | N.SELF | N.RIGHT):
            draw_rect(x - fw / 2, cy - r, 2 * fw, 2 * r)
        if _has(mask, N.TOP | N.SELF | N.BOT):
            draw_rect(cx - r, y - fh / 2, 2 * r, 2 * fh)
        if _has(mask, N.LEFT | N.SELF):
            draw_rect(x, cy - r, fw / 2, 2 * r)
        if _has(mask, N.SELF | N.RIGHT):
            draw_rect(cx, cy - r, fw / 2, 2 * r)
        if _has(mask, N.SELF | N.TOP):
            draw_rect(cx - r, y, 2 * r, fh / 2)
        if _has(mask, N.SELF | N.BOT):
            draw_rect(cx - r, y + fh / 2, 2 * r, fh / 2)

        corners = (
            (N.BOT | N.RIGHT | N.SELF, N.BOT_RIGHT, ang_bot_right),
            (N.BOT | N.LEFT | N.SELF, N.BOT_LEFT, ang_bot_left),
            (N.TOP | N.LEFT | N.SELF, N.TOP_LEFT, ang_top_left),
            (N.TOP | N.RIGHT | N.SELF, N.TOP_RIGHT, ang_top_right),
        )
        for required, diagonal, path in corners:
            if _has(mask, required) and not mask & int(diagonal):
                path()
                c.fill()

        c.draw_circle(cx, cy, r)
        c.fill()

    return draw


def h_stripe_block(stripe_ratio: float) -> DrawFunc:
    """Round blocks joined horizontally into stripes.

    Ratios outside [0.6, 1.0] fall back to 0.85.
    """
    if stripe_ratio < 0.6 or stripe_ratio > 1:
        stripe_ratio = 0.85

    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        fw = float(w)
        x, y = ctx.upper_left()
        cx, cy = x + fw / 2, y + float(h) / 2
        r = fw * 0.9 / 2
        ctx.canvas.set_color(ctx.color)
        mask = int(ctx.neighbours)
        draw_rect = _rect_filler(ctx)

        ctx.canvas.draw_circle(cx, cy, r)
        if _has(mask, N.LEFT | N.SELF):
            draw_rect(x, cy - r, fw / 2, 2 * r)
        if _has(mask, N.RIGHT | N.SELF):
            draw_rect(cx, cy - r, fw / 2, 2 * r)
        ctx.canvas.fill()

    return draw


def v_stripe_block(stripe_ratio: float) -> DrawFunc:
    """Round blocks joined vertically into stripes of width ``stripe_ratio``.

    Ratios outside [0.6, 1.0] fall back to 0.85.
    """
    if stripe_ratio < 0.6 or stripe_ratio > 1:
        stripe_ratio = 0.85

    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        fw, fh = float(w), float(h)
        x, y = ctx.upper_left()
        cx, cy = x + fw / 2, y + fh / 2
        r = fw * stripe_ratio / 2
        ctx.canvas.set_color(ctx.color)
        mask = int(ctx.neighbours)
        draw_rect = _rect_filler(ctx)

        ctx.canvas.draw_circle(cx, cy, r)
        if _has(mask, N.TOP | N.SELF):
            draw_rect(cx - r, y, 2 * r, fh / 2)
        if _has(mask, N.BOT | N.SELF):
            draw_rect(cx - r, cy, 2 * r, fh / 2)
        ctx.canvas.fill()

    return draw


def _chain(ratio: float, horizontal: bool, vertical: bool) -> DrawFunc:
    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        fw, fh = float(w), float(h)
        x, y = ctx.upper_left()
        cx, cy = x + fw / 2, y + fh / 2
        r = fw * ratio / 2
        ln = r * 0.2
        ctx.canvas.set_color(ctx.color)
        mask = int(ctx.neighbours)
        draw_rect = _rect_filler(ctx)

        ctx.canvas.draw_circle(cx, cy, r)
        if vertical:
            if _has(mask, N.TOP | N.SELF):
                draw_rect(cx - ln, y, 2 * ln, fh / 2)
            if _has(mask, N.BOT | N.SELF):
                draw_rect(cx - ln, cy, 2 * ln, fh / 2)
        if horizontal:
            if _has(mask, N.LEFT | N.SELF):
                draw_rect(x, cy - ln, fw / 2, 2 * ln)
            if _has(mask, N.RIGHT | N.SELF):
                draw_rect(cx, cy - ln, fw / 2, 2 * ln)
        ctx.canvas.fill()

    return draw


def chain_block() -> DrawFunc:
    """Round blocks with narrow links to neighbours in all four directions."""
    return _chain(0.9, horizontal=True, vertical=True)


def v_chain_block() -> DrawFunc:
    """Round blocks with narrow links to the blocks above and below."""
    return _chain(0.85, horizontal=False, vertical=True)


def h_chain_block() -> DrawFunc:
    """Round blocks with narrow links to the blocks left and right."""
    return _chain(0.85, horizontal=True, vertical=False)


def square_blocks(size: float) -> DrawFunc:
    """Centred squares of ``size`` (0.1 to 1.0) of the cell; otherwise full size."""
    if size < 0.1 or size > 1.0:
        size = 1.0

    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        fw0, fh0 = float(w), float(h)
        x0, y0 = ctx.upper_left()
        cx, cy = x0 + fw0 / 2, y0 + fh0 / 2
        fw, fh = fw0 * size, fh0 * size
        ctx.canvas.set_color(ctx.color)
        ctx.canvas.draw_rectangle(cx - fw / 2, cy - fh / 2, fw, fh)
        ctx.canvas.fill()

    return draw


def circle_blocks(size: float) -> DrawFunc:
    """Centred circles of ``size`` (0.1 to 1.0) of the cell; otherwise full size."""
    if size < 0.1 or size > 1.0:
        size = 1.0

    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        fw0, fh0 = float(w), float(h)
        x0, y0 = ctx.upper_left()
        ctx.canvas.set_color(ctx.color)
        ctx.canvas.draw_circle(x0 + fw0 / 2, y0 + fh0 / 2, (fw0 / 2) * size)
        ctx.canvas.fill()

    return draw


def rounded_finder() -> DrawFunc:
    """Finder blocks with rounded outer corners and smoothed inner corners."""

    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        fw, fh = float(w), float(h)
        x, y = ctx.upper_left()
        lw, lh = fw / 2, fh / 2
        c = ctx.canvas
        c.set_color(ctx.color)

        mask = int(ctx.neighbours)
        if not mask & int(N.SELF):
            return

        if mask == int(N.SELF | N.BOT | N.LEFT):
            c.move_to(x, y)
            c.quadratic_to(x + fw, y, x + fw, y + fh)
            c.line_to(x, y + fh + lh)
            c.quadratic_to(x, y + fh, x - lw, y + fh)
            c.close_path()
        elif mask == int(N.SELF | N.BOT | N.LEFT | N.BOT_LEFT):
            c.move_to(x, y)
            c.quadratic_to(x + fw, y, x + fw, y + fh)
            c.line_to(x, y + fh)
            c.close_path()
        elif mask == int(N.SELF | N.BOT | N.RIGHT):
            c.move_to(x, y + fh)
            c.quadratic_to(x, y, x + fw, y)
            c.line_to(x + fw + lw, y + fh)
            c.quadratic_to(x + fw, y + fh, x + fw, y + fh + lh)
            c.close_path()
        elif mask == int(N.SELF | N.BOT | N.RIGHT | N.BOT_RIGHT):
            c.move_to(x, y + fh)
            c.quadratic_to(x, y, x + fw, y)
            c.line_to(x + fw, y + fh)
            c.close_path()
        elif mask == int(N.SELF | N.TOP | N.RIGHT):
            c.move_to(x, y)
            c.quadratic_to(x, y + fh, x + fw, y + fh)
            c.line_to(x + fw + lw, y)
            c.quadratic_to(x + fw, y, x + fw, y - lh)
            c.close_path()
        elif mask == int(N.SELF | N.TOP | N.RIGHT | N.TOP_RIGHT):
            c.move_to(x, y)
            c.quadratic_to(x, y + fh, x + fw, y + fh)
            c.line_to(x + fw, y)
            c.close_path()
        elif mask == int(N.SELF | N.TOP | N.LEFT):
            c.move_to(x, y + fh)
            c.quadratic_to(x + fw, y + fh, x + fw, y)
            c.line_to(x, y - lh)
            c.quadratic_to(x, y, x - lw, y)
            c.close_path()
        elif mask == int(N.SELF | N.TOP | N.LEFT | N.TOP_LEFT):
            c.move_to(x, y + fh)
            c.quadratic_to(x + fw, y + fh, x + fw, y)
            c.line_to(x, y)
            c.close_path()
            c.fill()
        else:
            c.draw_rectangle(x, y, fw, fh)

        c.fill()

    return draw


def square_finder() -> DrawFunc:
    """Finder blocks drawn as plain squares filling the cell."""

    def draw(ctx: DrawContext) -> None:
        w, h = ctx.edge()
        x0, y0 = ctx.upper_left()
        ctx.canvas.set_color(ctx.color)
        ctx.canvas.draw_rectangle(x0, y0, float(w), float(h))
        ctx.canvas.fill()

    return draw