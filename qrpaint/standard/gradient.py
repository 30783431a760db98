"""Linear colour gradients applied to foreground pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from PIL import Image

RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class ColorStop:
    """A colour at position ``t`` (0.0 to 1.0) along the gradient."""

    t: float
    color: RGBA


@dataclass
class LinearGradient:
    """A gradient along ``angle`` degrees: 0 right, 90 up, 180 left, 270 down."""

    stops: list[ColorStop] = field(default_factory=list)
    angle: float = 0.0

    def apply(self, img: Image.Image, fg_color: RGBA) -> Image.Image:
        """Return a copy with every ``fg_color`` pixel replaced by the gradient."""
        rad = self.angle * math.pi / 180.0
        dx, dy = math.cos(rad), -math.sin(rad)
        w, h = img.size
        projections = [px * dx + py * dy for px in (0, w) for py in (0, h)]
        lo, hi = min(projections), max(projections)
        span = hi - lo

        src = img.convert("RGBA")
        out = src.copy()
        src_px, out_px = src.load(), out.load()
        fg = tuple(fg_color)
        for y in range(h):
            for x in range(w):
                if src_px[x, y] == fg:
                    t = (x * dx + y * dy - lo) / span
                    out_px[x, y] = interpolate_color(self.stops, t)
        return out


def new_gradient(angle: float, *args: ColorStop) -> LinearGradient:
    """Create a gradient with its stops sorted by position."""
    return LinearGradient(sorted(args, key=lambda s: s.t), angle)


def interpolate_color(stops: list[ColorStop], t: float) -> RGBA:
    """The colour at ``t`` between the surrounding stops."""
    if t <= stops[0].t:
        return stops[0].color
    if t >= stops[-1].t:
        return stops[-1].color
    for start, end in zip(stops, stops[1:]):
        if start.t <= t <= end.t:
            return blend_colors(start.color, end.color, (t - start.t) / (end.t - start.t))
    return (0, 0, 0, 255)


def blend_colors(c1: RGBA, c2: RGBA, t: float) -> RGBA:
    """Linear mix of two colours' RGB channels; alpha is always opaque."""
    r, g, b = (int(a * (1 - t) + c * t) for a, c in zip(c1[:3], c2[:3]))
    return (r, g, b, 255)