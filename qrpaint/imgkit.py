"""Image helpers: reading, saving, greyscale, thresholding and scaling."""

from __future__ import annotations

import os
from typing import Optional

from PIL import Image, UnidentifiedImageError


def read(path: str) -> Image.Image:
    """Load a PNG or JPEG image from ``path``."""
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except UnidentifiedImageError as exc:
        raise ValueError(f"failed to decode image: {path}") from exc


def save(img: Image.Image, filename: str) -> None:
    """Save by extension: ``.jpg``/``.jpeg`` as JPEG, ``.png`` as PNG."""
    ext = os.path.splitext(filename)[1]
    if ext in (".jpg", ".jpeg"):
        img.convert("RGB").save(filename, format="JPEG", quality=75)
    elif ext == ".png":
        img.save(filename, format="PNG")
    else:
        raise ValueError("unsupported image format, jpg or png only")


def gray(src: Image.Image) -> Image.Image:
    """Return a greyscale copy of ``src``."""
    return src.convert("L")


def binaryzation(src: Image.Image, threshold: int = 128) -> Image.Image:
    """Greyscale then map each pixel to white if above ``threshold``, else black."""
    if threshold < 0 or threshold > 255:
        threshold = 128
    return gray(src).point(lambda v: 255 if v > threshold else 0)


def scale(
    src: Image.Image, size: tuple[int, int], resample: Optional[int] = None
) -> Image.Image:
    """Resize ``src`` to ``size`` (bilinear by default) as an RGBA image."""
    if resample is None:
        resample = Image.Resampling.BILINEAR
    return src.convert("RGBA").resize(size, resample=resample)