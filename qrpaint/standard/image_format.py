"""Image encoders for the rendered QR image."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import BinaryIO

from PIL import Image


class ImageFormat(enum.IntEnum):
    JPEG = 0
    PNG = 1


class ImageEncoder(ABC):
    """Encodes an image into a binary stream."""

    @abstractmethod
    def encode(self, stream: BinaryIO, img: Image.Image) -> None:
        """Write ``img`` to ``stream``."""


class JpegEncoder(ImageEncoder):
    def encode(self, stream: BinaryIO, img: Image.Image) -> None:
        img.convert("RGB").save(stream, format="JPEG", quality=75)


class PngEncoder(ImageEncoder):
    def encode(self, stream: BinaryIO, img: Image.Image) -> None:
        img.save(stream, format="PNG")


def encoder_for(fmt: ImageFormat) -> ImageEncoder:
    """The built-in encoder for ``fmt``."""
    if fmt == ImageFormat.JPEG:
        return JpegEncoder()
    if fmt == ImageFormat.PNG:
        return PngEncoder()
    raise ValueError("Not supported file format")