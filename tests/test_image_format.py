import io

import pytest
from PIL import Image, ImageDraw

from qrpaint.standard.image_format import (
    ImageFormat,
    JpegEncoder,
    PngEncoder,
    encoder_for,
)


def _new_image():
    img = Image.new("RGBA", (100, 100), (255, 255, 255, 255))
    ImageDraw.Draw(img).text((25, 50), "sample", fill=(0, 0, 0, 255))
    return img


def test_jpeg_encoder():
    buf = io.BytesIO()
    JpegEncoder().encode(buf, _new_image())
    buf.seek(0)
    with Image.open(buf) as img:
        assert img.format == "JPEG"
        assert img.size == (100, 100)


def test_png_encoder_lossless():
    src = _new_image()
    buf = io.BytesIO()
    PngEncoder().encode(buf, src)
    buf.seek(0)
    with Image.open(buf) as img:
        assert img.format == "PNG"
        assert list(img.convert("RGBA").getdata()) == list(src.getdata())


def test_encoder_for():
    assert isinstance(encoder_for(ImageFormat.JPEG), JpegEncoder)
    assert isinstance(encoder_for(ImageFormat.PNG), PngEncoder)
    with pytest.raises(ValueError):
        encoder_for(7)