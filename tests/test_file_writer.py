import io

import pytest

from qrpaint.file_writer import FileWriter, render_half_blocks
from qrpaint.writer import ModuleGrid


def test_two_rows_one_line():
    g = ModuleGrid.from_bitmap([[True, False], [False, True]])
    assert render_half_blocks(g) == "\u2580\u2584\n"


def test_full_and_space():
    g = ModuleGrid.from_bitmap([[True, False], [True, False]])
    assert render_half_blocks(g) == "\u2588 \n"


def test_odd_height_line_count():
    g = ModuleGrid.from_bitmap([[True], [True], [True]])
    out = render_half_blocks(g)
    assert out.splitlines() == ["\u2588", "\u2580"]


def test_writer_writes_to_stream():
    buf = io.StringIO()
    g = ModuleGrid.from_bitmap([[True, True], [False, False]])
    FileWriter(buf).write(g)
    assert buf.getvalue() == render_half_blocks(g)


def test_nil_stream_raises():
    with pytest.raises(ValueError, match="nil file"):
        FileWriter(None).write(ModuleGrid.from_bitmap([[True]]))