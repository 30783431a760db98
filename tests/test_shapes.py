import pytest

from qrpaint.standard.shape import Canvas, DrawContext, Neighbour
from qrpaint.standard.shapes import (
    ComposableShape,
    assemble,
    chain_block,
    circle_blocks,
    h_chain_block,
    h_stripe_block,
    liquid_block,
    rounded_finder,
    square_blocks,
    square_finder,
    v_chain_block,
    v_stripe_block,
)

RED = (255, 0, 0, 255)
CLEAR = (0, 0, 0, 0)
N = Neighbour


def _ctx(mask=N.SELF, x=10, y=10, size=20):
    canvas = Canvas(40, 40)
    return DrawContext(canvas, float(x), float(y), size, size, RED, mask)


def test_assemble_delegates_to_functions():
    calls = []
    shape = assemble(lambda c: calls.append(("finder", c)), lambda c: calls.append(("block", c)))
    ctx = _ctx()
    shape.draw(ctx)
    shape.draw_finder(ctx)
    assert isinstance(shape, ComposableShape)
    assert calls == [("block", ctx), ("finder", ctx)]


def test_square_finder_fills_cell_only():
    ctx = _ctx()
    square_finder()(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((10, 10)) == RED
    assert img.getpixel((29, 29)) == RED
    assert img.getpixel((30, 30)) == CLEAR
    assert img.getbbox() == (10, 10, 30, 30)


def test_square_blocks_half_size_leaves_corner_clear():
    ctx = _ctx()
    square_blocks(0.5)(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((20, 20)) == RED
    assert img.getpixel((11, 11)) == CLEAR


@pytest.mark.parametrize("size", [0.0, 2.0])
def test_square_blocks_out_of_range_is_full(size):
    ctx = _ctx()
    square_blocks(size)(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((11, 11)) == RED
    assert img.getbbox() == (10, 10, 30, 30)


def test_circle_blocks_corner_clear_centre_set():
    ctx = _ctx()
    circle_blocks(1.0)(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((20, 20)) == RED
    assert img.getpixel((10, 10)) == CLEAR


def test_rounded_finder_without_self_draws_nothing():
    ctx = _ctx(mask=N.TOP | N.LEFT)
    rounded_finder()(ctx)
    assert ctx.canvas.image().getbbox() is None


def test_rounded_finder_plain_self_is_square():
    ctx = _ctx(mask=N.SELF)
    rounded_finder()(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((10, 10)) == RED
    assert img.getbbox() == (10, 10, 30, 30)


def test_rounded_finder_corner_is_rounded():
    ctx = _ctx(mask=N.SELF | N.BOT | N.RIGHT | N.BOT_RIGHT)
    rounded_finder()(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((10, 10)) == CLEAR
    assert img.getpixel((28, 28)) == RED


def test_liquid_block_alone_is_round():
    ctx = _ctx(mask=N.SELF)
    liquid_block()(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((20, 20)) == RED
    assert img.getpixel((28, 11)) == CLEAR


def test_liquid_block_joins_right_neighbour():
    ctx = _ctx(mask=N.SELF | N.RIGHT)
    liquid_block()(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((28, 11)) == RED
    assert img.getpixel((11, 11)) == CLEAR


def test_chain_block_link_to_top():
    alone = _ctx(mask=N.SELF)
    chain_block()(alone)
    linked = _ctx(mask=N.SELF | N.TOP)
    chain_block()(linked)
    assert alone.canvas.image().getpixel((20, 10)) == CLEAR
    assert linked.canvas.image().getpixel((20, 10)) == RED


def test_v_chain_ignores_horizontal_neighbours():
    ctx = _ctx(mask=N.SELF | N.LEFT | N.RIGHT)
    v_chain_block()(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((10, 20)) == CLEAR
    assert img.getpixel((20, 20)) == RED


def test_h_chain_links_left():
    ctx = _ctx(mask=N.SELF | N.LEFT)
    h_chain_block()(ctx)
    img = ctx.canvas.image()
    assert img.getpixel((10, 20)) == RED
    assert img.getpixel((20, 10)) == CLEAR


def test_h_stripe_links_right():
    alone = _ctx(mask=N.SELF)
    h_stripe_block(0.9)(alone)
    linked = _ctx(mask=N.SELF | N.RIGHT)
    h_stripe_block(0.9)(linked)
    assert alone.canvas.image().getpixel((29, 20)) == CLEAR
    assert linked.canvas.image().getpixel((29, 20)) == RED


def test_v_stripe_ratio_out_of_range_falls_back():
    full = _ctx(mask=N.SELF | N.TOP)
    v_stripe_block(1.0)(full)
    fallback = _ctx(mask=N.SELF | N.TOP)
    v_stripe_block(2.0)(fallback)
    assert full.canvas.image().getpixel((11, 11)) == RED
    assert fallback.canvas.image().getpixel((11, 11)) == CLEAR
    assert fallback.canvas.image().getpixel((20, 10)) == RED