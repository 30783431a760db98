from qrpaint.standard.shape import Canvas, Circle, DrawContext, Neighbour, Rectangle

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def _white_canvas():
    c = Canvas(100, 100)
    c.draw_rectangle(0, 0, 100, 100)
    c.set_color(WHITE)
    c.fill()
    return c


def _ctx(canvas):
    return DrawContext(canvas, 0.0, 0.0, 50, 50, BLACK)


def test_rectangle_draw():
    c = _white_canvas()
    Rectangle().draw(_ctx(c))
    img = c.image()
    assert img.getpixel((10, 10)) == BLACK
    assert img.getpixel((49, 49)) == BLACK
    assert img.getpixel((75, 75)) == WHITE


def test_circle_draw():
    c = _white_canvas()
    Circle().draw(_ctx(c))
    img = c.image()
    assert img.getpixel((25, 25)) == BLACK
    assert img.getpixel((1, 1)) == WHITE
    assert img.getpixel((75, 25)) == WHITE


def test_finder_same_as_draw():
    a, b = _white_canvas(), _white_canvas()
    Circle().draw(_ctx(a))
    Circle().draw_finder(_ctx(b))
    assert a.image().tobytes() == b.image().tobytes()


def test_context_accessors():
    ctx = DrawContext(Canvas(1, 1), 3.0, 4.0, 5, 6, BLACK, Neighbour.SELF | Neighbour.TOP)
    assert ctx.upper_left() == (3.0, 4.0)
    assert ctx.edge() == (5, 6)
    assert Neighbour.TOP in ctx.neighbours


def test_path_fill_triangle():
    c = _white_canvas()
    c.move_to(0, 0)
    c.line_to(90, 0)
    c.line_to(0, 90)
    c.close_path()
    c.set_color(BLACK)
    c.fill()
    img = c.image()
    assert img.getpixel((10, 10)) == BLACK
    assert img.getpixel((80, 80)) == WHITE


def test_draw_image():
    c = _white_canvas()
    from PIL import Image

    c.draw_image(Image.new("RGBA", (10, 10), BLACK), 20, 20)
    img = c.image()
    assert img.getpixel((25, 25)) == BLACK
    assert img.getpixel((35, 35)) == WHITE