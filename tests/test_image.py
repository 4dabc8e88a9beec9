from tamapet.canvas import Canvas
from tamapet.ui.image import Image

PATTERN = [
    [True, False],
    [False, True],
    [True, True],
]


def make_icon():
    return Canvas(3, 2, rows=PATTERN)


def test_image_copies_icon_at_position():
    canvas = Canvas(10, 10)
    Image(4, 5, make_icon()).draw(canvas, 0, 0)
    for j, row in enumerate(PATTERN):
        for i, value in enumerate(row):
            assert canvas[4 + j, 5 + i] is value
    assert canvas[0, 0] is False


def test_inverted_image():
    canvas = Canvas(10, 10)
    image = Image(1, 1, make_icon())
    image.inverted = True
    image.draw(canvas, 0, 0)
    for j, row in enumerate(PATTERN):
        for i, value in enumerate(row):
            assert canvas[1 + j, 1 + i] is (not value)


def test_image_overwrites_background():
    canvas = Canvas(10, 10, rows=[[True] * 10] * 10)
    Image(0, 0, make_icon()).draw(canvas, 0, 0)
    assert canvas[0, 1] is False
    assert canvas[5, 5] is True


def test_icon_can_be_replaced():
    canvas = Canvas(10, 10)
    image = Image(0, 0, make_icon())
    image.icon = Canvas(1, 1, rows=[[True]])
    image.draw(canvas, 0, 0)
    assert canvas[0, 0] is True
    assert canvas[1, 1] is False


def test_image_clipped_at_edge():
    canvas = Canvas(4, 4)
    Image(2, 3, make_icon()).draw(canvas, 0, 0)
    assert canvas[2, 3] is True
    assert canvas[3, 3] is False


def test_hidden_image():
    canvas = Canvas(10, 10)
    image = Image(0, 0, make_icon())
    image.visible = False
    image.draw(canvas, 0, 0)
    assert canvas.raw_data() == bytes(canvas.raw_size())