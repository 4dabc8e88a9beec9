from tamapet.canvas import Canvas
from tamapet.ui.container import Container, Tabs
from tamapet.ui.drawable import AbstractDrawable


class Dot(AbstractDrawable):
    def _draw_impl(self, canvas, offset_y, offset_x):
        canvas[offset_y, offset_x] = True


def lit(canvas):
    return [
        (y, x)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas[y, x]
    ]


def test_container_offsets_children():
    canvas = Canvas(20, 20)
    box = Container(5, 6)
    box.drawables.push_back(Dot(1, 2))
    box.draw(canvas, 0, 0)
    assert lit(canvas) == [(5 + 1, 6 + 2)]


def test_container_draws_all_children():
    canvas = Canvas(20, 20)
    box = Container(0, 0)
    for pos in [(1, 1), (3, 4), (7, 2)]:
        box.drawables.push_back(Dot(*pos))
    box.draw(canvas, 0, 0)
    assert sorted(lit(canvas)) == [(1, 1), (3, 4), (7, 2)]


def test_hidden_container_hides_children():
    canvas = Canvas(20, 20)
    box = Container(0, 0)
    box.drawables.push_back(Dot(1, 1))
    box.visible = False
    box.draw(canvas, 0, 0)
    assert lit(canvas) == []


def test_nested_containers_accumulate_offsets():
    canvas = Canvas(20, 20)
    outer = Container(2, 3)
    inner = Container(4, 5)
    outer.drawables.push_back(inner)
    inner.drawables.push_back(Dot(1, 1))
    outer.draw(canvas, 0, 0)
    assert lit(canvas) == [(2 + 4 + 1, 3 + 5 + 1)]


def test_child_moves_between_containers():
    first, second = Container(0, 0), Container(0, 0)
    dot = Dot(0, 0)
    first.drawables.push_back(dot)
    second.drawables.push_back(dot)
    assert list(first.drawables) == []
    assert list(second.drawables) == [dot]


def test_tabs_draw_only_selected_child():
    canvas = Canvas(20, 20)
    tabs = Tabs(0, 0, index=1)
    for pos in [(1, 1), (3, 4), (7, 2)]:
        tabs.drawables.push_back(Dot(*pos))
    tabs.draw(canvas, 0, 0)
    assert lit(canvas) == [(3, 4)]


def test_tabs_index_can_change():
    tabs = Tabs(2, 2)
    for pos in [(1, 1), (3, 4)]:
        tabs.drawables.push_back(Dot(*pos))
    canvas = Canvas(20, 20)
    tabs.draw(canvas, 0, 0)
    assert lit(canvas) == [(2 + 1, 2 + 1)]
    tabs.index = 1
    canvas = Canvas(20, 20)
    tabs.draw(canvas, 0, 0)
    assert lit(canvas) == [(2 + 3, 2 + 4)]


def test_tabs_out_of_range_draws_nothing():
    canvas = Canvas(20, 20)
    tabs = Tabs(0, 0, index=5)
    tabs.drawables.push_back(Dot(1, 1))
    tabs.draw(canvas, 0, 0)
    assert lit(canvas) == []