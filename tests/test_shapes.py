import pytest

from rastergfx.canvas import Canvas, Color
from rastergfx.shapes import box, rectangle, rounded_box, rounded_rectangle

RED = Color(255, 0, 0)
EMPTY = Color(0, 0, 0, 0)


def painted(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_at(x, y) != EMPTY
    }


def grid(canvas):
    return [[canvas.get_at(x, y) for x in range(canvas.width)] for y in range(canvas.height)]


def test_box_fills_inclusive_region():
    canvas = Canvas(10, 10)
    box(canvas, 2, 3, 5, 6, RED)
    expected = {(x, y) for x in range(2, 6) for y in range(3, 7)}
    assert painted(canvas) == expected
    assert canvas.get_at(2, 3) == RED


def test_box_corner_order_does_not_matter():
    a = Canvas(10, 10)
    b = Canvas(10, 10)
    box(a, 2, 3, 5, 6, RED)
    box(b, 5, 6, 2, 3, RED)
    assert grid(a) == grid(b)


def test_box_accepts_packed_colour():
    canvas = Canvas(6, 6)
    box(canvas, 1, 1, 3, 3, 0xFF0000FF)
    assert canvas.get_at(2, 2) == Color.from_packed(0xFF0000FF)


def test_box_coordinates_wrap_as_16_bit():
    a = Canvas(8, 8)
    b = Canvas(8, 8)
    box(a, 1, 1, 4, 4, RED)
    box(b, 65536 + 1, 1, 4, 65536 + 4, RED)
    assert grid(a) == grid(b)


def test_rectangle_outline_stops_short_of_far_corner():
    canvas = Canvas(10, 10)
    rectangle(canvas, 1, 1, 5, 4, RED)
    pts = painted(canvas)
    assert (1, 1) in pts
    assert (4, 3) in pts
    assert (5, 4) not in pts
    assert (2, 2) not in pts


def test_rectangle_same_column_is_inclusive_vertical_line():
    canvas = Canvas(10, 10)
    rectangle(canvas, 3, 1, 3, 5, RED)
    assert painted(canvas) == {(3, y) for y in range(1, 6)}


def test_rectangle_single_point():
    canvas = Canvas(5, 5)
    rectangle(canvas, 2, 2, 2, 2, RED)
    assert painted(canvas) == {(2, 2)}


def test_rounded_rectangle_small_radius_matches_rectangle():
    a = Canvas(12, 12)
    b = Canvas(12, 12)
    rectangle(a, 1, 2, 9, 8, RED)
    rounded_rectangle(b, 1, 2, 9, 8, 1, RED)
    assert grid(a) == grid(b)


def test_rounded_box_small_radius_matches_box():
    a = Canvas(12, 12)
    b = Canvas(12, 12)
    box(a, 1, 2, 9, 8, RED)
    rounded_box(b, 1, 2, 9, 8, 0, RED)
    assert grid(a) == grid(b)


@pytest.mark.parametrize("func", [rounded_rectangle, rounded_box])
def test_negative_radius_rejected(func):
    canvas = Canvas(10, 10)
    with pytest.raises(ValueError):
        func(canvas, 1, 1, 8, 8, -2, RED)
    assert painted(canvas) == set()


def test_rounded_rectangle_edges_and_corners():
    canvas = Canvas(20, 20)
    rounded_rectangle(canvas, 2, 2, 17, 17, 4, RED)
    pts = painted(canvas)
    for p in [(9, 2), (9, 17), (2, 9), (17, 9)]:
        assert p in pts
    assert (2, 2) not in pts
    assert (17, 17) not in pts
    assert (9, 9) not in pts
    assert all(2 <= x <= 17 and 2 <= y <= 17 for x, y in pts)


def test_rounded_box_shape():
    canvas = Canvas(20, 20)
    rounded_box(canvas, 2, 2, 17, 17, 4, RED)
    pts = painted(canvas)
    assert (2, 2) not in pts
    assert (17, 17) not in pts
    assert (2, 17) not in pts
    assert (17, 2) not in pts
    for p in [(9, 9), (2, 9), (17, 9), (9, 2), (9, 17)]:
        assert p in pts
    assert all(2 <= x <= 17 and 2 <= y <= 17 for x, y in pts)


def test_rounded_box_is_symmetric():
    canvas = Canvas(20, 20)
    rounded_box(canvas, 2, 2, 17, 17, 4, RED)
    pts = painted(canvas)
    assert pts == {(19 - x, y) for x, y in pts}
    assert pts == {(x, 19 - y) for x, y in pts}


def test_rounded_box_degenerate_is_line():
    a = Canvas(10, 10)
    b = Canvas(10, 10)
    rounded_box(a, 1, 4, 8, 4, 3, RED)
    box(b, 1, 4, 8, 4, RED)
    assert grid(a) == grid(b)
    assert painted(a) == {(x, 4) for x in range(1, 9)}