import pytest

from rastergfx.canvas import Canvas, Color, Image
from rastergfx.polygons import (
    aapolygon,
    aatrigon,
    filled_polygon,
    filled_trigon,
    polygon,
    textured_polygon,
    trigon,
)

RED = Color(255, 0, 0, 255)
BLANK = Color(0, 0, 0, 0)
SQUARE = [(1, 1), (5, 1), (5, 5), (1, 5)]


def snapshot(canvas):
    return [[canvas.get_at(x, y) for x in range(canvas.width)] for y in range(canvas.height)]


def painted(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_at(x, y) != BLANK
    }


@pytest.mark.parametrize("func", [polygon, aapolygon, filled_polygon])
def test_too_few_vertices_rejected(func):
    canvas = Canvas(4, 4)
    with pytest.raises(ValueError):
        func(canvas, [(0, 0), (3, 3)], RED)


def test_textured_too_few_vertices_rejected():
    canvas = Canvas(4, 4)
    with pytest.raises(ValueError):
        textured_polygon(canvas, [(0, 0), (1, 1)], Image(2, 2), 0, 0)


def test_polygon_outline_leaves_interior_empty():
    canvas = Canvas(7, 7)
    polygon(canvas, SQUARE, RED)
    edge = {(x, y) for x in range(1, 6) for y in range(1, 6) if x in (1, 5) or y in (1, 5)}
    assert painted(canvas) == edge
    assert canvas.get_at(3, 3) == BLANK
    assert canvas.get_at(1, 1) == RED


def test_filled_square_covers_all_vertices_and_interior():
    canvas = Canvas(7, 7)
    filled_polygon(canvas, SQUARE, RED)
    assert painted(canvas) == {(x, y) for x in range(1, 6) for y in range(1, 6)}
    assert canvas.get_at(3, 3) == RED


def test_filled_polygon_stays_within_bounding_box():
    canvas = Canvas(12, 12)
    filled_polygon(canvas, [(2, 1), (9, 4), (4, 10)], RED)
    pixels = painted(canvas)
    assert pixels
    assert all(2 <= x <= 9 and 1 <= y <= 10 for x, y in pixels)


def test_filled_polygon_accepts_packed_colour():
    canvas = Canvas(7, 7)
    filled_polygon(canvas, SQUARE, 0xFF0000FF)
    assert canvas.get_at(3, 3) == RED


def test_filled_polygon_vertex_order_does_not_matter():
    a = Canvas(12, 12)
    b = Canvas(12, 12)
    filled_polygon(a, [(2, 1), (9, 4), (4, 10)], RED)
    filled_polygon(b, [(4, 10), (9, 4), (2, 1)], RED)
    assert snapshot(a) == snapshot(b)


def test_trigon_matches_polygon():
    a = Canvas(12, 12)
    b = Canvas(12, 12)
    trigon(a, 1, 1, 10, 3, 5, 9, RED)
    polygon(b, [(1, 1), (10, 3), (5, 9)], RED)
    assert snapshot(a) == snapshot(b)
    assert a.get_at(1, 1) == RED


def test_filled_trigon_matches_filled_polygon():
    a = Canvas(12, 12)
    b = Canvas(12, 12)
    filled_trigon(a, 1, 1, 10, 3, 5, 9, RED)
    filled_polygon(b, [(1, 1), (10, 3), (5, 9)], RED)
    assert snapshot(a) == snapshot(b)


def test_aatrigon_matches_aapolygon():
    a = Canvas(12, 12)
    b = Canvas(12, 12)
    aatrigon(a, 1, 1, 10, 3, 5, 9, RED)
    aapolygon(b, [(1, 1), (10, 3), (5, 9)], RED)
    assert snapshot(a) == snapshot(b)
    assert a.get_at(1, 1) == RED


def test_aapolygon_axis_aligned_matches_plain_outline():
    a = Canvas(7, 7)
    b = Canvas(7, 7)
    aapolygon(a, SQUARE, RED)
    polygon(b, SQUARE, RED)
    assert snapshot(a) == snapshot(b)


def _checker():
    image = Image(2, 2)
    image.set_at(0, 0, Color(10, 20, 30, 255))
    image.set_at(1, 0, Color(40, 50, 60, 255))
    image.set_at(0, 1, Color(70, 80, 90, 255))
    image.set_at(1, 1, Color(100, 110, 120, 255))
    return image


def test_textured_polygon_tiles_texture():
    image = _checker()
    canvas = Canvas(7, 7)
    textured_polygon(canvas, SQUARE, image, 0, 0)
    assert painted(canvas) == {(x, y) for x in range(1, 6) for y in range(1, 6)}
    for x in range(1, 6):
        for y in range(1, 6):
            assert canvas.get_at(x, y) == image.get_at(x % 2, y % 2)


def test_textured_polygon_offsets_shift_texture():
    image = _checker()
    canvas = Canvas(7, 7)
    textured_polygon(canvas, SQUARE, image, 1, 1)
    for x in range(1, 6):
        for y in range(1, 6):
            assert canvas.get_at(x, y) == image.get_at((x - 1) % 2, (y + 1) % 2)


def test_textured_polygon_transparent_texture_leaves_canvas():
    canvas = Canvas(7, 7)
    textured_polygon(canvas, SQUARE, Image(3, 3), 0, 0)
    assert painted(canvas) == set()
    assert canvas.get_at(3, 3) == BLANK