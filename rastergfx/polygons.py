"""Polygons and triangles: outlined, anti-aliased, filled and textured.

A polygon is given as a sequence of (x, y) vertices and is closed
automatically; at least three vertices are required. Coordinates are 16-bit
signed values and wrap like them. Opaque colours replace what is underneath
and translucent ones blend.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from rastergfx.canvas import Canvas, Image
from rastergfx.lines import ColorLike, _aaline, _as_color, _i16

Point = Tuple[int, int]


def _vertices(points: Sequence[Sequence[int]]) -> List[Point]:
    pts = [(_i16(x), _i16(y)) for x, y in points]
    if len(pts) < 3:
        raise ValueError(f"a polygon needs at least 3 vertices, got {len(pts)}")
    return pts


def _round16(value: int) -> int:
    """Convert 16.16 fixed point to an integer, rounding at one half."""
    return (value >> 16) + ((value & 32768) >> 15)


def _scanlines(pts: List[Point]) -> Iterator[Tuple[int, int, int]]:
    """Yield (y, x_start, x_end) spans covering the polygon's interior."""
    ys = [y for _, y in pts]
    miny, maxy = min(ys), max(ys)
    edges = list(zip([pts[-1]] + pts[:-1], pts))
    for y in range(miny, maxy + 1):
        crossings = []
        for (ax, ay), (bx, by) in edges:
            if ay < by:
                x1, y1, x2, y2 = ax, ay, bx, by
            elif ay > by:
                x1, y1, x2, y2 = bx, by, ax, ay
            else:
                continue
            if y1 <= y < y2 or (y == maxy and y1 < y <= y2):
                crossings.append((65536 * (y - y1)) // (y2 - y1) * (x2 - x1) + 65536 * x1)
        crossings.sort()
        for left, right in zip(crossings[::2], crossings[1::2]):
            yield y, _round16(left + 1), _round16(right - 1)


def polygon(canvas: Canvas, points: Sequence[Sequence[int]], color: ColorLike) -> None:
    """Paint the closed outline through the given vertices."""
    pts = _vertices(points)
    canvas.use_color(_as_color(color))
    canvas.lines(pts + [pts[0]])


def aapolygon(canvas: Canvas, points: Sequence[Sequence[int]], color: ColorLike) -> None:
    """Paint an anti-aliased closed outline through the given vertices."""
    pts = _vertices(points)
    c = _as_color(color)
    for (x1, y1), (x2, y2) in zip(pts, pts[1:] + [pts[0]]):
        _aaline(canvas, x1, y1, x2, y2, c, False)


def filled_polygon(canvas: Canvas, points: Sequence[Sequence[int]], color: ColorLike) -> None:
    """Paint a filled polygon by scanning it row by row."""
    pts = _vertices(points)
    canvas.use_color(_as_color(color))
    for y, xa, xb in _scanlines(pts):
        row = _i16(y)
        canvas.line(_i16(xa), row, _i16(xb), row)


def _textured_span(
    canvas: Canvas, x1: int, x2: int, y: int, image: Image, texture_dx: int, texture_dy: int
) -> None:
    x1, x2, y = _i16(x1), _i16(x2), _i16(y)
    if x1 > x2:
        x1, x2 = x2, x1
    width = _i16(x2 - x1 + 1)
    tw, th = image.width, image.height
    walker = (x1 - texture_dx) % tw
    row = (y + texture_dy) % th

    if width <= tw - walker:
        canvas.blit(image, (walker, row, width, 1), (x1, y, width, 1))
        return

    written = tw - walker
    canvas.blit(image, (walker, row, written, 1), (x1, y, written, 1))
    chunk = tw
    while written < width:
        chunk = min(chunk, width - written)
        canvas.blit(image, (0, row, chunk, 1), (x1 + written, y, chunk, 1))
        written += chunk


def textured_polygon(
    canvas: Canvas,
    points: Sequence[Sequence[int]],
    image: Image,
    texture_dx: int,
    texture_dy: int,
) -> None:
    """Fill a polygon with `image` tiled across the canvas.

    A canvas pixel (x, y) takes the texel at
    ((x - texture_dx) mod width, (y + texture_dy) mod height).
    Texels are alpha-blended onto the canvas.
    """
    pts = _vertices(points)
    texture_dx, texture_dy = int(texture_dx), int(texture_dy)
    for y, xa, xb in _scanlines(pts):
        _textured_span(canvas, xa, xb, y, image, texture_dx, texture_dy)


def trigon(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: ColorLike
) -> None:
    """Paint a triangle outline."""
    polygon(canvas, [(x1, y1), (x2, y2), (x3, y3)], color)


def aatrigon(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: ColorLike
) -> None:
    """Paint an anti-aliased triangle outline."""
    aapolygon(canvas, [(x1, y1), (x2, y2), (x3, y3)], color)


def filled_trigon(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: ColorLike
) -> None:
    """Paint a filled triangle."""
    filled_polygon(canvas, [(x1, y1), (x2, y2), (x3, y3)], color)