"""Rectangles and boxes, with square or rounded corners.

Each primitive makes its colour current on the canvas, so opaque colours
replace what is underneath and translucent ones blend. Coordinates are
16-bit signed values and wrap like them. Corner order does not matter.
"""

from __future__ import annotations

from typing import Tuple

from rastergfx.canvas import Canvas
from rastergfx.curves import arc
from rastergfx.lines import ColorLike, _as_color, _i16, hline, pixel, vline


def _ordered(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def _degenerate(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: ColorLike
) -> bool:
    """Draw a point or straight line when the corners share a row or column."""
    if x1 == x2:
        if y1 == y2:
            pixel(canvas, x1, y1, color)
        else:
            vline(canvas, x1, y1, y2, color)
        return True
    if y1 == y2:
        hline(canvas, x1, x2, y1, color)
        return True
    return False


def _check_radius(rad: int) -> None:
    if rad < 0:
        raise ValueError(f"radius must not be negative, got {rad}")


def rectangle(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: ColorLike) -> None:
    """Paint a rectangle outline spanning the two corners.

    The outline covers x2 - x1 columns and y2 - y1 rows starting at the
    smaller corner, so the far edges lie one pixel inside x2 and y2.
    """
    c = _as_color(color)
    x1, y1, x2, y2 = _i16(x1), _i16(y1), _i16(x2), _i16(y2)
    if _degenerate(canvas, x1, y1, x2, y2, c):
        return
    x1, x2 = _ordered(x1, x2)
    y1, y2 = _ordered(y1, y2)
    canvas.use_color(c)
    canvas.rect(x1, y1, x2 - x1, y2 - y1)


def box(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: ColorLike) -> None:
    """Paint a filled rectangle including both corners."""
    c = _as_color(color)
    x1, y1, x2, y2 = _i16(x1), _i16(y1), _i16(x2), _i16(y2)
    if _degenerate(canvas, x1, y1, x2, y2, c):
        return
    x1, x2 = _ordered(x1, x2)
    y1, y2 = _ordered(y1, y2)
    canvas.use_color(c)
    canvas.fill_rect(x1, y1, x2 - x1 + 1, y2 - y1 + 1)


def rounded_rectangle(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, rad: int, color: ColorLike
) -> None:
    """Paint a rectangle outline whose corners are arcs of radius `rad`.

    The radius shrinks to fit the rectangle; a radius of 0 or 1 gives a
    plain rectangle.
    """
    c = _as_color(color)
    x1, y1, x2, y2, rad = _i16(x1), _i16(y1), _i16(x2), _i16(y2), _i16(rad)
    _check_radius(rad)
    if rad <= 1:
        rectangle(canvas, x1, y1, x2, y2, c)
        return
    if _degenerate(canvas, x1, y1, x2, y2, c):
        return
    x1, x2 = _ordered(x1, x2)
    y1, y2 = _ordered(y1, y2)

    w = _i16(x2 - x1)
    h = _i16(y2 - y1)
    if rad * 2 > w:
        rad = int(w / 2)
    if rad * 2 > h:
        rad = int(h / 2)

    xx1 = _i16(x1 + rad)
    xx2 = _i16(x2 - rad)
    yy1 = _i16(y1 + rad)
    yy2 = _i16(y2 - rad)
    arc(canvas, xx1, yy1, rad, 180, 270, c)
    arc(canvas, xx2, yy1, rad, 270, 360, c)
    arc(canvas, xx1, yy2, rad, 90, 180, c)
    arc(canvas, xx2, yy2, rad, 0, 90, c)

    if xx1 <= xx2:
        hline(canvas, xx1, xx2, y1, c)
        hline(canvas, xx1, xx2, y2, c)
    if yy1 <= yy2:
        vline(canvas, x1, yy1, yy2, c)
        vline(canvas, x2, yy1, yy2, c)


def _span(canvas: Canvas, xa: int, xb: int, y: int) -> None:
    y = _i16(y)
    canvas.line(_i16(xa), y, _i16(xb), y)


def rounded_box(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, rad: int, color: ColorLike
) -> None:
    """Paint a filled rectangle whose corners are rounded with radius `rad`.

    A radius of 0 or 1 gives a plain filled box. The corner circle is
    traced with the radius as given, while its placement uses the radius
    shrunk to fit the box.
    """
    c = _as_color(color)
    x1, y1, x2, y2, rad = _i16(x1), _i16(y1), _i16(x2), _i16(y2), _i16(rad)
    _check_radius(rad)
    if rad <= 1:
        box(canvas, x1, y1, x2, y2, c)
        return
    if _degenerate(canvas, x1, y1, x2, y2, c):
        return
    x1, x2 = _ordered(x1, x2)
    y1, y2 = _ordered(y1, y2)

    cx = 0
    cy = rad
    ocx = ocy = -1
    df = 1 - rad
    d_e = 3
    d_se = -2 * rad + 5

    w = _i16(x2 - x1 + 1)
    h = _i16(y2 - y1 + 1)
    r2 = rad + rad
    if r2 > w:
        rad = int(w / 2)
        r2 = rad + rad
    if r2 > h:
        rad = int(h / 2)

    x = _i16(x1 + rad)
    y = _i16(y1 + rad)
    dx = _i16(x2 - x1 - rad - rad)
    dy = _i16(y2 - y1 - rad - rad)

    canvas.use_color(c)

    while True:
        xpcx, xmcx = x + cx, x - cx
        xpcy, xmcy = x + cy, x - cy
        if ocy != cy:
            if cy > 0:
                _span(canvas, xmcx, xpcx + dx, _i16(y + cy) + dy)
                _span(canvas, xmcx, xpcx + dx, y - cy)
            else:
                _span(canvas, xmcx, xpcx + dx, y)
            ocy = cy
        if ocx != cx:
            if cx != cy:
                if cx > 0:
                    _span(canvas, xmcy, xpcy + dx, y - cx)
                    _span(canvas, xmcy, xpcy + dx, _i16(y + cx) + dy)
                else:
                    _span(canvas, xmcy, xpcy + dx, y)
            ocx = cx

        if df < 0:
            df += d_e
            d_e += 2
            d_se += 2
        else:
            df += d_se
            d_e += 2
            d_se += 4
            cy -= 1
        cx += 1
        if cx > cy:
            break

    if dx > 0 and dy > 0:
        box(canvas, x1, y1 + rad + 1, x2, y2 - rad, c)