"""Pixels, straight lines and anti-aliased lines drawn in a given colour.

Each primitive makes its colour current on the canvas first. Opaque colours
replace what is underneath and translucent ones blend. Coordinates are
16-bit signed values and wrap like them.
"""

from __future__ import annotations

from typing import Union

from rastergfx.canvas import Canvas, Color

ColorLike = Union[Color, int]

_AA_BITS = 8
_INT_SHIFT = 32 - _AA_BITS
_U32 = 0xFFFFFFFF


def _i16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def _as_color(color: ColorLike) -> Color:
    if isinstance(color, Color):
        return color
    if isinstance(color, int) and not isinstance(color, bool):
        return Color.from_packed(color)
    raise TypeError(f"expected a Color or a packed 32-bit colour, got {color!r}")


def pixel(canvas: Canvas, x: int, y: int, color: ColorLike) -> None:
    """Paint one pixel, blending when the colour is not opaque."""
    canvas.use_color(_as_color(color))
    canvas.point(_i16(x), _i16(y))


def pixel_weighted(canvas: Canvas, x: int, y: int, color: ColorLike, weight: int) -> None:
    """Paint one pixel with its alpha scaled by weight/256, capped at 255."""
    c = _as_color(color)
    alpha = min(255, (c.a * (int(weight) & _U32)) >> 8)
    pixel(canvas, x, y, Color(c.r, c.g, c.b, alpha))


def hline(canvas: Canvas, x1: int, x2: int, y: int, color: ColorLike) -> None:
    """Paint a horizontal line from x1 to x2 inclusive at row y."""
    canvas.use_color(_as_color(color))
    y = _i16(y)
    canvas.line(_i16(x1), y, _i16(x2), y)


def vline(canvas: Canvas, x: int, y1: int, y2: int, color: ColorLike) -> None:
    """Paint a vertical line from y1 to y2 inclusive at column x."""
    canvas.use_color(_as_color(color))
    x = _i16(x)
    canvas.line(x, _i16(y1), x, _i16(y2))


def line(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: ColorLike) -> None:
    """Paint a line between two points, both endpoints included."""
    canvas.use_color(_as_color(color))
    canvas.line(_i16(x1), _i16(y1), _i16(x2), _i16(y2))


def _aaline(
    canvas: Canvas,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: ColorLike,
    draw_endpoint: bool,
) -> None:
    """Wu anti-aliased line; the last pixel is left out unless draw_endpoint."""
    c = _as_color(color)
    x1, y1, x2, y2 = _i16(x1), _i16(y1), _i16(x2), _i16(y2)

    xx0, yy0, xx1, yy1 = x1, y1, x2, y2
    if yy0 > yy1:
        xx0, yy0, xx1, yy1 = xx1, yy1, xx0, yy0

    dx = xx1 - xx0
    dy = yy1 - yy0
    xdir = 1 if dx >= 0 else -1
    dx = abs(dx)

    if dx == 0:
        if draw_endpoint:
            vline(canvas, x1, y1, y2, c)
        elif dy > 0:
            vline(canvas, x1, yy0, yy0 + dy, c)
        else:
            pixel(canvas, x1, y1, c)
        return
    if dy == 0:
        if draw_endpoint:
            hline(canvas, x1, x2, y1, c)
        else:
            hline(canvas, xx0, xx0 + xdir * dx, y1, c)
        return
    if dx == dy and draw_endpoint:
        line(canvas, x1, y1, x2, y2, c)
        return

    erracc = 0
    pixel(canvas, x1, y1, c)

    if dy > dx:
        erradj = (((dx << 16) // dy) << 16) & _U32
        x0pxdir = xx0 + xdir
        for _ in range(dy - 1):
            previous = erracc
            erracc = (erracc + erradj) & _U32
            if erracc <= previous:
                xx0 = x0pxdir
                x0pxdir += xdir
            yy0 += 1
            wgt = (erracc >> _INT_SHIFT) & 255
            pixel_weighted(canvas, xx0, yy0, c, 255 - wgt)
            pixel_weighted(canvas, x0pxdir, yy0, c, wgt)
    else:
        erradj = (((dy << 16) // dx) << 16) & _U32
        y0p1 = yy0 + 1
        for _ in range(dx - 1):
            previous = erracc
            erracc = (erracc + erradj) & _U32
            if erracc <= previous:
                yy0 = y0p1
                y0p1 += 1
            xx0 += xdir
            wgt = (erracc >> _INT_SHIFT) & 255
            pixel_weighted(canvas, xx0, yy0, c, 255 - wgt)
            pixel_weighted(canvas, xx0, y0p1, c, wgt)

    if draw_endpoint:
        pixel(canvas, x2, y2, c)


def aaline(canvas: Canvas, x1: int, y1: int, x2: int, y2: int, color: ColorLike) -> None:
    """Paint an anti-aliased line between two points, endpoints included."""
    _aaline(canvas, x1, y1, x2, y2, color, True)