"""Pies, Bezier curves and thick lines.

Pies are built from polygon vertices around the arc. Bezier curves pass
through sampled points of the curve over the control points. Thick lines are
filled quadrilaterals. Coordinates are 16-bit signed values and wrap like
them. Opaque colours replace what is underneath and translucent ones blend.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from rastergfx.canvas import Canvas
from rastergfx.lines import ColorLike, _as_color, _i16, line, pixel
from rastergfx.polygons import filled_polygon, polygon
from rastergfx.shapes import box

Point = Tuple[int, int]


def _trunc_mod(value: int, modulus: int) -> int:
    """Remainder that keeps the sign of `value`, as truncating division does."""
    return int(math.fmod(value, modulus))


def _pie(
    canvas: Canvas,
    x: int,
    y: int,
    rad: int,
    start: int,
    end: int,
    color: ColorLike,
    filled: bool,
) -> None:
    c = _as_color(color)
    x, y, rad = _i16(x), _i16(y), _i16(rad)
    if rad < 0:
        raise ValueError(f"rad must not be negative, got {rad}")
    start = _trunc_mod(_i16(start), 360)
    end = _trunc_mod(_i16(end), 360)
    if rad == 0:
        pixel(canvas, x, y, c)
        return

    dr = float(rad)
    delta = 3.0 / dr
    start_angle = start * (math.pi / 180.0)
    end_angle = end * (math.pi / 180.0)
    if start > end:
        end_angle += 2.0 * math.pi

    def vertex(angle: float) -> Point:
        return _i16(x + int(dr * math.cos(angle))), _i16(y + int(dr * math.sin(angle)))

    points: List[Point] = [(x, y), vertex(start_angle)]
    angle = start_angle
    while angle < end_angle:
        angle = min(angle + delta, end_angle)
        points.append(vertex(angle))

    if len(points) < 3:
        (x0, y0), (x1, y1) = points
        line(canvas, x0, y0, x1, y1, c)
    elif filled:
        filled_polygon(canvas, points, c)
    else:
        polygon(canvas, points, c)


def pie(canvas: Canvas, x: int, y: int, rad: int, start: int, end: int, color: ColorLike) -> None:
    """Paint the outline of a pie slice from `start` to `end` degrees."""
    _pie(canvas, x, y, rad, start, end, color, False)


def filled_pie(
    canvas: Canvas, x: int, y: int, rad: int, start: int, end: int, color: ColorLike
) -> None:
    """Paint a filled pie slice from `start` to `end` degrees."""
    _pie(canvas, x, y, rad, start, end, color, True)


def _evaluate_bezier(data: Sequence[float], ndata: int, t: float) -> float:
    """Bernstein interpolation of the first `ndata` values at position t in [0, ndata]."""
    if t < 0.0:
        return data[0]
    if t >= float(ndata):
        return data[ndata - 1]

    mu = t / float(ndata)
    n = ndata - 1
    result = 0.0
    muk = 1.0
    munk = math.pow(1.0 - mu, float(n))
    for k in range(n + 1):
        nn, kn, nkn = n, k, n - k
        blend = muk * munk
        muk *= mu
        munk /= 1 - mu
        while nn >= 1:
            blend *= nn
            nn -= 1
            if kn > 1:
                blend /= float(kn)
                kn -= 1
            if nkn > 1:
                blend /= float(nkn)
                nkn -= 1
        result += data[k] * blend
    return result


def bezier(canvas: Canvas, points: Sequence[Sequence[int]], steps: int, color: ColorLike) -> None:
    """Paint a Bezier curve over at least 3 control points with `steps` >= 2 per point."""
    pts = [(_i16(px), _i16(py)) for px, py in points]
    n = len(pts)
    if n < 3:
        raise ValueError(f"a Bezier curve needs at least 3 points, got {n}")
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")

    xs = [float(px) for px, _ in pts] + [float(pts[0][0])]
    ys = [float(py) for _, py in pts] + [float(pts[0][1])]
    stepsize = 1.0 / float(steps)

    canvas.use_color(_as_color(color))

    t = 0.0
    x1 = _i16(round(_evaluate_bezier(xs, n + 1, t)))
    y1 = _i16(round(_evaluate_bezier(ys, n + 1, t)))
    for _ in range(n * steps + 1):
        t += stepsize
        x2 = _i16(int(_evaluate_bezier(xs, n, t)))
        y2 = _i16(int(_evaluate_bezier(ys, n, t)))
        canvas.line(x1, y1, x2, y2)
        x1, y1 = x2, y2


def thick_line(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, width: int, color: ColorLike
) -> None:
    """Paint a line `width` pixels wide (1 to 255) between two points."""
    width = int(width)
    if not 1 <= width <= 255:
        raise ValueError(f"width must be between 1 and 255, got {width}")
    c = _as_color(color)
    x1, y1, x2, y2 = _i16(x1), _i16(y1), _i16(x2), _i16(y2)

    if x1 == x2 and y1 == y2:
        wh = width // 2
        box(canvas, x1 - wh, y1 - wh, x2 + width, y2 + width, c)
        return
    if width == 1:
        line(canvas, x1, y1, x2, y2, c)
        return

    dx = float(x2 - x1)
    dy = float(y2 - y1)
    length = math.sqrt(dx * dx + dy * dy)
    ang = math.atan2(dx, dy)
    adj = 0.1 + 0.9 * abs(math.cos(2.0 * ang))
    wl2 = (width - adj) / (2.0 * length)
    nx = dx * wl2
    ny = dy * wl2

    quad = [
        (_i16(int(x1 + ny)), _i16(int(y1 - nx))),
        (_i16(int(x1 - ny)), _i16(int(y1 + nx))),
        (_i16(int(x2 - ny)), _i16(int(y2 + nx))),
        (_i16(int(x2 + ny)), _i16(int(y2 - nx))),
    ]
    filled_polygon(canvas, quad, c)