"""Arcs, circles and ellipses: outlined, filled and anti-aliased.

Radii must not be negative. Each primitive makes its colour current on the
canvas, so opaque colours replace what is underneath and translucent ones
blend. Coordinates are 16-bit signed values and wrap like them.
"""

from __future__ import annotations

import math
import struct

from rastergfx.canvas import Canvas
from rastergfx.lines import ColorLike, _as_color, _i16, hline, pixel, pixel_weighted, vline

_DEFAULT_ELLIPSE_OVERSCAN = 4


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _check_radius(**radii: int) -> None:
    for name, value in radii.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def _plot(canvas: Canvas, x: int, y: int) -> None:
    canvas.point(_i16(x), _i16(y))


def _octant_offset(octant: int, degrees: int, rad: int) -> int:
    angle = degrees * math.pi / 180.0
    if octant in (0, 3):
        value = math.sin(angle)
    elif octant in (1, 6):
        value = math.cos(angle)
    elif octant in (2, 5):
        value = -math.cos(angle)
    else:
        value = -math.sin(angle)
    return int(value * rad)


def arc(canvas: Canvas, x: int, y: int, rad: int, start: int, end: int, color: ColorLike) -> None:
    """Paint a circular arc from `start` to `end` degrees.

    Angles grow from the +x axis towards +y (clockwise on screen); an arc
    whose start lies past its end wraps through 0 degrees.
    """
    c = _as_color(color)
    x, y, rad = _i16(x), _i16(y), _i16(rad)
    start, end = _i16(start) % 360, _i16(end) % 360
    _check_radius(rad=rad)
    if rad == 0:
        pixel(canvas, x, y, c)
        return

    startoct = start // 45
    endoct = end // 45
    drawoct = 0
    stopval_start = stopval_end = 0
    octant = startoct - 1
    while True:
        octant = (octant + 1) % 8
        bit = 1 << octant
        if octant == startoct:
            stopval_start = _octant_offset(octant, start, rad)
            if octant % 2:
                drawoct |= bit
            else:
                drawoct &= 255 - bit
        if octant == endoct:
            stopval_end = _octant_offset(octant, end, rad)
            if startoct == endoct:
                if start > end:
                    drawoct = 255
                else:
                    drawoct &= 255 - bit
            elif octant % 2:
                drawoct &= 255 - bit
            else:
                drawoct |= bit
        elif octant != startoct:
            drawoct |= bit
        if octant == endoct:
            break

    canvas.use_color(c)

    cx, cy = 0, rad
    df = 1 - rad
    d_e = 3
    d_se = -2 * rad + 5
    while True:
        ypcy, ymcy = y + cy, y - cy
        if cx > 0:
            xpcx, xmcx = x + cx, x - cx
            if drawoct & 4:
                _plot(canvas, xmcx, ypcy)
            if drawoct & 2:
                _plot(canvas, xpcx, ypcy)
            if drawoct & 32:
                _plot(canvas, xmcx, ymcy)
            if drawoct & 64:
                _plot(canvas, xpcx, ymcy)
        else:
            if drawoct & 96:
                _plot(canvas, x, ymcy)
            if drawoct & 6:
                _plot(canvas, x, ypcy)

        xpcy, xmcy = x + cy, x - cy
        if cx > 0 and cx != cy:
            ypcx, ymcx = y + cx, y - cx
            if drawoct & 8:
                _plot(canvas, xmcy, ypcx)
            if drawoct & 1:
                _plot(canvas, xpcy, ypcx)
            if drawoct & 16:
                _plot(canvas, xmcy, ymcx)
            if drawoct & 128:
                _plot(canvas, xpcy, ymcx)
        elif cx == 0:
            if drawoct & 24:
                _plot(canvas, xmcy, y)
            if drawoct & 129:
                _plot(canvas, xpcy, y)

        if stopval_start == cx:
            drawoct ^= 1 << startoct
        if stopval_end == cx:
            drawoct ^= 1 << endoct

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


def _draw_quadrants(canvas: Canvas, x: int, y: int, dx: int, dy: int, filled: bool) -> None:
    if dx == 0:
        if dy == 0:
            _plot(canvas, x, y)
        elif filled:
            canvas.line(_i16(x), _i16(y - dy), _i16(x), _i16(y + dy))
        else:
            _plot(canvas, x, y + dy)
            _plot(canvas, x, y - dy)
        return
    xpdx, xmdx = x + dx, x - dx
    ypdy, ymdy = y + dy, y - dy
    if filled:
        canvas.line(_i16(xpdx), _i16(ymdy), _i16(xpdx), _i16(ypdy))
        canvas.line(_i16(xmdx), _i16(ymdy), _i16(xmdx), _i16(ypdy))
    else:
        _plot(canvas, xpdx, ypdy)
        _plot(canvas, xmdx, ypdy)
        _plot(canvas, xpdx, ymdy)
        _plot(canvas, xmdx, ymdy)


def _ellipse(
    canvas: Canvas, x: int, y: int, rx: int, ry: int, color: ColorLike, filled: bool
) -> None:
    """Midpoint ellipse with overscan, outlined or filled."""
    c = _as_color(color)
    x, y, rx, ry = _i16(x), _i16(y), _i16(rx), _i16(ry)
    _check_radius(rx=rx, ry=ry)
    canvas.use_color(c)

    if rx == 0:
        if ry == 0:
            _plot(canvas, x, y)
        else:
            canvas.line(x, _i16(y - ry), x, _i16(y + ry))
        return
    if ry == 0:
        canvas.line(_i16(x - rx), y, _i16(x + rx), y)
        return

    if rx >= 512 or ry >= 512:
        overscan = _DEFAULT_ELLIPSE_OVERSCAN // 4
    elif rx >= 256 or ry >= 256:
        overscan = _DEFAULT_ELLIPSE_OVERSCAN // 2
    else:
        overscan = _DEFAULT_ELLIPSE_OVERSCAN

    old_x = scr_x = 0
    old_y = scr_y = ry
    _draw_quadrants(canvas, x, y, 0, ry, filled)

    rxi = rx * overscan
    ryi = ry * overscan
    rx2 = rxi * rxi
    rx22 = rx2 + rx2
    ry2 = ryi * ryi
    ry22 = ry2 + ry2
    cur_x = 0
    cur_y = ryi
    delta_x = 0
    delta_y = rx22 * cur_y

    error = ry2 - rx2 * ryi + rx2 // 4
    while delta_x <= delta_y:
        cur_x += 1
        delta_x += ry22
        error += delta_x + ry2
        if error >= 0:
            cur_y -= 1
            delta_y -= rx22
            error -= delta_y
        scr_x = cur_x // overscan
        scr_y = cur_y // overscan
        if scr_x != old_x:
            _draw_quadrants(canvas, x, y, scr_x, scr_y, filled)
            old_x, old_y = scr_x, scr_y

    if cur_y > 0:
        error = (
            ry2 * cur_x * (cur_x + 1)
            + (ry2 + 3) // 4
            + rx2 * (cur_y - 1) * (cur_y - 1)
            - rx2 * ry2
        )
        while cur_y > 0:
            cur_y -= 1
            delta_y -= rx22
            error += rx2
            error -= delta_y
            if error <= 0:
                cur_x += 1
                delta_x += ry22
                error += delta_x
            scr_x = cur_x // overscan
            scr_y = cur_y // overscan
            if scr_x != old_x:
                old_y -= 1
                while old_y >= scr_y:
                    _draw_quadrants(canvas, x, y, scr_x, old_y, filled)
                    if filled:
                        old_y = scr_y - 1
                    old_y -= 1
                old_x, old_y = scr_x, scr_y

        if not filled:
            old_y -= 1
            while old_y >= 0:
                _draw_quadrants(canvas, x, y, scr_x, old_y, filled)
                old_y -= 1


def ellipse(canvas: Canvas, x: int, y: int, rx: int, ry: int, color: ColorLike) -> None:
    """Paint the outline of an axis-aligned ellipse."""
    _ellipse(canvas, x, y, rx, ry, color, False)


def filled_ellipse(canvas: Canvas, x: int, y: int, rx: int, ry: int, color: ColorLike) -> None:
    """Paint a filled axis-aligned ellipse."""
    _ellipse(canvas, x, y, rx, ry, color, True)


def circle(canvas: Canvas, x: int, y: int, rad: int, color: ColorLike) -> None:
    """Paint the outline of a circle."""
    _ellipse(canvas, x, y, rad, rad, color, False)


def filled_circle(canvas: Canvas, x: int, y: int, rad: int, color: ColorLike) -> None:
    """Paint a filled circle."""
    _ellipse(canvas, x, y, rad, rad, color, True)


def _coverage(d: int, denom: int) -> tuple:
    if denom != 0:
        cp = _f32(_f32(float(abs(d))) / _f32(float(abs(denom))))
        cp = min(cp, 1.0)
    else:
        cp = 1.0
    weight = int(_f32(cp * 255)) & 0xFF
    return weight, 255 - weight


def aaellipse(canvas: Canvas, x: int, y: int, rx: int, ry: int, color: ColorLike) -> None:
    """Paint an anti-aliased ellipse outline."""
    c = _as_color(color)
    x, y, rx, ry = _i16(x), _i16(y), _i16(rx), _i16(ry)
    _check_radius(rx=rx, ry=ry)

    if rx == 0:
        if ry == 0:
            pixel(canvas, x, y, c)
        else:
            vline(canvas, x, y - ry, y + ry, c)
        return
    if ry == 0:
        hline(canvas, x - rx, x + rx, y, c)
        return

    a2 = rx * rx
    b2 = ry * ry
    ds = 2 * a2
    dt = 2 * b2
    xc2 = 2 * x
    yc2 = 2 * y

    sab = math.sqrt(float(a2 + b2))
    od = round(sab * 0.01) + 1
    dxt = round(a2 / sab) + od

    t = 0
    s = -2 * a2 * ry
    d = 0
    xp = x
    yp = y - ry

    pixel(canvas, xp, yp, c)
    pixel(canvas, xc2 - xp, yp, c)
    pixel(canvas, xp, yc2 - yp, c)
    pixel(canvas, xc2 - xp, yc2 - yp, c)

    for _ in range(dxt):
        xp -= 1
        d += t - b2
        if d >= 0:
            ys = yp - 1
        elif d - s - a2 > 0:
            if 2 * d - s - a2 >= 0:
                ys = yp + 1
            else:
                ys = yp
                yp += 1
                d -= s + a2
                s += ds
        else:
            yp += 1
            ys = yp + 1
            d -= s + a2
            s += ds
        t -= dt

        weight, iweight = _coverage(d, s)

        xx = xc2 - xp
        pixel_weighted(canvas, xp, yp, c, iweight)
        pixel_weighted(canvas, xx, yp, c, iweight)
        pixel_weighted(canvas, xp, ys, c, weight)
        pixel_weighted(canvas, xx, ys, c, weight)

        yy = yc2 - yp
        pixel_weighted(canvas, xp, yy, c, iweight)
        pixel_weighted(canvas, xx, yy, c, iweight)
        yy = yc2 - ys
        pixel_weighted(canvas, xp, yy, c, weight)
        pixel_weighted(canvas, xx, yy, c, weight)

    dyt = round(b2 / sab) + od

    for _ in range(dyt):
        yp += 1
        d -= s + a2
        if d <= 0:
            xs = xp + 1
        elif d + t - b2 < 0:
            if 2 * d + t - b2 <= 0:
                xs = xp - 1
            else:
                xs = xp
                xp -= 1
                d += t - b2
                t -= dt
        else:
            xp -= 1
            xs = xp - 1
            d += t - b2
            t -= dt
        s += ds

        weight, iweight = _coverage(d, t)

        xx = xc2 - xp
        yy = yc2 - yp
        pixel_weighted(canvas, xp, yp, c, iweight)
        pixel_weighted(canvas, xx, yp, c, iweight)
        pixel_weighted(canvas, xp, yy, c, iweight)
        pixel_weighted(canvas, xx, yy, c, iweight)

        xx = xc2 - xs
        pixel_weighted(canvas, xs, yp, c, weight)
        pixel_weighted(canvas, xx, yp, c, weight)
        pixel_weighted(canvas, xs, yy, c, weight)
        pixel_weighted(canvas, xx, yy, c, weight)


def aacircle(canvas: Canvas, x: int, y: int, rad: int, color: ColorLike) -> None:
    """Paint an anti-aliased circle outline."""
    aaellipse(canvas, x, y, rad, rad, color)