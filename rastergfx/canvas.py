"""A software drawing target with a current colour and blend mode.

The canvas offers the small set of raster operations the drawing
primitives are built on: points, lines, rectangle outlines, filled
rectangles and image blits, each honouring the current blend mode.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

Rect = Tuple[int, int, int, int]
Point = Tuple[int, int]


class BlendMode(enum.Enum):
    """How drawn pixels combine with what is already on the canvas."""

    NONE = "none"
    BLEND = "blend"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour component {name} out of range: {value!r}")

    @classmethod
    def from_packed(cls, value: int) -> "Color":
        """Unpack a 32-bit colour whose bytes, lowest first, are r, g, b, a."""
        if not isinstance(value, int) or not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"packed colour out of range: {value!r}")
        r, g, b, a = value.to_bytes(4, "little")
        return cls(r, g, b, a)


TRANSPARENT = Color(0, 0, 0, 0)


def _blend(src: Color, dst: Color, mode: BlendMode) -> Color:
    if mode is BlendMode.NONE:
        return src
    a = src.a
    inv = 255 - a

    def mix(s: int, d: int) -> int:
        return (s * a + d * inv + 127) // 255

    alpha = a + (dst.a * inv + 127) // 255
    return Color(mix(src.r, dst.r), mix(src.g, dst.g), mix(src.b, dst.b), min(alpha, 255))


class Image:
    """A width x height grid of colours, initially fully transparent."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [[TRANSPARENT] * width for _ in range(height)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_at(self, x: int, y: int) -> Color:
        """Return the colour at (x, y)."""
        self._check(x, y)
        return self._pixels[y][x]

    def set_at(self, x: int, y: int, color: Color) -> None:
        """Store a colour at (x, y), replacing what was there."""
        self._check(x, y)
        self._pixels[y][x] = color


def _line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[Point]:
    dx = abs(x2 - x1)
    dy = -abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx + dy
    x, y = x1, y1
    while True:
        yield x, y
        if x == x2 and y == y2:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


class Canvas:
    """A drawing target that paints with a current colour and blend mode."""

    def __init__(self, width: int, height: int) -> None:
        self.image = Image(width, height)
        self.color = Color(255, 255, 255, 255)
        self.blend_mode = BlendMode.NONE

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def get_at(self, x: int, y: int) -> Color:
        """Return the colour currently stored at (x, y)."""
        return self.image.get_at(x, y)

    def use_color(self, color: Color) -> None:
        """Make `color` current; opaque colours replace, others blend."""
        self.blend_mode = BlendMode.NONE if color.a == 255 else BlendMode.BLEND
        self.color = color

    def _plot(self, x: int, y: int, color: Color, mode: BlendMode) -> None:
        if self.image.contains(x, y):
            dst = self.image.get_at(x, y)
            self.image.set_at(x, y, _blend(color, dst, mode))

    def point(self, x: int, y: int) -> None:
        """Paint one pixel; points off the canvas are clipped."""
        self._plot(int(x), int(y), self.color, self.blend_mode)

    def line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Paint a line including both endpoints."""
        for px, py in _line_points(int(x1), int(y1), int(x2), int(y2)):
            self._plot(px, py, self.color, self.blend_mode)

    def lines(self, points: Iterable[Point]) -> None:
        """Paint connected segments; shared vertices are painted once."""
        pts = [(int(x), int(y)) for x, y in points]
        if not pts:
            return
        if len(pts) == 1:
            self.point(*pts[0])
            return
        painted = set()
        for (x1, y1), (x2, y2) in zip(pts, pts[1:]):
            for p in _line_points(x1, y1, x2, y2):
                if p not in painted:
                    painted.add(p)
                    self._plot(p[0], p[1], self.color, self.blend_mode)

    def rect(self, x: int, y: int, w: int, h: int) -> None:
        """Paint the outline of the w x h rectangle at (x, y)."""
        x, y, w, h = int(x), int(y), int(w), int(h)
        if w <= 0 or h <= 0:
            return
        right, bottom = x + w - 1, y + h - 1
        edge = set()
        for px in range(x, right + 1):
            edge.add((px, y))
            edge.add((px, bottom))
        for py in range(y, bottom + 1):
            edge.add((x, py))
            edge.add((right, py))
        for px, py in edge:
            self._plot(px, py, self.color, self.blend_mode)

    def fill_rect(self, x: int, y: int, w: int, h: int) -> None:
        """Paint every pixel of the w x h rectangle at (x, y)."""
        x, y, w, h = int(x), int(y), int(w), int(h)
        for py in range(max(y, 0), min(y + h, self.height)):
            for px in range(max(x, 0), min(x + w, self.width)):
                self._plot(px, py, self.color, self.blend_mode)

    def blit(
        self,
        image: Image,
        src_rect: Optional[Sequence[int]],
        dst_rect: Optional[Sequence[int]],
    ) -> None:
        """Copy a region of `image` onto the canvas with alpha blending.

        `None` for a rectangle means the whole image or the whole canvas.
        The source region is stretched to the destination size.
        """
        sx, sy, sw, sh = (0, 0, image.width, image.height) if src_rect is None else map(int, src_rect)
        dx, dy, dw, dh = (0, 0, self.width, self.height) if dst_rect is None else map(int, dst_rect)
        if sw <= 0 or sh <= 0 or dw <= 0 or dh <= 0:
            return
        if sx < 0 or sy < 0 or sx + sw > image.width or sy + sh > image.height:
            raise ValueError(f"source rectangle {(sx, sy, sw, sh)} outside the image")
        for py in range(max(dy, 0), min(dy + dh, self.height)):
            src_y = sy + (py - dy) * sh // dh
            for px in range(max(dx, 0), min(dx + dw, self.width)):
                src_x = sx + (px - dx) * sw // dw
                self._plot(px, py, image.get_at(src_x, src_y), BlendMode.BLEND)