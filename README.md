# rastergfx

A small, dependency-free software rasterizer. It keeps an in-memory RGBA
`Canvas` and draws graphics primitives onto it: pixels, plain and
anti-aliased lines, arcs, circles and ellipses (outlined, filled and
anti-aliased), rectangles and rounded rectangles, boxes and rounded boxes,
polygons (outlined, anti-aliased, filled and textured), triangles, pies,
Bézier curves and thick lines.

Every primitive takes the canvas first and a colour last. A colour is
either a `Color` or a packed 32-bit integer whose bytes, lowest first, are
red, green, blue and alpha. A fully opaque colour replaces what is on the
canvas; any other colour is alpha-blended with it. Pixels that fall off the
canvas are clipped. Coordinates are treated as 16-bit signed integers and
wrap around like them.

## Installation

```
pip install rastergfx
```

Python 3.10 or later is required. There are no runtime dependencies.

## Quick start

```python
from rastergfx.canvas import Canvas, Color
from rastergfx.lines import line, aaline
from rastergfx.curves import circle, filled_ellipse
from rastergfx.shapes import rounded_box
from rastergfx.polygons import filled_trigon
from rastergfx.paths import bezier, thick_line

canvas = Canvas(200, 200)
red = Color(255, 0, 0)
translucent_blue = Color(0, 0, 255, 128)

line(canvas, 10, 10, 190, 10, red)
aaline(canvas, 10, 20, 190, 60, red)
circle(canvas, 100, 100, 40, red)
filled_ellipse(canvas, 100, 100, 30, 15, translucent_blue)
rounded_box(canvas, 20, 140, 80, 180, 8, red)
filled_trigon(canvas, 120, 180, 150, 130, 180, 180, translucent_blue)
bezier(canvas, [(10, 190), (60, 120), (120, 190)], 10, red)
thick_line(canvas, 20, 60, 80, 120, 5, red)

print(canvas.get_at(100, 10))   # Color(r=255, g=0, b=0, a=255)
```

## Modules

### `rastergfx.canvas`

- `Color(r, g, b, a=255)`: a frozen RGBA colour; components outside 0–255
  raise `ValueError`. `Color.from_packed(value)` unpacks a 32-bit integer.
- `BlendMode`: `NONE` (replace) or `BLEND` (alpha blend).
- `Image(width, height)`: a grid of colours, initially fully transparent,
  with `get_at(x, y)` and `set_at(x, y, color)`. Out-of-range pixels raise
  `IndexError`.
- `Canvas(width, height)`: the drawing target. `use_color(color)` makes a
  colour current (and picks the blend mode from its alpha); `point`, `line`,
  `lines`, `rect`, `fill_rect` and `blit` paint with it; `get_at(x, y)`
  reads a pixel back. The pixels live in `canvas.image`.

### `rastergfx.lines`

`pixel`, `pixel_weighted` (alpha scaled by `weight / 256`, capped at 255),
`hline`, `vline`, `line` and `aaline` (Wu anti-aliasing).

### `rastergfx.curves`

`arc`, `circle`, `aacircle`, `filled_circle`, `ellipse`, `aaellipse`,
`filled_ellipse`. Arc angles are in degrees, growing from the +x axis
towards +y; an arc whose start lies past its end wraps through 0. A
negative radius raises `ValueError`.

### `rastergfx.shapes`

`rectangle`, `rounded_rectangle`, `box`, `rounded_box`, each given two
opposite corners in either order. `box` includes both corners; the
`rectangle` outline spans `x2 - x1` columns and `y2 - y1` rows from the
smaller corner. Corner radii shrink to fit; a radius of 0 or 1 gives square
corners and a negative one raises `ValueError`.

### `rastergfx.polygons`

`polygon`, `aapolygon`, `filled_polygon`, `textured_polygon`, `trigon`,
`aatrigon`, `filled_trigon`. Polygons take a sequence of `(x, y)` vertices,
are closed automatically and need at least three vertices (otherwise
`ValueError`). `textured_polygon(canvas, points, image, texture_dx,
texture_dy)` fills the polygon with `image` tiled across the canvas: pixel
`(x, y)` takes the texel at `((x - texture_dx) mod width, (y + texture_dy)
mod height)`, alpha-blended onto the canvas.

### `rastergfx.paths`

- `pie` and `filled_pie`: slices from `start` to `end` degrees.
- `bezier(canvas, points, steps, color)`: needs at least 3 control points
  and `steps` of at least 2.
- `thick_line(canvas, x1, y1, x2, y2, width, color)`: `width` from 1 to 255.

Invalid arguments raise `ValueError`.

## What it does not do

rastergfx only draws into memory. It does not open windows or display
anything, does not read or write image files, does not draw text, and does
not rotate or scale images. To see the result, read the pixels back with
`Canvas.get_at` (or from `canvas.image`) and hand them to whatever displays
or saves images in your application.

## Running the tests

From a checkout of the project:

```
pip install -e ".[test]"
pytest
```