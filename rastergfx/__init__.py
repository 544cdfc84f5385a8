"""Software rasterizer: lines, curves, shapes, polygons and paths on an in-memory RGBA canvas."""

__version__ = "0.1.0"