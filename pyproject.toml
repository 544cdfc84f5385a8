[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rastergfx"
version = "0.1.0"
description = "Software rasterizer for pixels, lines, curves, rectangles, polygons, pies and Bezier curves on an in-memory RGBA canvas"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "rasterizer", "primitives", "antialiasing", "drawing", "canvas", "bezier", "polygon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rastergfx"]

[tool.pytest.ini_options]
addopts = "-ra"
