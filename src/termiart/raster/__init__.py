"""Rasterisation algorithms that draw onto a Grid."""

from termiart.raster.line import draw_boundary_line, draw_line, preview_rect
from termiart.raster.circle import draw_circle, fill_circle
from termiart.raster.ellipse import draw_ellipse, fill_ellipse
from termiart.raster.fill import fill_area

__all__ = [
    "draw_line",
    "draw_boundary_line",
    "preview_rect",
    "draw_circle",
    "fill_circle",
    "draw_ellipse",
    "fill_ellipse",
    "fill_area",
]
