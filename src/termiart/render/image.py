"""Render a grid to a raster image with Pillow."""

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from termiart.core.grid import Grid


class ImageRenderer:
    """
    Paint each cell as a ``cell_size`` square of its background color,
    with non-blank glyphs drawn on top in the glyph color.
    """

    def __init__(self, cell_size: int = 16, draw_glyphs: bool = True):
        if cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.draw_glyphs = draw_glyphs

    def render(self, grid: Grid) -> Image.Image:
        size = self.cell_size
        image = Image.new("RGB", (grid.width * size, grid.height * size))
        draw = ImageDraw.Draw(image)
        font = ImageFont.load_default()

        for x, y, cell in grid.cells():
            left, top = x * size, y * size
            draw.rectangle(
                (left, top, left + size - 1, top + size - 1),
                fill=cell.bg.rgb,
            )
            if self.draw_glyphs and cell.glyph.strip():
                draw.text((left, top), cell.glyph, fill=cell.fg.rgb, font=font)

        return image

    def save(self, grid: Grid, path: str | Path) -> None:
        self.render(grid).save(path)
