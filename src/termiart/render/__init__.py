"""Renderers for outputting grids to various formats."""

from termiart.render.terminal import TerminalRenderer
from termiart.render.text import TextRenderer

__all__ = ["TerminalRenderer", "TextRenderer"]
