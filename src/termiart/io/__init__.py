"""File I/O for grid files."""

from termiart.io.reader import load, read_header
from termiart.io.writer import save

__all__ = ["load", "save", "read_header"]
