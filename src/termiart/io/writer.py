"""Save grid files."""

import logging
import struct
from pathlib import Path
from typing import TYPE_CHECKING

from termiart.codec.cp437 import encode_glyph
from termiart.core.constants import FORMAT_TAG

if TYPE_CHECKING:
    from termiart.core.grid import Grid

logger = logging.getLogger(__name__)

# Width and height: 4-byte unsigned, native byte order
HEADER_DIMENSIONS = struct.Struct("=II")


def to_bytes(grid: "Grid") -> bytes:
    """
    Serialize a grid.

    Layout: format tag, NUL, width, height, then one record per cell in
    row-major order: bg r/g/b, fg r/g/b, two glyph bytes. Cell status
    and boundary segments are not stored.
    """
    data = bytearray(FORMAT_TAG.encode("utf-8"))
    data.append(0)
    data += HEADER_DIMENSIONS.pack(grid.width, grid.height)

    for row in grid.rows():
        for cell in row:
            data += bytes(cell.bg.rgb)
            data += bytes(cell.fg.rgb)
            data += encode_glyph(cell.glyph)

    return bytes(data)


def save(grid: "Grid", path: str | Path) -> None:
    """Save a grid to disk, replacing any existing file."""
    path = Path(path)
    data = to_bytes(grid)

    with open(path, 'wb') as f:
        f.write(data)

    logger.debug("Saved %dx%d grid to %s (%d bytes)", grid.width, grid.height, path, len(data))
