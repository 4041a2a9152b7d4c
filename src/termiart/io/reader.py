"""Load grid files."""

import logging
from dataclasses import dataclass
from pathlib import Path

from termiart.codec.cp437 import decode_glyph
from termiart.core.cell import Cell
from termiart.core.color import Color
from termiart.core.constants import CELL_RECORD_SIZE, FORMAT_TAG
from termiart.core.errors import CorruptFile, VersionMismatch
from termiart.core.grid import Grid
from termiart.io.writer import HEADER_DIMENSIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridHeader:
    """Format tag and dimensions at the start of a grid file."""
    format_tag: str
    width: int
    height: int
    offset: int  # Start of the first cell record


def parse_header(data: bytes) -> GridHeader:
    """Parse the header of a serialized grid without checking the tag."""
    end = data.find(b'\0')
    if end == -1:
        raise CorruptFile("Missing format tag terminator")
    try:
        tag = data[:end].decode("utf-8")
    except UnicodeDecodeError:
        raise CorruptFile("Format tag is not valid UTF-8") from None

    start = end + 1
    if len(data) < start + HEADER_DIMENSIONS.size:
        raise CorruptFile("File ends before grid dimensions")
    width, height = HEADER_DIMENSIONS.unpack_from(data, start)
    return GridHeader(tag, width, height, start + HEADER_DIMENSIONS.size)


def read_header(path: str | Path) -> GridHeader:
    """Read only the header of a grid file."""
    with open(path, 'rb') as f:
        return parse_header(f.read())


def from_bytes(data: bytes) -> Grid:
    """Deserialize a grid, refusing files written with another format tag."""
    header = parse_header(data)
    if header.format_tag != FORMAT_TAG:
        raise VersionMismatch(FORMAT_TAG, header.format_tag)

    if header.width < 1 or header.height < 1:
        raise CorruptFile(f"Invalid grid dimensions {header.width}x{header.height}")

    count = header.width * header.height
    expected = header.offset + count * CELL_RECORD_SIZE
    if len(data) < expected:
        raise CorruptFile(
            f"Expected {count} cell records ({expected} bytes), file has {len(data)} bytes"
        )

    cells: list[Cell] = []
    pos = header.offset
    for _ in range(count):
        record = data[pos:pos + CELL_RECORD_SIZE]
        cells.append(Cell(
            bg=Color(record[0], record[1], record[2]),
            fg=Color(record[3], record[4], record[5]),
            glyph=decode_glyph(record[6:8]),
        ))
        pos += CELL_RECORD_SIZE

    return Grid.from_cells(header.width, header.height, cells)


def load(path: str | Path) -> Grid:
    """Load a grid file from disk."""
    path = Path(path)

    with open(path, 'rb') as f:
        data = f.read()

    grid = from_bytes(data)
    logger.debug("Loaded %dx%d grid from %s", grid.width, grid.height, path)
    return grid
