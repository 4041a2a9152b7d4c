"""Color representation for grid cells."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """
    A 24-bit RGB color.

    Colors are immutable values; the named palette entries are shared
    constants and can never be modified in place.
    """
    r: int = 255
    g: int = 255
    b: int = 255

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a ``#rrggbb`` string."""
        value = text.strip().lstrip('#')
        if len(value) != 6:
            raise ValueError(f"Expected #rrggbb, got {text!r}")
        try:
            return cls.from_rgb(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
        except ValueError:
            raise ValueError(f"Expected #rrggbb, got {text!r}") from None

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def reverse(self) -> "Color":
        """Return the inverted color."""
        return Color(255 - self.r, 255 - self.g, 255 - self.b)

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this color as foreground."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as background."""
        return f"48;2;{self.r};{self.g};{self.b}"


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
