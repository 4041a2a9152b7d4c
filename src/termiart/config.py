"""Runtime settings with environment overrides."""

import os
from dataclasses import dataclass, field, replace

from termiart.core.color import Color

ENV_PREFIX = "TERMIART_"


@dataclass(frozen=True)
class Settings:
    """Defaults for new grids and logging."""
    width: int = 30
    height: int = 30
    background: Color = field(default_factory=lambda: Color.WHITE)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """
        Build settings from ``TERMIART_*`` variables.

        Recognised: WIDTH, HEIGHT, BACKGROUND (#rrggbb) and
        LOG_LEVEL. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        settings = cls()
        overrides: dict[str, object] = {}

        if value := env.get(f"{ENV_PREFIX}WIDTH"):
            overrides["width"] = _positive_int("WIDTH", value)
        if value := env.get(f"{ENV_PREFIX}HEIGHT"):
            overrides["height"] = _positive_int("HEIGHT", value)
        if value := env.get(f"{ENV_PREFIX}BACKGROUND"):
            overrides["background"] = Color.from_hex(value)
        if value := env.get(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = value.upper()

        return replace(settings, **overrides)


def _positive_int(name: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from None
    if number < 1:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {number}")
    return number
