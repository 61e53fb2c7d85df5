"""Console colors for the sweep transcript.

The bundled data/theme.toml holds the defaults; a theme.toml in the user
config directory may override any subset of them.
"""

import logging
import re
import tomllib
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from buildsweep.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _check_hex(value: str) -> str:
    color = value.strip()
    if not _HEX_COLOR.fullmatch(color):
        msg = f"expected a #RGB or #RRGGBB color, got {value!r}"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, AfterValidator(_check_hex)]


class TranscriptColors(BaseModel):
    """Colors for each kind of line the CLI prints."""

    model_config = ConfigDict(extra="forbid")

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    pending: HexColor = "#faf870"
    removed: HexColor = "#f53263"
    path: HexColor = "#69B9A1"


def read_colors(path: Path) -> dict[str, object]:
    """Read the [colors] table of a theme file.

    Returns an empty table when the file is missing, unreadable or not
    valid TOML; the latter two are logged.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_colors(user_path: Path | None = None) -> TranscriptColors:
    """Merge bundled and user colors.

    An invalid user override is reported and the bundled colors are used.
    """
    bundled = read_colors(Path(str(resources.files("buildsweep.data") / "theme.toml")))
    user = read_colors(user_path or get_user_theme_path())
    if not user:
        return TranscriptColors(**bundled)

    try:
        return TranscriptColors(**{**bundled, **user})
    except ValidationError as e:
        logger.warning("Invalid theme override, using defaults: %s", e)
        return TranscriptColors(**bundled)


def build_theme(colors: TranscriptColors) -> Theme:
    """Turn transcript colors into Rich styles (errors in bold)."""
    styles = colors.model_dump()
    styles["error"] = f"bold {colors.error}"
    return Theme(styles)


_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, loading it on first use."""
    global _theme
    if _theme is None:
        _theme = build_theme(load_colors())
    return _theme
