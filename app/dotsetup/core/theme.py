"""Terminal colors for dotsetup.

The bundled palette in ``data/theme.toml`` can be overridden, one color
at a time, by ``~/.config/dotsetup/theme.toml``.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.theme import Theme

from dotsetup.core.paths import get_config_dir

logger = logging.getLogger(__name__)

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")]


class Palette(BaseModel):
    """Colors for log levels, banners and tables (#RGB or #RRGGBB)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    banner: HexColor = "#f5b332"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0e8ac8"

    def to_rich_theme(self) -> Theme:
        """Build the Rich theme; level and banner styles are bold."""
        return Theme(
            {
                "muted": self.muted,
                "header": self.header,
                "border": self.border,
                "bold_header": f"bold {self.header}",
                "banner": f"bold {self.banner}",
                "success": f"bold {self.success}",
                "warning": f"bold {self.warning}",
                "error": f"bold {self.error}",
                "info": f"bold {self.info}",
            }
        )


def _colors_table(text: str) -> dict[str, object]:
    colors = tomllib.loads(text).get("colors", {})
    return colors if isinstance(colors, dict) else {}


def load_palette(user_path: Path | None = None) -> Palette:
    """Load the bundled palette with the user's overrides applied.

    An unreadable or invalid user file is logged and ignored.

    Args:
        user_path: Override file. Defaults to ~/.config/dotsetup/theme.toml.

    Returns:
        The merged Palette.
    """
    bundled_file = resources.files("dotsetup.data").joinpath("theme.toml")
    bundled = _colors_table(bundled_file.read_text(encoding="utf-8"))

    path = user_path or get_config_dir() / "theme.toml"
    try:
        overrides = _colors_table(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Palette.model_validate(bundled)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return Palette.model_validate(bundled)

    try:
        return Palette.model_validate({**bundled, **overrides})
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using defaults: %s", path, e)
        return Palette.model_validate(bundled)


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once per process."""
    return load_palette().to_rich_theme()
