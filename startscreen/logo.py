"""Logo loading for the start screen.

Terminals cannot show raster images, so a logo is ASCII art: either the
bundled banner or the contents of a text file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple

from .constants import ScreenConstants


@dataclass(frozen=True)
class LogoImage:
    """A multi-line block of art with a fixed rendered width."""
    lines: Tuple[str, ...]
    width: int
    style: Optional[str] = "logo"


def load_logo(source: str, length: Callable[[str], int] = len) -> LogoImage:
    """Load a logo from ``source``.

    Args:
        source: ``ScreenConstants.BUILTIN_LOGO`` or a path to a text file
        length: Measures the printed width of one line

    Raises:
        FileNotFoundError: if the file does not exist
    """
    if source == ScreenConstants.BUILTIN_LOGO:
        art = ScreenConstants.LOGO_ART
    else:
        art = Path(source).expanduser().read_text(encoding='utf-8')

    lines = tuple(art.rstrip('\n').split('\n'))
    width = max((length(line) for line in lines), default=0)
    return LogoImage(lines=lines, width=width)
