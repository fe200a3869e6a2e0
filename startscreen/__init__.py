"""startscreen - A centered start screen for the terminal."""

from .config import ActionSpec, SectionSeparators, StartScreenConfig, load_config
from .layout import BodyRowFormatter, LayoutResult, MalformedBodyError, center_offset, row_width
from .renderer import SectionRenderer, Surface
from .screen import StartScreen

__all__ = [
    'ActionSpec',
    'SectionSeparators',
    'StartScreenConfig',
    'load_config',
    'BodyRowFormatter',
    'LayoutResult',
    'MalformedBodyError',
    'center_offset',
    'row_width',
    'SectionRenderer',
    'Surface',
    'StartScreen',
]
