"""Section rendering: turns configuration into positioned segments.

A render produces an ordered list of segments for logo, title, body and
footer. Sections whose content is not configured contribute nothing, not
even their separator. Output is rebuilt from scratch on every render.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Union

from .layout import BodyRowFormatter, StyledText, center_offset
from .logo import LogoImage

if TYPE_CHECKING:
    from .config import ActionSpec, StartScreenConfig


@dataclass(frozen=True)
class Spacer:
    """Blank space up to absolute column ``align_to``."""
    align_to: int


@dataclass(frozen=True)
class TextRun:
    """Styled text. A run with an action is a button."""
    text: StyledText
    action: Optional['ActionSpec'] = None


@dataclass(frozen=True)
class ImageRun:
    """A logo drawn with every line starting at ``offset``."""
    image: LogoImage
    offset: int


@dataclass(frozen=True)
class LineBreak:
    pass


@dataclass(frozen=True)
class Separator:
    """Text that ends a section."""
    text: str


Segment = Union[Spacer, TextRun, ImageRun, LineBreak, Separator]
RenderOutput = List[Segment]


class SectionRenderer:
    """Lays out the start screen sections for one viewport width."""

    def __init__(
        self,
        measure_width: Callable[[Any], int],
        lookup_binding: Callable[[Callable], Optional[str]],
        render_image: Callable[[str], LogoImage],
    ):
        self.measure_width = measure_width
        self.lookup_binding = lookup_binding
        self.render_image = render_image

    def render(self, config: 'StartScreenConfig', viewport_width: int) -> RenderOutput:
        """Lay out every configured section, in fixed order.

        Raises:
            MalformedBodyError: if the body entries do not pair up
        """
        output: RenderOutput = []
        if config.logo_source:
            self._render_logo(output, config, viewport_width)
        if config.title:
            self._render_centered(output, StyledText(config.title, "title"), viewport_width)
            output.append(Separator(config.separators.title))
        if config.body_entries:
            self._render_body(output, config, viewport_width)
        if config.footer:
            self._render_centered(output, StyledText(config.footer, "footer"), viewport_width)
            output.append(Separator(config.separators.footer))
        return output

    def _render_logo(self, output: RenderOutput, config: 'StartScreenConfig', viewport_width: int):
        image = self.render_image(config.logo_source)
        output.append(ImageRun(image, center_offset(self.measure_width(image), viewport_width)))
        output.append(Separator(config.separators.logo))

    def _render_centered(self, output: RenderOutput, run: StyledText, viewport_width: int):
        output.append(Spacer(center_offset(self.measure_width(run), viewport_width)))
        output.append(TextRun(run))

    def _render_body(self, output: RenderOutput, config: 'StartScreenConfig', viewport_width: int):
        formatter = BodyRowFormatter(
            self.measure_width,
            self.lookup_binding,
            column_separator=config.body_column_separator,
        )
        layout = formatter.format(config.body_entries)
        block_offset = center_offset(layout.max_row_width, viewport_width)
        for row in layout.rows:
            output.append(Spacer(block_offset))
            output.append(TextRun(row.label, action=row.action))
            # Right-justify the hint against the block's right edge
            output.append(Spacer(block_offset + layout.max_row_width - row.key_hint_width))
            output.append(TextRun(row.key_hint))
            output.append(LineBreak())
        output.append(Separator(config.separators.body))


class Surface:
    """The output buffer a render is committed to.

    Readers and the rebuild share one lock, so a half-written surface is
    never observed.
    """

    def __init__(self, name: str, styles: Optional[Dict[str, str]] = None):
        self.name = name
        # Style name -> blessed formatter string used when drawing
        self.styles: Dict[str, str] = dict(styles or {})
        self._segments: RenderOutput = []
        self._lock = threading.Lock()

    def emit(self, segment: Segment) -> None:
        """Append a segment."""
        with self._lock:
            self._segments.append(segment)

    def replace(self, segments: RenderOutput, styles: Optional[Dict[str, str]] = None) -> None:
        """Clear the surface and emit ``segments`` as one write."""
        with self._lock:
            self._segments = []
            self._segments.extend(segments)
            if styles is not None:
                self.styles = dict(styles)

    @property
    def segments(self) -> RenderOutput:
        """A copy of the current content."""
        with self._lock:
            return list(self._segments)

    def buttons(self) -> List[TextRun]:
        """Runs that carry an action, in display order."""
        return [s for s in self.segments if isinstance(s, TextRun) and s.action is not None]
