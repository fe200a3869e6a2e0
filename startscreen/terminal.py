"""Terminal interface using Blessed for display and Curtsies for input."""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional
import select
import sys

import blessed

from .renderer import ImageRun, LineBreak, Segment, Separator, Spacer, TextRun


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False

    def setup(self):
        """Enter fullscreen mode and prepare terminal."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.hide_cursor, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            # Without start/stop the tty no longer swallows Ctrl-Q and Ctrl-S
            try:
                from curtsies import Input  # type: ignore
                self._curtsies_input = Input(keynames='curtsies', disable_terminal_start_stop=True)  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception:
                # curtsies fails to enter raw mode without a tty (CI, pipes);
                # the screen still draws, it just receives no keys.
                self._curtsies_input = None
                self._curtsies_active = False

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception:
                # Teardown must not crash the app; the tty is reset on exit anyway.
                pass
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    @contextmanager
    def suspend(self) -> Iterator[None]:
        """Hand the terminal to another program for the duration of the block."""
        self.cleanup()
        try:
            yield
        finally:
            self.setup()

    def length(self, text: str) -> int:
        """Printed width of text in cells (wide glyphs count 2, escapes 0)."""
        return self.term.length(text)

    def style(self, text: str, spec: Optional[str], reverse: bool = False) -> str:
        """Wrap text in the blessed formatter named by ``spec``."""
        if reverse:
            spec = f"{spec}_reverse" if spec and spec != "normal" else "reverse"
        if not spec or spec == "normal":
            return text
        formatter = getattr(self.term, spec, None)
        if not callable(formatter):
            return text
        return formatter(text)

    def _clip(self, text: str, room: int) -> str:
        """Longest prefix of text that fits in ``room`` cells."""
        if self.length(text) <= room:
            return text
        used = 0
        for i, ch in enumerate(text):
            used += self.length(ch)
            if used > room:
                return text[:i]
        return text

    def compose_lines(
        self,
        segments: List[Segment],
        styles: Dict[str, str],
        width: int,
        selected: Optional[TextRun] = None,
    ) -> List[str]:
        """Turn segments into display lines no wider than ``width``.

        A spacer that aligns to a column left of the current one adds no
        space. ``selected`` is drawn in reverse video.
        """
        lines = [""]
        col = 0

        def put(text: str, style_name: Optional[str] = None, reverse: bool = False):
            nonlocal col
            fitted = self._clip(text, max(0, width - col))
            if fitted:
                lines[-1] += self.style(fitted, styles.get(style_name) if style_name else None, reverse)
                col += self.length(fitted)

        def newline():
            nonlocal col
            lines.append("")
            col = 0

        def pad_to(column: int):
            if column > col:
                put(' ' * (column - col))

        for segment in segments:
            if isinstance(segment, Spacer):
                pad_to(segment.align_to)
            elif isinstance(segment, TextRun):
                for i, piece in enumerate(segment.text.text.split('\n')):
                    if i:
                        newline()
                    put(piece, segment.text.style, reverse=segment is selected)
            elif isinstance(segment, ImageRun):
                for i, line in enumerate(segment.image.lines):
                    if i:
                        newline()
                    pad_to(segment.offset)
                    put(line, segment.image.style)
            elif isinstance(segment, LineBreak):
                newline()
            elif isinstance(segment, Separator):
                for i, piece in enumerate(segment.text.split('\n')):
                    if i:
                        newline()
                    put(piece)
        return lines

    def draw(self, lines: List[str], status: Optional[str] = None):
        """Clear the screen and draw lines with a status line at the bottom."""
        print(self.term.home + self.term.clear, end='')
        for y, line in enumerate(lines[:self.height]):
            print(self.term.move(y, 0) + line, end='')
        if status:
            print(self.term.move(self.term.height - 1, 0) + f" {status}"[:self.term.width], end='')
        print(self.term.hide_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None when no key is available
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - 1  # Reserve one line for status
