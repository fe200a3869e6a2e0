"""The host: terminal event loop, key bindings, and the visible surface."""

import logging
import os
import select
import signal
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from .commands import CommandRegistry
from .constants import ScreenConstants
from .keyboard import KeyboardHandler, KeyEvent
from .layout import StyledText
from .logo import LogoImage, load_logo
from .renderer import Surface, TextRun
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class Host:
    """Owns the terminal and shows one surface at a time.

    Besides running the loop, the host supplies the capabilities layout
    depends on: width measurement, key binding lookup, the viewport width
    and logo loading.
    """

    def __init__(self, terminal: Optional[TerminalInterface] = None):
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.registry = CommandRegistry()
        # Called after every terminal resize
        self.resize_hooks: List[Callable[[], Any]] = []
        # Supplies the surface shown when the loop starts with nothing visible
        self.initial_surface_function: Optional[Callable[[], Surface]] = None
        self.surface: Optional[Surface] = None
        self.selected_index = 0
        self.status_message: Optional[str] = None
        self.running = False
        self._needs_redraw = True
        # Resize signaling pipe, open only while run() is active
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

    # Capabilities

    def measure_width(self, item) -> int:
        """Rendered width of a styled run, a plain string or a logo."""
        if isinstance(item, LogoImage):
            return item.width
        if isinstance(item, StyledText):
            return self.terminal.length(item.text)
        return self.terminal.length(str(item))

    def lookup_binding(self, command: Callable) -> Optional[str]:
        return self.registry.lookup_binding(command)

    def current_viewport_width(self) -> int:
        return self.terminal.width

    def render_image(self, source: str) -> LogoImage:
        return load_logo(source, length=self.terminal.length)

    # Surfaces and buttons

    def show(self, surface: Surface) -> None:
        """Make ``surface`` the only visible surface."""
        if self.surface is not None and self.surface is not surface:
            logger.debug(f"Replacing surface {self.surface.name!r} with {surface.name!r}")
        self.surface = surface
        self.selected_index = 0
        self.status_message = None
        self.invalidate()

    def invalidate(self) -> None:
        """Redraw on the next loop iteration."""
        self._needs_redraw = True

    def selected_button(self) -> Optional[TextRun]:
        buttons = self.surface.buttons() if self.surface else []
        if not buttons:
            return None
        return buttons[self.selected_index % len(buttons)]

    def _move_selection(self, step: int) -> None:
        buttons = self.surface.buttons() if self.surface else []
        if buttons:
            self.selected_index = (self.selected_index + step) % len(buttons)

    def next_button(self) -> None:
        self._move_selection(1)

    def previous_button(self) -> None:
        self._move_selection(-1)

    def activate_button(self) -> None:
        """Run the action of the selected button."""
        button = self.selected_button()
        if button is None:
            return
        action = button.action
        logger.debug(f"Activating {button.text.text!r}")
        action.command(self, *action.args)

    @contextmanager
    def suspend(self) -> Iterator[None]:
        """Give the terminal to an external program."""
        try:
            with self.terminal.suspend():
                yield
        finally:
            self.invalidate()

    # Event loop

    def _handle_resize_signal(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        if self._resize_pipe_w is not None:
            os.write(self._resize_pipe_w, ScreenConstants.RESIZE_PIPE_MARKER)

    def handle_resize(self) -> None:
        """Run every resize hook, then redraw."""
        logger.debug(f"Viewport resized to {self.current_viewport_width()} columns")
        for hook in list(self.resize_hooks):
            hook()
        self.invalidate()

    def handle_key_event(self, key_event: KeyEvent) -> None:
        """Run the command bound to a key."""
        self.status_message = None
        if not self.registry.execute(self, key_event):
            logger.debug(f"No command bound to {key_event.key_type.value} {key_event.value!r}")
        self.invalidate()

    def run(self):
        """Run the main loop until a command stops it."""
        if self.surface is None and self.initial_surface_function is not None:
            self.show(self.initial_surface_function())

        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize_signal)

        try:
            with self.terminal.term.cbreak():
                while self.running:
                    if self._needs_redraw:
                        self._draw()
                        self._needs_redraw = False

                    # Wait for input on stdin or resize pipe
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                    if self._resize_pipe_r in ready:
                        os.read(self._resize_pipe_r, 1024)
                        self.handle_resize()
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        if key_event:
                            self.handle_key_event(key_event)
        except KeyboardInterrupt:
            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()

    def _draw(self):
        """Draw the visible surface."""
        if self.surface is None:
            self.terminal.draw([], self.status_message)
            return
        selected = self.selected_button()
        lines = self.terminal.compose_lines(
            self.surface.segments,
            self.surface.styles,
            self.terminal.width,
            selected=selected,
        )
        status = self.status_message
        if status is None and selected is not None:
            status = selected.action.help
        self.terminal.draw(lines, status)
