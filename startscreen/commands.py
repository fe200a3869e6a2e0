"""Commands and the key bindings that run them.

Commands are plain functions called as ``command(host, *args)``. The same
function object is bound to keys in the registry and referenced by body
actions, so a body row finds its key hint by identity.
"""

import logging
import os
import shlex
import subprocess
from typing import Any, Callable, Dict, List, Optional, Tuple, TYPE_CHECKING

from .keyboard import KeyType, describe_key

if TYPE_CHECKING:
    from .host import Host
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)

Command = Callable[..., Any]


def editor_argv(path: Optional[str] = None) -> List[str]:
    """Command line that opens ``path`` in the user's editor."""
    editor = os.environ.get('VISUAL') or os.environ.get('EDITOR') or 'vi'
    argv = shlex.split(editor)
    if path:
        argv.append(os.path.expanduser(path))
    return argv


def run_external(host: 'Host', argv: List[str]) -> None:
    """Run a program in the foreground with the screen suspended."""
    logger.info(f"Running {argv}")
    try:
        with host.suspend():
            result = subprocess.run(argv, check=False)
    except OSError as e:
        logger.warning(f"Could not run {argv[0]}: {e}")
        host.status_message = f"Cannot run {argv[0]}: {e.strerror or e}"
        return
    if result.returncode:
        host.status_message = f"{argv[0]} exited with status {result.returncode}"


def quit_command(host: 'Host') -> None:
    host.running = False


def open_file_command(host: 'Host', path: Optional[str] = None) -> None:
    run_external(host, editor_argv(path))


def shell_command(host: 'Host', *argv: str) -> None:
    """Run ``argv``, or an interactive ``$SHELL`` when no arguments are given."""
    run_external(host, list(argv) or [os.environ.get('SHELL', '/bin/sh')])


def next_button_command(host: 'Host') -> None:
    host.next_button()


def previous_button_command(host: 'Host') -> None:
    host.previous_button()


def activate_button_command(host: 'Host') -> None:
    host.activate_button()


def redraw_command(host: 'Host') -> None:
    host.invalidate()


# Names usable in config.json
COMMANDS: Dict[str, Command] = {
    'quit': quit_command,
    'open_file': open_file_command,
    'shell': shell_command,
    'next_button': next_button_command,
    'previous_button': previous_button_command,
    'activate_button': activate_button_command,
    'redraw': redraw_command,
}


class CommandRegistry:
    """Maps keys to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], Command] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Bind the default keys. Earlier bindings are preferred as hints."""
        self.register((KeyType.REGULAR, 'q'), quit_command)
        self.register((KeyType.CTRL, 'q'), quit_command)
        self.register((KeyType.REGULAR, 'o'), open_file_command)
        self.register((KeyType.REGULAR, 's'), shell_command)

        # Moving between actions
        self.register((KeyType.REGULAR, '\t'), next_button_command)
        self.register((KeyType.SPECIAL, 'down'), next_button_command)
        self.register((KeyType.REGULAR, 'n'), next_button_command)
        self.register((KeyType.SHIFT_SPECIAL, 'tab'), previous_button_command)
        self.register((KeyType.SPECIAL, 'up'), previous_button_command)
        self.register((KeyType.REGULAR, 'p'), previous_button_command)
        self.register((KeyType.SPECIAL, 'enter'), activate_button_command)

        self.register((KeyType.CTRL, 'l'), redraw_command)

    def register(self, key: Tuple[KeyType, str], command: Command):
        """Bind a key to a command, replacing any previous binding."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[Command]:
        """Get the command bound to a key."""
        return self._commands.get((key_type, value))

    def execute(self, host: 'Host', key_event: 'KeyEvent') -> bool:
        """Run the command bound to the key event.

        Returns:
            True if a command was bound and ran
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        command(host)
        return True

    def lookup_binding(self, command: Command) -> Optional[str]:
        """Describe the first key bound to ``command``, or None if unbound."""
        for (key_type, value), bound in self._commands.items():
            if bound is command:
                return describe_key(key_type, value)
        return None
