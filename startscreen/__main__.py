"""startscreen CLI entry point.

Allows running via `python -m startscreen` and provides the console script
defined in `pyproject.toml`.

Usage:
    startscreen [--version] [--debug] [FILE]
"""

from __future__ import annotations

import importlib.metadata
import logging
import subprocess
import sys
from pathlib import Path

import platformdirs

from .constants import ScreenConstants

logger = logging.getLogger(__name__)


def get_version_string() -> str:
    try:
        return importlib.metadata.version(ScreenConstants.APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def configure_logging(debug: bool) -> None:
    """Send debug logs to a file; the fullscreen terminal is not a log sink."""
    if not debug:
        logging.getLogger("startscreen").addHandler(logging.NullHandler())
        return
    log_dir = Path(platformdirs.user_log_dir(ScreenConstants.APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_dir / ScreenConstants.LOG_FILENAME),
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    # Very small arg parsing: version, debug logging, and optional filename
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    debug = "--debug" in args
    args = [a for a in args if a != "--debug"]
    configure_logging(debug)

    # Lazy import to avoid importing UI deps for --version
    from .commands import editor_argv
    from .config import ConfigError, load_config, with_startup_file

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error in configuration: {e}", file=sys.stderr)
        sys.exit(1)

    # Decided once: a file on the command line skips the start screen
    if args and config.suppress_on_startup_file_arg:
        logger.info(f"File argument {args[0]!r} given, not showing the start screen")
        sys.exit(subprocess.call(editor_argv(args[0])))
    if args:
        logger.info(f"Showing the start screen; 'Open file' opens {args[0]!r}")
        config = with_startup_file(config, args[0])

    from .host import Host
    from .screen import StartScreen

    host = Host()
    screen = StartScreen(host, config)
    screen.initialize()
    screen.open()
    host.run()


if __name__ == "__main__":  # pragma: no cover
    main()
