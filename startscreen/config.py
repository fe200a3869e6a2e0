"""Start screen configuration.

The configuration is long-lived; every render reads it from scratch. User
settings live in a JSON file in the platform config directory and are
overlaid on the defaults below.

Example ``config.json``::

    {
        "title": "Hello again",
        "body_entries": [
            "Notes", {"command": "open_file", "args": ["~/notes.md"], "help": "Edit notes"},
            "Quit", {"command": "quit"}
        ],
        "styles": {"title": "bold_green"}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import platformdirs

from .commands import COMMANDS, open_file_command, quit_command, shell_command
from .constants import ScreenConstants

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised for configuration that cannot be interpreted."""


@dataclass(frozen=True)
class ActionSpec:
    """What a body row does when activated.

    Attributes:
        command: Called as ``command(host, *args)``; also the key used to
            look up its key binding
        args: Extra arguments passed to the command
        help: One-line description shown while the row is selected
    """
    command: Callable[..., Any]
    args: Tuple[Any, ...] = ()
    help: str = ""


@dataclass(frozen=True)
class SectionSeparators:
    """Text inserted after each section that is present."""
    logo: str = ScreenConstants.LOGO_SEPARATOR
    title: str = ScreenConstants.TITLE_SEPARATOR
    body: str = ScreenConstants.BODY_SEPARATOR
    footer: str = ScreenConstants.FOOTER_SEPARATOR


def default_body_entries() -> List[Union[str, ActionSpec]]:
    return [
        "Open file", ActionSpec(open_file_command, help="Start the editor"),
        "Shell", ActionSpec(shell_command, help="Run an interactive shell"),
        "Quit", ActionSpec(quit_command, help="Leave the start screen"),
    ]


@dataclass
class StartScreenConfig:
    """All options recognized by the start screen."""
    logo_source: Optional[str] = ScreenConstants.BUILTIN_LOGO
    title: Optional[str] = ScreenConstants.DEFAULT_TITLE
    body_entries: Optional[List[Union[str, ActionSpec]]] = field(default_factory=default_body_entries)
    footer: Optional[str] = ScreenConstants.DEFAULT_FOOTER
    separators: SectionSeparators = field(default_factory=SectionSeparators)
    body_column_separator: str = ScreenConstants.BODY_COLUMN_SEPARATOR
    suppress_on_startup_file_arg: bool = True
    styles: Dict[str, str] = field(default_factory=lambda: dict(ScreenConstants.DEFAULT_STYLES))


def config_path() -> Path:
    """Location of the user's config file."""
    return Path(platformdirs.user_config_dir(ScreenConstants.APP_NAME)) / ScreenConstants.CONFIG_FILENAME


def parse_action(data: Any) -> ActionSpec:
    """Build an ActionSpec from its JSON object form."""
    if not isinstance(data, dict) or "command" not in data:
        raise ConfigError(f"Action must be an object with a 'command' key: {data!r}")
    name = data["command"]
    command = COMMANDS.get(name)
    if command is None:
        raise ConfigError(f"Unknown command: {name!r}")
    args = data.get("args", [])
    if not isinstance(args, list):
        raise ConfigError(f"Arguments of {name!r} must be a list")
    return ActionSpec(command=command, args=tuple(args), help=str(data.get("help", "")))


def parse_body_entries(data: Any) -> List[Union[str, ActionSpec]]:
    """Convert the JSON body list, keeping its flat label/action layout.

    An odd-length list is kept as-is; laying it out raises
    ``MalformedBodyError``.
    """
    if not isinstance(data, list):
        raise ConfigError("body_entries must be a list")
    entries: List[Union[str, ActionSpec]] = []
    for i, item in enumerate(data):
        if i % 2 == 0:
            if not isinstance(item, str):
                raise ConfigError(f"Body entry {i} must be a label string, got {item!r}")
            entries.append(item)
        else:
            entries.append(parse_action(item))
    return entries


# Accepted JSON types of the scalar options
_OPTION_TYPES: Dict[str, Tuple[type, ...]] = {
    "logo_source": (str, type(None)),
    "title": (str, type(None)),
    "footer": (str, type(None)),
    "body_column_separator": (str,),
    "suppress_on_startup_file_arg": (bool,),
}

_SEPARATOR_NAMES = ("logo", "title", "body", "footer")


def _check_type(name: str, value: Any, types: Tuple[type, ...]) -> None:
    if not isinstance(value, types):
        expected = " or ".join("null" if t is type(None) else t.__name__ for t in types)
        raise ConfigError(f"{name} must be {expected}, got {value!r}")


def _check_strings(name: str, data: Any) -> Dict[str, str]:
    if not isinstance(data, dict):
        raise ConfigError(f"{name} must be an object")
    for key, value in data.items():
        _check_type(f"{name}.{key}", value, (str,))
    return data


def apply_settings(config: StartScreenConfig, data: Dict[str, Any]) -> StartScreenConfig:
    """Return ``config`` with the recognized keys of ``data`` applied.

    Raises:
        ConfigError: If a value has the wrong type
    """
    known = {f.name for f in fields(StartScreenConfig)}
    changes: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config option {key!r}")
            continue
        if key in _OPTION_TYPES:
            _check_type(key, value, _OPTION_TYPES[key])
        elif key == "body_entries":
            if value is not None:
                value = parse_body_entries(value)
        elif key == "separators":
            value = _check_strings("separators", value)
            for name in set(value) - set(_SEPARATOR_NAMES):
                logger.warning(f"Ignoring unknown separator {name!r}")
            value = replace(config.separators, **{k: v for k, v in value.items()
                                                  if k in _SEPARATOR_NAMES})
        elif key == "styles":
            value = {**config.styles, **_check_strings("styles", value)}
        changes[key] = value
    return replace(config, **changes)


def with_startup_file(config: StartScreenConfig, path: str) -> StartScreenConfig:
    """Point body actions that open the editor without a file at ``path``."""
    entries = config.body_entries
    if not entries:
        return config
    bound = [
        replace(entry, args=(path,))
        if isinstance(entry, ActionSpec) and entry.command is open_file_command and not entry.args
        else entry
        for entry in entries
    ]
    return replace(config, body_entries=bound)


def load_config(path: Optional[Path] = None) -> StartScreenConfig:
    """Load the user's configuration, falling back to defaults.

    A missing or unreadable file gives the defaults. Content that cannot be
    interpreted raises ``ConfigError``.
    """
    path = Path(path) if path else config_path()
    config = StartScreenConfig()
    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return config

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config from {path}: {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file {path} is not a JSON object, ignoring")
        return config

    logger.debug(f"Loaded config from {path}")
    return apply_settings(config, data)
