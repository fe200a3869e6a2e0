"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"  # Shift + arrow keys, Shift-Tab


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'q', 'down', 'enter')
    raw: str  # The raw key string from curtsies


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace', 'delete',
    'page_up', 'page_down', 'insert', 'tab',
}

_REGULAR_NAMES = {'\t': 'Tab', ' ': 'Space'}


def describe_key(key_type: KeyType, value: str) -> str:
    """Human-readable name of a key, as shown next to an action."""
    if key_type == KeyType.CTRL:
        return f"Ctrl-{value.upper()}"
    if key_type == KeyType.ALT:
        return f"Alt-{value.upper() if len(value) == 1 else _special_name(value)}"
    if key_type == KeyType.SHIFT_SPECIAL:
        return f"Shift-{_special_name(value)}"
    if key_type == KeyType.SPECIAL:
        return _special_name(value)
    return _REGULAR_NAMES.get(value, value)


def _special_name(value: str) -> str:
    # 'page_up' -> 'PageUp', 'f1' -> 'F1'
    return ''.join(part.capitalize() for part in value.split('_'))


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get the next key event, or None if no key arrived in time."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token (or a single raw character)."""
        key_str = str(key)

        if key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if o == 9:
                return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                if ch in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str)

        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        """Parse names like '<DOWN>', '<Ctrl-q>', '<Shift-TAB>', '<Esc+x>'."""
        lower = key_str[1:-1].lower().replace('+', '-')
        parts = lower.split('-')
        base = parts[-1]
        mods = set(parts[:-1])
        if mods & {'meta', 'esc'}:
            mods.add('alt')
        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if base == 'tab':
                return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw='\t')
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
        if 'ctrl' in mods and len(base) == 1:
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str)
        if 'shift' in mods and base in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SHIFT_SPECIAL, value=base, raw=key_str)
        # Plain specials and unknown tokens such as '<F1>'
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
