"""Centering arithmetic and the two-column body layout.

The body section is a list of action rows. Each row is a label on the left
and the key that runs the action on the right. All rows share one block
width, the widest row, so the block is centered as a unit and every key hint
ends on the same right edge.

Widths are whatever ``measure_width`` returns (terminal cells in practice),
never character counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence, Tuple

from .constants import ScreenConstants

if TYPE_CHECKING:
    from .config import ActionSpec


class MalformedBodyError(ValueError):
    """Raised when body entries do not pair up as label/action."""


@dataclass(frozen=True)
class StyledText:
    """A run of text with a style name resolved at draw time."""
    text: str
    style: Optional[str] = None


@dataclass(frozen=True)
class BodyRow:
    """One laid-out action row."""
    label: StyledText
    label_width: int
    key_hint: StyledText
    key_hint_width: int
    action: 'ActionSpec'


@dataclass(frozen=True)
class LayoutResult:
    """Rows in display order plus the shared block width."""
    rows: Tuple[BodyRow, ...]
    max_row_width: int


def center_offset(content_width: int, viewport_width: int) -> int:
    """Return the left offset that centers content in the viewport.

    Content wider than the viewport yields a negative offset; it is not
    clamped here.
    """
    return (viewport_width - content_width) // 2


def row_width(label_width: int, key_hint_width: int, separator_width: int) -> int:
    """Total width of a body row."""
    return label_width + key_hint_width + separator_width


class BodyRowFormatter:
    """Builds the label/key-hint row model for the body section."""

    def __init__(
        self,
        measure_width: Callable[[Any], int],
        lookup_binding: Callable[[Callable], Optional[str]],
        column_separator: str = ScreenConstants.BODY_COLUMN_SEPARATOR,
    ):
        self.measure_width = measure_width
        self.lookup_binding = lookup_binding
        self.column_separator = column_separator

    def format(self, entries: Sequence[Any]) -> LayoutResult:
        """Lay out a flat ``[label, spec, label, spec, ...]`` sequence.

        Raises:
            MalformedBodyError: if the sequence has odd length.
        """
        if len(entries) % 2:
            raise MalformedBodyError(
                f"Body entries must alternate label and action, got {len(entries)} items"
            )

        separator_width = self.measure_width(StyledText(self.column_separator, "body"))
        rows = []
        max_row_width = 0
        for i in range(0, len(entries), 2):
            label, spec = entries[i], entries[i + 1]
            label_run = StyledText(label, "body")
            hint = self.lookup_binding(spec.command) or ScreenConstants.UNBOUND_KEY_HINT
            hint_run = StyledText(hint, "keybind")

            label_width = self.measure_width(label_run)
            hint_width = self.measure_width(hint_run)
            max_row_width = max(max_row_width, row_width(label_width, hint_width, separator_width))
            rows.append(BodyRow(
                label=label_run,
                label_width=label_width,
                key_hint=hint_run,
                key_hint_width=hint_width,
                action=spec,
            ))

        return LayoutResult(rows=tuple(rows), max_row_width=max_row_width)
