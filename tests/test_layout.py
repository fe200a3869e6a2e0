"""Test centering arithmetic and the body row layout."""

import pytest
from startscreen.config import ActionSpec
from startscreen.layout import (
    BodyRowFormatter,
    MalformedBodyError,
    StyledText,
    center_offset,
    row_width,
)


def quit_cmd(host):
    pass


def open_cmd(host):
    pass


def measure(run):
    """Ten units per character."""
    return len(run.text) * 10


def lookup_none(command):
    return None


def test_center_offset_basic():
    assert center_offset(150, 800) == 325
    assert center_offset(0, 80) == 40
    assert center_offset(80, 80) == 0


def test_center_offset_is_symmetric():
    """Content plus both margins fills the viewport within rounding."""
    for viewport in range(0, 120):
        for content in range(0, viewport + 1):
            offset = center_offset(content, viewport)
            assert abs(offset + content + offset - viewport) <= 1


def test_center_offset_negative_passes_through():
    """Content wider than the viewport is not clamped."""
    assert center_offset(100, 80) == -10
    assert center_offset(81, 80) == -1


def test_row_width_sums_columns():
    assert row_width(40, 30, 80) == 150
    assert row_width(0, 0, 0) == 0


def test_format_row_count_and_order():
    entries = [
        "Open", ActionSpec(open_cmd),
        "Quit", ActionSpec(quit_cmd),
        "Again", ActionSpec(open_cmd),
    ]
    result = BodyRowFormatter(measure, lookup_none).format(entries)

    assert len(result.rows) == 3
    assert [row.label.text for row in result.rows] == ["Open", "Quit", "Again"]
    assert result.rows[1].action.command is quit_cmd


def test_format_styles_runs():
    result = BodyRowFormatter(measure, lookup_none).format(["Quit", ActionSpec(quit_cmd)])
    row = result.rows[0]
    assert row.label == StyledText("Quit", "body")
    assert row.key_hint == StyledText("none", "keybind")


@pytest.mark.parametrize("entries", [
    ["Quit"],
    ["Quit", ActionSpec(quit_cmd), "Open"],
])
def test_format_odd_length_raises(entries):
    formatter = BodyRowFormatter(measure, lookup_none)
    with pytest.raises(MalformedBodyError):
        formatter.format(entries)


def test_format_empty():
    result = BodyRowFormatter(measure, lookup_none).format([])
    assert result.rows == ()
    assert result.max_row_width == 0


def test_unbound_command_shows_none():
    result = BodyRowFormatter(measure, lookup_none).format(["Quit", ActionSpec(quit_cmd)])
    assert result.rows[0].key_hint.text == "none"
    assert result.rows[0].key_hint_width == 40


def test_bound_command_shows_key():
    def lookup(command):
        return "Ctrl-Q" if command is quit_cmd else None

    result = BodyRowFormatter(measure, lookup).format([
        "Quit", ActionSpec(quit_cmd),
        "Open", ActionSpec(open_cmd),
    ])
    assert result.rows[0].key_hint.text == "Ctrl-Q"
    assert result.rows[1].key_hint.text == "none"


def test_max_row_width_is_widest_row():
    entries = [
        "A", ActionSpec(open_cmd),
        "Much longer label", ActionSpec(quit_cmd),
        "Mid label", ActionSpec(open_cmd),
    ]
    result = BodyRowFormatter(measure, lookup_none, column_separator="  ").format(entries)

    widths = [row_width(r.label_width, r.key_hint_width, 20) for r in result.rows]
    assert all(result.max_row_width >= w for w in widths)
    assert result.max_row_width in widths
    assert result.max_row_width == (17 + 4 + 2) * 10


def test_column_separator_is_measured():
    widths = {"Quit": 40, "none": 30, " " * 8: 80}
    result = BodyRowFormatter(lambda run: widths[run.text], lookup_none).format(
        ["Quit", ActionSpec(quit_cmd)]
    )
    assert result.max_row_width == 150
