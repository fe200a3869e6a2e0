"""Test logo loading and the output surface."""

import pytest
from startscreen.constants import ScreenConstants
from startscreen.layout import StyledText
from startscreen.logo import load_logo
from startscreen.renderer import LineBreak, Spacer, Surface, TextRun


def test_builtin_logo():
    image = load_logo(ScreenConstants.BUILTIN_LOGO)
    assert image.lines == tuple(ScreenConstants.LOGO_ART.split('\n'))
    assert image.width == max(len(line) for line in image.lines)
    assert image.style == "logo"


def test_logo_from_file(tmp_path):
    path = tmp_path / "logo.txt"
    path.write_text(" /\\\n/__\\\n\n", encoding='utf-8')
    image = load_logo(str(path))
    assert image.lines == (" /\\", "/__\\")
    assert image.width == 4


def test_logo_width_uses_measure():
    image = load_logo(ScreenConstants.BUILTIN_LOGO, length=lambda line: 1)
    assert image.width == 1


def test_missing_logo_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_logo(str(tmp_path / "nope.txt"))


def test_surface_emit_and_replace():
    surface = Surface("start", styles={"title": "bold"})
    surface.emit(Spacer(3))
    surface.emit(TextRun(StyledText("Hi", "title")))
    assert surface.segments == [Spacer(3), TextRun(StyledText("Hi", "title"))]

    surface.replace([LineBreak()], styles={"title": "underline"})
    assert surface.segments == [LineBreak()]
    assert surface.styles == {"title": "underline"}


def test_surface_segments_is_a_copy():
    surface = Surface("start")
    surface.segments.append(LineBreak())
    assert surface.segments == []


def test_surface_buttons():
    surface = Surface("start")
    surface.replace([
        TextRun(StyledText("plain")),
        TextRun(StyledText("Quit", "body"), action=object()),
    ])
    assert [b.text.text for b in surface.buttons()] == ["Quit"]
