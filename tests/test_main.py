"""Test the command line entry point."""

import sys
from unittest.mock import Mock, patch

import pytest
from startscreen import __main__ as cli
from startscreen.commands import open_file_command
from startscreen.config import ActionSpec, ConfigError, StartScreenConfig


def test_version(capsys):
    with patch.object(sys, 'argv', ['startscreen', '--version']):
        cli.main()
    assert capsys.readouterr().out.strip()


def test_file_argument_skips_screen(monkeypatch):
    monkeypatch.setenv('VISUAL', 'nano')
    with patch.object(sys, 'argv', ['startscreen', 'notes.md']):
        with patch('startscreen.config.load_config', return_value=StartScreenConfig()):
            with patch('startscreen.__main__.subprocess.call', return_value=0) as mock_call:
                with patch('startscreen.host.Host') as mock_host:
                    with pytest.raises(SystemExit) as exc:
                        cli.main()
    assert exc.value.code == 0
    mock_call.assert_called_once_with(['nano', 'notes.md'])
    mock_host.assert_not_called()


def test_file_argument_shows_screen_when_not_suppressed():
    config = StartScreenConfig(suppress_on_startup_file_arg=False)
    with patch.object(sys, 'argv', ['startscreen', 'notes.md']):
        with patch('startscreen.config.load_config', return_value=config):
            with patch('startscreen.__main__.subprocess.call') as mock_call:
                with patch('startscreen.host.Host') as mock_host:
                    with patch('startscreen.screen.StartScreen') as mock_screen:
                        cli.main()
    mock_call.assert_not_called()
    host_arg, shown_config = mock_screen.call_args.args
    assert host_arg is mock_host.return_value
    # The file is what the "Open file" action opens
    assert shown_config.body_entries[1] == ActionSpec(open_file_command, ("notes.md",), "Start the editor")
    assert shown_config.body_entries[3:] == config.body_entries[3:]
    mock_screen.return_value.initialize.assert_called_once_with()
    mock_screen.return_value.open.assert_called_once_with()
    mock_host.return_value.run.assert_called_once_with()


def test_config_error_exits(capsys):
    with patch.object(sys, 'argv', ['startscreen']):
        with patch('startscreen.config.load_config', side_effect=ConfigError("Unknown command: 'x'")):
            with pytest.raises(SystemExit) as exc:
                cli.main()
    assert exc.value.code == 1
    assert "Unknown command" in capsys.readouterr().err
