"""Constants and defaults for the start screen."""

class ScreenConstants:
    """Central defaults for the start screen."""

    # Layout
    BODY_COLUMN_SEPARATOR = " " * 8  # Gap between an action label and its key hint
    UNBOUND_KEY_HINT = "none"  # Shown when no key runs the action's command

    # Section separators, each leaves one blank line after its section
    LOGO_SEPARATOR = "\n\n"
    TITLE_SEPARATOR = "\n\n"
    BODY_SEPARATOR = "\n"  # Body rows already end with a line break
    FOOTER_SEPARATOR = "\n\n"

    # Default content
    BUILTIN_LOGO = "builtin"  # logo_source value selecting LOGO_ART
    DEFAULT_TITLE = "Welcome!"
    DEFAULT_FOOTER = "Tab/Up/Down to move, Enter to run"

    # Style name -> blessed formatter string
    DEFAULT_STYLES = {
        "logo": "bold",
        "title": "bold",
        "body": "normal",
        "keybind": "bright_black",
        "footer": "italic",
    }

    # Config file location
    APP_NAME = "startscreen"
    CONFIG_FILENAME = "config.json"
    LOG_FILENAME = "startscreen.log"

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    LOGO_ART = "\n".join([
        r"     _             _                            ",
        r" ___| |_ __ _ _ __| |_ ___  ___ _ __ ___  ___ _ __  ",
        r"/ __| __/ _` | '__| __/ __|/ __| '__/ _ \/ _ \ '_ \ ",
        r"\__ \ || (_| | |  | |_\__ \ (__| | |  __/  __/ | | |",
        r"|___/\__\__,_|_|   \__|___/\___|_|  \___|\___|_| |_|",
    ])
