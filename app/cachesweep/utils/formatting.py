"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import os
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cachesweep.core.theme import get_theme

# Windows extended-length path prefix, shown by some resolved paths
_EXTENDED_PATH_PREFIX = "\\\\?\\"


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system(), highlight=False)
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def _printable(text: str) -> str:
    """Render undecodable filename bytes as backslash escapes."""
    return os.fsencode(text).decode("utf-8", "backslashreplace")


def display_path(path: Path | str) -> str:
    """Format a path for display, stripping a leading extended-length prefix.

    Bytes that are not valid UTF-8 are shown as ``\\xNN`` escapes.
    """
    text = _printable(str(path))
    if text.startswith(_EXTENDED_PATH_PREFIX):
        return text[len(_EXTENDED_PATH_PREFIX) :]
    return text


def print_root(root: Path) -> None:
    """Print the resolved traversal root."""
    console.print(f"current dir: [root]{escape(display_path(root))}[/]", soft_wrap=True)


def print_removal(path: Path) -> None:
    """Print a matched directory.

    The wording is the same for dry and real runs.
    """
    console.print(f"removing [match]{escape(display_path(path))}[/]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(_printable(message))}", soft_wrap=True)
