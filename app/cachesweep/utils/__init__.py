"""Utility modules for cachesweep.

This module exports commonly used utility functions.
"""

from cachesweep.utils.formatting import (
    console,
    display_path,
    err_console,
    print_error,
    print_removal,
    print_root,
)

__all__ = [
    "console",
    "display_path",
    "err_console",
    "print_error",
    "print_removal",
    "print_root",
]
