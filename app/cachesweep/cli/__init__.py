"""CLI package for cachesweep.

This package contains the Typer application.
"""

from cachesweep.cli.main import app

__all__ = ["app"]
