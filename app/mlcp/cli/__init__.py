"""CLI package for mlcp.

This package contains the Typer application and its display helpers.
"""

from mlcp.cli.main import app

__all__ = ["app"]
