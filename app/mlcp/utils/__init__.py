"""Utility modules for mlcp.

This module exports commonly used utility functions.
"""

from mlcp.utils.formatting import (
    console,
    err_console,
    print_error,
    print_success,
)

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_success",
]
