"""Utility functions and helpers."""

from .helpers import ordered_group
from .log import setup_logging
from .output import (
    console,
    create_table,
    format_megabytes,
    format_value,
    print_error,
    print_info,
    render_record,
)

__all__ = [
    "console",
    "create_table",
    "format_megabytes",
    "format_value",
    "ordered_group",
    "print_error",
    "print_info",
    "render_record",
    "setup_logging",
]
