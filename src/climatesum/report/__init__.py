"""Text rendering of a finished accumulator store."""

from .render import format_ctime, render, resolve_timezone

__all__ = [
    "format_ctime",
    "render",
    "resolve_timezone",
]
