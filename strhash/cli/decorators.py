"""
Click decorators for strhash CLI commands.

- report_errors: Turns library errors into Click errors with exit code 1
- to_click_exception: The conversion report_errors applies
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import StrhashException

F = TypeVar("F", bound=Callable[..., Any])


def to_click_exception(error: StrhashException) -> click.ClickException:
    """Build a ClickException carrying the message and exit code of error."""
    click_error = click.ClickException(str(error))
    click_error.exit_code = error.exit_code
    return click_error


def report_errors(f: F) -> F:
    """Report StrhashException as a Click error instead of a traceback.

    Usage:
        @click.command()
        @click.pass_obj
        @report_errors
        def digest(ctx: StrhashContext, text: str):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except StrhashException as e:
            raise to_click_exception(e) from e

    return wrapper  # type: ignore[return-value]


def read_text_argument(text: str) -> str:
    """Return TEXT, or stdin when TEXT is '-' (one trailing newline dropped)."""
    if text != "-":
        return text
    data = click.get_text_stream("stdin").read()
    if data.endswith("\n"):
        data = data[:-1]
    return data
