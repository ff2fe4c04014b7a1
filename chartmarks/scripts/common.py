"""Common helper functions used across CLI commands."""

import traceback

from click import echo, style
from click.exceptions import Exit

from chartmarks.core.exceptions import (
    ConfigurationException,
    InvalidSpecException,
    MissingCapabilityException,
)

KNOWN_EXCEPTIONS = (
    ConfigurationException,
    InvalidSpecException,
    MissingCapabilityException,
)


def print_error(message: str) -> None:
    echo(style(f"Error: {message}", fg="red"), err=True)


def handle_execution_exception(e: Exception, debug: bool = False) -> None:
    if isinstance(e, KNOWN_EXCEPTIONS):
        print_error(str(e))
    else:
        print_error(f"Unexpected error: {e}")
    if debug:
        echo(traceback.format_exc(), err=True)
    raise Exit(1) from e
