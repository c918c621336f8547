"""Fatal error type and the CLI-level handler that reports it."""

import sys
from contextlib import contextmanager

import click


class ScaffoldError(Exception):
    """An unrecoverable failure; the run stops and exits with status 1."""


@contextmanager
def with_error_handling():
    try:
        yield
    except ScaffoldError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
