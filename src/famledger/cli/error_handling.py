"""CLI error handling helpers."""

from contextlib import contextmanager

import click
from sqlalchemy.exc import SQLAlchemyError

from famledger.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


@contextmanager
def report_errors(ctx: click.Context):
    """Turn domain and store errors raised inside a command into exit code 1."""
    try:
        yield
    except ValueError as e:
        handle_domain_error(ctx, e)
    except SQLAlchemyError as e:
        click.echo(f"Error: database operation failed: {e}", err=True)
        ctx.exit(1)
