"""Main CLI entry point."""

import logging

import click
from famledger.database.factories import create_database

# Import and register all commands at module level
from famledger.cli.commands import (
    add,
    transaction,
    view,
    summary,
    insights,
)


@click.group()
@click.option(
    "--db-url",
    help="SQLAlchemy database URL (overrides FAMLEDGER_DB_URL environment variable)",
    envvar="FAMLEDGER_DB_URL",
)
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides FAMLEDGER_DB_PATH environment variable)",
    envvar="FAMLEDGER_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_url: str | None, db_path: str | None, verbose: bool):
    """Famledger - Family finance tracker.

    Log income and expenses per category and family member, split purchases
    into monthly installments, and review month summaries.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=db_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
insights.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
