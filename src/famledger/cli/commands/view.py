"""Transaction viewing commands."""

import click
from famledger.cli.error_handling import report_errors
from famledger.cli.formatting import echo_table
from famledger.domain.aggregation import filter_transactions
from famledger.domain.transaction import TransactionService
from famledger.utils.date_parser import current_month, month_label, parse_month


@click.command("view")
@click.option("--month", help="Month to show (YYYY-MM, 'this' or 'last'); defaults to this month")
@click.option("--member", help="Only show transactions of this family member")
@click.option("--all", "show_all", is_flag=True, help="Show every month")
@click.pass_context
def view_transactions(ctx, month: str | None, member: str | None, show_all: bool):
    """View a month's transactions, newest first."""
    service = TransactionService(ctx.obj["db"])

    with report_errors(ctx):
        if show_all:
            transactions = service.list_transactions()
            if member is not None:
                transactions = filter_transactions(transactions, member=member)
            title = "all months"
        else:
            selected = parse_month(month) if month else current_month()
            transactions = service.list_month(selected, member=member)
            title = month_label(selected)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s) for {title}:")
    echo_table(transactions)


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_transactions)
