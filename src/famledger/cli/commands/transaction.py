"""Transaction management commands."""

import click
from famledger.cli.error_handling import report_errors
from famledger.cli.formatting import echo_transaction
from famledger.domain.entities import TransactionType
from famledger.domain.transaction import TransactionService, build_draft


@click.group("transaction")
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int) -> None:
    """Show a single transaction."""
    service = TransactionService(ctx.obj["db"])
    with report_errors(ctx):
        echo_transaction(service.require_transaction(transaction_id))


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--description", help="Transaction description")
@click.option("--amount", help="Amount, always positive (e.g., 123.45)")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice(TransactionType.choices(), case_sensitive=False),
    help="Transaction type",
)
@click.option("--category", help="Category")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--fixed/--not-fixed", default=None, help="Mark as fixed or variable")
@click.option("--member", help="Family member")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    description: str | None,
    amount: str | None,
    txn_type: str | None,
    category: str | None,
    date: str | None,
    fixed: bool | None,
    member: str | None,
) -> None:
    """Update a transaction.

    The stored record is replaced as a whole; options that are not given keep
    their current value.

    Examples:
        famledger transaction update 1 --amount 75.00
        famledger transaction update 1 --category Lazer --member Liz --not-fixed
    """
    service = TransactionService(ctx.obj["db"])

    with report_errors(ctx):
        current = service.require_transaction(transaction_id)
        draft = build_draft(
            description=description if description is not None else current.description,
            amount=amount if amount is not None else current.amount,
            type=txn_type if txn_type is not None else current.type,
            category=category if category is not None else current.category,
            date=date if date is not None else current.date,
            is_fixed=fixed if fixed is not None else current.is_fixed,
            user=member if member is not None else current.user,
        )
        txn = service.update_transaction(transaction_id, draft)
        echo_transaction(txn, header="Updated transaction")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction."""
    service = TransactionService(ctx.obj["db"])

    with report_errors(ctx):
        txn = service.require_transaction(transaction_id)
        if not yes:
            click.confirm(
                f"Delete transaction {txn.id} '{txn.description}'?", abort=True
            )
        service.delete_transaction(transaction_id)
        click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group)
