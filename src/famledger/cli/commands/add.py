"""Add transaction command."""

import click
from famledger.cli.error_handling import report_errors
from famledger.cli.formatting import echo_transaction, format_amount
from famledger.domain.entities import Category, FamilyMember, TransactionType
from famledger.domain.transaction import TransactionService, build_draft


@click.command("add")
@click.option("--description", required=True, help="Transaction description")
@click.option("--amount", required=True, help="Amount, always positive (e.g., 123.45)")
@click.option(
    "--type",
    "txn_type",
    type=click.Choice(TransactionType.choices(), case_sensitive=False),
    default=TransactionType.EXPENSE.value,
    show_default=True,
    help="Transaction type",
)
@click.option(
    "--category",
    default=Category.OTHER.value,
    show_default=True,
    help=f"Category ({', '.join(Category.choices())})",
)
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--fixed", is_flag=True, help="Mark as a fixed (recurring) transaction")
@click.option(
    "--member",
    default=FamilyMember.HOUSEHOLD.value,
    show_default=True,
    help=f"Family member ({', '.join(FamilyMember.choices())})",
)
@click.option(
    "--installments",
    type=int,
    help="Split an expense into this many monthly installments (at least 2)",
)
@click.pass_context
def add_transaction(
    ctx,
    description: str,
    amount: str,
    txn_type: str,
    category: str,
    date: str,
    fixed: bool,
    member: str,
    installments: int | None,
):
    """Add a transaction manually.

    Examples:
        famledger add --description "Groceries" --amount 250.90 --category Alimentação
        famledger add --description "Salary" --amount 5000 --type income --category Salário --member Pai
        famledger add --description "New fridge" --amount 3600 --date 2024-01-31 --installments 12
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    with report_errors(ctx):
        draft = build_draft(
            description=description,
            amount=amount,
            type=txn_type,
            category=category,
            date=date,
            is_fixed=fixed,
            user=member,
        )

        if installments is not None:
            created = service.create_installments(draft, installments)
            click.echo(
                f"Created {len(created)} installments of {format_amount(created[0].amount)}"
            )
            for txn in created:
                click.echo(f"  {txn.id:<6} {txn.date}  {txn.description}")
            return

        txn = service.create_transaction(draft)
        echo_transaction(txn, header="Created transaction")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
