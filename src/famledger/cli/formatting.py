"""Shared CLI output helpers."""

from decimal import Decimal

import click

from famledger.domain.entities import Transaction, TransactionType


def format_amount(amount: Decimal) -> str:
    return f"R$ {amount:,.2f}"


def format_signed(txn: Transaction) -> str:
    sign = "+" if txn.type == TransactionType.INCOME else "-"
    return f"{sign}{format_amount(txn.amount)}"


def echo_transaction(txn: Transaction, header: str = "Transaction") -> None:
    """Print every field of a transaction."""
    click.echo(f"{header} {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Amount: {format_signed(txn)}")
    click.echo(f"  Type: {txn.type}")
    click.echo(f"  Category: {txn.category}")
    click.echo(f"  Member: {txn.user or 'Casa'}")
    click.echo(f"  Fixed: {'yes' if txn.is_fixed else 'no'}")


def echo_table(transactions: list[Transaction]) -> None:
    """Print transactions as a compact table."""
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Amount':>16} {'Category':<15} {'Member':<8} {'Fixed':<6} {'Description':<30}"
    )
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {format_signed(txn):>16} {str(txn.category):<15} "
            f"{str(txn.user or 'Casa'):<8} {'yes' if txn.is_fixed else '':<6} {txn.description[:30]:<30}"
        )
