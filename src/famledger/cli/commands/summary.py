"""Summary commands."""

import click
from famledger.cli.error_handling import report_errors
from famledger.cli.formatting import format_amount
from famledger.domain.entities import AggregateReport, BreakdownEntry
from famledger.domain.summary import SummaryService
from famledger.utils.date_parser import current_month, month_label, parse_month

SECTIONS = ("totals", "categories", "members", "daily", "budget")


def _display_totals(report: AggregateReport) -> None:
    stats = report.stats
    click.echo(f"{'Income':<30} {format_amount(stats.total_income):>20}")
    click.echo(f"{'Expenses':<30} {format_amount(stats.total_expense):>20}")
    click.echo("-" * 51)
    click.echo(f"{'Balance':<30} {format_amount(stats.balance):>20}")


def _display_breakdown(title: str, entries: tuple[BreakdownEntry, ...]) -> None:
    click.echo(title)
    if not entries:
        click.echo("  No expenses.")
        return
    total = sum(entry.value for entry in entries)
    for entry in entries:
        share = entry.value / total * 100 if total else 0
        click.echo(f"  {entry.name:<28} {format_amount(entry.value):>20} {share:>6.1f}%")


def _display_daily(report: AggregateReport) -> None:
    click.echo("By day")
    if not report.by_day:
        click.echo("  No transactions.")
        return
    click.echo(f"  {'Day':<5} {'Income':>18} {'Expenses':>18}  Details")
    for bucket in report.by_day:
        details = ", ".join(
            f"[{txn.user or 'Casa'}] {txn.description}" for txn in bucket.details
        )
        click.echo(
            f"  {bucket.day:<5} {format_amount(bucket.income):>18} "
            f"{format_amount(bucket.expense):>18}  {details}"
        )


def _display_budget(report: AggregateReport) -> None:
    split = report.fixed_variable
    click.echo("Fixed vs. variable expenses")
    click.echo(
        f"  {'Fixed':<28} {format_amount(split.fixed_total):>20} {split.fixed_percent:>6.0f}% of total"
    )
    for txn in split.fixed:
        click.echo(f"    {txn.description:<26} {format_amount(txn.amount):>20}")
    click.echo(
        f"  {'Variable':<28} {format_amount(split.variable_total):>20} {split.variable_percent:>6.0f}% of total"
    )
    for txn in split.variable:
        click.echo(f"    {txn.description:<26} {format_amount(txn.amount):>20}")


@click.command("summary")
@click.option("--month", help="Month to summarize (YYYY-MM, 'this' or 'last'); defaults to this month")
@click.option("--member", help="Only include transactions of this family member")
@click.option(
    "--section",
    "sections",
    type=click.Choice(SECTIONS),
    multiple=True,
    help="Only show the given section (repeatable)",
)
@click.pass_context
def summary(ctx, month: str | None, member: str | None, sections: tuple[str, ...]):
    """Show the month summary: totals, breakdowns and the fixed/variable split."""
    service = SummaryService(ctx.obj["db"])

    with report_errors(ctx):
        selected = parse_month(month) if month else current_month()
        report = service.build_report(selected, member=member)

    shown = sections or SECTIONS
    scope = member if member else "whole family"
    click.echo(f"\nSummary for {month_label(selected)} ({scope})")
    click.echo("=" * 51)

    renderers = {
        "totals": lambda: _display_totals(report),
        "categories": lambda: _display_breakdown("Expenses by category", report.by_category),
        "members": lambda: _display_breakdown("Expenses by member", report.by_member),
        "daily": lambda: _display_daily(report),
        "budget": lambda: _display_budget(report),
    }
    for i, section in enumerate(s for s in SECTIONS if s in shown):
        if i:
            click.echo()
        renderers[section]()


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
