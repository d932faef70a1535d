"""AI insights command."""

import click
from famledger.cli.error_handling import report_errors
from famledger.domain.insights import InsightService
from famledger.domain.summary import SummaryService
from famledger.utils.date_parser import current_month, month_label, parse_month


@click.command("insights")
@click.option("--month", help="Month to analyse (YYYY-MM, 'this' or 'last'); defaults to this month")
@click.option("--member", help="Only include transactions of this family member")
@click.option("--api-key", envvar="GEMINI_API_KEY", help="Gemini API key (defaults to GEMINI_API_KEY)")
@click.option("--model", envvar="GEMINI_MODEL", help="Gemini model name (defaults to GEMINI_MODEL)")
@click.pass_context
def insights(ctx, month: str | None, member: str | None, api_key: str | None, model: str | None):
    """Ask the AI advisor for a summary of a month's spending."""
    summary_service = SummaryService(ctx.obj["db"])

    with report_errors(ctx):
        selected = parse_month(month) if month else current_month()
        transactions = summary_service.get_filtered_transactions(selected, member=member)

    service = InsightService(api_key=api_key, model_name=model)
    click.echo(service.generate_insights(transactions, month_label(selected)))


def register_commands(cli):
    """Register insights command with main CLI."""
    cli.add_command(insights)
