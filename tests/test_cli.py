"""Integration tests for the command line interface."""

from datetime import date
from decimal import Decimal

from famledger.cli.main import cli
from famledger.domain.entities import FamilyMember, TransactionType


def _invoke(cli_runner, temp_db, args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


class FakeInsightService:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.calls = []

    def generate_insights(self, transactions, month_label):
        self.calls.append((list(transactions), month_label))
        return "Spend less on leisure."


def test_add_transaction_minimal(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        ["add", "--description", "Bakery", "--amount", "12.30", "--date", "2024-03-05"],
    )

    assert result.exit_code == 0, result.output
    assert "Created transaction" in result.output
    assert "Bakery" in result.output
    assert "Casa" in result.output

    transactions = temp_db.list_transactions()
    assert len(transactions) == 1
    assert transactions[0].amount == Decimal("12.30")
    assert transactions[0].type == TransactionType.EXPENSE


def test_add_income_for_member(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        [
            "add",
            "--description", "Salary",
            "--amount", "5000",
            "--type", "income",
            "--category", "Salário",
            "--member", "Pai",
            "--date", "2024-03-01",
            "--fixed",
        ],
    )

    assert result.exit_code == 0, result.output
    txn = temp_db.list_transactions()[0]
    assert txn.type == TransactionType.INCOME
    assert txn.user == FamilyMember.DAD
    assert txn.is_fixed is True


def test_add_rejects_negative_amount(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, ["add", "--description", "Oops", "--amount", "-5"]
    )

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert temp_db.list_transactions() == []


def test_add_reads_comma_as_decimal_separator(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        ["add", "--description", "Bakery", "--amount", "R$ 12,50", "--date", "2024-03-05"],
    )

    assert result.exit_code == 0, result.output
    assert temp_db.list_transactions()[0].amount == Decimal("12.50")


def test_add_rejects_date_without_day(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        ["add", "--description", "Bakery", "--amount", "12.50", "--date", "2024-03"],
    )

    assert result.exit_code == 1
    assert "missing month or day" in result.output
    assert temp_db.list_transactions() == []


def test_add_rejects_unknown_category(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        ["add", "--description", "Dog food", "--amount", "50", "--category", "Pets"],
    )

    assert result.exit_code == 1
    assert "Unknown category" in result.output


def test_add_installments(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        [
            "add",
            "--description", "Fridge",
            "--amount", "120",
            "--date", "2024-01-31",
            "--category", "Moradia",
            "--installments", "3",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Created 3 installments" in result.output
    assert "Fridge (3/3)" in result.output

    stored = sorted(temp_db.list_transactions(), key=lambda txn: txn.date)
    assert [txn.date for txn in stored] == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
    ]


def test_add_installments_rejects_income(cli_runner, temp_db):
    result = _invoke(
        cli_runner,
        temp_db,
        [
            "add",
            "--description", "Salary",
            "--amount", "5000",
            "--type", "income",
            "--installments", "2",
        ],
    )

    assert result.exit_code == 1
    assert "Only expenses" in result.output
    assert temp_db.list_transactions() == []


def test_view_month(cli_runner, temp_db, sample_transactions):
    result = _invoke(cli_runner, temp_db, ["view", "--month", "2024-03"])

    assert result.exit_code == 0, result.output
    assert "Found 5 transaction(s) for March 2024" in result.output
    assert "February rent" not in result.output


def test_view_member_filter(cli_runner, temp_db, sample_transactions):
    result = _invoke(cli_runner, temp_db, ["view", "--month", "2024-03", "--member", "Liz"])

    assert result.exit_code == 0, result.output
    assert "Found 2 transaction(s)" in result.output
    assert "Cinema" in result.output
    assert "Rent" not in result.output


def test_view_all_months(cli_runner, temp_db, sample_transactions):
    result = _invoke(cli_runner, temp_db, ["view", "--all"])

    assert result.exit_code == 0, result.output
    assert "Found 6 transaction(s) for all months" in result.output


def test_view_empty_month(cli_runner, temp_db, sample_transactions):
    result = _invoke(cli_runner, temp_db, ["view", "--month", "2023-01"])

    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_view_bad_month(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, ["view", "--month", "March"])

    assert result.exit_code == 1
    assert "Invalid month" in result.output


def test_summary(cli_runner, temp_db, sample_transactions):
    result = _invoke(cli_runner, temp_db, ["summary", "--month", "2024-03"])

    assert result.exit_code == 0, result.output
    output = result.output
    assert "Summary for March 2024 (whole family)" in output
    assert "R$ 5,000.00" in output
    assert "R$ 2,800.00" in output
    assert "R$ 2,200.00" in output
    assert "Expenses by category" in output
    assert "Moradia" in output
    assert "Expenses by member" in output
    assert "By day" in output
    assert "Fixed vs. variable expenses" in output
    assert "R$ 2,300.00" in output
    # The February rent stays out of the March summary
    assert "February rent" not in output


def test_summary_single_section(cli_runner, temp_db, sample_transactions):
    result = _invoke(
        cli_runner, temp_db, ["summary", "--month", "2024-03", "--section", "budget"]
    )

    assert result.exit_code == 0, result.output
    assert "Fixed vs. variable expenses" in result.output
    assert "Expenses by category" not in result.output


def test_summary_empty_month(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, ["summary", "--month", "2024-03"])

    assert result.exit_code == 0, result.output
    assert "No expenses." in result.output
    assert "No transactions." in result.output


def test_transaction_show_update_delete(cli_runner, temp_db, sample_transactions):
    cinema = next(txn for txn in sample_transactions if txn.description == "Cinema")

    result = _invoke(cli_runner, temp_db, ["transaction", "show", str(cinema.id)])
    assert result.exit_code == 0, result.output
    assert "Cinema" in result.output

    result = _invoke(
        cli_runner,
        temp_db,
        ["transaction", "update", str(cinema.id), "--amount", "95", "--member", "Mãe", "--fixed"],
    )
    assert result.exit_code == 0, result.output
    assert "Updated transaction" in result.output

    updated = temp_db.get_transaction(cinema.id)
    assert updated.amount == Decimal("95.00")
    assert updated.user == FamilyMember.MOM
    assert updated.is_fixed is True
    assert updated.description == "Cinema"
    assert updated.date == cinema.date

    result = _invoke(cli_runner, temp_db, ["transaction", "delete", str(cinema.id), "--yes"])
    assert result.exit_code == 0, result.output
    assert temp_db.get_transaction(cinema.id) is None


def test_transaction_delete_asks_for_confirmation(cli_runner, temp_db, sample_transactions):
    txn = sample_transactions[0]

    result = _invoke(cli_runner, temp_db, ["transaction", "delete", str(txn.id)], input="n\n")

    assert result.exit_code != 0
    assert temp_db.get_transaction(txn.id) is not None


def test_transaction_update_missing(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, ["transaction", "update", "999", "--amount", "10"])

    assert result.exit_code == 1
    assert "Transaction 999 not found" in result.output


def test_insights_uses_month_transactions(cli_runner, temp_db, sample_transactions, monkeypatch):
    created = []

    def fake_service(**kwargs):
        created.append(FakeInsightService(**kwargs))
        return created[-1]

    monkeypatch.setattr("famledger.cli.commands.insights.InsightService", fake_service)

    result = _invoke(
        cli_runner,
        temp_db,
        ["insights", "--month", "2024-03", "--api-key", "secret", "--model", "gemini-test"],
    )

    assert result.exit_code == 0, result.output
    assert "Spend less on leisure." in result.output
    fake = created[0]
    assert fake.kwargs == {"api_key": "secret", "model_name": "gemini-test"}
    transactions, label = fake.calls[0]
    assert label == "March 2024"
    assert len(transactions) == 5


def test_insights_without_api_key_prints_fallback(cli_runner, temp_db, sample_transactions, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    result = _invoke(cli_runner, temp_db, ["insights", "--month", "2024-03"])

    assert result.exit_code == 0, result.output
    assert "Something went wrong" in result.output
