"""Shared pytest fixtures for famledger tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from famledger.database.factories import create_sqlite_database
from famledger.domain.entities import (
    Category,
    FamilyMember,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from famledger.domain.summary import SummaryService
from famledger.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def make_draft():
    """Build transaction drafts with sensible defaults."""

    def _make(
        description="Groceries",
        amount="100.00",
        type=TransactionType.EXPENSE,
        category=Category.FOOD,
        date=date(2024, 3, 5),
        is_fixed=False,
        user=FamilyMember.HOUSEHOLD,
    ):
        return TransactionDraft(
            description=description,
            amount=Decimal(amount),
            type=type,
            category=category,
            date=date,
            is_fixed=is_fixed,
            user=user,
        )

    return _make


@pytest.fixture
def make_transaction():
    """Build in-memory transactions without touching the database."""
    counter = {"id": 0}

    def _make(
        amount="100.00",
        type=TransactionType.EXPENSE,
        category=Category.FOOD,
        date=date(2024, 3, 5),
        is_fixed=False,
        user=FamilyMember.HOUSEHOLD,
        description=None,
    ):
        counter["id"] += 1
        return Transaction(
            id=counter["id"],
            description=description or f"Transaction {counter['id']}",
            amount=Decimal(amount),
            type=type,
            category=category,
            date=date,
            is_fixed=is_fixed,
            user=user,
        )

    return _make


@pytest.fixture
def sample_transactions(transaction_service, make_draft):
    """Store a small household month plus one record from another month."""
    drafts = [
        make_draft("Salary", "5000.00", TransactionType.INCOME, Category.SALARY, date(2024, 3, 1), user=FamilyMember.DAD),
        make_draft("Rent", "1500.00", category=Category.HOUSING, date=date(2024, 3, 5), is_fixed=True),
        make_draft("Supermarket", "420.50", category=Category.FOOD, date=date(2024, 3, 5), user=FamilyMember.MOM),
        make_draft("School", "800.00", category=Category.EDUCATION, date=date(2024, 3, 10), is_fixed=True, user=FamilyMember.LIZ),
        make_draft("Cinema", "79.50", category=Category.LEISURE, date=date(2024, 3, 22), user=FamilyMember.LIZ),
        make_draft("February rent", "1500.00", category=Category.HOUSING, date=date(2024, 2, 5), is_fixed=True),
    ]
    return [transaction_service.create_transaction(draft) for draft in drafts]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
