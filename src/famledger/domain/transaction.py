"""Transaction domain service."""

import logging
from typing import Optional, Union
from datetime import date
from decimal import Decimal

from famledger.database.base import Database

from famledger.domain.entities import (
    Category,
    FamilyMember,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from famledger.domain.errors import InvalidInputError, NotFoundError, transaction_not_found
from famledger.domain.installments import split_installments
from famledger.utils.amount_parser import parse_amount
from famledger.utils.date_parser import month_bounds, parse_date, resolve_month

logger = logging.getLogger(__name__)


def build_draft(
    description: Optional[str],
    amount: Union[Decimal, str, int, None],
    type: Union[TransactionType, str, None],
    category: Union[Category, str, None],
    date: Union[date, str, None],
    is_fixed: bool = False,
    user: Union[FamilyMember, str, None] = None,
) -> TransactionDraft:
    """Validate raw field values and build a transaction draft.

    Args:
        description: Non-empty description
        amount: Positive amount, as a Decimal or a string such as "R$ 1,234.50"
        type: "income" or "expense"
        category: One of the category values or member names
        date: Date or date string
        is_fixed: Whether the transaction is recurring
        user: Family member; the household when omitted

    Returns:
        Validated TransactionDraft

    Raises:
        InvalidInputError: If any field is missing or malformed
    """
    if description is None or not str(description).strip():
        raise InvalidInputError("Description is required")

    if amount is None:
        raise InvalidInputError("Amount is required")
    if isinstance(amount, Decimal):
        if not amount.is_finite() or amount <= 0:
            raise InvalidInputError(f"Amount must be greater than zero, got '{amount}'")
        parsed_amount = amount
    else:
        parsed_amount = parse_amount(str(amount))

    if date is None:
        raise InvalidInputError("Date is required")
    parsed_date = date if hasattr(date, "year") else parse_date(str(date))

    return TransactionDraft(
        description=str(description).strip(),
        amount=parsed_amount,
        type=TransactionType.parse(type),
        category=Category.parse(category),
        date=parsed_date,
        is_fixed=bool(is_fixed),
        user=FamilyMember.parse(user) if user is not None else FamilyMember.HOUSEHOLD,
    )


def validate_draft(draft: TransactionDraft) -> TransactionDraft:
    """Re-run field validation on an already built draft."""
    return build_draft(
        description=draft.description,
        amount=draft.amount,
        type=draft.type,
        category=draft.category,
        date=draft.date,
        is_fixed=draft.is_fixed,
        user=draft.user,
    )


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        """Create a transaction.

        Args:
            draft: Transaction fields

        Returns:
            Stored transaction with its assigned ID

        Raises:
            InvalidInputError: If the draft is invalid
        """
        draft = validate_draft(draft)
        transaction = self.db.create_transaction(draft)
        logger.info("Created %s transaction %s", transaction.type, transaction.id)
        return transaction

    def create_installments(self, draft: TransactionDraft, count: int) -> list[Transaction]:
        """Split an expense into monthly installments and store them.

        All installments are stored in one batch: if the store fails, none
        of them is kept and the store error is raised unchanged.

        Args:
            draft: The expense as entered (full amount, first due date)
            count: Number of installments (at least 2)

        Returns:
            Stored installments in date order

        Raises:
            InvalidInputError: If the draft is invalid, is income, or count < 2
        """
        drafts = split_installments(validate_draft(draft), count)
        transactions = self.db.create_transactions(drafts)
        logger.info(
            "Created %d installments for '%s'", len(transactions), draft.description
        )
        return transactions

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(self, transaction_id: int, draft: TransactionDraft) -> Transaction:
        """Replace every field of a transaction except its ID.

        Args:
            transaction_id: Transaction ID to update
            draft: New field values

        Returns:
            Updated transaction

        Raises:
            InvalidInputError: If the draft is invalid
            NotFoundError: If transaction doesn't exist
        """
        draft = validate_draft(draft)
        self.require_transaction(transaction_id)
        transaction = self.db.update_transaction(transaction_id, draft)
        logger.info("Updated transaction %s", transaction_id)
        return transaction

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Args:
            transaction_id: Transaction ID to delete

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)

    def list_transactions(self) -> list[Transaction]:
        """List all transactions, newest date first."""
        return self.db.list_transactions()

    def list_month(
        self,
        month: Union[tuple[int, int], str],
        member: Union[FamilyMember, str, None] = None,
    ) -> list[Transaction]:
        """List one month's transactions, optionally for a single member.

        Args:
            month: (year, month) pair or "YYYY-MM"
            member: Optional family member filter

        Returns:
            List of transaction entities, newest date first
        """
        start_date, end_date = month_bounds(resolve_month(month))
        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            member=FamilyMember.parse(member) if member is not None else None,
        )
