"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date

# Import entities directly to avoid pulling in the domain services
from famledger.domain.entities import (
    FamilyMember,
    Transaction,
    TransactionDraft,
)


class Database(ABC):
    """Abstract database interface for famledger.

    Store failures are raised as-is to the caller; implementations do not
    retry or translate them.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(self, draft: TransactionDraft) -> Transaction:
        """Insert a transaction. Returns the stored record with its ID."""
        pass

    @abstractmethod
    def create_transactions(self, drafts: Sequence[TransactionDraft]) -> list[Transaction]:
        """Insert several transactions all-or-nothing.

        Either every draft is stored or, on failure, none is.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(self, transaction_id: int, draft: TransactionDraft) -> Transaction:
        """Replace every field of a transaction except its ID.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        member: Optional[FamilyMember] = None,
    ) -> list[Transaction]:
        """List transactions, newest date first.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            member: Optional family member filter
        """
        pass
