"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the stored column layout can
differ from the domain field names (``family_member`` vs ``user``).
"""

from famledger.domain import entities as domain
from famledger.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    member = orm_transaction.family_member
    return domain.Transaction(
        id=orm_transaction.id,
        description=orm_transaction.description,
        amount=orm_transaction.amount,
        type=domain.TransactionType.parse(orm_transaction.type),
        category=domain.Category.parse(orm_transaction.category),
        date=orm_transaction.date,
        is_fixed=bool(orm_transaction.is_fixed),
        user=domain.FamilyMember.parse(member) if member else None,
    )


def apply_draft(orm_transaction: ORMTransaction, draft: domain.TransactionDraft) -> ORMTransaction:
    """Overwrite every stored field of a SQLAlchemy Transaction with a draft."""
    orm_transaction.description = draft.description
    orm_transaction.amount = draft.amount
    orm_transaction.type = draft.type.value
    orm_transaction.category = draft.category.value
    orm_transaction.date = draft.date
    orm_transaction.is_fixed = draft.is_fixed
    orm_transaction.family_member = draft.user.value if draft.user else None
    return orm_transaction


def draft_to_orm(draft: domain.TransactionDraft) -> ORMTransaction:
    """Build a new SQLAlchemy Transaction from a domain draft."""
    return apply_draft(ORMTransaction(), draft)
