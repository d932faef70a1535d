"""Installment splitting for expenses paid over several months."""

from dataclasses import replace
from typing import List

from famledger.domain.entities import TransactionDraft, TransactionType
from famledger.domain.errors import (
    InvalidInputError,
    installment_count_too_low,
    installments_require_expense,
)
from famledger.utils.date_parser import add_months


def split_installments(base: TransactionDraft, count: int) -> List[TransactionDraft]:
    """
    Split one expense into monthly installments.

    Rules:
    - Each installment carries base.amount / count, computed once. Cents are
      not redistributed, so the installments may not add up to the exact
      original amount.
    - Installment i (0-based) is dated i calendar months after base.date,
      clamped to the end of shorter months.
    - Descriptions get a "(i/count)" suffix, counting from 1.
    - Category, member and fixed flag are copied unchanged.

    Args:
        base: The expense as entered
        count: Number of installments (at least 2)

    Returns:
        List of drafts ready to be persisted, in date order

    Raises:
        InvalidInputError: If count < 2 or base is not an expense

    Example:
        120.00 on 2024-01-31 in 3 installments ->
        40 on 2024-01-31 "(1/3)", 40 on 2024-02-29 "(2/3)", 40 on 2024-03-31 "(3/3)"
    """
    if count < 2:
        raise InvalidInputError(installment_count_too_low(count))
    if base.type != TransactionType.EXPENSE:
        raise InvalidInputError(installments_require_expense())

    installment_amount = base.amount / count

    return [
        replace(
            base,
            description=f"{base.description} ({i + 1}/{count})",
            amount=installment_amount,
            date=add_months(base.date, i),
        )
        for i in range(count)
    ]
