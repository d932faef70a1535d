"""Month aggregation of transactions.

Every function here is a pure reduction over an in-memory list; nothing is
cached between calls. The daily breakdown keys on the day of the month only,
so callers are expected to pass a single month's transactions (see
``filter_transactions``).
"""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from famledger.domain.entities import (
    AggregateReport,
    BreakdownEntry,
    DailyBucket,
    FamilyMember,
    FixedVariableSplit,
    MonthlyStats,
    Transaction,
    TransactionType,
)
from famledger.utils.date_parser import month_key, resolve_month

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def aggregate(transactions: Iterable[Transaction]) -> AggregateReport:
    """Build every month view aggregate from a list of transactions."""
    transactions = list(transactions)
    return AggregateReport(
        stats=compute_totals(transactions),
        by_category=group_expenses_by_category(transactions),
        by_member=group_expenses_by_member(transactions),
        by_day=group_by_day(transactions),
        fixed_variable=split_fixed_variable(transactions),
    )


def compute_totals(transactions: Sequence[Transaction]) -> MonthlyStats:
    total_income = ZERO
    total_expense = ZERO
    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
        else:
            total_expense += txn.amount
    return MonthlyStats(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
    )


def _expenses(transactions: Sequence[Transaction]) -> list[Transaction]:
    return [txn for txn in transactions if txn.type == TransactionType.EXPENSE]


def _sorted_breakdown(grouped: dict[str, Decimal]) -> tuple[BreakdownEntry, ...]:
    entries = [BreakdownEntry(name=name, value=value) for name, value in grouped.items()]
    return tuple(sorted(entries, key=lambda entry: (-entry.value, entry.name)))


def group_expenses_by_category(
    transactions: Sequence[Transaction],
) -> tuple[BreakdownEntry, ...]:
    """Sum expenses per category, largest first."""
    grouped: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in _expenses(transactions):
        grouped[str(txn.category)] += txn.amount
    return _sorted_breakdown(grouped)


def group_expenses_by_member(
    transactions: Sequence[Transaction],
) -> tuple[BreakdownEntry, ...]:
    """Sum expenses per family member, largest first.

    Records without a member are attributed to the household.
    """
    grouped: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in _expenses(transactions):
        member = txn.user or FamilyMember.HOUSEHOLD
        grouped[str(member)] += txn.amount
    return _sorted_breakdown(grouped)


def day_of_month(value) -> Optional[int]:
    """Extract the day of the month from a date or an ISO date string.

    Returns None when no numeric day can be read.
    """
    if hasattr(value, "day"):
        return value.day
    if not isinstance(value, str):
        return None
    parts = value.split("-")
    if len(parts) < 3:
        return None
    day_str = parts[2][:2]
    if not day_str.isdigit():
        return None
    return int(day_str)


def group_by_day(transactions: Sequence[Transaction]) -> tuple[DailyBucket, ...]:
    """Group income and expenses by day of the month.

    Records whose date has no readable day are left out of this grouping.
    """
    income: dict[int, Decimal] = defaultdict(lambda: ZERO)
    expense: dict[int, Decimal] = defaultdict(lambda: ZERO)
    details: dict[int, list[Transaction]] = defaultdict(list)

    for txn in transactions:
        day = day_of_month(txn.date)
        if day is None:
            continue
        if txn.type == TransactionType.INCOME:
            income[day] += txn.amount
        else:
            expense[day] += txn.amount
        details[day].append(txn)

    return tuple(
        DailyBucket(
            day=day,
            income=income[day],
            expense=expense[day],
            details=tuple(details[day]),
        )
        for day in sorted(details)
    )


def split_fixed_variable(transactions: Sequence[Transaction]) -> FixedVariableSplit:
    """Partition expenses into fixed and variable and compute their shares."""
    fixed = []
    variable = []
    for txn in _expenses(transactions):
        if txn.is_fixed:
            fixed.append(txn)
        else:
            variable.append(txn)

    fixed_total = sum((txn.amount for txn in fixed), ZERO)
    variable_total = sum((txn.amount for txn in variable), ZERO)
    total = fixed_total + variable_total

    fixed_percent = ZERO
    variable_percent = ZERO
    if total > 0:
        fixed_percent = fixed_total / total * HUNDRED
        variable_percent = HUNDRED - fixed_percent

    return FixedVariableSplit(
        fixed_total=fixed_total,
        variable_total=variable_total,
        fixed_percent=fixed_percent,
        variable_percent=variable_percent,
        fixed=tuple(fixed),
        variable=tuple(variable),
    )


def _matches_month(value, key: str) -> bool:
    if hasattr(value, "year") and hasattr(value, "month"):
        return month_key((value.year, value.month)) == key
    return isinstance(value, str) and value.startswith(key)


def filter_transactions(
    transactions: Iterable[Transaction],
    month: Union[tuple[int, int], str, None] = None,
    member: Union[FamilyMember, str, None] = None,
) -> list[Transaction]:
    """Select one month's transactions, optionally for a single member.

    Args:
        transactions: Transactions to filter (order is preserved)
        month: (year, month) pair or "YYYY-MM" string; None keeps every month
        member: Family member to keep; None keeps every member

    Returns:
        Filtered list of transactions
    """
    key = None
    if month is not None:
        key = month_key(resolve_month(month))
    if member is not None:
        member = FamilyMember.parse(member)

    result = []
    for txn in transactions:
        if key is not None and not _matches_month(txn.date, key):
            continue
        if member is not None and txn.user != member:
            continue
        result.append(txn)
    return result
