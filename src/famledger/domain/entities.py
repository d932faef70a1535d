"""Domain model entities for famledger.

These are pure data classes representing business concepts, independent of
database schema. The enum values are the strings kept in the store, so
records written by other clients of the same household database stay
readable.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
import re
from typing import Optional

from famledger.domain.errors import InvalidInputError, invalid_choice


class _ChoiceEnum(str, Enum):
    """String enum that parses from its stored value or its member name."""

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if value is None:
            raise InvalidInputError(invalid_choice(cls._kind(), value, cls.choices()))
        text = str(value).strip()
        for member in cls:
            if text.casefold() in (member.value.casefold(), member.name.casefold()):
                return member
        raise InvalidInputError(invalid_choice(cls._kind(), value, cls.choices()))

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def _kind(cls) -> str:
        return re.sub(r"(?<!^)(?=[A-Z])", " ", cls.__name__).lower()

    def __str__(self) -> str:
        return self.value


class TransactionType(_ChoiceEnum):
    """Direction of money flow."""

    INCOME = "income"
    EXPENSE = "expense"


class Category(_ChoiceEnum):
    """Closed set of transaction categories."""

    FOOD = "Alimentação"
    HOUSING = "Moradia"
    TRANSPORT = "Transporte"
    LEISURE = "Lazer"
    HEALTH = "Saúde"
    EDUCATION = "Educação"
    SALARY = "Salário"
    INVESTMENTS = "Investimentos"
    OTHER = "Outros"


class FamilyMember(_ChoiceEnum):
    """Family members a transaction can be attributed to."""

    LIZ = "Liz"
    DAD = "Pai"
    MOM = "Mãe"
    HOUSEHOLD = "Casa"


@dataclass(frozen=True)
class TransactionDraft:
    """Transaction fields as entered, before the store assigns an id."""

    description: str
    amount: Decimal
    type: TransactionType
    category: Category
    date: date
    is_fixed: bool = False
    user: FamilyMember = FamilyMember.HOUSEHOLD


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    description: str
    amount: Decimal
    type: TransactionType
    category: Category
    date: date
    is_fixed: bool = False
    user: Optional[FamilyMember] = FamilyMember.HOUSEHOLD


@dataclass(frozen=True)
class MonthlyStats:
    """Income, expense and balance totals."""

    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class BreakdownEntry:
    """Expense sum for one category or family member."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class DailyBucket:
    """Income and expense sums for one day of the month."""

    day: int
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    details: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class FixedVariableSplit:
    """Expenses partitioned by their fixed flag."""

    fixed_total: Decimal = Decimal("0")
    variable_total: Decimal = Decimal("0")
    fixed_percent: Decimal = Decimal("0")
    variable_percent: Decimal = Decimal("0")
    fixed: tuple[Transaction, ...] = ()
    variable: tuple[Transaction, ...] = ()


@dataclass(frozen=True)
class AggregateReport:
    """Everything the month views need, computed from one transaction list."""

    stats: MonthlyStats = field(default_factory=MonthlyStats)
    by_category: tuple[BreakdownEntry, ...] = ()
    by_member: tuple[BreakdownEntry, ...] = ()
    by_day: tuple[DailyBucket, ...] = ()
    fixed_variable: FixedVariableSplit = field(default_factory=FixedVariableSplit)
