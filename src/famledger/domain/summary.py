"""Month summary domain service."""

from typing import Union

from famledger.database.base import Database
from famledger.domain.aggregation import aggregate
from famledger.domain.entities import AggregateReport, FamilyMember, Transaction
from famledger.utils.date_parser import month_bounds, resolve_month


class SummaryService:
    """Service for building month summary reports."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_filtered_transactions(
        self,
        month: Union[tuple[int, int], str],
        member: Union[FamilyMember, str, None] = None,
    ) -> list[Transaction]:
        """Get one month's transactions matching the member filter."""
        start_date, end_date = month_bounds(resolve_month(month))
        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            member=FamilyMember.parse(member) if member is not None else None,
        )

    def build_report(
        self,
        month: Union[tuple[int, int], str],
        member: Union[FamilyMember, str, None] = None,
    ) -> AggregateReport:
        """Build the aggregate report for one month.

        Args:
            month: (year, month) pair or "YYYY-MM"
            member: Optional family member filter; None covers the whole family

        Returns:
            AggregateReport for the filtered transactions
        """
        return aggregate(self.get_filtered_transactions(month, member))
