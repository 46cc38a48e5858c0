"""Reporting value types

Calendar anchors and the plain rows repositories hand back to the reporting
use cases. None of these are persisted.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional, Tuple

from src.domain.client import Client
from src.domain.folder import Folder
from src.domain.invoice import Invoice


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def add_months(month_start: date, months: int) -> date:
    """
    Shift the first day of a month by a number of calendar months

    Args:
        month_start: Any date; only its year and month are used
        months: Months to add (negative to go back)

    Returns:
        First day of the resulting month
    """
    index = month_start.year * 12 + (month_start.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_window(reference: date, months: int) -> List[Tuple[int, int]]:
    """Return (year, month) pairs of the trailing window, oldest first"""
    start = add_months(reference, -(months - 1))
    window = []
    for offset in range(months):
        month = add_months(start, offset)
        window.append((month.year, month.month))
    return window


@dataclass(frozen=True)
class PeriodAnchors:
    """
    Monthly period boundaries derived from a reference date

    Ranges are half-open: [current_start, current_end) and
    [previous_start, current_start).
    """

    current_start: date
    current_end: date
    previous_start: date

    @property
    def previous_end(self) -> date:
        return self.current_start

    @property
    def current_last_day(self) -> date:
        return self.current_end - timedelta(days=1)

    @property
    def previous_last_day(self) -> date:
        return self.current_start - timedelta(days=1)

    @classmethod
    def for_reference(cls, reference: date) -> "PeriodAnchors":
        current_start = first_of_month(reference)
        return cls(
            current_start=current_start,
            current_end=add_months(current_start, 1),
            previous_start=add_months(current_start, -1),
        )


@dataclass(frozen=True)
class PeriodTotals:
    """Raw sums and counts produced by the stats aggregation pass"""

    total_revenue: Decimal = Decimal("0")
    current_revenue: Decimal = Decimal("0")
    previous_revenue: Decimal = Decimal("0")
    total_invoices: int = 0
    current_invoices: int = 0
    previous_invoices: int = 0
    current_paid_invoices: int = 0


@dataclass(frozen=True)
class MonthlyRevenueBucket:
    """Paid revenue of one calendar month"""

    year: int
    month: int
    revenue: Decimal = Decimal("0")
    invoice_count: int = 0


@dataclass(frozen=True)
class InvoiceListing:
    """An invoice joined with its client and folder, if they still exist"""

    invoice: Invoice
    client: Optional[Client] = None
    folder: Optional[Folder] = None


@dataclass(frozen=True)
class ClientListing:
    """A client with the number of invoices that reference it"""

    client: Client
    invoice_count: int = 0
