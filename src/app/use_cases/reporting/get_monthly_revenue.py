"""Get Monthly Revenue Use Case

Paid revenue per calendar month over a trailing window, gap-filled with zeros.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Tuple
from libs.result import Result
from src.app.repositories.report_repository import InvoiceReportRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from src.app.services.ttl_cache import KeyedCacheSlot, KeyedTTLCache
from src.domain.base import utc_now
from src.domain.reporting import MonthlyRevenueBucket, add_months, month_window
from .cached_report import CachedReportUseCase
from .dtos import CachedReport, MonthlyRevenueDTO

DEFAULT_REVENUE_MONTHS = 6
MAX_REVENUE_MONTHS = 24

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "Máj", "Jún",
    "Júl", "Aug", "Sep", "Okt", "Nov", "Dec",
)

WindowKey = Tuple[int, int, int]


def clamp_months(months: Optional[int]) -> int:
    if months is None:
        return DEFAULT_REVENUE_MONTHS
    return min(MAX_REVENUE_MONTHS, max(1, months))


def fill_monthly_window(
    window: List[Tuple[int, int]],
    buckets: Iterable[MonthlyRevenueBucket],
) -> List[MonthlyRevenueDTO]:
    """
    Produce one entry per window month, oldest first

    Args:
        window: (year, month) pairs in chronological order
        buckets: Months that have paid invoices

    Returns:
        Entries for every month; months without buckets have zero revenue
    """
    by_month = {(b.year, b.month): b for b in buckets}
    filled = []
    for year, month in window:
        bucket = by_month.get((year, month))
        filled.append(
            MonthlyRevenueDTO(
                month=MONTH_LABELS[month - 1],
                month_number=month,
                year=year,
                revenue=bucket.revenue if bucket else Decimal("0.00"),
                invoice_count=bucket.invoice_count if bucket else 0,
            )
        )
    return filled


class GetMonthlyRevenue(CachedReportUseCase[List[MonthlyRevenueDTO]]):
    """
    Use Case: Monthly revenue chart

    Business Rules:
    1. Window size is clamped to [1, 24], default 6
    2. The window ends with the reference month (default: current month, UTC)
    3. One grouped query; months without paid invoices are zero-filled
    4. Cached per (window size, last month); stale values are served on failure
    """

    report_name = "monthly revenue"
    failure_code = "MONTHLY_REVENUE_FAILED"

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        report_repo: InvoiceReportRepository,
        cache: KeyedTTLCache[WindowKey, List[MonthlyRevenueDTO]],
        now: Callable[[], datetime] = utc_now,
    ):
        super().__init__(connection)
        self.report_repo = report_repo
        self.cache = cache
        self.now = now

    async def execute(
        self,
        months: Optional[int] = DEFAULT_REVENUE_MONTHS,
        reference_date: Optional[date] = None,
        force_refresh: bool = False,
    ) -> Result[CachedReport[List[MonthlyRevenueDTO]]]:
        """
        Compute (or serve cached) monthly revenue

        Args:
            months: Requested window size (clamped)
            reference_date: Any day of the last month in the window
            force_refresh: Recompute even if the cached value is fresh

        Returns:
            Result[CachedReport[List[MonthlyRevenueDTO]]] with exactly window-size entries
        """
        window_size = clamp_months(months)
        reference = reference_date or self.now().date()
        window = month_window(reference, window_size)
        last_year, last_month = window[-1]

        async def compute() -> List[MonthlyRevenueDTO]:
            start = date(window[0][0], window[0][1], 1)
            end = add_months(date(last_year, last_month, 1), 1)
            buckets = await self.report_repo.monthly_paid_revenue(start, end)
            return fill_monthly_window(window, buckets)

        slot = KeyedCacheSlot(self.cache, (window_size, last_year, last_month))
        return await self.run_cached(slot, compute, force_refresh)
