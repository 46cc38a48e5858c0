"""Get Invoice Stats Use Case

Dashboard totals: revenue and invoice counts with month-over-month deltas.
"""

from datetime import date, datetime
from typing import Callable, Optional, Tuple
from libs.result import Result
from src.app.repositories.report_repository import InvoiceReportRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from src.app.services.ttl_cache import KeyedCacheSlot, KeyedTTLCache
from src.domain.base import utc_now
from src.domain.reporting import PeriodAnchors, PeriodTotals
from .cached_report import CachedReportUseCase
from .dtos import CachedReport, InvoiceStatsDTO
from .metrics import percent_change

PeriodKey = Tuple[int, int]


def build_invoice_stats(totals: PeriodTotals, updated_at: datetime) -> InvoiceStatsDTO:
    """
    Derive the stats DTO from raw period totals

    Args:
        totals: Sums and counts from the aggregation pass
        updated_at: Computation timestamp

    Returns:
        InvoiceStatsDTO with percentage deltas
    """
    return InvoiceStatsDTO(
        total_revenue=totals.total_revenue,
        revenue_change=percent_change(totals.current_revenue, totals.previous_revenue),
        total_invoices=totals.total_invoices,
        invoice_change=percent_change(totals.current_invoices, totals.previous_invoices),
        this_month_revenue=totals.current_revenue,
        this_month_invoices=totals.current_invoices,
        paid_invoices_this_month=totals.current_paid_invoices,
        last_month_revenue=totals.previous_revenue,
        last_month_invoices=totals.previous_invoices,
        updated_at=updated_at,
    )


class GetInvoiceStats(CachedReportUseCase[InvoiceStatsDTO]):
    """
    Use Case: Dashboard statistics

    Business Rules:
    1. Periods are calendar months of the reference date (default: today, UTC)
    2. Revenue counts paid invoices only; invoice counts include every status
    3. Deltas: +100% when last month is 0 and this month is not, 0% when both are 0
    4. Cached per reporting month for STATS_CACHE_TTL_SECONDS; stale values of
       the same month are served on failure
    """

    report_name = "invoice stats"
    failure_code = "STATS_FAILED"

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        report_repo: InvoiceReportRepository,
        cache: KeyedTTLCache[PeriodKey, InvoiceStatsDTO],
        now: Callable[[], datetime] = utc_now,
    ):
        super().__init__(connection)
        self.report_repo = report_repo
        self.cache = cache
        self.now = now

    async def execute(
        self,
        reference_date: Optional[date] = None,
        force_refresh: bool = False,
    ) -> Result[CachedReport[InvoiceStatsDTO]]:
        """
        Compute (or serve cached) dashboard statistics

        Args:
            reference_date: Any day of the "current" month
            force_refresh: Recompute even if the cached value is fresh

        Returns:
            Result[CachedReport[InvoiceStatsDTO]]
        """
        anchors = PeriodAnchors.for_reference(reference_date or self.now().date())

        async def compute() -> InvoiceStatsDTO:
            totals = await self.report_repo.aggregate_period_totals(anchors)
            return build_invoice_stats(totals, self.now())

        slot = KeyedCacheSlot(
            self.cache, (anchors.current_start.year, anchors.current_start.month)
        )
        return await self.run_cached(slot, compute, force_refresh)
