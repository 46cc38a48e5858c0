"""Get Status Breakdown Use Case

Invoice counts per status with each status's share of the total.
"""

from datetime import datetime
from typing import Callable, Dict, Mapping, NamedTuple, Tuple
from libs.result import Result
from src.app.repositories.report_repository import InvoiceReportRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from src.app.services.ttl_cache import TTLCache
from src.domain.base import utc_now
from src.domain.invoice import InvoiceStatus
from .cached_report import CachedReportUseCase
from .dtos import CachedReport, StatusBreakdownDTO, StatusCountDTO
from .metrics import share_percent


class StatusPresentation(NamedTuple):
    status: InvoiceStatus
    label: str
    color: str


# Output order of the breakdown; every status listed here is always reported
STATUS_PRESENTATION: Tuple[StatusPresentation, ...] = (
    StatusPresentation(InvoiceStatus.PAID, "Zaplatené", "#22c55e"),
    StatusPresentation(InvoiceStatus.PENDING, "Čakajúce", "#eab308"),
    StatusPresentation(InvoiceStatus.OVERDUE, "Po splatnosti", "#ef4444"),
    StatusPresentation(InvoiceStatus.DRAFT, "Koncept", "#94a3b8"),
)


def build_status_breakdown(
    counts: Mapping[InvoiceStatus, int],
    updated_at: datetime,
) -> StatusBreakdownDTO:
    """
    Left-join observed counts against the fixed status list

    Args:
        counts: Observed status counts (missing statuses count as 0)
        updated_at: Computation timestamp

    Returns:
        StatusBreakdownDTO with one entry per presented status
    """
    values: Dict[InvoiceStatus, int] = {
        p.status: int(counts.get(p.status, 0)) for p in STATUS_PRESENTATION
    }
    total = sum(values.values())

    entries = [
        StatusCountDTO(
            name=p.label,
            value=values[p.status],
            percentage=share_percent(values[p.status], total),
            color=p.color,
            status=p.status.value,
        )
        for p in STATUS_PRESENTATION
    ]

    return StatusBreakdownDTO(data=entries, total=total, updated_at=updated_at)


class GetStatusBreakdown(CachedReportUseCase[StatusBreakdownDTO]):
    """
    Use Case: Invoice status chart

    Cached for STATUS_CACHE_TTL_SECONDS; stale values are served on failure.
    """

    report_name = "invoice status counts"
    failure_code = "STATUS_COUNT_FAILED"

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        report_repo: InvoiceReportRepository,
        cache: TTLCache[StatusBreakdownDTO],
        now: Callable[[], datetime] = utc_now,
    ):
        super().__init__(connection)
        self.report_repo = report_repo
        self.cache = cache
        self.now = now

    async def execute(self, force_refresh: bool = False) -> Result[CachedReport[StatusBreakdownDTO]]:

        async def compute() -> StatusBreakdownDTO:
            counts = await self.report_repo.count_by_status()
            return build_status_breakdown(counts, self.now())

        return await self.run_cached(self.cache, compute, force_refresh)
