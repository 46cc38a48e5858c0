"""Report API Routes

Cached dashboard reports: statistics, monthly revenue and status breakdown.
Every response carries X-Data-Source (database, cache or cache-stale).
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Header, Query, Response, status

from src.app.use_cases.reporting.dtos import (
    CachedReport,
    InvoiceStatsDTO,
    MonthlyRevenueDTO,
    StatusBreakdownDTO,
)
from src.app.use_cases.reporting.get_invoice_stats import GetInvoiceStats
from src.app.use_cases.reporting.get_monthly_revenue import (
    DEFAULT_REVENUE_MONTHS,
    GetMonthlyRevenue,
)
from src.app.use_cases.reporting.get_status_breakdown import GetStatusBreakdown
from src.depends import ReportingContext, get_reporting_context
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Reports"])

STORE_FAILURE_RESPONSES = {
    503: {
        "description": "Store unreachable and nothing cached",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "STORE_UNAVAILABLE",
                        "message": "Database connection failed"
                    }
                }
            }
        }
    },
    408: {
        "description": "Query timed out and nothing cached",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "QUERY_TIMEOUT",
                        "message": "Request timeout - try refining your search"
                    }
                }
            }
        }
    }
}


def wants_refresh(cache_control: Optional[str]) -> bool:
    return bool(cache_control) and "no-cache" in cache_control.lower()


def tag_response(response: Response, report: CachedReport, ttl: float) -> None:
    response.headers["X-Data-Source"] = report.source.value
    if report.is_stale:
        response.headers["Cache-Control"] = "no-cache"
    else:
        response.headers["Cache-Control"] = f"public, s-maxage={int(ttl)}"


@router.get(
    "/stats",
    response_model=InvoiceStatsDTO,
    status_code=status.HTTP_200_OK,
    responses=STORE_FAILURE_RESPONSES,
)
async def get_invoice_stats(
    response: Response,
    cache_control: Optional[str] = Header(None),
    context: ReportingContext = Depends(get_reporting_context),
):
    """
    Dashboard statistics.

    Revenue counts paid invoices only. Changes are month-over-month
    percentages rounded to one decimal.

    **Headers:**
    - `Cache-Control: no-cache` forces recomputation

    **Returns:**
    - 200: Statistics (possibly from cache, see `X-Data-Source`)
    - 408/503: Store failed and nothing was cached
    """
    use_case = GetInvoiceStats(
        context.connection, context.report_repository(), context.stats_cache
    )
    result = await use_case.execute(force_refresh=wants_refresh(cache_control))

    if result.is_err():
        raise ClientError.from_error(result.error)

    tag_response(response, result.value, context.stats_cache.ttl)
    return result.value.data


@router.get(
    "/monthly-revenue",
    response_model=List[MonthlyRevenueDTO],
    status_code=status.HTTP_200_OK,
    responses=STORE_FAILURE_RESPONSES,
)
async def get_monthly_revenue(
    response: Response,
    months: int = Query(DEFAULT_REVENUE_MONTHS, description="Window size, clamped to [1, 24]"),
    cache_control: Optional[str] = Header(None),
    context: ReportingContext = Depends(get_reporting_context),
):
    """
    Paid revenue per calendar month, oldest first.

    Months without paid invoices are present with zero revenue.

    **Query parameters:**
    - `months` (optional): Window size, default 6
    """
    use_case = GetMonthlyRevenue(
        context.connection, context.report_repository(), context.monthly_revenue_cache
    )
    result = await use_case.execute(months=months, force_refresh=wants_refresh(cache_control))

    if result.is_err():
        raise ClientError.from_error(result.error)

    tag_response(response, result.value, context.monthly_revenue_cache.ttl)
    return result.value.data


@router.get(
    "/status-count",
    response_model=StatusBreakdownDTO,
    status_code=status.HTTP_200_OK,
    responses=STORE_FAILURE_RESPONSES,
)
async def get_status_count(
    response: Response,
    cache_control: Optional[str] = Header(None),
    context: ReportingContext = Depends(get_reporting_context),
):
    """
    Invoice count per status with whole-percent shares.

    Every status is listed, including those with zero invoices.
    """
    use_case = GetStatusBreakdown(
        context.connection, context.report_repository(), context.status_cache
    )
    result = await use_case.execute(force_refresh=wants_refresh(cache_control))

    if result.is_err():
        raise ClientError.from_error(result.error)

    tag_response(response, result.value, context.status_cache.ttl)
    return result.value.data
