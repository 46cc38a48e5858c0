"""Data Transfer Objects for Reporting Use Cases

Pydantic models serialized to JSON with camelCase keys.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class DataSource(str, Enum):
    """Where a report's data came from"""
    DATABASE = "database"
    CACHE = "cache"
    CACHE_STALE = "cache-stale"


@dataclass(frozen=True)
class CachedReport(Generic[T]):
    """A report value tagged with its data source"""

    data: T
    source: DataSource

    @property
    def is_stale(self) -> bool:
        return self.source is DataSource.CACHE_STALE


class ReportModel(BaseModel):
    """Base DTO: snake_case in Python, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class InvoiceStatsDTO(ReportModel):
    """
    Dashboard statistics

    Returned by GetInvoiceStats.
    """

    total_revenue: Decimal = Field(..., description="Sum of all paid invoices")
    revenue_change: float = Field(..., description="Paid revenue change vs previous month, in %")
    total_invoices: int = Field(..., description="Number of invoices")
    invoice_change: float = Field(..., description="Invoice count change vs previous month, in %")
    this_month_revenue: Decimal = Field(..., description="Paid revenue dated this month")
    this_month_invoices: int = Field(..., description="Invoices dated this month")
    paid_invoices_this_month: int = Field(..., description="Paid invoices dated this month")
    last_month_revenue: Decimal = Field(..., description="Paid revenue dated last month")
    last_month_invoices: int = Field(..., description="Invoices dated last month")
    updated_at: datetime = Field(..., description="When the figures were computed")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "totalRevenue": "15400.00",
                "revenueChange": 20.0,
                "totalInvoices": 42,
                "invoiceChange": -12.5,
                "thisMonthRevenue": "1200.00",
                "thisMonthInvoices": 7,
                "paidInvoicesThisMonth": 3,
                "lastMonthRevenue": "1000.00",
                "lastMonthInvoices": 8,
                "updatedAt": "2024-03-15T10:00:00Z"
            }
        }
    )


class MonthlyRevenueDTO(ReportModel):
    """Paid revenue of one calendar month"""

    month: str = Field(..., description="Localized three-letter month label")
    month_number: int = Field(..., ge=1, le=12, description="Calendar month (1-12)")
    year: int = Field(..., description="Calendar year")
    revenue: Decimal = Field(..., description="Paid revenue dated in the month")
    invoice_count: int = Field(..., description="Paid invoices dated in the month")


class StatusCountDTO(ReportModel):
    """Invoice count of one status"""

    name: str = Field(..., description="Localized status label")
    value: int = Field(..., description="Number of invoices")
    percentage: int = Field(..., description="Share of all invoices, in whole %")
    color: str = Field(..., description="Chart color")
    status: str = Field(..., description="Status code")


class StatusBreakdownDTO(ReportModel):
    """Invoice counts for every status"""

    data: List[StatusCountDTO]
    total: int
    updated_at: datetime


class PaginationDTO(ReportModel):
    total: int
    page: int
    limit: int
    pages: int
    has_next: bool
    has_prev: bool


class ClientSummaryDTO(ReportModel):
    id: str
    name: str
    email: str
    address: Optional[str] = None


class FolderSummaryDTO(ReportModel):
    id: str
    name: str


class FolderListItemDTO(ReportModel):
    """Folder row for pickers and the folder-scoped invoice listing"""

    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime


class InvoiceListItemDTO(ReportModel):
    """Invoice row with its client and folder summaries"""

    id: str
    invoice_number: str
    status: str
    total: Decimal
    invoice_date: date
    due_date: date
    paid_at: Optional[datetime] = None
    client: Optional[ClientSummaryDTO] = None
    folder: Optional[FolderSummaryDTO] = None
    created_at: datetime
    updated_at: datetime


class InvoiceListResponseDTO(ReportModel):
    invoices: List[InvoiceListItemDTO]
    pagination: PaginationDTO


class ClientListItemDTO(ReportModel):
    id: str
    name: str
    email: str
    address: Optional[str] = None
    invoice_count: int
    created_at: datetime


class ClientListResponseDTO(ReportModel):
    data: List[ClientListItemDTO]
    pagination: PaginationDTO


class SearchMetaDTO(ReportModel):
    count: int
    has_more: bool
    query: str


class InvoiceSearchResponseDTO(ReportModel):
    data: List[InvoiceListItemDTO]
    meta: SearchMetaDTO
