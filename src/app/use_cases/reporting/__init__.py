"""Reporting use cases"""
from .get_invoice_stats import GetInvoiceStats
from .get_monthly_revenue import GetMonthlyRevenue
from .get_status_breakdown import GetStatusBreakdown
from .list_invoices import ListInvoices
from .list_clients import ListClients
from .search_invoices import SearchInvoices
from .list_recent_invoices import ListRecentInvoices
from .list_folders import ListFolders
from .list_client_contacts import ListClientContacts
from .query_filters import (
    InvoiceQueryFilterBuilder,
    ClientQueryFilterBuilder,
    InvoiceScope,
)
from .dtos import (
    DataSource,
    CachedReport,
    InvoiceStatsDTO,
    MonthlyRevenueDTO,
    StatusCountDTO,
    StatusBreakdownDTO,
    PaginationDTO,
    ClientSummaryDTO,
    FolderSummaryDTO,
    FolderListItemDTO,
    InvoiceListItemDTO,
    InvoiceListResponseDTO,
    ClientListItemDTO,
    ClientListResponseDTO,
    SearchMetaDTO,
    InvoiceSearchResponseDTO,
)

__all__ = [
    "GetInvoiceStats",
    "GetMonthlyRevenue",
    "GetStatusBreakdown",
    "ListInvoices",
    "ListClients",
    "SearchInvoices",
    "ListRecentInvoices",
    "ListFolders",
    "ListClientContacts",
    "InvoiceQueryFilterBuilder",
    "ClientQueryFilterBuilder",
    "InvoiceScope",
    "DataSource",
    "CachedReport",
    "InvoiceStatsDTO",
    "MonthlyRevenueDTO",
    "StatusCountDTO",
    "StatusBreakdownDTO",
    "PaginationDTO",
    "ClientSummaryDTO",
    "FolderSummaryDTO",
    "FolderListItemDTO",
    "InvoiceListItemDTO",
    "InvoiceListResponseDTO",
    "ClientListItemDTO",
    "ClientListResponseDTO",
    "SearchMetaDTO",
    "InvoiceSearchResponseDTO",
]
