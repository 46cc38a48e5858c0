from .criteria import (
    MatchMode,
    FieldMatch,
    SearchCriteria,
    InvoiceCriteria,
    ClientCriteria,
    MATCH_ALL_INVOICES,
    MATCH_ALL_CLIENTS,
)
from .invoice_repository import InvoiceRepository
from .client_repository import ClientRepository
from .folder_repository import FolderRepository
from .report_repository import InvoiceReportRepository

__all__ = [
    "MatchMode",
    "FieldMatch",
    "SearchCriteria",
    "InvoiceCriteria",
    "ClientCriteria",
    "MATCH_ALL_INVOICES",
    "MATCH_ALL_CLIENTS",
    "InvoiceRepository",
    "ClientRepository",
    "FolderRepository",
    "InvoiceReportRepository",
]
