from .invoice_repository import SqlAlchemyInvoiceRepository
from .client_repository import SqlAlchemyClientRepository
from .folder_repository import SqlAlchemyFolderRepository
from .report_repository import SqlAlchemyInvoiceReportRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyFolderRepository",
    "SqlAlchemyInvoiceReportRepository",
]
