from .base import BaseModel, generate_uuid, utc_now
from .client import Client
from .folder import Folder
from .invoice import Invoice, InvoiceStatus
from .invoice_line import InvoiceLine

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utc_now",
    "Client",
    "Folder",
    "Invoice",
    "InvoiceStatus",
    "InvoiceLine",
]
