"""Invoice Domain Entity

The subject of every report: revenue, counts and status breakdowns are
aggregated from this table.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, ForeignKey, Numeric, String, Date, Text
from src.domain.base import BaseModel, generate_uuid, utc_now


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "draft"
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document issued to a client

    Domain Rules:
    - invoice_number must be unique
    - total is non-negative
    - When line items exist, total is the sum of their amounts (see compute_total)
    - paid_at is set when status becomes paid
    - client_name / client_email snapshot the client's contact at issue time
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_invoice_date', 'invoice_date'),
        Index('ix_invoices_client_id', 'client_id'),
        Index('ix_invoices_folder_id', 'folder_id'),
        Index('ix_invoices_created_at', 'created_at'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique invoice identifier (UUID)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., FA-2024-001)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (draft, pending, paid, overdue)"
    )

    total: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Invoice total (precision: 18,2)"
    )

    invoice_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the invoice was issued"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    paid_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="Timestamp when invoice was paid"
    )

    client_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("clients.id", ondelete="SET NULL"), nullable=True),
        description="Foreign key to Client"
    )

    folder_id: str = Field(
        sa_column=Column(String(36), ForeignKey("folders.id"), nullable=False),
        description="Foreign key to Folder"
    )

    client_name: str = Field(
        default="",
        sa_column=Column(String(255), nullable=False, default=""),
        description="Client name snapshot"
    )

    client_email: str = Field(
        default="",
        sa_column=Column(String(255), nullable=False, default=""),
        description="Client email snapshot"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Free-text notes"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    @staticmethod
    def compute_total(amounts: Iterable[Decimal]) -> Decimal:
        """
        Sum line item amounts into an invoice total

        Args:
            amounts: Line item amounts

        Returns:
            Total rounded to cents
        """
        return sum((Decimal(a) for a in amounts), Decimal("0")).quantize(Decimal("0.01"))

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "7f7a0c55-4f41-4f0e-9f43-0f7d3f3c8f10",
                "invoice_number": "FA-2024-001",
                "status": "pending",
                "total": "1200.00",
                "invoice_date": "2024-03-01",
                "due_date": "2024-03-15",
                "paid_at": None,
                "client_id": "b1d5a7a2-1c36-4a52-8f0a-2b8e8f6a4a11",
                "folder_id": "3c0c4e8e-0b5e-4e55-9a8b-7d4c2c6b9e21",
                "client_name": "Acme s.r.o.",
                "client_email": "billing@acme.sk",
                "notes": None,
                "created_at": "2024-03-01T09:00:00Z",
                "updated_at": "2024-03-01T09:00:00Z"
            }
        }
