"""Invoice Line Domain Entity

Tracks individual line items within an invoice.
"""

from decimal import Decimal
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - Lines are ordered by position
    - quantity >= 0, rate >= 0
    - amount = quantity * rate
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique invoice line identifier (UUID)"
    )

    invoice_id: str = Field(
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Zero-based order of the line within the invoice"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line item description (e.g., 'Web design - 10 hours')"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        sa_column=Column(Numeric(18, 4), nullable=False, default=1),
        description="Quantity (hours, units)"
    )

    rate: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Price per unit"
    )

    amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Line amount (quantity * rate)"
    )

    @staticmethod
    def compute_amount(quantity: Decimal, rate: Decimal) -> Decimal:
        """Return quantity * rate rounded to cents"""
        if quantity < 0 or rate < 0:
            raise ValueError("Quantity and rate must be non-negative")
        return (Decimal(quantity) * Decimal(rate)).quantize(Decimal("0.01"))
