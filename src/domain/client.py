"""Client Domain Entity

Invoice recipients. Invoice counts per client are derived by joining invoices,
never stored on the client row.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid, utc_now


class Client(BaseModel, table=True):
    """
    Client - A customer invoices are issued to

    Domain Rules:
    - email is unique
    - name and email are stored trimmed
    """

    __tablename__ = "clients"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique client identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Client email (unique)"
    )

    address: Optional[str] = Field(
        default="",
        sa_column=Column(String(500), nullable=True, default=""),
        description="Postal address"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Client creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )
