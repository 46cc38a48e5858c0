"""Folder Domain Entity

Groups invoices; the invoice listing can be scoped to a single folder.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, String
from src.domain.base import BaseModel, generate_uuid, utc_now


class Folder(BaseModel, table=True):
    """
    Folder - Named group of invoices

    Domain Rules:
    - name is unique case-insensitively (enforced through name_key)
    """

    __tablename__ = "folders"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        max_length=36,
        description="Unique folder identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Folder name as entered"
    )

    name_key: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Lower-cased, trimmed name used for uniqueness"
    )

    description: Optional[str] = Field(
        default="",
        sa_column=Column(String(1000), nullable=True, default=""),
        description="Optional description"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Folder creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    @staticmethod
    def normalize_name(name: str) -> str:
        return name.strip().casefold()

    @classmethod
    def named(cls, name: str, description: str = "") -> "Folder":
        """Build a folder with its uniqueness key filled in"""
        return cls(
            name=name.strip(),
            name_key=cls.normalize_name(name),
            description=description.strip(),
        )
