"""Query criteria

Validated, store-neutral descriptions of a listing query. Repositories
compile them into their own query language.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from src.domain.invoice import InvoiceStatus


class MatchMode(str, Enum):
    """How a search term is matched against a field (always case-insensitive)"""
    PREFIX = "prefix"
    CONTAINS = "contains"


@dataclass(frozen=True)
class FieldMatch:
    field: str
    mode: MatchMode = MatchMode.CONTAINS


@dataclass(frozen=True)
class SearchCriteria:
    """A search term OR-matched across a fixed set of fields"""

    term: str
    fields: Tuple[FieldMatch, ...]


@dataclass(frozen=True)
class InvoiceCriteria:
    """Invoice listing filter: search AND folder AND status"""

    search: Optional[SearchCriteria] = None
    folder_id: Optional[str] = None
    status: Optional[InvoiceStatus] = None

    @property
    def matches_all(self) -> bool:
        return self.search is None and self.folder_id is None and self.status is None


@dataclass(frozen=True)
class ClientCriteria:
    """Client listing filter"""

    search: Optional[SearchCriteria] = None

    @property
    def matches_all(self) -> bool:
        return self.search is None


MATCH_ALL_INVOICES = InvoiceCriteria()
MATCH_ALL_CLIENTS = ClientCriteria()
