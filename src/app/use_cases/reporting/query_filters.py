"""Query Filter Builder

Validates raw search and scope parameters and turns them into criteria the
repositories understand. Invalid input is rejected here, before any store
access, so malformed identifiers never reach the database.
"""

import uuid
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple
from libs.result import Result, Return, Error
from src.app.repositories.criteria import (
    ClientCriteria,
    FieldMatch,
    InvoiceCriteria,
    MatchMode,
    SearchCriteria,
)
from src.domain.invoice import InvoiceStatus
from .errors import (
    INVALID_FOLDER_ID,
    INVALID_STATUS,
    SEARCH_TOO_LONG,
    SEARCH_TOO_SHORT,
)

MAX_SEARCH_LENGTH = 100

INVOICE_SEARCH_FIELDS: Tuple[FieldMatch, ...] = (
    FieldMatch("invoice_number", MatchMode.PREFIX),
    FieldMatch("client_name", MatchMode.CONTAINS),
    FieldMatch("client_email", MatchMode.CONTAINS),
)

CLIENT_SEARCH_FIELDS: Tuple[FieldMatch, ...] = (
    FieldMatch("name", MatchMode.CONTAINS),
    FieldMatch("email", MatchMode.CONTAINS),
)


@dataclass(frozen=True)
class InvoiceScope:
    """Raw scope parameters as received from the caller"""

    folder_id: Optional[str] = None
    status: Optional[str] = None


@lru_cache(maxsize=1024)
def normalize_reference(value: str) -> Optional[str]:
    """
    Canonicalize an entity reference

    Args:
        value: Reference as supplied by the caller

    Returns:
        Canonical lower-case UUID string, or None if value is not a UUID
    """
    try:
        return str(uuid.UUID(value.strip()))
    except (ValueError, AttributeError, TypeError):
        return None


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def normalize_search(
    search: Optional[str],
    min_length: int = 0,
    max_length: int = MAX_SEARCH_LENGTH,
) -> Result[Optional[str]]:
    """
    Trim a search term and check its length

    Args:
        search: Raw search term
        min_length: Shortest accepted term (0 = empty allowed)
        max_length: Longest accepted term

    Returns:
        Result with the trimmed term, or None when the term is empty
    """
    term = (search or "").strip()

    if len(term) > max_length:
        return Return.err(
            Error(
                code=SEARCH_TOO_LONG,
                message=f"Query too long (max {max_length} characters)",
            )
        )

    if len(term) < min_length:
        return Return.err(
            Error(
                code=SEARCH_TOO_SHORT,
                message=f"Query must be at least {min_length} characters",
            )
        )

    return Return.ok(term or None)


class InvoiceQueryFilterBuilder:
    """
    Builds InvoiceCriteria from search and scope parameters

    Search is OR-matched across search_fields; folder and status scope are
    AND-combined with it.
    """

    def __init__(
        self,
        search_fields: Tuple[FieldMatch, ...] = INVOICE_SEARCH_FIELDS,
        max_search_length: int = MAX_SEARCH_LENGTH,
    ):
        self.search_fields = search_fields
        self.max_search_length = max_search_length

    def build(
        self,
        search: Optional[str] = None,
        scope: Optional[InvoiceScope] = None,
        min_search_length: int = 0,
    ) -> Result[InvoiceCriteria]:
        """
        Validate parameters and build criteria

        Args:
            search: Free-text search term
            scope: Folder and status restrictions
            min_search_length: Shortest accepted search term

        Returns:
            Result[InvoiceCriteria] or a validation error
        """
        scope = scope or InvoiceScope()

        term_result = normalize_search(search, min_search_length, self.max_search_length)
        if term_result.is_err():
            return term_result
        term = term_result.value

        folder_id = None
        if not _blank(scope.folder_id):
            folder_id = normalize_reference(scope.folder_id)
            if folder_id is None:
                return Return.err(
                    Error(
                        code=INVALID_FOLDER_ID,
                        message="Invalid folder ID",
                        reason=f"'{scope.folder_id}' is not a valid identifier",
                    )
                )

        status = None
        if not _blank(scope.status):
            try:
                status = InvoiceStatus(scope.status.strip().lower())
            except ValueError:
                valid = ", ".join(s.value for s in InvoiceStatus)
                return Return.err(
                    Error(
                        code=INVALID_STATUS,
                        message="Invalid invoice status",
                        reason=f"Expected one of: {valid}",
                    )
                )

        return Return.ok(
            InvoiceCriteria(
                search=SearchCriteria(term=term, fields=self.search_fields) if term else None,
                folder_id=folder_id,
                status=status,
            )
        )


class ClientQueryFilterBuilder:
    """Builds ClientCriteria from a search term"""

    def __init__(
        self,
        search_fields: Tuple[FieldMatch, ...] = CLIENT_SEARCH_FIELDS,
        max_search_length: int = MAX_SEARCH_LENGTH,
    ):
        self.search_fields = search_fields
        self.max_search_length = max_search_length

    def build(self, search: Optional[str] = None) -> Result[ClientCriteria]:
        term_result = normalize_search(search, 0, self.max_search_length)
        if term_result.is_err():
            return term_result
        term = term_result.value

        return Return.ok(
            ClientCriteria(
                search=SearchCriteria(term=term, fields=self.search_fields) if term else None
            )
        )
