"""Criteria to SQL compilation

Turns validated InvoiceCriteria / ClientCriteria into SQLAlchemy WHERE
clauses. Search fields are OR-combined; scope filters are AND-combined with
the search clause.
"""

from typing import Callable, Dict, List, Sequence
from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement
from src.app.repositories.criteria import (
    ClientCriteria,
    InvoiceCriteria,
    MatchMode,
    SearchCriteria,
)
from src.domain.client import Client
from src.domain.invoice import Invoice

LIKE_ESCAPE = "\\"

# Client fields on an invoice match the live client row or the snapshot copy
INVOICE_SEARCH_COLUMNS: Dict[str, Callable[[], Sequence]] = {
    "invoice_number": lambda: (Invoice.invoice_number,),
    "client_name": lambda: (Client.name, Invoice.client_name),
    "client_email": lambda: (Client.email, Invoice.client_email),
}

CLIENT_SEARCH_COLUMNS: Dict[str, Callable[[], Sequence]] = {
    "name": lambda: (Client.name,),
    "email": lambda: (Client.email,),
}

CLIENT_JOIN_FIELDS = frozenset({"client_name", "client_email"})


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input matches literally"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def like_pattern(term: str, mode: MatchMode) -> str:
    escaped = escape_like(term)
    if mode is MatchMode.PREFIX:
        return f"{escaped}%"
    return f"%{escaped}%"


def _search_clause(
    search: SearchCriteria, columns: Dict[str, Callable[[], Sequence]]
) -> ColumnElement:
    matches = []
    for field_match in search.fields:
        pattern = like_pattern(search.term, field_match.mode)
        for column in columns[field_match.field]():
            matches.append(column.ilike(pattern, escape=LIKE_ESCAPE))
    return or_(*matches)


def needs_client_join(criteria: InvoiceCriteria) -> bool:
    if criteria.search is None:
        return False
    return any(f.field in CLIENT_JOIN_FIELDS for f in criteria.search.fields)


def invoice_where_clauses(criteria: InvoiceCriteria) -> List[ColumnElement]:
    """
    Compile invoice criteria

    Args:
        criteria: Validated invoice criteria

    Returns:
        WHERE clauses to AND together (empty list = match all)
    """
    clauses: List[ColumnElement] = []
    if criteria.search is not None:
        clauses.append(_search_clause(criteria.search, INVOICE_SEARCH_COLUMNS))
    if criteria.folder_id is not None:
        clauses.append(Invoice.folder_id == criteria.folder_id)
    if criteria.status is not None:
        clauses.append(Invoice.status == criteria.status)
    return clauses


def client_where_clauses(criteria: ClientCriteria) -> List[ColumnElement]:
    if criteria.search is None:
        return []
    return [_search_clause(criteria.search, CLIENT_SEARCH_COLUMNS)]

