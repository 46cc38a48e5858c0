"""Invoice API Routes

Paginated invoice listing, quick search and the recent-invoices widget.
Listings are always read from the store.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from src.app.use_cases.reporting.dtos import (
    InvoiceListItemDTO,
    InvoiceListResponseDTO,
    InvoiceSearchResponseDTO,
)
from src.app.use_cases.reporting.list_invoices import ListInvoices
from src.app.use_cases.reporting.list_recent_invoices import ListRecentInvoices
from src.app.use_cases.reporting.search_invoices import SearchInvoices
from src.depends import ReportingContext, get_reporting_context
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get(
    "/search",
    response_model=InvoiceSearchResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Query too short or too long",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "SEARCH_TOO_SHORT",
                            "message": "Query must be at least 2 characters"
                        }
                    }
                }
            }
        }
    }
)
async def search_invoices(
    q: Optional[str] = Query(None, description="Search term (2-100 characters)"),
    limit: Optional[int] = Query(None, description="Max results, clamped to [1, 50]"),
    context: ReportingContext = Depends(get_reporting_context),
):
    """
    Quick search by client name prefix or invoice number.

    **Query parameters:**
    - `q` (required): Search term
    - `limit` (optional): Max results, default 20

    **Returns:**
    - 200: Matches with `meta.count` and `meta.hasMore`
    - 400: Query missing, too short or too long
    """
    use_case = SearchInvoices(context.connection, context.invoice_repository())
    result = await use_case.execute(q, limit=limit)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/recent",
    response_model=List[InvoiceListItemDTO],
    status_code=status.HTTP_200_OK,
)
async def list_recent_invoices(
    limit: Optional[int] = Query(None, description="Number of invoices, clamped to [1, 20]"),
    context: ReportingContext = Depends(get_reporting_context),
):
    """Newest invoices first, default 5."""
    use_case = ListRecentInvoices(context.connection, context.invoice_repository())
    result = await use_case.execute(limit=limit)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "",
    response_model=InvoiceListResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Invalid folder id or status",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_FOLDER_ID",
                            "message": "Invalid folder ID"
                        }
                    }
                }
            }
        },
        503: {
            "description": "Store unreachable",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "STORE_UNAVAILABLE",
                            "message": "Database connection failed"
                        }
                    }
                }
            }
        }
    }
)
async def list_invoices(
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Page size, clamped to [1, 100]"),
    folder_id: Optional[str] = Query(None, alias="folderId", description="Folder id"),
    invoice_status: Optional[str] = Query(None, alias="status", description="draft, pending, paid or overdue"),
    search: Optional[str] = Query(None, description="Invoice number prefix, client name or email"),
    context: ReportingContext = Depends(get_reporting_context),
):
    """
    List invoices, newest first.

    **Query parameters:**
    - `page`, `limit` (optional): Paging, default 1 and 10
    - `folderId` (optional): Restrict to one folder
    - `status` (optional): Restrict to one status
    - `search` (optional): Free-text search

    **Example response:**
    ```json
    {
      "invoices": [...],
      "pagination": {"total": 3, "page": 1, "limit": 10, "pages": 1, "hasNext": false, "hasPrev": false}
    }
    ```
    """
    use_case = ListInvoices(context.connection, context.invoice_repository())
    result = await use_case.execute(
        page=page,
        limit=limit,
        search=search,
        folder_id=folder_id,
        status=invoice_status,
    )

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
