"""Client API Routes"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from src.app.use_cases.reporting.dtos import ClientListResponseDTO, ClientSummaryDTO
from src.app.use_cases.reporting.list_client_contacts import ListClientContacts
from src.app.use_cases.reporting.list_clients import ListClients
from src.depends import ReportingContext, get_reporting_context
from src.api.error import ClientError

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get(
    "",
    response_model=ClientListResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_clients(
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Page size, clamped to [1, 100]"),
    search: Optional[str] = Query(None, description="Client name or email"),
    context: ReportingContext = Depends(get_reporting_context),
):
    """
    List clients alphabetically with their invoice counts.

    **Returns:**
    - 200: `{data: [...], pagination: {...}}`
    - 400: Search term too long
    - 503: Store unreachable
    """
    use_case = ListClients(context.connection, context.client_repository())
    result = await use_case.execute(page=page, limit=limit, search=search)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value


@router.get(
    "/all",
    response_model=List[ClientSummaryDTO],
    status_code=status.HTTP_200_OK,
)
async def list_client_contacts(
    context: ReportingContext = Depends(get_reporting_context),
):
    """Every client's name, email and address, ordered by name (no paging)."""
    use_case = ListClientContacts(context.connection, context.client_repository())
    result = await use_case.execute()

    if result.is_err():
        raise ClientError.from_error(result.error)

    return result.value
