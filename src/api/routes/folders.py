"""Folder API Routes"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from src.app.use_cases.reporting.dtos import FolderListItemDTO
from src.app.use_cases.reporting.list_folders import ListFolders
from src.depends import ReportingContext, get_reporting_context
from src.api.error import ClientError

router = APIRouter(prefix="/folders", tags=["Folders"])

FOLDERS_CACHE_CONTROL = "public, s-maxage=60, stale-while-revalidate=30"


@router.get(
    "",
    response_model=List[FolderListItemDTO],
    status_code=status.HTTP_200_OK,
)
async def list_folders(
    response: Response,
    limit: Optional[int] = Query(None, description="Number of folders, clamped to [1, 1000]"),
    context: ReportingContext = Depends(get_reporting_context),
):
    """
    List folders, newest first.

    Use a folder's `id` as `folderId` on `GET /invoices`.

    **Returns:**
    - 200: Folders (default 50)
    - 503: Store unreachable
    """
    use_case = ListFolders(context.connection, context.folder_repository())
    result = await use_case.execute(limit=limit)

    if result.is_err():
        raise ClientError.from_error(result.error)

    response.headers["Cache-Control"] = FOLDERS_CACHE_CONTROL
    return result.value
