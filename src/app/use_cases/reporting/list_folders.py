"""List Folders Use Case

Folders for the folder picker; their ids scope the invoice listing.
"""

import logging
from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.folder_repository import FolderRepository
from src.app.services.connection_manager import ConnectionLifecycleManager
from .dtos import FolderListItemDTO
from .errors import store_failure
from .mappers import folder_list_item
from .pagination import PageRequest

logger = logging.getLogger(__name__)

DEFAULT_FOLDER_LIMIT = 50
MAX_FOLDER_LIMIT = 1000


class ListFolders:
    """
    Use Case: Folder listing

    Business Rules:
    1. Newest folders first
    2. limit defaults to 50 and is clamped to [1, 1000]
    """

    def __init__(
        self,
        connection: ConnectionLifecycleManager,
        folder_repo: FolderRepository,
    ):
        self.connection = connection
        self.folder_repo = folder_repo

    async def execute(self, limit: Optional[int] = None) -> Result[List[FolderListItemDTO]]:
        page_request = PageRequest.clamp(
            1, limit, default_limit=DEFAULT_FOLDER_LIMIT, max_limit=MAX_FOLDER_LIMIT
        )

        try:
            await self.connection.ensure_connection()
            folders = await self.folder_repo.list_recent(limit=page_request.limit)
        except Exception as e:
            self.connection.reset(f"folder listing failed: {type(e).__name__}")
            logger.error(f"Error fetching folders: {type(e).__name__}: {e}")
            return Return.err(store_failure(e, "Failed to fetch folders", "LIST_FOLDERS_FAILED"))

        return Return.ok([folder_list_item(folder) for folder in folders])
