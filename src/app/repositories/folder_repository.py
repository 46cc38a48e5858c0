"""Folder Repository Interface

Defines the contract for folder reads.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.folder import Folder


class FolderRepository(ABC):
    """Repository interface for Folder queries"""

    @abstractmethod
    async def list_recent(self, limit: int = 50) -> List[Folder]:
        """
        Retrieve folders, newest first

        Args:
            limit: Maximum number of folders to return

        Returns:
            Folders ordered by creation time descending
        """
        pass
