"""SQLAlchemy Folder Repository Implementation"""

from typing import List
from sqlmodel import select
from src.adapter.repositories.base import SqlAlchemyReadRepository
from src.app.repositories.folder_repository import FolderRepository
from src.domain.folder import Folder


class SqlAlchemyFolderRepository(SqlAlchemyReadRepository, FolderRepository):
    """SQLAlchemy implementation of FolderRepository"""

    async def list_recent(self, limit: int = 50) -> List[Folder]:
        statement = (
            select(Folder)
            .order_by(Folder.created_at.desc(), Folder.id)
            .limit(limit)
        )
        return list(await self._execute(statement, lambda result: result.scalars().all()))
