"""Page request clamping and pagination metadata"""

import math
from dataclasses import dataclass
from typing import Optional
from libs.result import Error, Result, Return
from .dtos import PaginationDTO
from .errors import VALIDATION_ERROR

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_PAGE_LIMIT = 100
# Keeps (page - 1) * limit well inside a 64-bit store integer
MAX_PAGE = 100_000


@dataclass(frozen=True)
class PageRequest:
    """A page number and size already clamped to server bounds"""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def clamp(
        cls,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> "PageRequest":
        """
        Clamp client supplied values

        Args:
            page: Requested page (None or < 1 becomes 1)
            limit: Requested page size (None uses default_limit)
            default_limit: Page size when none is given
            max_limit: Upper bound on page size

        Returns:
            PageRequest with page >= 1 and 1 <= limit <= max_limit
        """
        page = DEFAULT_PAGE if page is None else max(DEFAULT_PAGE, page)
        limit = default_limit if limit is None else limit
        limit = min(max_limit, max(1, limit))
        return cls(page=page, limit=limit)

    @classmethod
    def validate(
        cls,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> Result["PageRequest"]:
        """
        Reject pages beyond MAX_PAGE, then clamp like clamp()

        Returns:
            Result[PageRequest], VALIDATION_ERROR when page exceeds MAX_PAGE
        """
        if page is not None and page > MAX_PAGE:
            return Return.err(
                Error(
                    code=VALIDATION_ERROR,
                    message=f"page must be between 1 and {MAX_PAGE}",
                    reason=f"page={page}",
                )
            )
        return Return.ok(cls.clamp(page, limit, default_limit, max_limit))

    def paginate(self, total: int) -> PaginationDTO:
        pages = math.ceil(total / self.limit)
        return PaginationDTO(
            total=total,
            page=self.page,
            limit=self.limit,
            pages=pages,
            has_next=self.page < pages,
            has_prev=self.page > 1,
        )
