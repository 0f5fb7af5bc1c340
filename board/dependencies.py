from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from board.config import settings
from board.database import get_db
from board.pagination import MAX_OFFSET, PageSpec
from board.repository import SqlAlchemyPostRepository, resolve_sort_key
from board.services.post_service import PostService


class PaginationParams:
    """
    Reusable FastAPI dependency that parses pagination / sorting query
    parameters into a ``PageSpec``.

    Usage in a router::

        @router.get("/posts")
        async def list_posts(pagination: PaginationParams = Depends()):
            ...

    Attributes
    ----------
    page:
        0-based page number, bounded so the SQL OFFSET fits in a signed
        64-bit integer.
    size:
        Number of items per page, clamped to ``settings.MAX_PAGE_SIZE``
        regardless of the value supplied by the caller.
    sort:
        ``"property[,direction]"``; direction is ``asc`` or ``desc`` and
        defaults to ``asc`` when omitted.  Unknown properties fall back to
        ``postId``, which is also what the response reports.
    """

    def __init__(
        self,
        page: int = Query(
            0,
            ge=0,
            le=MAX_OFFSET // settings.MAX_PAGE_SIZE,
            description="Page number (0-based).",
        ),
        size: int | None = Query(
            None,
            ge=1,
            description="Number of items returned per page.",
        ),
        sort: str = Query(
            "postId,desc",
            pattern=r"^\w+(,([aA][sS][cC]|[dD][eE][sS][cC]))?$",
            description="Sort expression, e.g. 'postId,desc' or 'title,asc'.",
        ),
    ) -> None:
        self.page = page
        if size is None:
            size = settings.DEFAULT_PAGE_SIZE
        self.size = min(size, settings.MAX_PAGE_SIZE)
        self.sort = sort

    @property
    def page_spec(self) -> PageSpec:
        sort_key, sort_direction = PageSpec.parse_sort(self.sort)
        return PageSpec(
            page_number=self.page,
            page_size=self.size,
            sort_key=resolve_sort_key(sort_key),
            sort_direction=sort_direction,
        )


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(SqlAlchemyPostRepository(db), db)
