"""
Post repository: generic CRUD access to the ``posts`` table.

``PostRepository`` is the capability set the service depends on;
``SqlAlchemyPostRepository`` implements it on top of an ``AsyncSession``.
Repository methods flush but never commit; the transaction boundary is
owned by the service layer.
"""
from typing import Protocol

from sqlalchemy import asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from board.models import MAX_POST_ID, MIN_POST_ID, Post
from board.pagination import Page, PageSpec, SortDirection

# Public sort keys -> mapped columns.  ``postId`` is the name exposed by the API.
_SORTABLE_COLUMNS = {
    "id": Post.id,
    "postId": Post.id,
    "title": Post.title,
    "content": Post.content,
}


def _resolve_sort_column(sort_key: str):
    """Return the column for *sort_key*, falling back to ``Post.id``."""
    return _SORTABLE_COLUMNS.get(sort_key, Post.id)


def resolve_sort_key(sort_key: str) -> str:
    """Return the public sort key actually applied for *sort_key*."""
    return sort_key if sort_key in _SORTABLE_COLUMNS else "postId"


class PostRepository(Protocol):
    async def save(self, post: Post) -> Post: ...

    async def find_by_id(self, post_id: int) -> Post | None: ...

    async def find_all(self, page_spec: PageSpec) -> Page[Post]: ...

    async def delete(self, post: Post) -> None: ...


class SqlAlchemyPostRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, post: Post) -> Post:
        """
        Insert *post* when it has no id, otherwise upsert by id.

        Returns the persistent instance with its id populated, which may
        be a different object than the one passed in on the upsert path.
        """
        if post.id is None:
            self._session.add(post)
        else:
            post = await self._session.merge(post)
        await self._session.flush()
        return post

    async def find_by_id(self, post_id: int) -> Post | None:
        # Ids outside the column range can never be stored.
        if not MIN_POST_ID <= post_id <= MAX_POST_ID:
            return None
        return await self._session.get(Post, post_id)

    async def find_all(self, page_spec: PageSpec) -> Page[Post]:
        """
        Return one page of posts plus the total row count.

        Two SQL statements are issued: a COUNT and a SELECT with
        ORDER BY / LIMIT / OFFSET.
        """
        total: int = (
            await self._session.execute(select(func.count()).select_from(Post))
        ).scalar_one()

        order = desc if page_spec.sort_direction is SortDirection.DESC else asc
        sort_col = _resolve_sort_column(page_spec.sort_key)
        order_by = [order(sort_col)]
        # Secondary key keeps slices stable when the primary key has ties.
        if sort_col is not Post.id:
            order_by.append(order(Post.id))

        q = (
            select(Post)
            .order_by(*order_by)
            .offset(page_spec.offset)
            .limit(page_spec.page_size)
        )
        posts = (await self._session.execute(q)).scalars().all()

        return Page(
            items=list(posts),
            page_number=page_spec.page_number,
            page_size=page_spec.page_size,
            total_elements=total,
        )

    async def delete(self, post: Post) -> None:
        await self._session.delete(post)
        await self._session.flush()
