"""
Post service: business orchestration for the Post entity.

Design notes
------------
- The repository and the session are passed in explicitly; the router
  composes them per request via ``get_post_service``.
- Every public method runs inside ``transaction(session)``, so a failure
  at any step rolls back and nothing partial is committed.
- Mutations are persisted with an explicit ``save`` before the
  transaction block commits rather than relying on implicit flush of
  dirty instances.
- A lookup miss is an explicit ``None`` check that raises
  ``PostNotFoundError``.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from board.database import transaction
from board.exceptions import PostNotFoundError
from board.models import Post
from board.pagination import Page, PageSpec
from board.repository import PostRepository
from board.schemas import DeletePostResponse, PostResponse

logger = logging.getLogger(__name__)


def _post_to_response(post: Post) -> PostResponse:
    return PostResponse(post_id=post.id, title=post.title, content=post.content)


class PostService:
    def __init__(self, repository: PostRepository, session: AsyncSession) -> None:
        self._repository = repository
        self._session = session

    async def _get_or_raise(self, post_id: int) -> Post:
        post = await self._repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def create_post(self, title: str, content: str) -> PostResponse:
        async with transaction(self._session):
            post = await self._repository.save(Post(title=title, content=content))
            response = _post_to_response(post)
        logger.info("Created post id=%s", response.post_id)
        return response

    async def read_post_by_id(self, post_id: int) -> PostResponse:
        async with transaction(self._session):
            post = await self._get_or_raise(post_id)
            response = _post_to_response(post)
        logger.debug("Read post id=%s", post_id)
        return response

    async def update_post(self, post_id: int, title: str, content: str) -> PostResponse:
        """
        Overwrite title and content of an existing post.

        Raises ``PostNotFoundError`` when *post_id* does not exist.
        """
        async with transaction(self._session):
            post = await self._get_or_raise(post_id)
            post.title = title
            post.content = content
            post = await self._repository.save(post)
            response = _post_to_response(post)
        logger.info("Updated post id=%s", post_id)
        return response

    async def delete_post(self, post_id: int) -> DeletePostResponse:
        """
        Permanently delete a post.

        Raises ``PostNotFoundError`` when *post_id* does not exist, which
        includes a second delete of the same id.
        """
        async with transaction(self._session):
            post = await self._get_or_raise(post_id)
            await self._repository.delete(post)
        logger.info("Deleted post id=%s", post_id)
        return DeletePostResponse(post_id=post_id)

    async def read_all_posts(self, page_spec: PageSpec) -> Page[PostResponse]:
        async with transaction(self._session):
            page = await self._repository.find_all(page_spec)
            response = page.map(_post_to_response)
        logger.debug(
            "Read page %d (size=%d) of posts: %d/%d",
            page_spec.page_number,
            page_spec.page_size,
            response.number_of_elements,
            response.total_elements,
        )
        return response
