"""Database seeder for local development.

Usage::

    python -m board.seed --count 20 [--reset]
"""
import argparse
import asyncio
import time

from sqlalchemy.ext.asyncio import AsyncSession

from board.database import async_session, create_schema, drop_schema, engine
from board.repository import SqlAlchemyPostRepository
from board.services.post_service import PostService


async def seed_posts(session: AsyncSession, count: int) -> list[int]:
    """Insert *count* posts through the service layer and return their ids."""
    service = PostService(SqlAlchemyPostRepository(session), session)
    ids = []
    for i in range(1, count + 1):
        post = await service.create_post(f"Post {i}", f"Content for post {i}")
        ids.append(post.post_id)
    return ids


async def seed(count: int, reset: bool = False) -> None:
    start = time.perf_counter()

    if reset:
        await drop_schema()
    await create_schema()

    async with async_session() as session:
        ids = await seed_posts(session, count)

    elapsed = time.perf_counter() - start
    print(f"Seeded {len(ids)} posts in {elapsed:.2f}s")
    await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the posts table")
    parser.add_argument("--count", type=int, default=20, help="Number of posts to create")
    parser.add_argument("--reset", action="store_true", help="Drop and re-create the schema first")
    args = parser.parse_args()
    asyncio.run(seed(args.count, reset=args.reset))


if __name__ == "__main__":
    main()
