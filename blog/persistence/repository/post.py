"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId
from blog.persistence.error import storage_errors
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        with storage_errors("find_post_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update) in one upsert statement."""
        post_dict = post_to_dict(post)
        stmt = insert(posts_table).values(**post_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[posts_table.c.id],
            set_={key: stmt.excluded[key] for key in post_dict if key != "id"},
        ).returning(posts_table)
        with storage_errors("save_post"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_post(row._asdict())

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment_count by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(
                comment_count=posts_table.c.comment_count + 1,
                updated_at=func.now(),
            )
        )
        with storage_errors("increment_comment_count"):
            await self.session.execute(stmt)

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement comment_count by 1 (minimum 0)."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.comment_count > 0)
            .values(
                comment_count=posts_table.c.comment_count - 1,
                updated_at=func.now(),
            )
        )
        with storage_errors("decrement_comment_count"):
            await self.session.execute(stmt)
