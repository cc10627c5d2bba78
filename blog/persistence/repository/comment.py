"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional
from uuid import uuid4

from sqlalchemy import Select, delete, desc, func, insert, literal, or_, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import InvalidStateError, NotFoundError
from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId, UserId
from blog.persistence.error import storage_errors
from blog.persistence.mappers import row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Multi-statement writes run inside a SAVEPOINT so they are applied
    completely or not at all, even if the caller keeps using the session.
    Timestamps come from ``clock_timestamp()`` so several writes in one
    transaction still get increasing values.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _visible(
        stmt: Select, approved_only: bool, author_id: Optional[UserId]
    ) -> Select:
        if not approved_only:
            return stmt
        if author_id is not None:
            return stmt.where(
                or_(
                    comments_table.c.is_approved.is_(True),
                    comments_table.c.author_id == author_id,
                )
            )
        return stmt.where(comments_table.c.is_approved.is_(True))

    async def insert_root(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Insert a pending root comment."""
        stmt = (
            insert(comments_table)
            .values(
                id=uuid4(),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=None,
                is_approved=False,
                like_count=0,
                created_at=func.clock_timestamp(),
                updated_at=func.clock_timestamp(),
            )
            .returning(comments_table)
        )
        with storage_errors("insert_root"):
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
                    row = result.fetchone()
            except IntegrityError as e:
                # Foreign key on post_id: the post does not exist
                raise NotFoundError("Post", str(post_id)) from e
        return row_to_comment(row._asdict())

    async def insert_reply(
        self, parent_id: CommentId, author_id: UserId, content: str
    ) -> Comment:
        """Insert a reply and append it to the parent's reply_ids atomically."""
        with storage_errors("insert_reply"):
            async with self.session.begin_nested():
                # Lock the parent so a concurrent cascade cannot orphan the reply
                parent = (
                    await self.session.execute(
                        select(comments_table.c.post_id, comments_table.c.parent_id)
                        .where(comments_table.c.id == parent_id)
                        .with_for_update()
                    )
                ).fetchone()
                if parent is None:
                    raise NotFoundError("Comment", str(parent_id))
                if parent.parent_id is not None:
                    raise InvalidStateError("Cannot reply to a reply")

                reply_id = uuid4()
                result = await self.session.execute(
                    insert(comments_table)
                    .values(
                        id=reply_id,
                        post_id=parent.post_id,
                        author_id=author_id,
                        content=content,
                        parent_id=parent_id,
                        is_approved=False,
                        like_count=0,
                        created_at=func.clock_timestamp(),
                        updated_at=func.clock_timestamp(),
                    )
                    .returning(comments_table)
                )
                row = result.fetchone()

                await self.session.execute(
                    update(comments_table)
                    .where(comments_table.c.id == parent_id)
                    .values(
                        reply_ids=func.array_append(
                            comments_table.c.reply_ids, literal(reply_id, UUID)
                        )
                    )
                )
        return row_to_comment(row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with storage_errors("find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_roots_by_post(
        self,
        post_id: PostId,
        approved_only: bool,
        skip: int = 0,
        limit: int = 20,
        author_id: Optional[UserId] = None,
    ) -> List[Comment]:
        """Find root comments of a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        stmt = self._visible(stmt, approved_only, author_id)
        # id breaks ties so pages never overlap
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .offset(skip)
            .limit(limit)
        )

        with storage_errors("find_roots_by_post"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies_by_parent(
        self,
        parent_id: CommentId,
        approved_only: bool,
        author_id: Optional[UserId] = None,
    ) -> List[Comment]:
        """Find replies of a root comment, oldest first."""
        stmt = select(comments_table).where(comments_table.c.parent_id == parent_id)
        stmt = self._visible(stmt, approved_only, author_id)
        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        with storage_errors("find_replies_by_parent"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_roots_by_post(
        self,
        post_id: PostId,
        approved_only: bool,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count root comments of a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        stmt = self._visible(stmt, approved_only, author_id)

        with storage_errors("count_roots_by_post"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    @staticmethod
    def _approval(stmt: Select, approved: Optional[bool]) -> Select:
        if approved is None:
            return stmt
        return stmt.where(comments_table.c.is_approved.is_(approved))

    async def find_by_approval(
        self,
        approved: Optional[bool],
        skip: int = 0,
        limit: int = 20,
    ) -> List[Comment]:
        """Find comments across all posts, newest first."""
        stmt = self._approval(select(comments_table), approved)
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .offset(skip)
            .limit(limit)
        )

        with storage_errors("find_by_approval"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_approval(self, approved: Optional[bool]) -> int:
        """Count comments across all posts."""
        stmt = self._approval(select(func.count()).select_from(comments_table), approved)

        with storage_errors("count_by_approval"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=func.clock_timestamp())
            .returning(comments_table)
        )
        with storage_errors("update_content"):
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if row is None:
            raise NotFoundError("Comment", str(comment_id))
        return row_to_comment(row._asdict())

    async def set_approval(self, comment_id: CommentId, approved: bool) -> Comment:
        """Set the approval flag of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(is_approved=approved, updated_at=func.clock_timestamp())
            .returning(comments_table)
        )
        with storage_errors("set_approval"):
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if row is None:
            raise NotFoundError("Comment", str(comment_id))
        return row_to_comment(row._asdict())

    async def increment_like_count(self, comment_id: CommentId) -> int:
        """Atomically increment like_count by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(like_count=comments_table.c.like_count + 1)
            .returning(comments_table.c.like_count)
        )
        with storage_errors("increment_like_count"):
            result = await self.session.execute(stmt)
            like_count = result.scalar_one_or_none()

        if like_count is None:
            raise NotFoundError("Comment", str(comment_id))
        return like_count

    async def delete_cascade(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies, or unlink a reply from its parent."""
        with storage_errors("delete_cascade"):
            async with self.session.begin_nested():
                target = (
                    await self.session.execute(
                        select(comments_table.c.parent_id)
                        .where(comments_table.c.id == comment_id)
                        .with_for_update()
                    )
                ).fetchone()
                if target is None:
                    raise NotFoundError("Comment", str(comment_id))

                if target.parent_id is None:
                    # Root and replies go in one statement
                    result = await self.session.execute(
                        delete(comments_table)
                        .where(
                            or_(
                                comments_table.c.id == comment_id,
                                comments_table.c.parent_id == comment_id,
                            )
                        )
                        .returning(comments_table.c.id)
                    )
                    return len(result.fetchall())

                await self.session.execute(
                    delete(comments_table).where(comments_table.c.id == comment_id)
                )
                await self.session.execute(
                    update(comments_table)
                    .where(comments_table.c.id == target.parent_id)
                    .values(
                        reply_ids=func.array_remove(
                            comments_table.c.reply_ids, literal(comment_id, UUID)
                        )
                    )
                )
                return 1
