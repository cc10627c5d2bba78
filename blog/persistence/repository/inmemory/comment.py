"""In-memory comment repository for testing."""

from typing import Iterable, Optional
from uuid import uuid4

from blog.domain.error import InvalidStateError, NotFoundError
from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._store.comments

    @staticmethod
    def _visible(
        comments: Iterable[Comment], approved_only: bool, author_id: Optional[UserId]
    ) -> list[Comment]:
        if not approved_only:
            return list(comments)
        return [c for c in comments if c.is_approved or c.author_id == author_id]

    def _get(self, comment_id: CommentId) -> Comment:
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def insert_root(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Insert a pending root comment."""
        if post_id not in self._store.posts:
            raise NotFoundError("Post", str(post_id))

        now = self._store.now()
        comment = Comment(
            id=CommentId(uuid4()),
            post_id=post_id,
            author_id=author_id,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._comments[comment.id] = comment
        return comment

    async def insert_reply(
        self, parent_id: CommentId, author_id: UserId, content: str
    ) -> Comment:
        """Insert a reply and link it into its parent."""
        parent = self._get(parent_id)
        if not parent.is_root:
            raise InvalidStateError("Cannot reply to a reply")

        now = self._store.now()
        reply = Comment(
            id=CommentId(uuid4()),
            post_id=parent.post_id,
            author_id=author_id,
            content=content,
            parent_id=parent_id,
            created_at=now,
            updated_at=now,
        )
        self._comments[reply.id] = reply
        self._comments[parent_id] = parent.model_copy(
            update={"reply_ids": [*parent.reply_ids, reply.id]}
        )
        return reply

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_roots_by_post(
        self,
        post_id: PostId,
        approved_only: bool,
        skip: int = 0,
        limit: int = 20,
        author_id: Optional[UserId] = None,
    ) -> list[Comment]:
        """Find root comments of a post, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None
        ]
        comments = self._visible(comments, approved_only, author_id)
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[skip : skip + limit]

    async def find_replies_by_parent(
        self,
        parent_id: CommentId,
        approved_only: bool,
        author_id: Optional[UserId] = None,
    ) -> list[Comment]:
        """Find replies of a root comment, oldest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments = self._visible(comments, approved_only, author_id)
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_roots_by_post(
        self,
        post_id: PostId,
        approved_only: bool,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count root comments of a post."""
        roots = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None
        ]
        return len(self._visible(roots, approved_only, author_id))

    def _by_approval(self, approved: Optional[bool]) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if approved is None or c.is_approved == approved
        ]

    async def find_by_approval(
        self,
        approved: Optional[bool],
        skip: int = 0,
        limit: int = 20,
    ) -> list[Comment]:
        """Find comments across all posts, newest first."""
        comments = self._by_approval(approved)
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[skip : skip + limit]

    async def count_by_approval(self, approved: Optional[bool]) -> int:
        """Count comments across all posts."""
        return len(self._by_approval(approved))

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment."""
        comment = self._get(comment_id)
        updated = comment.model_copy(
            update={"content": content, "updated_at": self._store.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def set_approval(self, comment_id: CommentId, approved: bool) -> Comment:
        """Set the approval flag of a comment."""
        comment = self._get(comment_id)
        updated = comment.model_copy(
            update={"is_approved": approved, "updated_at": self._store.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def increment_like_count(self, comment_id: CommentId) -> int:
        """Atomically increment like_count by 1."""
        comment = self._get(comment_id)
        like_count = comment.like_count + 1
        self._comments[comment_id] = comment.model_copy(
            update={"like_count": like_count}
        )
        return like_count

    async def delete_cascade(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies, or unlink a reply from its parent."""
        comment = self._get(comment_id)

        if comment.is_root:
            doomed = [comment_id] + [
                c.id for c in self._comments.values() if c.parent_id == comment_id
            ]
            for doomed_id in doomed:
                del self._comments[doomed_id]
            return len(doomed)

        del self._comments[comment_id]
        parent = self._comments.get(comment.parent_id)
        if parent is not None:
            self._comments[parent.id] = parent.model_copy(
                update={"reply_ids": [r for r in parent.reply_ids if r != comment_id]}
            )
        return 1
