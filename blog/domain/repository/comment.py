"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Owns referential integrity of the comment tree: the parent pointer on
    replies and the ``reply_ids`` list on roots are always written together.
    Atomic operations (reply linkage, like increments, cascades) are done by
    the store itself, never as read-then-write in application code.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def insert_root(
        self, post_id: PostId, author_id: UserId, content: str
    ) -> Comment:
        """Insert a pending root comment.

        Args:
            post_id: The owning post
            author_id: The author's user ID
            content: Validated, trimmed content

        Returns:
            The stored comment

        Raises:
            NotFoundError: If the post does not exist in the store
        """
        pass

    @abstractmethod
    async def insert_reply(
        self, parent_id: CommentId, author_id: UserId, content: str
    ) -> Comment:
        """Insert a pending reply and link it into its parent.

        The reply inherits ``post_id`` from the parent. The insert and the
        append to the parent's ``reply_ids`` happen in one atomic unit.

        Args:
            parent_id: The root comment being replied to
            author_id: The author's user ID
            content: Validated, trimmed content

        Returns:
            The stored reply

        Raises:
            NotFoundError: If the parent does not exist
            InvalidStateError: If the parent is itself a reply
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots_by_post(
        self,
        post_id: PostId,
        approved_only: bool,
        skip: int = 0,
        limit: int = 20,
        author_id: Optional[UserId] = None,
    ) -> List[Comment]:
        """Find root comments of a post, newest first.

        Args:
            post_id: The post ID
            approved_only: Restrict to approved comments
            skip: Number of roots to skip
            limit: Maximum number of roots to return
            author_id: When filtering to approved, also include this
                author's pending comments

        Returns:
            Root comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_replies_by_parent(
        self,
        parent_id: CommentId,
        approved_only: bool,
        author_id: Optional[UserId] = None,
    ) -> List[Comment]:
        """Find replies of a root comment, oldest first.

        Args:
            parent_id: The root comment ID
            approved_only: Restrict to approved replies
            author_id: When filtering to approved, also include this
                author's pending replies

        Returns:
            Replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_roots_by_post(
        self,
        post_id: PostId,
        approved_only: bool,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count root comments of a post with the same filter as find_roots_by_post."""
        pass

    @abstractmethod
    async def find_by_approval(
        self,
        approved: Optional[bool],
        skip: int = 0,
        limit: int = 20,
    ) -> List[Comment]:
        """Find comments across all posts, roots and replies alike, newest first.

        Args:
            approved: Restrict to this approval flag, or None for every comment
            skip: Number of comments to skip
            limit: Maximum number of comments to return

        Returns:
            Comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_by_approval(self, approved: Optional[bool]) -> int:
        """Count comments with the same filter as find_by_approval."""
        pass

    @abstractmethod
    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment and bump updated_at.

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def set_approval(self, comment_id: CommentId, approved: bool) -> Comment:
        """Set the approval flag of a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def increment_like_count(self, comment_id: CommentId) -> int:
        """Atomically increment like_count by 1.

        Returns:
            The new like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def delete_cascade(self, comment_id: CommentId) -> int:
        """Delete a comment together with everything that depends on it.

        A root is deleted with all of its replies. A reply is deleted and
        removed from its parent's ``reply_ids``. Either way the change is
        applied completely or not at all.

        Returns:
            Number of comments deleted

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass
