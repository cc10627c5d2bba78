"""Comment domain service.

The single entry point the rest of the application uses for comments.
Validation and authorization happen here, before any write reaches the
store; storage errors propagate unchanged and are never retried.
"""

import logfire

from blog.config import CommentSettings
from blog.domain.error import (
    ForbiddenError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
)
from blog.domain.model.comment import Comment
from blog.domain.model.thread import CommentPage, ModerationQueuePage
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId, UserRef

from .base import Service
from .moderation_service import ModerationService
from .post_service import PostService
from .thread_assembler import ThreadAssembler


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        moderation_service: ModerationService,
        thread_assembler: ThreadAssembler,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post lookups and comment counter
            moderation_service: Approval state machine
            thread_assembler: Read-side thread assembly
            comment_settings: Content and pagination limits
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.moderation_service = moderation_service
        self.thread_assembler = thread_assembler
        self.settings = comment_settings

    def _clean_content(self, content: str) -> str:
        """Trim content and check its length in characters."""
        cleaned = content.strip()
        if not 1 <= len(cleaned) <= self.settings.max_content_length:
            raise InvalidInputError(
                "Comment content must be between 1 and "
                f"{self.settings.max_content_length} characters"
            )
        return cleaned

    async def _get_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    def _page_size(self, page: int, page_size: int | None) -> int:
        """Apply the default page size and check the paging range."""
        if page_size is None:
            page_size = self.settings.default_page_size
        if page < 1:
            raise InvalidInputError("Page must be a positive integer")
        if not 1 <= page_size <= self.settings.max_page_size:
            raise InvalidInputError(
                f"Limit must be between 1 and {self.settings.max_page_size}"
            )
        return page_size

    @staticmethod
    def _require_author_or_moderator(
        comment: Comment, user: UserRef, action: str
    ) -> None:
        if comment.author_id != user.id and not user.can_moderate:
            logfire.warn(
                "Comment access denied",
                action=action,
                comment_id=str(comment.id),
                user_id=str(user.id),
            )
            raise ForbiddenError(action, "comment", str(comment.id), str(user.id))

    async def create_comment(
        self, post_id: PostId, author: UserRef, content: str
    ) -> Comment:
        """Create a root comment on a published post.

        Args:
            post_id: Post ID
            author: Authenticated author
            content: Raw comment content

        Returns:
            The created comment, pending approval

        Raises:
            InvalidInputError: If content is empty or too long
            NotFoundError: If the post is missing or not published
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author.id),
        ):
            cleaned = self._clean_content(content)
            await self.post_service.get_published_post(post_id)

            comment = await self.comment_repository.insert_root(
                post_id=post_id, author_id=author.id, content=cleaned
            )
            await self.post_service.increment_comment_count(post_id)

            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                post_id=str(post_id),
                author_id=str(author.id),
            )
            return comment

    async def create_reply(
        self, parent_id: CommentId, author: UserRef, content: str
    ) -> Comment:
        """Reply to a root comment.

        Replies to replies are rejected; threads are one level deep.

        Args:
            parent_id: Root comment ID
            author: Authenticated author
            content: Raw reply content

        Returns:
            The created reply, pending approval

        Raises:
            InvalidInputError: If content is empty or too long
            NotFoundError: If the parent or its post is missing, or the
                post is not published
            InvalidStateError: If the parent is itself a reply
        """
        with logfire.span(
            "comment_service.create_reply",
            parent_id=str(parent_id),
            author_id=str(author.id),
        ):
            cleaned = self._clean_content(content)
            parent = await self._get_comment(parent_id)
            await self.post_service.get_published_post(parent.post_id)
            if not parent.is_root:
                logfire.warn("Reply to a reply rejected", parent_id=str(parent_id))
                raise InvalidStateError("Cannot reply to a reply")

            # insert_reply re-checks the depth guard against the stored parent
            reply = await self.comment_repository.insert_reply(
                parent_id=parent_id, author_id=author.id, content=cleaned
            )

            logfire.info(
                "Reply created",
                comment_id=str(reply.id),
                parent_id=str(parent_id),
                post_id=str(reply.post_id),
            )
            return reply

    async def edit_comment(
        self, comment_id: CommentId, editor: UserRef, content: str
    ) -> Comment:
        """Replace a comment's content.

        Args:
            comment_id: Comment ID
            editor: Author of the comment or a moderator
            content: Raw new content

        Returns:
            The updated comment

        Raises:
            InvalidInputError: If content is empty or too long
            NotFoundError: If the comment does not exist
            ForbiddenError: If the editor is neither author nor moderator
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            editor_id=str(editor.id),
        ):
            cleaned = self._clean_content(content)
            comment = await self._get_comment(comment_id)
            self._require_author_or_moderator(comment, editor, "edit")

            updated = await self.comment_repository.update_content(comment_id, cleaned)
            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                content_length=len(cleaned),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, requester: UserRef) -> int:
        """Delete a comment; deleting a root also deletes its replies.

        Args:
            comment_id: Comment ID
            requester: Author of the comment or a moderator

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is neither author nor moderator
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester.id),
        ):
            comment = await self._get_comment(comment_id)
            self._require_author_or_moderator(comment, requester, "delete")

            deleted = await self.comment_repository.delete_cascade(comment_id)
            if comment.is_root:
                await self.post_service.decrement_comment_count(comment.post_id)

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                was_root=comment.is_root,
                deleted_count=deleted,
            )
            return deleted

    async def like(self, comment_id: CommentId) -> int:
        """Add a like to an approved comment.

        Likes are an aggregate counter; the same user may like repeatedly.

        Args:
            comment_id: Comment ID

        Returns:
            The new like count

        Raises:
            NotFoundError: If the comment is missing or not approved
        """
        with logfire.span("comment_service.like", comment_id=str(comment_id)):
            comment = await self._get_comment(comment_id)
            if not comment.is_approved:
                logfire.warn("Like on unapproved comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            like_count = await self.comment_repository.increment_like_count(comment_id)
            logfire.info(
                "Comment liked", comment_id=str(comment_id), like_count=like_count
            )
            return like_count

    async def approve(
        self, comment_id: CommentId, approved: bool, moderator: UserRef
    ) -> Comment:
        """Approve a comment, or return it to pending.

        Args:
            comment_id: Comment ID
            approved: True to approve, False to return to pending
            moderator: Caller, must have moderation capability

        Returns:
            The updated comment

        Raises:
            ForbiddenError: If the caller cannot moderate
            NotFoundError: If the comment does not exist
        """
        if not moderator.can_moderate:
            logfire.warn(
                "Moderation denied",
                comment_id=str(comment_id),
                user_id=str(moderator.id),
            )
            raise ForbiddenError(
                "moderate", "comment", str(comment_id), str(moderator.id)
            )
        return await self.moderation_service.set_approval(comment_id, approved)

    async def list_for_post(
        self,
        post_id: PostId,
        viewer: UserRef | None,
        page: int = 1,
        page_size: int | None = None,
    ) -> CommentPage:
        """List a post's comment threads.

        Args:
            post_id: Post ID
            viewer: Caller, or None for an anonymous reader
            page: 1-based page number
            page_size: Roots per page (defaults to the configured size)

        Returns:
            One page of comment threads

        Raises:
            InvalidInputError: If page or page_size are out of range
            NotFoundError: If the post is missing or not published
        """
        page_size = self._page_size(page, page_size)

        with logfire.span(
            "comment_service.list_for_post", post_id=str(post_id), page=page
        ):
            await self.post_service.get_published_post(post_id)
            return await self.thread_assembler.assemble(
                post_id=post_id, viewer=viewer, page=page, page_size=page_size
            )

    async def list_for_moderation(
        self,
        moderator: UserRef,
        approved: bool | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> ModerationQueuePage:
        """List comments of every post for moderators, newest first.

        Args:
            moderator: Caller, must have moderation capability
            approved: Only approved (True) or pending (False) comments,
                or None for both
            page: 1-based page number
            page_size: Comments per page (defaults to the configured size)

        Returns:
            One page of the moderation queue

        Raises:
            ForbiddenError: If the caller cannot moderate
            InvalidInputError: If page or page_size are out of range
        """
        if not moderator.can_moderate:
            logfire.warn("Moderation queue denied", user_id=str(moderator.id))
            raise ForbiddenError("list", "comments", "queue", str(moderator.id))
        page_size = self._page_size(page, page_size)

        return await self.moderation_service.list_queue(
            approved=approved, page=page, page_size=page_size
        )
