"""Moderation domain service.

Comments move between two states, pending and approved. Moderators gate
visibility; disapproving simply returns a comment to pending.
"""

import math

import logfire

from blog.domain.model.comment import Comment
from blog.domain.model.thread import ModerationQueuePage
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, UserRef

from .base import Service


def is_visible(comment: Comment, viewer: UserRef | None) -> bool:
    """Decide whether ``viewer`` may see ``comment``.

    Approved comments are public. Pending comments are visible to their
    author and to anyone with moderation capability. ``None`` is the
    anonymous public reader.
    """
    if comment.is_approved:
        return True
    if viewer is None:
        return False
    return viewer.id == comment.author_id or viewer.can_moderate


class ModerationService(Service):
    """Approval state machine.

    Authorization-agnostic: callers must check moderation capability
    before invoking ``set_approval``.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def set_approval(self, comment_id: CommentId, approved: bool) -> Comment:
        """Move a comment to approved (True) or back to pending (False).

        Args:
            comment_id: Comment ID
            approved: Target approval flag

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "moderation_service.set_approval",
            comment_id=str(comment_id),
            approved=approved,
        ):
            comment = await self.comment_repository.set_approval(comment_id, approved)
            logfire.info(
                "Comment moderation state changed",
                comment_id=str(comment_id),
                state=comment.moderation_state.value,
            )
            return comment

    async def list_queue(
        self, approved: bool | None, page: int, page_size: int
    ) -> ModerationQueuePage:
        """List comments of every post for review, newest first.

        Args:
            approved: Only approved (True) or pending (False) comments,
                or None for both
            page: 1-based page number
            page_size: Comments per page

        Returns:
            One page of the queue
        """
        with logfire.span(
            "moderation_service.list_queue",
            approved=approved,
            page=page,
            page_size=page_size,
        ):
            comments = await self.comment_repository.find_by_approval(
                approved=approved, skip=(page - 1) * page_size, limit=page_size
            )
            total = await self.comment_repository.count_by_approval(approved)
            total_pages = math.ceil(total / page_size)

            return ModerationQueuePage(
                comments=comments,
                total=total,
                current_page=page,
                page_size=page_size,
                total_pages=total_pages,
                has_next=page < total_pages,
                has_prev=page > 1,
            )
