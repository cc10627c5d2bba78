"""Approve comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserRef

from .common import CommentResponse, parse_id, to_comment_item


class ApproveCommentRequest(BaseModel):
    """Approve comment request."""

    comment_id: str  # UUID string
    is_approved: bool
    moderator: UserRef


class ApproveCommentUseCase:
    """Use case for approving a comment or returning it to pending."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize approve comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ApproveCommentRequest) -> CommentResponse:
        """Execute approve comment flow.

        Raises:
            ForbiddenError: If the caller cannot moderate
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))

        comment = await self.comment_service.approve(
            comment_id=comment_id,
            approved=request.is_approved,
            moderator=request.moderator,
        )

        verb = "approved" if comment.is_approved else "disapproved"
        return CommentResponse(
            message=f"Comment {verb} successfully",
            comment=to_comment_item(comment),
        )
