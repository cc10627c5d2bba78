"""Delete comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserRef

from .common import parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    requester: UserRef  # Must be the author or a moderator


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    deleted_count: int


class DeleteCommentUseCase:
    """Use case for deleting a comment (and its replies, for a root)."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is neither author nor moderator
        """
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))

        deleted = await self.comment_service.delete_comment(
            comment_id=comment_id, requester=request.requester
        )

        return DeleteCommentResponse(
            message="Comment deleted successfully", deleted_count=deleted
        )
