"""Like comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId

from .common import parse_id


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: str  # UUID string


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    message: str
    like_count: int


class LikeCommentUseCase:
    """Use case for liking an approved comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize like comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like comment flow.

        Raises:
            NotFoundError: If the comment is missing or not approved
        """
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))
        like_count = await self.comment_service.like(comment_id)
        return LikeCommentResponse(
            message="Comment liked successfully", like_count=like_count
        )
