"""Create reply use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserRef

from .common import CommentResponse, parse_id, to_comment_item


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    parent_id: str  # UUID string of the root comment
    content: str
    author: UserRef


class CreateReplyUseCase:
    """Use case for replying to a root comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateReplyRequest) -> CommentResponse:
        """Execute create reply flow.

        Args:
            request: Create reply request

        Returns:
            The created reply, pending approval

        Raises:
            InvalidInputError: If content is empty or too long
            NotFoundError: If the parent or its published post is missing
            InvalidStateError: If the parent is itself a reply
        """
        parent_id = CommentId(parse_id(request.parent_id, "Comment"))

        reply = await self.comment_service.create_reply(
            parent_id=parent_id,
            author=request.author,
            content=request.content,
        )

        return CommentResponse(
            message="Reply added successfully",
            comment=to_comment_item(reply),
        )
