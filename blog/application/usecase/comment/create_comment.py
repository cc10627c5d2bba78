"""Create comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import PostId, UserRef

from .common import CommentResponse, parse_id, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author: UserRef  # Authenticated caller


class CreateCommentUseCase:
    """Use case for creating a root comment on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment, pending approval

        Raises:
            InvalidInputError: If content is empty or too long
            NotFoundError: If the post is missing or not published
        """
        post_id = PostId(parse_id(request.post_id, "Post"))

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=request.author,
            content=request.content,
        )

        return CommentResponse(
            message="Comment added successfully",
            comment=to_comment_item(comment),
        )
