"""Update comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserRef

from .common import CommentResponse, parse_id, to_comment_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    editor: UserRef  # Must be the author or a moderator
    content: str


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            InvalidInputError: If content is empty or too long
            NotFoundError: If the comment does not exist
            ForbiddenError: If the editor is neither author nor moderator
        """
        comment_id = CommentId(parse_id(request.comment_id, "Comment"))

        updated = await self.comment_service.edit_comment(
            comment_id=comment_id,
            editor=request.editor,
            content=request.content,
        )

        return CommentResponse(
            message="Comment updated successfully",
            comment=to_comment_item(updated),
        )
