"""List moderation queue use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import UserRef

from .common import CommentItem, to_comment_item


class ListModerationQueueRequest(BaseModel):
    """List moderation queue request."""

    moderator: UserRef
    approved: bool | None = None  # None lists every comment
    page: int = 1
    limit: int | None = None


class ListModerationQueueResponse(BaseModel):
    """List moderation queue response."""

    comments: list[CommentItem]
    total_comments: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class ListModerationQueueUseCase:
    """Use case for reviewing comments of every post, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list moderation queue use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: ListModerationQueueRequest
    ) -> ListModerationQueueResponse:
        """Execute list moderation queue flow.

        Raises:
            ForbiddenError: If the caller cannot moderate
            InvalidInputError: If page or limit are out of range
        """
        page = await self.comment_service.list_for_moderation(
            moderator=request.moderator,
            approved=request.approved,
            page=request.page,
            page_size=request.limit,
        )

        return ListModerationQueueResponse(
            comments=[to_comment_item(comment) for comment in page.comments],
            total_comments=page.total,
            current_page=page.current_page,
            total_pages=page.total_pages,
            has_next_page=page.has_next,
            has_prev_page=page.has_prev,
        )
