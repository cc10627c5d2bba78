"""Get comments use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import PostId, UserRef

from .common import CommentItem, parse_id, to_comment_item


class CommentThreadItem(CommentItem):
    """Root comment with its visible replies."""

    replies: list[CommentItem]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    viewer: UserRef | None = None  # None for anonymous readers
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentThreadItem]
    total_comments: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class GetCommentsUseCase:
    """Use case for listing a post's comment threads page by page."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Roots come newest first; replies under each root oldest first.
        Pending comments are included only for their author and moderators.

        Args:
            request: Get comments request

        Returns:
            One page of comment threads with pagination info

        Raises:
            InvalidInputError: If page or limit are out of range
            NotFoundError: If the post is missing or not published
        """
        post_id = PostId(parse_id(request.post_id, "Post"))

        page = await self.comment_service.list_for_post(
            post_id=post_id,
            viewer=request.viewer,
            page=request.page,
            page_size=request.limit,
        )

        return GetCommentsResponse(
            comments=[
                CommentThreadItem(
                    **to_comment_item(view.comment).model_dump(),
                    replies=[to_comment_item(reply) for reply in view.replies],
                )
                for view in page.comments
            ],
            total_comments=page.total_roots,
            current_page=page.current_page,
            total_pages=page.total_pages,
            has_next_page=page.has_next,
            has_prev_page=page.has_prev,
        )
