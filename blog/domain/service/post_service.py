"""Post domain service."""

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for the post lookups the comment core relies on."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info(
                    "Post found", post_id=str(post_id), status=post.status.value
                )
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_published_post(self, post_id: PostId) -> Post:
        """Get a post that is open for comments.

        Args:
            post_id: Post ID

        Returns:
            The published post

        Raises:
            NotFoundError: If the post is missing or not published
        """
        post = await self.get_post_by_id(post_id)
        if post is None or not post.is_published:
            raise NotFoundError("Post", str(post_id))
        return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's root comment counter."""
        with logfire.span(
            "post_service.increment_comment_count", post_id=str(post_id)
        ):
            await self.post_repository.increment_comment_count(post_id)

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement the post's root comment counter."""
        with logfire.span(
            "post_service.decrement_comment_count", post_id=str(post_id)
        ):
            await self.post_repository.decrement_comment_count(post_id)
