"""Test configuration and helpers."""

from uuid import uuid4

import logfire

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId, PostStatus, UserId, UserRef

# Keep test runs local and quiet
logfire.configure(send_to_logfire=False, console=False)


def make_user(can_moderate: bool = False) -> UserRef:
    """Build a caller reference with a fresh ID."""
    return UserRef(
        id=UserId(uuid4()),
        role="admin" if can_moderate else "user",
        can_moderate=can_moderate,
    )


async def create_post(
    post_repository: PostRepository,
    status: PostStatus = PostStatus.PUBLISHED,
) -> Post:
    """Save a post to comment on."""
    post = Post(
        id=PostId(uuid4()),
        title="A post worth discussing",
        author_id=UserId(uuid4()),
        status=status,
    )
    return await post_repository.save(post)
