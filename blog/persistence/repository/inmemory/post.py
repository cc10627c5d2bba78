"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._store.posts[post.id] = post
        return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment_count by 1."""
        post = self._store.posts.get(post_id)
        if post:
            self._store.posts[post_id] = post.model_copy(
                update={"comment_count": post.comment_count + 1}
            )

    async def decrement_comment_count(self, post_id: PostId) -> None:
        """Atomically decrement comment_count by 1 (minimum 0)."""
        post = self._store.posts.get(post_id)
        if post and post.comment_count > 0:
            self._store.posts[post_id] = post.model_copy(
                update={"comment_count": post.comment_count - 1}
            )
