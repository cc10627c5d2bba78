"""Shared in-memory document store for testing."""

from datetime import datetime, timedelta, timezone

from blog.domain.model import Comment, Post
from blog.domain.model.common import utc_now
from blog.domain.value import CommentId, PostId


class InMemoryStore:
    """Collections shared by the in-memory repositories.

    Repository methods never await between reading and writing these
    dicts, so every mutation is atomic under asyncio.
    """

    def __init__(self) -> None:
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self._last_timestamp = datetime.min.replace(tzinfo=timezone.utc)

    def now(self) -> datetime:
        """Current UTC time, strictly later than any timestamp handed out before."""
        now = max(utc_now(), self._last_timestamp + timedelta(microseconds=1))
        self._last_timestamp = now
        return now
