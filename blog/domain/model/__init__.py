"""Domain model entities for the blog comment core."""

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.model.thread import CommentPage, CommentView, ModerationQueuePage

__all__ = [
    "Comment",
    "CommentPage",
    "CommentView",
    "ModerationQueuePage",
    "Post",
]
