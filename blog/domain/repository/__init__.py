"""Repository interfaces for the blog comment core.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.post import PostRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
]
