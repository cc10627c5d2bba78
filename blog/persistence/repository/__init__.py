"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostRepository",
]
