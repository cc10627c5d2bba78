"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityService
from .moderation_service import ModerationService, is_visible
from .post_service import PostService
from .thread_assembler import ThreadAssembler

__all__ = [
    "CommentService",
    "IdentityService",
    "ModerationService",
    "PostService",
    "Service",
    "ThreadAssembler",
    "is_visible",
]
