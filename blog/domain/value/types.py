"""Domain value objects for the blog comment core.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import UserId


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"


class ModerationState(str, Enum):
    """Approval state of a comment.

    Disapproving a comment moves it back to pending; there is no separate
    rejected state.
    """

    PENDING = "pending"
    APPROVED = "approved"


class UserRef(ValueObject):
    """Caller identity as resolved by the identity collaborator.

    ``can_moderate`` is decided by whoever builds the reference (from the
    configured moderator roles) and is never re-derived from ``role`` inside
    the comment core.
    """

    id: UserId
    role: str = "user"
    can_moderate: bool = False
