"""Comment entity.

Comments form a two-level tree: root comments attached to a post, and
replies attached to a root. The tree is kept flat: a reply points at its
root through ``parent_id`` and the root lists its replies in ``reply_ids``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utc_now
from blog.domain.value import CommentId, ModerationState, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a root comment on a post or a reply to a root comment.

    Threading is managed through:
    - parent_id: Root comment this reply belongs to (None for roots)
    - reply_ids: Ordered ids of replies (roots only, empty on replies)
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    reply_ids: list[CommentId] = Field(default_factory=list)
    is_approved: bool = False
    like_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_root(self) -> bool:
        """Whether this comment sits directly on the post."""
        return self.parent_id is None

    @property
    def moderation_state(self) -> ModerationState:
        """Approval state derived from ``is_approved``."""
        return ModerationState.APPROVED if self.is_approved else ModerationState.PENDING
