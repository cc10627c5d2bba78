"""Thread assembler.

Builds the public shape of a post's comment section: a page of root
comments (newest first, like a feed) each carrying its replies (oldest
first, like a conversation).
"""

import math

import logfire

from blog.domain.model.thread import CommentPage, CommentView
from blog.domain.repository import CommentRepository
from blog.domain.value import PostId, UserRef

from .base import Service
from .moderation_service import is_visible


class ThreadAssembler(Service):
    """Read-side assembly of paginated comment threads."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize thread assembler.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def assemble(
        self,
        post_id: PostId,
        viewer: UserRef | None,
        page: int,
        page_size: int,
    ) -> CommentPage:
        """Assemble one page of a post's comment threads.

        Moderators query without the approval filter. Other signed-in
        viewers query approved comments plus their own pending ones, so
        their own comments count towards pagination like any other.
        Anonymous viewers only see approved comments. The visibility
        policy is applied to every fetched comment as a final pass.

        The set of roots is fixed by the root query; replies created while
        the page is being assembled may or may not show up, but always
        under their own parent and in order.

        Args:
            post_id: Post ID
            viewer: Caller, or None for an anonymous reader
            page: 1-based page number
            page_size: Roots per page

        Returns:
            The assembled page
        """
        with logfire.span(
            "thread_assembler.assemble",
            post_id=str(post_id),
            viewer_id=str(viewer.id) if viewer else None,
            page=page,
            page_size=page_size,
        ):
            approved_only = not (viewer is not None and viewer.can_moderate)
            own_author_id = viewer.id if viewer is not None and approved_only else None

            roots = await self.comment_repository.find_roots_by_post(
                post_id=post_id,
                approved_only=approved_only,
                skip=(page - 1) * page_size,
                limit=page_size,
                author_id=own_author_id,
            )

            views: list[CommentView] = []
            for root in roots:
                if not is_visible(root, viewer):
                    continue
                # One session per request: reply fetches run one after another
                replies = await self.comment_repository.find_replies_by_parent(
                    parent_id=root.id,
                    approved_only=approved_only,
                    author_id=own_author_id,
                )
                views.append(
                    CommentView(
                        comment=root,
                        replies=[r for r in replies if is_visible(r, viewer)],
                    )
                )

            total_roots = await self.comment_repository.count_roots_by_post(
                post_id=post_id,
                approved_only=approved_only,
                author_id=own_author_id,
            )
            total_pages = math.ceil(total_roots / page_size)

            logfire.info(
                "Comment page assembled",
                post_id=str(post_id),
                roots=len(views),
                total_roots=total_roots,
            )

            return CommentPage(
                post_id=post_id,
                comments=views,
                total_roots=total_roots,
                current_page=page,
                page_size=page_size,
                total_pages=total_pages,
                has_next=page < total_pages,
                has_prev=page > 1,
            )
