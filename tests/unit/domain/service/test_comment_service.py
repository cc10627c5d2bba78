"""Unit tests for CommentService."""

import asyncio
from uuid import uuid4

import pytest

from blog.domain.error import (
    ForbiddenError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
)
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, PostStatus
from tests.conftest import create_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_starts_pending_root(self, unit_env):
        """New comments are pending roots with no likes."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        author = make_user()

        # Act
        comment = await comment_service.create_comment(
            post_id=post.id, author=author, content="nice post"
        )

        # Assert
        assert comment.is_approved is False
        assert comment.parent_id is None
        assert comment.like_count == 0
        assert comment.reply_ids == []
        assert comment.author_id == author.id
        assert comment.post_id == post.id

    @pytest.mark.asyncio
    async def test_create_comment_trims_content(self, unit_env):
        """Content is stored trimmed."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))

        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="   hello there \n"
        )

        assert comment.content == "hello there"

    @pytest.mark.asyncio
    async def test_create_comment_increments_post_counter(self, unit_env):
        """Root comments are counted on the post."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await create_post(post_repo)

        await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="first"
        )
        await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="second"
        )

        updated = await post_repo.find_by_id(post.id)
        assert updated.comment_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_create_comment_rejects_blank_content(self, unit_env, content):
        """Blank content is invalid input."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))

        with pytest.raises(InvalidInputError):
            await comment_service.create_comment(
                post_id=post.id, author=make_user(), content=content
            )

    @pytest.mark.asyncio
    async def test_create_comment_length_limit_counts_trimmed_characters(
        self, unit_env
    ):
        """1000 characters are allowed, 1001 are not."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))

        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="  " + "é" * 1000 + "  "
        )
        assert len(comment.content) == 1000

        with pytest.raises(InvalidInputError):
            await comment_service.create_comment(
                post_id=post.id, author=make_user(), content="a" * 1001
            )

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post_fails(self, unit_env):
        """Commenting on a missing post is NotFound."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post_id=PostId(uuid4()), author=make_user(), content="hello"
            )

    @pytest.mark.asyncio
    async def test_create_comment_on_draft_post_fails(self, unit_env):
        """Unpublished posts do not accept comments."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(
            await unit_env.get(PostRepository), status=PostStatus.DRAFT
        )

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post_id=post.id, author=make_user(), content="hello"
            )

        assert await comment_repo.count_roots_by_post(post.id, approved_only=False) == 0


class TestCreateReply:
    """Tests for create_reply method."""

    @pytest.mark.asyncio
    async def test_reply_is_linked_into_root(self, unit_env):
        """The root's reply_ids contains the new reply, in creation order."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        root = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="root"
        )

        # Act
        first = await comment_service.create_reply(
            parent_id=root.id, author=make_user(), content="first reply"
        )
        second = await comment_service.create_reply(
            parent_id=root.id, author=make_user(), content="second reply"
        )

        # Assert
        refetched = await comment_repo.find_by_id(root.id)
        assert refetched.reply_ids == [first.id, second.id]
        assert first.parent_id == root.id
        assert first.post_id == post.id
        assert first.is_approved is False

    @pytest.mark.asyncio
    async def test_reply_does_not_touch_post_counter(self, unit_env):
        """Only root comments are counted on the post."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await create_post(post_repo)
        root = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="root"
        )

        await comment_service.create_reply(
            parent_id=root.id, author=make_user(), content="reply"
        )

        assert (await post_repo.find_by_id(post.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_invalid_state(self, unit_env):
        """Threads are one level deep."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        root = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="root"
        )
        reply = await comment_service.create_reply(
            parent_id=root.id, author=make_user(), content="reply"
        )

        with pytest.raises(InvalidStateError):
            await comment_service.create_reply(
                parent_id=reply.id, author=make_user(), content="too deep"
            )

        refetched = await comment_repo.find_by_id(reply.id)
        assert refetched.reply_ids == []

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_fails(self, unit_env):
        """Missing parent is NotFound."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_reply(
                parent_id=CommentId(uuid4()), author=make_user(), content="hello"
            )

    @pytest.mark.asyncio
    async def test_reply_checks_content_before_lookup(self, unit_env):
        """Invalid content is reported even when the parent is missing."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(InvalidInputError):
            await comment_service.create_reply(
                parent_id=CommentId(uuid4()), author=make_user(), content="  "
            )

    @pytest.mark.asyncio
    async def test_reply_on_unpublished_post_fails(self, unit_env):
        """Replies need the root's post to still be published."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await create_post(post_repo)
        root = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="root"
        )
        await post_repo.save(
            (await post_repo.find_by_id(post.id)).model_copy(
                update={"status": PostStatus.DRAFT}
            )
        )

        with pytest.raises(NotFoundError):
            await comment_service.create_reply(
                parent_id=root.id, author=make_user(), content="reply"
            )


class TestEditComment:
    """Tests for edit_comment method."""

    @pytest.mark.asyncio
    async def test_edit_round_trip(self, unit_env):
        """Edited content is persisted with a later updated_at."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        author = make_user()
        comment = await comment_service.create_comment(
            post_id=post.id, author=author, content="original"
        )

        # Act
        await comment_service.edit_comment(
            comment_id=comment.id, editor=author, content="  edited  "
        )

        # Assert
        refetched = await comment_repo.find_by_id(comment.id)
        assert refetched.content == "edited"
        assert refetched.updated_at > refetched.created_at

    @pytest.mark.asyncio
    async def test_moderator_can_edit_any_comment(self, unit_env):
        """Moderators may edit comments they did not write."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="original"
        )

        updated = await comment_service.edit_comment(
            comment_id=comment.id,
            editor=make_user(can_moderate=True),
            content="moderated",
        )

        assert updated.content == "moderated"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Non-author without moderation capability is Forbidden."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="original"
        )

        with pytest.raises(ForbiddenError):
            await comment_service.edit_comment(
                comment_id=comment.id, editor=make_user(), content="hijacked"
            )

        assert (await comment_repo.find_by_id(comment.id)).content == "original"

    @pytest.mark.asyncio
    async def test_edit_missing_comment_fails(self, unit_env):
        """Editing a missing comment is NotFound."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(
                comment_id=CommentId(uuid4()), editor=make_user(), content="x"
            )

    @pytest.mark.asyncio
    async def test_edit_with_blank_content_fails(self, unit_env):
        """Blank replacement content is invalid input."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        author = make_user()
        comment = await comment_service.create_comment(
            post_id=post.id, author=author, content="original"
        )

        with pytest.raises(InvalidInputError):
            await comment_service.edit_comment(
                comment_id=comment.id, editor=author, content="   "
            )


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_root_cascades_to_replies(self, unit_env):
        """Deleting a root with 3 replies removes 4 comments."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        author = make_user()
        root = await comment_service.create_comment(
            post_id=post.id, author=author, content="root"
        )
        replies = [
            await comment_service.create_reply(
                parent_id=root.id, author=make_user(), content=f"reply {i}"
            )
            for i in range(3)
        ]

        # Act
        deleted = await comment_service.delete_comment(
            comment_id=root.id, requester=author
        )

        # Assert
        assert deleted == 4
        for comment_id in [root.id, *(r.id for r in replies)]:
            assert await comment_repo.find_by_id(comment_id) is None
            with pytest.raises(NotFoundError):
                await comment_service.like(comment_id)

    @pytest.mark.asyncio
    async def test_delete_root_decrements_post_counter(self, unit_env):
        """Removing a root is reflected in the post counter."""
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await create_post(post_repo)
        author = make_user()
        root = await comment_service.create_comment(
            post_id=post.id, author=author, content="root"
        )

        await comment_service.delete_comment(comment_id=root.id, requester=author)

        assert (await post_repo.find_by_id(post.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_delete_reply_unlinks_it_from_root(self, unit_env):
        """Deleting a reply leaves the root and its other replies alone."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_repo = await unit_env.get(PostRepository)
        post = await create_post(post_repo)
        root = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="root"
        )
        replier = make_user()
        doomed = await comment_service.create_reply(
            parent_id=root.id, author=replier, content="doomed"
        )
        kept = await comment_service.create_reply(
            parent_id=root.id, author=make_user(), content="kept"
        )

        deleted = await comment_service.delete_comment(
            comment_id=doomed.id, requester=replier
        )

        assert deleted == 1
        refetched = await comment_repo.find_by_id(root.id)
        assert refetched.reply_ids == [kept.id]
        assert await comment_repo.find_by_id(kept.id) is not None
        assert (await post_repo.find_by_id(post.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Non-author without moderation capability is Forbidden."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="mine"
        )

        with pytest.raises(ForbiddenError):
            await comment_service.delete_comment(
                comment_id=comment.id, requester=make_user()
            )

        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_moderator_can_delete(self, unit_env):
        """Moderators may delete any comment."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="spam"
        )

        deleted = await comment_service.delete_comment(
            comment_id=comment.id, requester=make_user(can_moderate=True)
        )

        assert deleted == 1


class TestLike:
    """Tests for like method."""

    @pytest.mark.asyncio
    async def test_like_increments_counter(self, unit_env):
        """Each like adds one, including repeats."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="likeable"
        )
        await comment_service.approve(
            comment_id=comment.id, approved=True, moderator=make_user(True)
        )

        assert await comment_service.like(comment.id) == 1
        assert await comment_service.like(comment.id) == 2

    @pytest.mark.asyncio
    async def test_concurrent_likes_are_not_lost(self, unit_env):
        """N concurrent likes raise the count by exactly N."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="popular"
        )
        await comment_service.approve(
            comment_id=comment.id, approved=True, moderator=make_user(True)
        )
        likes = 25

        # Act
        results = await asyncio.gather(
            *(comment_service.like(comment.id) for _ in range(likes))
        )

        # Assert
        assert sorted(results) == list(range(1, likes + 1))
        assert (await comment_repo.find_by_id(comment.id)).like_count == likes

    @pytest.mark.asyncio
    async def test_like_pending_comment_fails(self, unit_env):
        """Pending comments cannot be liked."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="pending"
        )

        with pytest.raises(NotFoundError):
            await comment_service.like(comment.id)

        assert (await comment_repo.find_by_id(comment.id)).like_count == 0


class TestApprove:
    """Tests for approve method."""

    @pytest.mark.asyncio
    async def test_moderator_approves_and_disapproves(self, unit_env):
        """Approval can be granted and withdrawn."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        comment = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="hello"
        )
        moderator = make_user(can_moderate=True)

        approved = await comment_service.approve(
            comment_id=comment.id, approved=True, moderator=moderator
        )
        pending = await comment_service.approve(
            comment_id=comment.id, approved=False, moderator=moderator
        )

        assert approved.is_approved is True
        assert pending.is_approved is False

    @pytest.mark.asyncio
    async def test_author_cannot_approve_own_comment(self, unit_env):
        """Only moderators approve."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        author = make_user()
        comment = await comment_service.create_comment(
            post_id=post.id, author=author, content="approve me"
        )

        with pytest.raises(ForbiddenError):
            await comment_service.approve(
                comment_id=comment.id, approved=True, moderator=author
            )

    @pytest.mark.asyncio
    async def test_approve_missing_comment_fails(self, unit_env):
        """Approving a missing comment is NotFound."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.approve(
                comment_id=CommentId(uuid4()),
                approved=True,
                moderator=make_user(can_moderate=True),
            )


class TestListForPost:
    """Tests for list_for_post method."""

    @pytest.mark.asyncio
    async def test_roots_newest_first_and_replies_oldest_first(self, unit_env):
        """Roots come t3, t2, t1; replies come t1, t2."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        moderator = make_user(can_moderate=True)
        roots = [
            await comment_service.create_comment(
                post_id=post.id, author=make_user(), content=f"root {i}"
            )
            for i in range(3)
        ]
        replies = [
            await comment_service.create_reply(
                parent_id=roots[0].id, author=make_user(), content=f"reply {i}"
            )
            for i in range(2)
        ]

        # Act
        page = await comment_service.list_for_post(post_id=post.id, viewer=moderator)

        # Assert
        assert [v.comment.id for v in page.comments] == [r.id for r in reversed(roots)]
        assert [r.id for r in page.comments[-1].replies] == [r.id for r in replies]

    @pytest.mark.asyncio
    async def test_pagination_boundary(self, unit_env):
        """Page size 2 over 5 roots gives 3 pages, the last with 1 root."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        moderator = make_user(can_moderate=True)
        for i in range(5):
            await comment_service.create_comment(
                post_id=post.id, author=make_user(), content=f"root {i}"
            )

        first = await comment_service.list_for_post(
            post_id=post.id, viewer=moderator, page=1, page_size=2
        )
        last = await comment_service.list_for_post(
            post_id=post.id, viewer=moderator, page=3, page_size=2
        )

        assert first.total_pages == 3
        assert first.has_next is True
        assert first.has_prev is False
        assert len(last.comments) == 1
        assert last.has_next is False
        assert last.has_prev is True
        assert last.total_roots == 5

    @pytest.mark.asyncio
    async def test_listing_is_idempotent(self, unit_env):
        """Two listings without writes in between are identical."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        author = make_user()
        root = await comment_service.create_comment(
            post_id=post.id, author=author, content="root"
        )
        await comment_service.create_reply(
            parent_id=root.id, author=make_user(), content="reply"
        )

        first = await comment_service.list_for_post(post_id=post.id, viewer=author)
        second = await comment_service.list_for_post(post_id=post.id, viewer=author)

        assert first == second

    @pytest.mark.asyncio
    async def test_pending_comment_visibility(self, unit_env):
        """Pending comments show for their author and moderators only."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        author = make_user()
        comment = await comment_service.create_comment(
            post_id=post.id, author=author, content="pending"
        )

        anonymous = await comment_service.list_for_post(post_id=post.id, viewer=None)
        stranger = await comment_service.list_for_post(
            post_id=post.id, viewer=make_user()
        )
        own = await comment_service.list_for_post(post_id=post.id, viewer=author)
        moderated = await comment_service.list_for_post(
            post_id=post.id, viewer=make_user(can_moderate=True)
        )

        assert anonymous.comments == []
        assert anonymous.total_roots == 0
        assert stranger.comments == []
        assert [v.comment.id for v in own.comments] == [comment.id]
        assert own.total_roots == 1
        assert [v.comment.id for v in moderated.comments] == [comment.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("page", "page_size"), [(0, 10), (-1, 10), (1, 0), (1, 51)]
    )
    async def test_invalid_pagination_fails(self, unit_env, page, page_size):
        """Out-of-range page or page size is invalid input."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))

        with pytest.raises(InvalidInputError):
            await comment_service.list_for_post(
                post_id=post.id, viewer=None, page=page, page_size=page_size
            )

    @pytest.mark.asyncio
    async def test_default_page_size(self, unit_env):
        """Without a page size the configured default applies."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))

        page = await comment_service.list_for_post(post_id=post.id, viewer=None)

        assert page.page_size == 20
        assert page.total_pages == 0
        assert page.has_next is False

    @pytest.mark.asyncio
    async def test_listing_draft_post_fails(self, unit_env):
        """Unpublished posts expose no comments."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(
            await unit_env.get(PostRepository), status=PostStatus.DRAFT
        )

        with pytest.raises(NotFoundError):
            await comment_service.list_for_post(post_id=post.id, viewer=None)


class TestListForModeration:
    """Tests for list_for_moderation method."""

    @pytest.mark.asyncio
    async def test_queue_spans_posts_newest_first(self, unit_env):
        """Roots and replies of every post come back newest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        first_post = await create_post(post_repo)
        second_post = await create_post(post_repo)
        moderator = make_user(can_moderate=True)

        root = await comment_service.create_comment(
            post_id=first_post.id, author=make_user(), content="root"
        )
        other = await comment_service.create_comment(
            post_id=second_post.id, author=make_user(), content="other post"
        )
        reply = await comment_service.create_reply(
            parent_id=root.id, author=make_user(), content="reply"
        )

        # Act
        page = await comment_service.list_for_moderation(moderator=moderator)

        # Assert
        assert [c.id for c in page.comments] == [reply.id, other.id, root.id]
        assert page.total == 3
        assert page.total_pages == 1
        assert page.has_next is False
        assert page.has_prev is False

    @pytest.mark.asyncio
    async def test_queue_filters_by_approval(self, unit_env):
        """approved=False is the pending queue, approved=True the reverse."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        moderator = make_user(can_moderate=True)

        approved = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="approved"
        )
        pending = await comment_service.create_comment(
            post_id=post.id, author=make_user(), content="pending"
        )
        await comment_service.approve(approved.id, True, moderator)

        pending_page = await comment_service.list_for_moderation(
            moderator=moderator, approved=False
        )
        approved_page = await comment_service.list_for_moderation(
            moderator=moderator, approved=True
        )

        assert [c.id for c in pending_page.comments] == [pending.id]
        assert pending_page.total == 1
        assert [c.id for c in approved_page.comments] == [approved.id]

    @pytest.mark.asyncio
    async def test_queue_pagination(self, unit_env):
        """Pages split the queue without overlap."""
        comment_service = await unit_env.get(CommentService)
        post = await create_post(await unit_env.get(PostRepository))
        moderator = make_user(can_moderate=True)
        created = [
            await comment_service.create_comment(
                post_id=post.id, author=make_user(), content=f"comment {i}"
            )
            for i in range(3)
        ]

        first = await comment_service.list_for_moderation(
            moderator=moderator, page=1, page_size=2
        )
        second = await comment_service.list_for_moderation(
            moderator=moderator, page=2, page_size=2
        )

        assert [c.id for c in first.comments] == [created[2].id, created[1].id]
        assert [c.id for c in second.comments] == [created[0].id]
        assert first.total_pages == 2
        assert first.has_next is True
        assert second.has_next is False
        assert second.has_prev is True

    @pytest.mark.asyncio
    async def test_non_moderator_cannot_list_queue(self, unit_env):
        """Regular users are refused."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ForbiddenError):
            await comment_service.list_for_moderation(moderator=make_user())

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("page", "page_size"), [(0, 10), (1, 0), (1, 51)]
    )
    async def test_queue_invalid_pagination_fails(self, unit_env, page, page_size):
        """Out-of-range page or page size is invalid input."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(InvalidInputError):
            await comment_service.list_for_moderation(
                moderator=make_user(can_moderate=True),
                page=page,
                page_size=page_size,
            )


class TestFullFlow:
    """Comment lifecycle from creation to deletion."""

    @pytest.mark.asyncio
    async def test_comment_reply_moderation_and_cascade(self, unit_env):
        """Create, approve, reply and delete with visibility checked throughout."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await create_post(await unit_env.get(PostRepository))
        u1, u2 = make_user(), make_user()
        moderator = make_user(can_moderate=True)

        # Comment starts pending
        comment = await comment_service.create_comment(
            post_id=post.id, author=u1, content="nice post"
        )
        assert comment.is_approved is False

        # Approval makes it public
        await comment_service.approve(
            comment_id=comment.id, approved=True, moderator=moderator
        )
        anonymous = await comment_service.list_for_post(post_id=post.id, viewer=None)
        assert [v.comment.id for v in anonymous.comments] == [comment.id]

        # Pending reply: its author and moderators see it, the public does not
        reply = await comment_service.create_reply(
            parent_id=comment.id, author=u2, content="thanks"
        )
        for viewer in (u2, moderator):
            page = await comment_service.list_for_post(post_id=post.id, viewer=viewer)
            assert [r.id for r in page.comments[0].replies] == [reply.id]
        anonymous = await comment_service.list_for_post(post_id=post.id, viewer=None)
        assert anonymous.comments[0].replies == []

        # Deleting the root takes the reply with it
        deleted = await comment_service.delete_comment(
            comment_id=comment.id, requester=u1
        )
        assert deleted == 2
        assert await comment_repo.find_by_id(comment.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
