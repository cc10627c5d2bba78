"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    ApproveCommentUseCase,
    CreateCommentUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    LikeCommentUseCase,
    ListModerationQueueUseCase,
    UpdateCommentUseCase,
)
from blog.domain.service import CommentService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    scope = Scope.REQUEST

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_create_reply_use_case(
        self, comment_service: CommentService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(comment_service=comment_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_like_comment_use_case(
        self, comment_service: CommentService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_service=comment_service)

    @provide
    def get_approve_comment_use_case(
        self, comment_service: CommentService
    ) -> ApproveCommentUseCase:
        """Provide approve comment use case."""
        return ApproveCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_moderation_queue_use_case(
        self, comment_service: CommentService
    ) -> ListModerationQueueUseCase:
        """Provide list moderation queue use case."""
        return ListModerationQueueUseCase(comment_service=comment_service)
