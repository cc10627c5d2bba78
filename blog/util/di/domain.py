"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, CommentSettings
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.service import (
    CommentService,
    IdentityService,
    ModerationService,
    PostService,
    ThreadAssembler,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_moderation_service(
        self, comment_repository: CommentRepository
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(comment_repository=comment_repository)

    @provide
    def get_thread_assembler(
        self, comment_repository: CommentRepository
    ) -> ThreadAssembler:
        """Provide thread assembler."""
        return ThreadAssembler(comment_repository=comment_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        moderation_service: ModerationService,
        thread_assembler: ThreadAssembler,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            moderation_service=moderation_service,
            thread_assembler=thread_assembler,
            comment_settings=comment_settings,
        )
