"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings, EmailSettings, SlugSettings
from quill.domain.repository import (
    ContactMessageRepository,
    PostRepository,
    UserRepository,
)
from quill.domain.service import (
    AuthService,
    CategoryService,
    ContactService,
    EmailClient,
    JWTService,
    NotificationService,
    PostService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The notification service holds no session and is APP-scoped, so it can
    still run in a background task after the request has finished.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self, user_service: UserService, jwt_service: JWTService
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, slug_settings: SlugSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, slug_settings=slug_settings)

    @provide
    def get_category_service(self, post_repository: PostRepository) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(post_repository=post_repository)

    @provide
    def get_contact_service(
        self, contact_repository: ContactMessageRepository
    ) -> ContactService:
        """Provide contact domain service."""
        return ContactService(contact_repository=contact_repository)

    @provide(scope=Scope.APP)
    def get_notification_service(
        self, email_client: EmailClient, email_settings: EmailSettings
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            email_client=email_client, email_settings=email_settings
        )
