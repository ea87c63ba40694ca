"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.auth import (
    EnsureAdminUserUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
)
from quill.application.usecase.contact import (
    ListMessagesUseCase,
    MarkMessageReadUseCase,
    MarkMessageRepliedUseCase,
    SubmitContactMessageUseCase,
)
from quill.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListCategoriesUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from quill.config import AdminSettings, AuthSettings, PaginationSettings
from quill.domain.service import (
    AuthService,
    CategoryService,
    ContactService,
    NotificationService,
    PostService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_ensure_admin_user_use_case(
        self, user_service: UserService, admin_settings: AdminSettings
    ) -> EnsureAdminUserUseCase:
        """Provide admin bootstrap use case."""
        return EnsureAdminUserUseCase(
            user_service=user_service, admin_settings=admin_settings
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        auth_service: AuthService,
        auth_settings: AuthSettings,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            auth_service=auth_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            auth_service=auth_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            user_service=user_service,
            auth_service=auth_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    # Contact use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_contact_message_use_case(
        self,
        contact_service: ContactService,
        notification_service: NotificationService,
    ) -> SubmitContactMessageUseCase:
        """Provide submit contact message use case."""
        return SubmitContactMessageUseCase(
            contact_service=contact_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_messages_use_case(
        self,
        contact_service: ContactService,
        user_service: UserService,
        auth_service: AuthService,
        pagination_settings: PaginationSettings,
    ) -> ListMessagesUseCase:
        """Provide list contact messages use case."""
        return ListMessagesUseCase(
            contact_service=contact_service,
            user_service=user_service,
            auth_service=auth_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_message_read_use_case(
        self,
        contact_service: ContactService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> MarkMessageReadUseCase:
        """Provide mark message read use case."""
        return MarkMessageReadUseCase(
            contact_service=contact_service,
            user_service=user_service,
            auth_service=auth_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_message_replied_use_case(
        self,
        contact_service: ContactService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> MarkMessageRepliedUseCase:
        """Provide mark message replied use case."""
        return MarkMessageRepliedUseCase(
            contact_service=contact_service,
            user_service=user_service,
            auth_service=auth_service,
        )
