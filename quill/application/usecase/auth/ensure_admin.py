"""Bootstrap admin account use case."""

import logfire

from quill.config import AdminSettings
from quill.domain.service import UserService
from quill.domain.value import UserRole


class EnsureAdminUserUseCase:
    """Creates the configured admin account if it doesn't exist yet.

    Runs at startup. Idempotent: an existing account is never modified.
    """

    def __init__(
        self, user_service: UserService, admin_settings: AdminSettings
    ) -> None:
        """Initialize ensure admin use case.

        Args:
            user_service: User domain service
            admin_settings: Bootstrap admin credentials
        """
        self.user_service = user_service
        self.admin_settings = admin_settings

    async def execute(self) -> bool:
        """Ensure the admin account exists.

        Returns:
            True if an account was created
        """
        settings = self.admin_settings
        if not settings.username or not settings.password:
            logfire.info("Admin bootstrap skipped, no credentials configured")
            return False

        with logfire.span("ensure_admin_user.execute", username=settings.username):
            _, created = await self.user_service.ensure_user(
                username=settings.username,
                email=settings.email,
                password=settings.password,
                display_name=settings.display_name,
                role=UserRole.ADMIN,
            )
            if created:
                logfire.info("Admin user created", username=settings.username)
            return created
