"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action their role or ownership forbids."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class InvalidCredentialsError(DomainError):
    """Raised when a login does not match a stored account."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class UnauthenticatedError(DomainError):
    """Raised when a token is missing, invalid, expired or names a deleted user."""

    pass


class SlugConflictError(DomainError):
    """Raised by a repository when a write violates slug uniqueness."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug already in use: {slug}")


class SlugExhaustedError(DomainError):
    """Raised when no free slug is found within the configured attempts."""

    def __init__(self, base_slug: str, attempts: int):
        self.base_slug = base_slug
        self.attempts = attempts
        super().__init__(
            f"Could not find a free slug for '{base_slug}' after {attempts} attempts"
        )
