"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .category_service import Category, CategoryService
from .contact_service import ContactService
from .jwt_service import JWTService
from .notification_service import EmailClient, NotificationService, OutgoingEmail
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "Category",
    "CategoryService",
    "ContactService",
    "EmailClient",
    "JWTService",
    "NotificationService",
    "OutgoingEmail",
    "PostService",
    "Service",
    "UserService",
]
