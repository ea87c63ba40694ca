"""In-memory repository implementations for testing."""

from .contact import InMemoryContactMessageRepository
from .post import InMemoryPostRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryContactMessageRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
