"""Strongly typed identifiers for blog entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
ContactMessageId = NewType("ContactMessageId", UUID)
