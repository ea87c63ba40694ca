"""Contact use cases."""

from .common import ContactMessageResponse
from .list_messages import (
    ListMessagesRequest,
    ListMessagesResponse,
    ListMessagesUseCase,
)
from .mark_message import (
    MarkMessageReadUseCase,
    MarkMessageRepliedUseCase,
    MarkMessageRequest,
)
from .submit_message import (
    SubmitContactMessageRequest,
    SubmitContactMessageResponse,
    SubmitContactMessageUseCase,
)

__all__ = [
    "ContactMessageResponse",
    "ListMessagesRequest",
    "ListMessagesResponse",
    "ListMessagesUseCase",
    "MarkMessageReadUseCase",
    "MarkMessageRepliedUseCase",
    "MarkMessageRequest",
    "SubmitContactMessageRequest",
    "SubmitContactMessageResponse",
    "SubmitContactMessageUseCase",
]
