"""
Message DTO used to compose prompts.

Defines the `MessageType` enumeration (who authored a chat turn) and the
immutable `Message` dataclass holding the turn's text content. Adapters decide
which message types their vendor understands and how they map to vendor roles.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class MessageType(str, Enum):
    """Author of a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    FUNCTION = "function"


@dataclass(frozen=True)
class Message:
    """A single chat instruction.

    Attributes:
        message_type: The :class:`MessageType` of the author.
        content: Plain text content of the turn.
        properties: Free-form metadata attached by the caller; never sent to
            the vendor.
    """

    message_type: MessageType
    content: str
    properties: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def user(cls, content: str, **properties: Any) -> "Message":
        return cls(MessageType.USER, content, dict(properties))

    @classmethod
    def assistant(cls, content: str, **properties: Any) -> "Message":
        return cls(MessageType.ASSISTANT, content, dict(properties))

    @classmethod
    def system(cls, content: str, **properties: Any) -> "Message":
        return cls(MessageType.SYSTEM, content, dict(properties))

    @classmethod
    def function(cls, content: str, **properties: Any) -> "Message":
        return cls(MessageType.FUNCTION, content, dict(properties))


__all__ = [
    "Message",
    "MessageType",
]
