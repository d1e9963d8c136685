"""
Provider-agnostic domain models (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``gallery_providers.base.models_parts``.
"""

from .models_parts.message import Message, MessageType
from .models_parts.prompt import Prompt
from .models_parts.generation import Generation, GenerationMetadata
from .models_parts.usage import Usage
from .models_parts.chat_response import ChatResponse, ChatResponseMetadata

__all__ = [
    "Message",
    "MessageType",
    "Prompt",
    "Generation",
    "GenerationMetadata",
    "Usage",
    "ChatResponse",
    "ChatResponseMetadata",
]
