"""
Providers Base Package

Provider-agnostic contracts and DTOs shared by chat adapters:
- Interfaces: chat and streaming chat client protocols
- Models (DTOs): prompts, messages, generations and responses
- Options: validated generation options and their override merge
- Resilience: retry policy
"""

from .dto import ChatOptions, GalleryChatOptions, merge_options
from .errors import ErrorCode, ProviderError, classify_exception
from .interfaces import ChatClient, StreamingChatClient
from .models import (
    ChatResponse,
    ChatResponseMetadata,
    Generation,
    GenerationMetadata,
    Message,
    MessageType,
    Prompt,
    Usage,
)
from .resilience import DEFAULT_RETRY_TEMPLATE, RetryConfig, RetryPolicy, RetryTemplate

__all__ = [
    # Models
    "Message",
    "MessageType",
    "Prompt",
    "Generation",
    "GenerationMetadata",
    "Usage",
    "ChatResponse",
    "ChatResponseMetadata",
    # Options
    "ChatOptions",
    "GalleryChatOptions",
    "merge_options",
    # Interfaces
    "ChatClient",
    "StreamingChatClient",
    # Errors
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    # Resilience
    "RetryConfig",
    "RetryPolicy",
    "RetryTemplate",
    "DEFAULT_RETRY_TEMPLATE",
]
