"""gallery_providers package

Chat adapter mapping a provider-agnostic prompt abstraction onto the Pangu
Gallery client library.

Public API (re-exported):
    - Version: ``__version__``
    - Adapter: :class:`GalleryChatClient`
    - Prompt model: :class:`Prompt`, :class:`Message`, :class:`MessageType`
    - Options: :class:`ChatOptions`, :class:`GalleryChatOptions`
    - Results: :class:`ChatResponse`, :class:`Generation`
    - Errors: :class:`ProviderError`, :class:`ErrorCode`
    - Retry: :class:`RetryPolicy`, :class:`RetryTemplate`, :class:`RetryConfig`
"""

from .base.dto import ChatOptions, GalleryChatOptions
from .base.errors import ErrorCode, ProviderError
from .base.interfaces import ChatClient, StreamingChatClient
from .base.models import (
    ChatResponse,
    ChatResponseMetadata,
    Generation,
    GenerationMetadata,
    Message,
    MessageType,
    Prompt,
    Usage,
)
from .base.resilience import RetryConfig, RetryPolicy, RetryTemplate
from .gallery import GalleryChatClient, GalleryClient, StreamCallback

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "GalleryChatClient",
    "ChatClient",
    "StreamingChatClient",
    "GalleryClient",
    "StreamCallback",
    "Prompt",
    "Message",
    "MessageType",
    "ChatOptions",
    "GalleryChatOptions",
    "ChatResponse",
    "ChatResponseMetadata",
    "Generation",
    "GenerationMetadata",
    "Usage",
    "ProviderError",
    "ErrorCode",
    "RetryConfig",
    "RetryPolicy",
    "RetryTemplate",
]
