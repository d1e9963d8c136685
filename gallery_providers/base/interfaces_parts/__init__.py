"""Interfaces (Protocols) split into single-class modules.

``gallery_providers.base.interfaces`` re-exports these as the stable API.
"""

from .chat_client import ChatClient
from .streaming_chat_client import StreamingChatClient

__all__ = ["ChatClient", "StreamingChatClient"]
