"""
Provider-agnostic interfaces (Protocols) for the providers layer.
"""

from __future__ import annotations

from .interfaces_parts import ChatClient, StreamingChatClient

__all__ = [
    "ChatClient",
    "StreamingChatClient",
]
