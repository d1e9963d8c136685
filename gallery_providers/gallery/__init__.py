"""Gallery (Pangu) chat provider package."""

from .client import GalleryChatClient
from .client_protocol import GalleryClient, StreamCallback
from .helpers import DEFAULT_CHAT_OPTIONS, DEFAULT_STREAM_CALLBACK, LoggingStreamCallback
from .metadata import GalleryChatResponseMetadata
from .request import GalleryChatMessage, GalleryChatReq

__all__ = [
    "GalleryChatClient",
    "GalleryClient",
    "StreamCallback",
    "DEFAULT_CHAT_OPTIONS",
    "DEFAULT_STREAM_CALLBACK",
    "LoggingStreamCallback",
    "GalleryChatResponseMetadata",
    "GalleryChatMessage",
    "GalleryChatReq",
]
