"""Gallery-specific Protocol exports (grouped namespace)."""

from __future__ import annotations

from .gallery_message import GalleryMessage
from .gallery_choice import GalleryChoice
from .gallery_chat_response import GalleryChatResponse
from .gallery_usage import GalleryUsage, HasGalleryUsage

__all__ = [
    "GalleryMessage",
    "GalleryChoice",
    "GalleryChatResponse",
    "GalleryUsage",
    "HasGalleryUsage",
]
