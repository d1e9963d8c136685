"""Typed protocol stubs for third-party SDK response shapes.

Concrete protocol definitions live in one-class-per-file modules under
``stubs_parts/``; this module keeps a single import path for them.
"""

from .stubs_parts.gallery import (
    GalleryChatResponse,
    GalleryChoice,
    GalleryMessage,
    GalleryUsage,
    HasGalleryUsage,
)

__all__ = [
    "GalleryChatResponse",
    "GalleryChoice",
    "GalleryMessage",
    "GalleryUsage",
    "HasGalleryUsage",
]
