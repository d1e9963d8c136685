"""Gallery response choice protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from .gallery_message import GalleryMessage


class GalleryChoice(Protocol):
    """One answer candidate of a Gallery chat response."""

    index: Optional[int]
    message: GalleryMessage
    finish_reason: Optional[str]
