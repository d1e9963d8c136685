"""Gallery chat response protocol."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .gallery_choice import GalleryChoice
from .gallery_usage import GalleryUsage


class GalleryChatResponse(Protocol):
    """Protocol for the Gallery SDK chat response object.

    Conversion code also accepts the decoded JSON mapping with the same keys.
    """

    id: Optional[str]
    choices: Sequence[GalleryChoice]
    usage: Optional[GalleryUsage]
