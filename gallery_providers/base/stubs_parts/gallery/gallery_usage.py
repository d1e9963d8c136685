"""Gallery usage protocol types."""

from __future__ import annotations

from typing import Optional, Protocol


class GalleryUsage(Protocol):
    """Protocol for the Gallery usage object.

    Attributes:
        prompt_tokens: Optional count of prompt tokens.
        completion_tokens: Optional count of completion tokens.
        total_tokens: Optional total tokens when provided by the SDK.
    """

    prompt_tokens: Optional[int]
    completion_tokens: Optional[int]
    total_tokens: Optional[int]


class HasGalleryUsage(Protocol):
    """Objects exposing a Gallery-compatible ``usage`` attribute."""

    usage: GalleryUsage
