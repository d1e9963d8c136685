"""Gallery-specific response metadata."""

from __future__ import annotations

from dataclasses import dataclass

from ..base.models import ChatResponseMetadata, Usage
from ..base.utils import read_field
from .client_protocol import GalleryResponse
from .helpers import extract_usage


@dataclass(frozen=True)
class GalleryChatResponseMetadata(ChatResponseMetadata):
    """Response metadata built from a Gallery chat response."""

    @classmethod
    def from_response(cls, resp: GalleryResponse) -> "GalleryChatResponseMetadata":
        """Wrap the response id and aggregate token usage of ``resp``."""
        return cls(id=read_field(resp, "id"), usage=Usage.from_canonical(extract_usage(resp)))


__all__ = ["GalleryChatResponseMetadata"]
