"""Gallery chat message protocol (response side)."""

from __future__ import annotations

from typing import Optional, Protocol


class GalleryMessage(Protocol):
    """Role/content pair carried by a response choice."""

    role: Optional[str]
    content: Optional[str]
