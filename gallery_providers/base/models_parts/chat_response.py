"""
ChatResponse DTO representing normalized chat client results.

A response holds zero or more :class:`Generation` candidates plus
response-level :class:`ChatResponseMetadata`. An empty generation list means the
vendor returned no content; it is not an error.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .generation import Generation
from .usage import Usage


@dataclass(frozen=True)
class ChatResponseMetadata:
    """Response-level metadata.

    Attributes:
        id: Vendor response identifier, when available.
        usage: Aggregate token :class:`Usage` for the response.
    """

    id: Optional[str] = None
    usage: Usage = field(default_factory=Usage)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "usage": self.usage.to_dict()}


@dataclass(frozen=True)
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        generations: Answer candidates in vendor order.
        metadata: :class:`ChatResponseMetadata` for the whole response.
    """

    generations: List[Generation]
    metadata: ChatResponseMetadata = field(default_factory=ChatResponseMetadata)

    @property
    def result(self) -> Optional[Generation]:
        """Return the first generation, or ``None`` for an empty response."""
        return self.generations[0] if self.generations else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generations": [g.to_dict() for g in self.generations],
            "metadata": self.metadata.to_dict(),
        }


__all__ = [
    "ChatResponse",
    "ChatResponseMetadata",
]
