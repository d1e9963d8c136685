"""StreamingChatClient Protocol (single-class module)."""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

from ..models import ChatResponse, Prompt


@runtime_checkable
class StreamingChatClient(Protocol):
    """Capability marker for adapters that produce responses as an iterator."""

    def stream(self, prompt: Prompt) -> Iterator[ChatResponse]:
        """Return an iterator of ``ChatResponse`` items for ``prompt``."""
        ...
