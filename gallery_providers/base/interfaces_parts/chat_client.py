"""ChatClient Protocol (single-class module).

Defines the synchronous chat contract for adapters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import ChatResponse, Prompt


@runtime_checkable
class ChatClient(Protocol):
    """Minimal interface for synchronous chat adapters.

    Implementations map a ``Prompt`` to their vendor call and normalize the
    result to ``ChatResponse``, never leaking SDK objects upstream.
    """

    def call(self, prompt: Prompt) -> ChatResponse:
        """Execute a single chat completion for ``prompt``."""
        ...
