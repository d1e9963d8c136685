"""Gallery chat request shapes.

``GalleryChatReq`` is the structured request handed to the Gallery client for
multi-turn prompts. ``to_dict`` renders the REST payload of the chat
completions endpoint, omitting unset fields so server-side defaults apply.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class GalleryChatMessage:
    """One chat turn in the vendor role vocabulary."""

    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class GalleryChatReq:
    """Structured Gallery chat request.

    Attributes:
        messages: Ordered chat turns.
        temperature: Sampling temperature.
        top_p: Nucleus sampling probability mass.
        max_tokens: Maximum tokens to generate.
        answer_num: Number of answer candidates (``n`` on the wire).
        presence_penalty: Presence penalty.
        user: End-user identifier.
        with_prompt: Whether the service echoes the prompt.
        is_stream: Whether the request is sent on the streaming endpoint.
    """

    messages: List[GalleryChatMessage] = field(default_factory=list)
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    answer_num: Optional[int] = None
    presence_penalty: Optional[float] = None
    user: Optional[str] = None
    with_prompt: Optional[bool] = None
    is_stream: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable request payload."""
        payload: Dict[str, Any] = {
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_tokens": self.max_tokens,
            "n": self.answer_num,
            "presence_penalty": self.presence_penalty,
            "user": self.user,
            "with_prompt": self.with_prompt,
            "stream": self.is_stream,
        }
        return {k: v for k, v in payload.items() if v is not None}


__all__ = ["GalleryChatMessage", "GalleryChatReq"]
