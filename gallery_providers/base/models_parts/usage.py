"""
Usage DTO: response-level token accounting.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Usage:
    """Token counts reported for a whole response.

    ``total_tokens`` is derived from the two components when the vendor does
    not report it.
    """

    prompt_tokens: Optional[int] = None
    generation_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total_tokens is None and self.prompt_tokens is not None and self.generation_tokens is not None:
            object.__setattr__(self, "total_tokens", self.prompt_tokens + self.generation_tokens)

    @classmethod
    def from_canonical(cls, usage: Mapping[str, Optional[int]]) -> "Usage":
        """Build from a ``{"prompt", "completion", "total"}`` mapping."""
        return cls(
            prompt_tokens=usage.get("prompt"),
            generation_tokens=usage.get("completion"),
            total_tokens=usage.get("total"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Usage"]
