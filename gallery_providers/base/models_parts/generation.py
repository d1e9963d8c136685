"""
Generation DTOs: one answer candidate and its metadata.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GenerationMetadata:
    """Metadata describing how a generation was produced.

    Attributes:
        kind: Vendor object tag (``"chat.completion"`` for chat answers).
        usage: Canonical token usage mapping (``prompt``/``completion``/``total``).
    """

    kind: Optional[str] = None
    usage: Dict[str, Optional[int]] = field(default_factory=dict)


@dataclass(frozen=True)
class Generation:
    """A produced response candidate.

    Attributes:
        text: Generated text.
        info: Per-choice metadata (response id, index, role, finish reason).
        metadata: :class:`GenerationMetadata` for the candidate.
    """

    text: Optional[str]
    info: Dict[str, Any] = field(default_factory=dict)
    metadata: GenerationMetadata = field(default_factory=GenerationMetadata)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "info": dict(self.info),
            "metadata": {"kind": self.metadata.kind, "usage": dict(self.metadata.usage)},
        }


__all__ = ["Generation", "GenerationMetadata"]
