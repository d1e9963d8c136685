"""Correlation fields shared by every log event of one adapter call."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LogContext:
    """Fields merged into each structured event of a call.

    ``operation`` is ``"chat"`` or ``"stream"``; ``response_id`` becomes known
    once the vendor answered. ``None`` values are left out of the payload.
    """

    provider: Optional[str] = None
    operation: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_response(self, response_id: Optional[str]) -> "LogContext":
        return replace(self, response_id=response_id)

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        data.update(self.extra)
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
