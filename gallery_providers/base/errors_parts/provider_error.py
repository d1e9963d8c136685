"""
Exception type for failures that already carry an :class:`ErrorCode`.

Vendor SDK exceptions propagate unchanged through the adapter. ``ProviderError``
is for callers (and SDK wrappers) that classify a failure themselves; the retry
policy trusts its ``code`` instead of re-classifying it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class ProviderError(Exception):
    """A vendor failure with a known category.

    ``retryable`` decides whether the retry policy tries again; it defaults to
    the category default (see :attr:`ErrorCode.retryable`) when left unset.
    """

    code: ErrorCode
    message: str
    provider: str = "gallery"
    retryable: Optional[bool] = None
    raw: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if self.retryable is None:
            self.retryable = self.code.retryable
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.provider}/{self.code.value}] {self.message}"


__all__ = ["ProviderError"]
