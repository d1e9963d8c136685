"""Token usage extraction helpers.

Converts the usage block of a Gallery chat response into the canonical mapping
used by response metadata and structured logging:

    {"prompt": <int|None>, "completion": <int|None>, "total": <int|None>}

Design Principles
-----------------
1. Non-Intrusive: a response without usage yields the placeholder mapping
   (all values ``None``) instead of raising.
2. Coercion: values are coerced via ``int``; invalid or negative values become
   ``None``.
3. Derived Total: if ``total`` is missing but both ``prompt`` and
   ``completion`` are present, the total is their sum. With only one
   component present the total stays ``None``.

The helper accepts SDK objects (attribute access) as well as decoded JSON
mappings, and never raises.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from ..stubs import HasGalleryUsage
from ..utils import read_field

CanonicalUsage = Dict[str, Optional[int]]

PLACEHOLDER_USAGE: CanonicalUsage = {"prompt": None, "completion": None, "total": None}


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce ``value`` to a non-negative ``int`` or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError):
        return None
    return iv if iv >= 0 else None


def _finalize_usage(prompt: Optional[int], completion: Optional[int], total: Optional[int]) -> CanonicalUsage:
    """Build the canonical mapping, deriving ``total`` when feasible."""
    if total is None and prompt is not None and completion is not None:
        total = prompt + completion
    return {"prompt": prompt, "completion": completion, "total": total}


def extract_gallery_token_usage(
    raw_response: Union[HasGalleryUsage, Mapping[str, Any], None],
) -> CanonicalUsage:
    """Extract token usage from a Gallery chat response.

    Args:
        raw_response: SDK response object or decoded JSON mapping (may be ``None``).

    Returns:
        CanonicalUsage: Mapping with ``prompt``, ``completion`` and ``total`` keys.
    """
    usage_obj = read_field(raw_response, "usage")
    if usage_obj is None:
        return PLACEHOLDER_USAGE.copy()
    prompt = _coerce_int(read_field(usage_obj, "prompt_tokens"))
    completion = _coerce_int(read_field(usage_obj, "completion_tokens"))
    total = _coerce_int(read_field(usage_obj, "total_tokens"))
    return _finalize_usage(prompt, completion, total)


def has_usage(usage: CanonicalUsage) -> bool:
    """Return True when at least one canonical usage value is known."""
    return any(v is not None for v in usage.values())


__all__ = [
    "CanonicalUsage",
    "extract_gallery_token_usage",
    "has_usage",
    "PLACEHOLDER_USAGE",
]
