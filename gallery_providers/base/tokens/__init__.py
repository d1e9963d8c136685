"""Token usage helpers package."""

from .extraction import (
    CanonicalUsage,
    extract_gallery_token_usage,
    has_usage,
    PLACEHOLDER_USAGE,
)

__all__ = [
    "CanonicalUsage",
    "extract_gallery_token_usage",
    "has_usage",
    "PLACEHOLDER_USAGE",
]
