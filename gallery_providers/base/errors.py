"""Unified provider error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``gallery_providers.base.errors_parts``.
"""

from .errors_parts.error_code import RETRYABLE_CODES, ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "RETRYABLE_CODES", "ProviderError", "classify_exception"]
