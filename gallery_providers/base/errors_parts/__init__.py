"""Errors parts package public surface.

Prefer importing from `gallery_providers.base.errors` for the stable surface.
"""

from .error_code import RETRYABLE_CODES, ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception

__all__ = ["ErrorCode", "RETRYABLE_CODES", "ProviderError", "classify_exception"]
