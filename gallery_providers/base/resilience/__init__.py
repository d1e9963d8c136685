"""Resilience primitives (retry) for the provider layer."""

from .retry import (
    DEFAULT_RETRY_CONFIG,
    DEFAULT_RETRY_TEMPLATE,
    RetryConfig,
    RetryPolicy,
    RetryTemplate,
    retry,
)

__all__ = [
    "DEFAULT_RETRY_CONFIG",
    "DEFAULT_RETRY_TEMPLATE",
    "RetryConfig",
    "RetryPolicy",
    "RetryTemplate",
    "retry",
]
