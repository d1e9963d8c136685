"""Centralized provider defaults.

Numbers here are the built-in layer of ``get_provider_config``; environment
variables and the optional config file override them.
"""
from __future__ import annotations

GALLERY_DEFAULT_TEMPERATURE = 0.7
GALLERY_DEFAULT_TOP_P = 0.8

DEFAULT_RETRY_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_BASE = 2.0

__all__ = [
    "GALLERY_DEFAULT_TEMPERATURE",
    "GALLERY_DEFAULT_TOP_P",
    "DEFAULT_RETRY_MAX_ATTEMPTS",
    "DEFAULT_RETRY_DELAY_BASE",
]
