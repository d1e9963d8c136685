"""gallery_providers.config.env
============================

Environment variable naming for provider configuration.

Variables follow ``<PROVIDER>_<SUFFIX>`` (e.g. ``GALLERY_TOP_P``). Option
fields map through ``ENV_FIELD_MAP``; retry settings through
``ENV_RETRY_FIELD_MAP`` and land under the nested ``retry`` section.

Helpers never raise on unknown providers or unset variables.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_FIELD_MAP: Dict[str, str] = {
    "temperature": "TEMPERATURE",
    "top_p": "TOP_P",
    "max_tokens": "MAX_TOKENS",
    "answer_num": "ANSWER_NUM",
    "presence_penalty": "PRESENCE_PENALTY",
    "user": "USER",
    "with_prompt": "WITH_PROMPT",
}

ENV_RETRY_FIELD_MAP: Dict[str, str] = {
    "max_attempts": "RETRY_MAX_ATTEMPTS",
    "delay_base": "RETRY_DELAY_BASE",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_' (case-insensitive, surrounding spaces ignored).
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def env_var_name(provider: str, suffix: str) -> str:
    """Return the environment variable name for ``provider`` and ``suffix``."""
    return f"{(provider or '').strip().upper()}_{suffix}"


def read_env(provider: str, suffix: str) -> Optional[str]:
    """Return the non-empty value of ``<PROVIDER>_<SUFFIX>`` or ``None``."""
    val = os.getenv(env_var_name(provider, suffix))
    return val if val not in (None, "") else None


__all__ = [
    "ENV_FIELD_MAP",
    "ENV_RETRY_FIELD_MAP",
    "is_placeholder",
    "env_var_name",
    "read_env",
]
