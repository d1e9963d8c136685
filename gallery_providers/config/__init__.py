"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (sampling presets, retry policy).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. GALLERY_TEMPERATURE, GALLERY_RETRY_MAX_ATTEMPTS)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider: str)``.

External Config File (Optional)
-------------------------------
If PROVIDERS_CONFIG_FILE is set, the file is parsed as JSON first and as YAML
when that fails. Structure example:

```
gallery:
  temperature: 0.5
  max_tokens: 1024
  retry:
    max_attempts: 5
    delay_base: 1.5
```

Values read from the environment are strings; typed validation happens when
options and retry settings are built from the merged mapping.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    DEFAULT_RETRY_DELAY_BASE,
    DEFAULT_RETRY_MAX_ATTEMPTS,
    GALLERY_DEFAULT_TEMPERATURE,
    GALLERY_DEFAULT_TOP_P,
)
from .env import ENV_FIELD_MAP, ENV_RETRY_FIELD_MAP, is_placeholder, read_env


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "gallery": {
        "temperature": GALLERY_DEFAULT_TEMPERATURE,
        "top_p": GALLERY_DEFAULT_TOP_P,
        "retry": {
            "max_attempts": DEFAULT_RETRY_MAX_ATTEMPTS,
            "delay_base": DEFAULT_RETRY_DELAY_BASE,
        },
    },
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables are only replaced when they hold placeholder values.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    p = Path(path) if path else None
    if p is None or not p.is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = read_env(provider, suffix)
        if val is not None:
            out[field] = val
    retry: Dict[str, Any] = {}
    for field, suffix in ENV_RETRY_FIELD_MAP.items():
        val = read_env(provider, suffix)
        if val is not None:
            retry[field] = val
    if retry:
        out["retry"] = retry
    return out


def _merge(base: Dict[str, Any], layer: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``layer`` over ``base``; nested ``retry`` sections merge key-wise."""
    out = dict(base)
    for k, v in layer.items():
        if k == "retry" and isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = {**out[k], **v}
        else:
            out[k] = v
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = _merge({}, DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg = _merge(cfg, file_cfg)

    cfg = _merge(cfg, _env_overrides(name))

    if overrides:
        cfg = _merge(cfg, {k: v for k, v in overrides.items() if v is not None})
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and .env state (re-read on next access)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
