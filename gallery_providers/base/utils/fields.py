"""Uniform field access over SDK objects and decoded JSON mappings.

Vendor SDKs return either typed objects or plain dictionaries depending on the
version and transport; adapters read both through :func:`read_field`.
"""
from __future__ import annotations

from typing import Any, Mapping


def read_field(obj: Any, name: str, default: Any = None) -> Any:
    """Return ``obj[name]`` for mappings or ``obj.name`` otherwise.

    Missing keys/attributes and a ``None`` ``obj`` yield ``default``.
    """
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


__all__ = ["read_field"]
