"""Small side-effect free helpers shared across the provider layer."""

from .fields import read_field

__all__ = ["read_field"]
