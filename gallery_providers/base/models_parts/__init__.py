"""One-class-per-file DTO modules; import from ``gallery_providers.base.models``."""
