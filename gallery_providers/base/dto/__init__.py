"""DTO validation package for providers."""

from .options import (
    OPTION_FIELDS,
    ChatOptions,
    GalleryChatOptions,
    PromptOptions,
    coerce_prompt_options,
    merge_options,
    options_from_mapping,
    to_gallery_options,
)

__all__ = [
    "OPTION_FIELDS",
    "ChatOptions",
    "GalleryChatOptions",
    "PromptOptions",
    "coerce_prompt_options",
    "merge_options",
    "options_from_mapping",
    "to_gallery_options",
]
