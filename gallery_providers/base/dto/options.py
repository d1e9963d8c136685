"""
Pydantic option DTOs for chat generation and their override merge.

Purpose
-------
Prompt-level options form a closed tagged union discriminated by ``kind``:

- ``ChatOptions`` (``kind="chat"``): the portable subset understood by every
  chat adapter (``temperature``, ``top_p``, ``top_k``).
- ``GalleryChatOptions`` (``kind="gallery"``): the full Gallery parameter set.

Options are validated where they enter the system (``Prompt`` construction and
adapter construction) through :func:`coerce_prompt_options`, so request
building only ever sees one of the two variants.

Merge semantics
---------------
``merge_options(runtime, defaults)`` walks :data:`OPTION_FIELDS` explicitly: a
field set on ``runtime`` (not ``None``) wins, otherwise the default value is
kept.

Failure modes
-------------
Out-of-range values raise ``pydantic.ValidationError`` (a ``ValueError``).
Unrecognized option objects raise ``ValueError`` naming the offending type.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ChatOptions(BaseModel):
    """Portable generation options shared by all chat adapters.

    Attributes:
        temperature: Sampling temperature, within [0.0, 2.0].
        top_p: Nucleus sampling probability mass, within [0.0, 1.0].
        top_k: Top-k sampling cutoff. Not used by Gallery; kept for portability.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["chat"] = "chat"
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, gt=0)


class GalleryChatOptions(BaseModel):
    """Gallery chat generation options.

    Attributes:
        temperature: Sampling temperature, within [0.0, 2.0].
        top_p: Nucleus sampling probability mass, within [0.0, 1.0].
        max_tokens: Maximum tokens to generate.
        answer_num: Number of answer candidates (choices) to return.
        presence_penalty: Penalty applied to already-present tokens, within [-2.0, 2.0].
        user: End-user identifier forwarded to the service.
        with_prompt: Whether the service should echo the prompt.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["gallery"] = "gallery"
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    answer_num: Optional[int] = Field(default=None, gt=0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    user: Optional[str] = None
    with_prompt: Optional[bool] = None

    @classmethod
    def from_chat_options(cls, options: ChatOptions) -> "GalleryChatOptions":
        """Copy the portable fields of ``options`` into Gallery options."""
        return cls(temperature=options.temperature, top_p=options.top_p)


# Fields participating in the override merge, in request order.
OPTION_FIELDS = (
    "temperature",
    "top_p",
    "max_tokens",
    "answer_num",
    "presence_penalty",
    "user",
    "with_prompt",
)

PromptOptions = Annotated[Union[ChatOptions, GalleryChatOptions], Field(discriminator="kind")]

_PROMPT_OPTIONS_ADAPTER: TypeAdapter = TypeAdapter(PromptOptions)


def coerce_prompt_options(options: Any) -> Optional[Union[ChatOptions, GalleryChatOptions]]:
    """Validate ``options`` into one of the recognized option variants.

    ``None`` and instances of a variant pass through. Mappings are validated
    against the discriminated union; a mapping without ``kind`` is read as
    Gallery options.

    Raises:
        ValueError: When ``options`` is of any other type, or a mapping fails validation.
    """
    if options is None or isinstance(options, (ChatOptions, GalleryChatOptions)):
        return options
    if isinstance(options, Mapping):
        data = dict(options)
        data.setdefault("kind", "gallery")
        return _PROMPT_OPTIONS_ADAPTER.validate_python(data)
    raise ValueError(f"Prompt options are not of type ChatOptions: {type(options).__name__}")


def to_gallery_options(options: Union[ChatOptions, GalleryChatOptions]) -> GalleryChatOptions:
    """Return ``options`` as :class:`GalleryChatOptions`."""
    if isinstance(options, GalleryChatOptions):
        return options
    return GalleryChatOptions.from_chat_options(options)


def merge_options(
    runtime: Optional[GalleryChatOptions],
    defaults: GalleryChatOptions,
) -> GalleryChatOptions:
    """Merge ``runtime`` over ``defaults`` field by field."""
    merged: dict[str, Any] = {}
    for name in OPTION_FIELDS:
        value = getattr(runtime, name) if runtime is not None else None
        merged[name] = value if value is not None else getattr(defaults, name)
    return GalleryChatOptions(**merged)


def options_from_mapping(values: Mapping[str, Any]) -> GalleryChatOptions:
    """Build Gallery options from a flat config mapping, ignoring unknown keys."""
    return GalleryChatOptions(**{k: values[k] for k in OPTION_FIELDS if values.get(k) is not None})


__all__ = [
    "ChatOptions",
    "GalleryChatOptions",
    "OPTION_FIELDS",
    "PromptOptions",
    "coerce_prompt_options",
    "to_gallery_options",
    "merge_options",
    "options_from_mapping",
]
