"""
Prompt DTO: ordered chat instructions plus optional generation options.

Options are validated here, at the boundary where callers hand them in, so
adapters can rely on receiving one of the recognized option variants.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

from ..dto.options import ChatOptions, GalleryChatOptions, coerce_prompt_options
from .message import Message


@dataclass(frozen=True, init=False)
class Prompt:
    """Immutable prompt handed to a chat client.

    Attributes:
        instructions: Ordered tuple of :class:`Message` turns.
        options: Optional runtime options overriding the client's defaults.

    Construction accepts a bare string (one user message), a single
    ``Message`` or any sequence of messages. ``options`` may be an option model
    or a mapping validated into one.

    Raises:
        ValueError: When an instruction is not a ``Message`` or the options
            are not a recognized option type.
    """

    instructions: Tuple[Message, ...]
    options: Optional[Union[ChatOptions, GalleryChatOptions]]

    def __init__(
        self,
        instructions: Union[str, Message, Sequence[Message]],
        options: Any = None,
    ) -> None:
        if isinstance(instructions, str):
            items: Tuple[Any, ...] = (Message.user(instructions),)
        elif isinstance(instructions, Message):
            items = (instructions,)
        elif instructions is None:
            raise ValueError("Prompt instructions must not be None")
        else:
            try:
                items = tuple(instructions)
            except TypeError:
                raise ValueError(
                    "Prompt instructions must be a string, a Message or a sequence of Messages: "
                    f"{type(instructions).__name__}"
                ) from None
        for item in items:
            if not isinstance(item, Message):
                raise ValueError(f"Prompt instructions must be Message instances: {type(item).__name__}")
        object.__setattr__(self, "instructions", items)
        object.__setattr__(self, "options", coerce_prompt_options(options))

    @property
    def contents(self) -> str:
        """Return the instruction texts joined with newlines."""
        return "\n".join(m.content for m in self.instructions)

    def with_options(self, options: Any) -> "Prompt":
        """Return a copy of this prompt carrying ``options``."""
        return Prompt(self.instructions, options)


__all__ = ["Prompt"]
