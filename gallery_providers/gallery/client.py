"""Gallery chat adapter.

``GalleryChatClient`` maps a provider-agnostic :class:`Prompt` onto the
Gallery client library and normalizes the vendor response into a
:class:`ChatResponse`.

Call flow (both ``call`` and ``stream``):
- a prompt with exactly one instruction is sent as plain text;
- otherwise a :class:`GalleryChatReq` is built from the user/assistant/system
  instructions and the runtime options merged over the client defaults;
- only the vendor round-trip runs under the injected retry policy, so
  validation errors are raised once and never retried;
- a ``None`` (or empty JSON) vendor response is logged as a warning and
  yields an empty result.

Streaming returns a lazy iterator producing exactly one ``ChatResponse`` built
from the final vendor response. Incremental vendor events are delivered to the
stream callback only.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from ..base.dto.options import (
    ChatOptions,
    GalleryChatOptions,
    coerce_prompt_options,
    merge_options,
    to_gallery_options,
)
from ..base.interfaces import ChatClient, StreamingChatClient
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import ChatResponse, Generation, GenerationMetadata, Prompt
from ..base.resilience.retry import DEFAULT_RETRY_TEMPLATE, RetryPolicy
from ..base.tokens import has_usage
from ..base.utils import read_field
from ..config import get_provider_config
from .client_protocol import GalleryClient, GalleryResponse, StreamCallback
from .helpers import (
    CHAT_COMPLETION_KIND,
    DEFAULT_CHAT_OPTIONS,
    DEFAULT_STREAM_CALLBACK,
    LOGGER_NAME,
    PROVIDER_NAME,
    SUPPORTED_MESSAGE_TYPES,
    default_options_from_config,
    extract_usage,
    is_empty_response,
    retry_policy_from_config,
    to_map,
    to_role,
)
from .metadata import GalleryChatResponseMetadata
from .request import GalleryChatMessage, GalleryChatReq

__all__ = ["GalleryChatClient"]


class GalleryChatClient(ChatClient, StreamingChatClient):
    """Chat adapter for the Gallery client library.

    Omitted arguments select the library defaults; passing ``None`` explicitly
    for any dependency is rejected.
    """

    def __init__(
        self,
        gallery_client: GalleryClient,
        stream_callback: StreamCallback = DEFAULT_STREAM_CALLBACK,
        options: Union[GalleryChatOptions, ChatOptions] = DEFAULT_CHAT_OPTIONS,
        retry_policy: RetryPolicy = DEFAULT_RETRY_TEMPLATE,
    ) -> None:
        """
        Args:
            gallery_client: Gallery SDK client performing the network calls.
            stream_callback: Receives incremental events of streaming calls.
            options: Default options merged under each prompt's runtime options.
            retry_policy: Strategy wrapping each vendor round-trip.

        Raises:
            ValueError: If any dependency is ``None`` or ``options`` is not a
                recognized option type.
        """
        if gallery_client is None:
            raise ValueError("GalleryClient must not be None")
        if stream_callback is None:
            raise ValueError("StreamCallback must not be None")
        if options is None:
            raise ValueError("Options must not be None")
        if retry_policy is None:
            raise ValueError("RetryPolicy must not be None")
        if not isinstance(options, (GalleryChatOptions, ChatOptions, Mapping)):
            raise ValueError(f"Options must be GalleryChatOptions or ChatOptions: {type(options).__name__}")
        default_options = to_gallery_options(coerce_prompt_options(options))
        self._gallery_client = gallery_client
        self._stream_callback = stream_callback
        self._default_options = default_options
        self._retry_policy = retry_policy
        self._logger = get_logger(LOGGER_NAME)

    @classmethod
    def from_config(
        cls,
        gallery_client: GalleryClient,
        *,
        stream_callback: StreamCallback = DEFAULT_STREAM_CALLBACK,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "GalleryChatClient":
        """Build a client whose defaults and retry policy come from configuration.

        See ``gallery_providers.config.get_provider_config`` for the merge
        order of defaults, config file, environment and ``overrides``.
        """
        cfg = get_provider_config(PROVIDER_NAME, overrides)
        return cls(
            gallery_client,
            stream_callback,
            default_options_from_config(cfg),
            retry_policy_from_config(get_logger(LOGGER_NAME), cfg),
        )

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    @property
    def default_options(self) -> GalleryChatOptions:
        return self._default_options

    # ------------------------------------------------------------------
    # ChatClient / StreamingChatClient

    def call(self, prompt: Union[Prompt, str]) -> ChatResponse:
        """Ask the model synchronously and return the normalized response."""
        prompt = self._require_instructions(prompt)
        payload = self._build_payload(prompt, stream=False)
        ctx = LogContext(provider=PROVIDER_NAME, operation="chat")
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            emitted=None,
            tokens=None,
            instructions=len(prompt.instructions),
            plain_text=isinstance(payload, str),
        )
        resp = self._retry_policy.execute(lambda: self._gallery_client.create_chat(payload))
        if is_empty_response(resp):
            log_event(
                self._logger,
                "chat.empty_response",
                ctx,
                level=logging.WARNING,
                instructions=len(prompt.instructions),
            )
            return ChatResponse([])
        response = self._to_chat_response(resp)
        self._log_end("chat.end", ctx, response)
        return response

    def stream(self, prompt: Union[Prompt, str]) -> Iterator[ChatResponse]:
        """Ask the model on the streaming endpoint.

        Preconditions and request construction are checked immediately; the
        vendor call runs when the returned iterator is first advanced.
        """
        prompt = self._require_instructions(prompt)
        payload = self._build_payload(prompt, stream=True)
        return self._stream_responses(prompt, payload)

    def _stream_responses(
        self,
        prompt: Prompt,
        payload: Union[str, GalleryChatReq],
    ) -> Iterator[ChatResponse]:
        ctx = LogContext(provider=PROVIDER_NAME, operation="stream")
        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            emitted=None,
            tokens=None,
            instructions=len(prompt.instructions),
            plain_text=isinstance(payload, str),
        )
        resp = self._retry_policy.execute(
            lambda: self._gallery_client.create_stream_chat(payload, self._stream_callback)
        )
        if is_empty_response(resp):
            log_event(
                self._logger,
                "stream.empty_response",
                ctx,
                level=logging.WARNING,
                instructions=len(prompt.instructions),
            )
            return
        response = self._to_chat_response(resp)
        self._log_end("stream.end", ctx, response)
        yield response

    # ------------------------------------------------------------------
    # Request construction

    def create_request(self, prompt: Prompt, stream: bool) -> GalleryChatReq:
        """Build the structured Gallery request for ``prompt``.

        Only user, assistant and system instructions are forwarded, in their
        original order. Runtime options on the prompt override the client
        defaults field by field.

        Raises:
            ValueError: If the prompt options are not a recognized option type.
        """
        messages = [
            GalleryChatMessage(role=to_role(m), content=m.content)
            for m in prompt.instructions
            if m.message_type in SUPPORTED_MESSAGE_TYPES
        ]

        runtime_options: Optional[GalleryChatOptions] = None
        if prompt.options is not None:
            runtime_options = to_gallery_options(coerce_prompt_options(prompt.options))

        merged = merge_options(runtime_options, self._default_options)

        return GalleryChatReq(
            messages=messages,
            temperature=float(merged.temperature) if merged.temperature is not None else None,
            top_p=float(merged.top_p) if merged.top_p is not None else None,
            max_tokens=merged.max_tokens,
            answer_num=merged.answer_num,
            presence_penalty=merged.presence_penalty,
            user=merged.user,
            with_prompt=merged.with_prompt,
            is_stream=stream,
        )

    def _build_payload(self, prompt: Prompt, stream: bool) -> Union[str, GalleryChatReq]:
        # A single instruction goes out as plain text, without options.
        if len(prompt.instructions) == 1:
            return prompt.instructions[0].content
        return self.create_request(prompt, stream)

    @staticmethod
    def _require_instructions(prompt: Union[Prompt, str, None]) -> Prompt:
        if isinstance(prompt, str):
            prompt = Prompt(prompt)
        if not isinstance(prompt, Prompt):
            raise ValueError(f"Prompt must be a Prompt instance: {type(prompt).__name__}")
        if not prompt.instructions:
            raise ValueError("At least one text is required!")
        return prompt

    # ------------------------------------------------------------------
    # Response conversion

    def _to_chat_response(self, resp: GalleryResponse) -> ChatResponse:
        response_id = read_field(resp, "id")
        usage = extract_usage(resp)
        generations = [
            Generation(
                text=read_field(read_field(choice, "message"), "content"),
                info=to_map(response_id, choice),
                metadata=GenerationMetadata(kind=CHAT_COMPLETION_KIND, usage=dict(usage)),
            )
            for choice in read_field(resp, "choices") or []
        ]
        return ChatResponse(generations, GalleryChatResponseMetadata.from_response(resp))

    def _log_end(self, event: str, ctx: LogContext, response: ChatResponse) -> None:
        usage = response.result.metadata.usage if response.result else None
        normalized_log_event(
            self._logger,
            event,
            ctx.with_response(response.metadata.id),
            phase="finalize",
            emitted=bool(response.generations),
            tokens=usage if usage and has_usage(usage) else None,
            generations=len(response.generations),
        )
