"""Common helpers for the Gallery provider.

Purpose:
    Small, focused helpers shared by the synchronous and streaming paths of
    ``GalleryChatClient``: role mapping, per-choice metadata, usage extraction,
    the default stream callback, and builders that turn the merged provider
    configuration into default options and a retry policy.

External dependencies:
    - None directly; the Gallery SDK is injected into the client.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..base.dto.options import GalleryChatOptions, options_from_mapping
from ..base.errors import ErrorCode
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import Message, MessageType
from ..base.resilience.retry import RetryConfig, RetryTemplate
from ..base.tokens import CanonicalUsage, extract_gallery_token_usage
from ..base.utils import read_field
from ..config import get_provider_config
from ..config.defaults import (
    DEFAULT_RETRY_DELAY_BASE,
    DEFAULT_RETRY_MAX_ATTEMPTS,
    GALLERY_DEFAULT_TEMPERATURE,
    GALLERY_DEFAULT_TOP_P,
)

PROVIDER_NAME = "gallery"
LOGGER_NAME = "providers.gallery"

# Generation metadata tag for chat answers.
CHAT_COMPLETION_KIND = "chat.completion"

DEFAULT_CHAT_OPTIONS = GalleryChatOptions(
    temperature=GALLERY_DEFAULT_TEMPERATURE,
    top_p=GALLERY_DEFAULT_TOP_P,
)

SUPPORTED_MESSAGE_TYPES = frozenset({MessageType.USER, MessageType.ASSISTANT, MessageType.SYSTEM})

_ROLES: Dict[MessageType, str] = {
    MessageType.USER: "user",
    MessageType.ASSISTANT: "assistant",
    MessageType.SYSTEM: "system",
}


def to_role(message: Message) -> str:
    """Map a message type to the Gallery role vocabulary.

    Raises:
        ValueError: For message types Gallery has no role for.
    """
    try:
        return _ROLES[message.message_type]
    except KeyError:
        raise ValueError(f"Unsupported message type for Gallery: {message.message_type.value}") from None


def to_map(response_id: Optional[str], choice: Any) -> Dict[str, Any]:
    """Build the per-choice metadata map for a generation.

    Keys: ``id`` (response id), ``index``, ``role`` and ``finish_reason``;
    keys whose value is unknown are omitted.
    """
    message = read_field(choice, "message")
    info = {
        "id": response_id,
        "index": read_field(choice, "index"),
        "role": read_field(message, "role"),
        "finish_reason": read_field(choice, "finish_reason"),
    }
    return {k: v for k, v in info.items() if v is not None}


def is_empty_response(resp: Any) -> bool:
    """Return True for a missing response or an empty decoded JSON body."""
    return resp is None or (isinstance(resp, Mapping) and not resp)


def extract_usage(resp: Any) -> CanonicalUsage:
    """Return the canonical token usage of a Gallery response."""
    return extract_gallery_token_usage(resp)


class LoggingStreamCallback:
    """Stream callback that records vendor stream events at DEBUG level."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger(LOGGER_NAME)
        self._ctx = LogContext(provider=PROVIDER_NAME, operation="stream")

    def on_open(self) -> None:
        log_event(self._logger, "stream.open", self._ctx, level=logging.DEBUG)

    def on_event(self, data: str) -> None:
        log_event(self._logger, "stream.event", self._ctx, level=logging.DEBUG, data=data)

    def on_closed(self) -> None:
        log_event(self._logger, "stream.closed", self._ctx, level=logging.DEBUG)

    def on_failure(self, error: BaseException) -> None:
        log_event(self._logger, "stream.failure", self._ctx, level=logging.WARNING, error=str(error))


DEFAULT_STREAM_CALLBACK = LoggingStreamCallback()


def default_options_from_config(cfg: Optional[Mapping[str, Any]] = None) -> GalleryChatOptions:
    """Build validated default options from the merged provider config."""
    if cfg is None:
        cfg = get_provider_config(PROVIDER_NAME)
    return options_from_mapping(cfg)


def build_retry_config(
    logger: logging.Logger,
    ctx: LogContext,
    cfg: Optional[Mapping[str, Any]] = None,
    *,
    phase: Optional[str] = None,
) -> RetryConfig:
    """Construct a retry configuration for Gallery calls.

    Reads the ``retry`` section of the provider config and attaches an attempt
    logger that emits normalized ``retry.attempt`` events.

    Parameters:
        logger: Logger used for the attempt events.
        ctx: Logging context (provider correlation).
        cfg: Merged provider config; read via ``get_provider_config`` when omitted.
        phase: Optional logical phase name propagated to logs.
    """
    if cfg is None:
        cfg = get_provider_config(PROVIDER_NAME)
    retry_cfg_raw = cfg.get("retry") or {}
    max_attempts = int(retry_cfg_raw.get("max_attempts", DEFAULT_RETRY_MAX_ATTEMPTS))
    delay_base = float(retry_cfg_raw.get("delay_base", DEFAULT_RETRY_DELAY_BASE))

    def _attempt_logger(
        *,
        attempt: int,
        max_attempts: int,
        delay: Optional[float],
        error: Optional[BaseException],
        code: Optional[ErrorCode],
    ) -> None:
        normalized_log_event(
            logger,
            "retry.attempt",
            ctx,
            phase=(phase or "retry"),
            attempt=attempt,
            error_code=(code.value if code is not None else None),
            emitted=None,
            tokens=None,
            max_attempts=max_attempts,
            delay=delay,
            will_retry=bool(error is not None and delay is not None),
        )

    return RetryConfig(max_attempts=max_attempts, delay_base=delay_base, attempt_logger=_attempt_logger)


def retry_policy_from_config(
    logger: logging.Logger,
    cfg: Optional[Mapping[str, Any]] = None,
) -> RetryTemplate:
    """Return a :class:`RetryTemplate` configured from the provider config."""
    return RetryTemplate(build_retry_config(logger, LogContext(provider=PROVIDER_NAME), cfg))


__all__ = [
    "PROVIDER_NAME",
    "LOGGER_NAME",
    "CHAT_COMPLETION_KIND",
    "DEFAULT_CHAT_OPTIONS",
    "DEFAULT_STREAM_CALLBACK",
    "SUPPORTED_MESSAGE_TYPES",
    "LoggingStreamCallback",
    "to_role",
    "to_map",
    "extract_usage",
    "is_empty_response",
    "default_options_from_config",
    "build_retry_config",
    "retry_policy_from_config",
]
