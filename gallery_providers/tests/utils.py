"""Shared testing utilities for the Gallery adapter tests.

Exports:
    - make_response: decoded-JSON shaped Gallery chat response
    - make_sdk_response: attribute-style (SDK object) Gallery chat response
    - FakeGalleryClient: scripted stand-in for the Gallery SDK client
    - RecordingCallback: stream callback that records received events
    - event_payloads: decode structured log records emitted by ``log_event``
"""
from __future__ import annotations

import json
import logging
from types import SimpleNamespace
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple


def make_response(
    contents: Sequence[str] = ("Hello there",),
    *,
    response_id: str = "chatcmpl-1",
    usage: Optional[Tuple[int, int, int]] = (3, 5, 8),
    finish_reason: Optional[str] = "stop",
) -> Dict[str, Any]:
    """Return a Gallery chat response as decoded JSON."""
    resp: Dict[str, Any] = {
        "id": response_id,
        "choices": [
            {
                "index": i,
                "message": {"role": "assistant", "content": text},
                "finish_reason": finish_reason,
            }
            for i, text in enumerate(contents)
        ],
    }
    if usage is not None:
        prompt, completion, total = usage
        resp["usage"] = {"prompt_tokens": prompt, "completion_tokens": completion, "total_tokens": total}
    return resp


def make_sdk_response(
    contents: Sequence[str] = ("Hello there",),
    *,
    response_id: str = "chatcmpl-sdk",
    usage: Optional[Tuple[int, int, Optional[int]]] = (2, 4, None),
) -> SimpleNamespace:
    """Return a Gallery chat response shaped like an SDK object."""
    choices = [
        SimpleNamespace(
            index=i,
            message=SimpleNamespace(role="assistant", content=text),
            finish_reason=None,
        )
        for i, text in enumerate(contents)
    ]
    usage_obj = None
    if usage is not None:
        prompt, completion, total = usage
        usage_obj = SimpleNamespace(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total)
    return SimpleNamespace(id=response_id, choices=choices, usage=usage_obj)


class FakeGalleryClient:
    """Scripted Gallery client.

    Each call consumes the next entry of ``script``: exceptions are raised,
    anything else (including ``None``) is returned. The last entry repeats
    once the script is exhausted.
    """

    def __init__(self, script: Optional[Iterable[Any]] = None) -> None:
        self.script: List[Any] = list(script) if script is not None else [make_response()]
        self.chat_calls: List[Any] = []
        self.stream_calls: List[Tuple[Any, Any]] = []

    def _next(self) -> Any:
        item = self.script.pop(0) if len(self.script) > 1 else self.script[0]
        if isinstance(item, BaseException):
            raise item
        return item

    def create_chat(self, request: Any) -> Any:
        self.chat_calls.append(request)
        return self._next()

    def create_stream_chat(self, request: Any, callback: Any) -> Any:
        self.stream_calls.append((request, callback))
        callback.on_open()
        callback.on_event('{"delta": "Hel"}')
        callback.on_event('{"delta": "lo"}')
        result = self._next()
        callback.on_closed()
        return result

    @property
    def calls(self) -> int:
        return len(self.chat_calls) + len(self.stream_calls)


class RecordingCallback:
    """Stream callback collecting every event it receives."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def on_open(self) -> None:
        self.events.append(("open", None))

    def on_event(self, data: str) -> None:
        self.events.append(("event", data))

    def on_closed(self) -> None:
        self.events.append(("closed", None))

    def on_failure(self, error: BaseException) -> None:
        self.events.append(("failure", error))


class NoRetry:
    """Retry policy running the operation exactly once."""

    def __init__(self) -> None:
        self.executions = 0

    def execute(self, operation):
        self.executions += 1
        return operation()


def event_payloads(records: Iterable[logging.LogRecord]) -> List[Dict[str, Any]]:
    """Decode JSON payloads of structured log records, skipping plain messages."""
    out: List[Dict[str, Any]] = []
    for rec in records:
        try:
            data = json.loads(rec.getMessage())
        except ValueError:
            continue
        if isinstance(data, dict):
            data["_level"] = rec.levelno
            out.append(data)
    return out
