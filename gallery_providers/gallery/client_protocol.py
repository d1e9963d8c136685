"""Protocols for the Gallery SDK surface used by ``GalleryChatClient``.

The adapter never imports the SDK; any object with these methods can be
injected (the real SDK client, a thin HTTP wrapper, or a test fake).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from ..base.stubs import GalleryChatResponse
from .request import GalleryChatReq

# SDK response object, or the decoded JSON body of the REST endpoint.
GalleryResponse = Union[GalleryChatResponse, Mapping[str, Any]]


@runtime_checkable
class StreamCallback(Protocol):
    """Receives incremental events while the vendor streams a response."""

    def on_open(self) -> None:
        """Called once the stream is established."""
        ...

    def on_event(self, data: str) -> None:
        """Called for each raw event payload received."""
        ...

    def on_closed(self) -> None:
        """Called when the stream ends normally."""
        ...

    def on_failure(self, error: BaseException) -> None:
        """Called when the stream fails."""
        ...


@runtime_checkable
class GalleryClient(Protocol):
    """Gallery chat client.

    Both methods accept either the plain prompt text or a structured
    :class:`GalleryChatReq`, and return the vendor response (SDK object or
    decoded JSON mapping) or ``None`` when the service produced nothing.
    """

    def create_chat(self, request: Union[str, GalleryChatReq]) -> Optional[GalleryResponse]:
        ...

    def create_stream_chat(
        self,
        request: Union[str, GalleryChatReq],
        callback: StreamCallback,
    ) -> Optional[GalleryResponse]:
        ...


__all__ = ["GalleryClient", "GalleryResponse", "StreamCallback"]
