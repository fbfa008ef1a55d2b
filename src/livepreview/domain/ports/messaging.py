"""Port for sending messages back to the entry editor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from livepreview.domain.model import EditorMessage


@runtime_checkable
class EditorMessageSink(Protocol):
    """Fire-and-forget channel to the editor; no acknowledgement is awaited."""

    def send(self, message: EditorMessage) -> None: ...


__all__ = ["EditorMessageSink"]
