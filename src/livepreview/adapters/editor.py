"""Editor message sinks.

The transport that carries messages to the editor belongs to the host
application; these sinks cover buffering and diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from livepreview.domain.ports import EditorMessageSink

if TYPE_CHECKING:
    from livepreview.domain.model import EditorMessage

log = getLogger(__name__)


@dataclass(slots=True)
class OutboxMessageSink:
    """Keep messages in send order until the host drains them."""

    pending: list[EditorMessage] = field(default_factory=list["EditorMessage"])

    def send(self, message: EditorMessage) -> None:
        self.pending.append(message)

    def drain(self) -> list[EditorMessage]:
        drained = self.pending
        self.pending = []
        return drained


@dataclass(slots=True)
class LoggingMessageSink:
    """Log messages and forward them to an optional downstream sink."""

    downstream: EditorMessageSink | None = None

    def send(self, message: EditorMessage) -> None:
        log.info("Sending editor message: %s", message.to_payload())
        if self.downstream is not None:
            self.downstream.send(message)


if TYPE_CHECKING:
    _outbox_check: EditorMessageSink = OutboxMessageSink()
    _logging_check: EditorMessageSink = LoggingMessageSink()
