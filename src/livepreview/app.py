"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from livepreview.adapters.contentful import build_reference_map
from livepreview.adapters.editor import OutboxMessageSink
from livepreview.domain.preview import log_missing_fields, reconcile_entry

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from livepreview.domain.model import ContentTypeSchema, Entity, EntryUpdate
    from livepreview.domain.ports import EditorMessageSink, EntityLookup
    from livepreview.domain.preview import MissingFieldsReporter, ReconcileResult


log = getLogger(__name__)


def apply_entry_update(  # noqa: PLR0913
    schema: ContentTypeSchema,
    record: Entity,
    update: EntryUpdate,
    *,
    locale: str,
    references: EntityLookup | None,
    sink: EditorMessageSink,
    report_missing: MissingFieldsReporter | None = log_missing_fields,
) -> ReconcileResult:
    """Reconcile ``update`` into ``record`` and send resulting editor messages."""

    result = reconcile_entry(
        schema,
        record,
        update,
        locale,
        references,
        report_missing=report_missing,
    )
    for message in result.messages:
        sink.send(message)
    if result.messages:
        log.info(
            "Requested %s unknown entities from the editor for entry %s",
            len(result.messages),
            update.id,
        )
    return result


def _empty_references() -> dict[str, Mapping[str, object]]:
    return {}


@dataclass(slots=True, kw_only=True)
class PreviewSession:
    """Keep one query record in sync with the editor for the life of a preview.

    The session owns the entities the editor has shared so far. References
    that are unknown on one update resolve on a later one once the editor has
    answered the ``ENTITY_NOT_KNOWN`` message via ``register_entities``.
    """

    schema: ContentTypeSchema
    record: Entity
    locale: str
    sink: EditorMessageSink = field(default_factory=OutboxMessageSink)
    references: dict[str, Mapping[str, object]] = field(default_factory=_empty_references)

    def register_entities(self, entities: Iterable[Mapping[str, object]]) -> int:
        """Add entities shared by the editor; returns how many were added or replaced."""

        added = build_reference_map(entities)
        self.references.update(added)
        return len(added)

    def apply(self, update: EntryUpdate) -> Entity:
        """Reconcile ``update`` into the session record and return the new record."""

        result = apply_entry_update(
            self.schema,
            self.record,
            update,
            locale=self.locale,
            references=self.references,
            sink=self.sink,
        )
        self.record = result.record
        return self.record
