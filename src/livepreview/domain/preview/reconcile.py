"""Reconcile an entry update into a previously fetched query record.

The query record is never mutated. A shallow copy is taken and only the keys
the record already carries are replaced; missing update data clears a field
instead of failing so the preview always renders the best available state.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias, cast

from livepreview.domain.model import entity_id

from .classify import (
    ReferenceCollectionStrategy,
    RichTextStrategy,
    ScalarStrategy,
    SingleReferenceStrategy,
    UnhandledArrayStrategy,
    classify_schema,
    missing_record_keys,
)
from .resolve import resolve_reference

if TYPE_CHECKING:
    from livepreview.domain.model import ContentTypeSchema, EditorMessage, Entity, EntryUpdate
    from livepreview.domain.ports import EntityLookup


log = getLogger(__name__)

MissingFieldsReporter: TypeAlias = Callable[[frozenset[str]], None]


def log_missing_fields(keys: frozenset[str]) -> None:
    """Default diagnostic hook for schema fields absent from the query record."""

    log.warning(
        "Fields %s are not part of the query response and will not be updated",
        ", ".join(sorted(keys)),
    )


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Reconciled record and the editor messages produced while resolving it."""

    record: Entity
    messages: tuple[EditorMessage, ...] = ()


@dataclass(slots=True)
class _MessageCollector:
    messages: list[EditorMessage] = field(default_factory=list["EditorMessage"])

    def add(self, message: EditorMessage | None) -> None:
        if message is not None and message not in self.messages:
            self.messages.append(message)


def reconcile_entry(  # noqa: PLR0913
    schema: ContentTypeSchema,
    record: Entity,
    update: EntryUpdate,
    locale: str,
    references: EntityLookup | None = None,
    *,
    report_missing: MissingFieldsReporter | None = log_missing_fields,
) -> ReconcileResult:
    """Apply ``update`` for ``locale`` to ``record`` following ``schema``.

    Returns the record unchanged when it belongs to another entry than the
    update. Unknown references are dropped from the result and reported as
    ``ENTITY_NOT_KNOWN`` messages, each entity at most once per call.
    """

    strategies = classify_schema(schema)
    missing = missing_record_keys(schema, record)
    if missing and report_missing is not None:
        report_missing(missing)

    record_id = entity_id(record)
    if record_id != update.id:
        log.debug("Skipping update for %s, record is %s", update.id, record_id)
        return ReconcileResult(record=record)

    modified: dict[str, object] = dict(record)
    collector = _MessageCollector()

    for strategy in strategies:
        if strategy.record_key not in modified:
            continue
        match strategy:
            case ScalarStrategy(key=key):
                modified[key] = update.value(key, locale)
            case RichTextStrategy(key=key):
                modified[key] = _rich_text_value(modified[key], update.value(key, locale))
            case SingleReferenceStrategy(key=key):
                resolution = resolve_reference(update.value(key, locale), references)
                collector.add(resolution.message)
                modified[key] = resolution.item
            case ReferenceCollectionStrategy(key=key):
                modified[strategy.record_key] = _collection_value(
                    modified[strategy.record_key],
                    update.value(key, locale),
                    references,
                    collector,
                )
            case UnhandledArrayStrategy():
                # arrays of non-link items keep their fetched value
                pass

    return ReconcileResult(record=modified, messages=tuple(collector.messages))


def _rich_text_value(current: object, document: object) -> dict[str, object]:
    container = cast(Mapping[str, object], current) if isinstance(current, Mapping) else {}
    return {**container, "json": document}


def _collection_value(
    current: object,
    raw_items: object,
    references: EntityLookup | None,
    collector: _MessageCollector,
) -> dict[str, object]:
    items: list[Mapping[str, object]] = []
    if isinstance(raw_items, Sequence) and not isinstance(raw_items, str):
        for raw in cast(Sequence[object], raw_items):
            resolution = resolve_reference(raw, references)
            collector.add(resolution.message)
            if resolution.item:
                items.append(resolution.item)
    container = cast(Mapping[str, object], current) if isinstance(current, Mapping) else {}
    return {**container, "items": items}


__all__ = [
    "MissingFieldsReporter",
    "ReconcileResult",
    "log_missing_fields",
    "reconcile_entry",
]
