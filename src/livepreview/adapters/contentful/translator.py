"""Translate content management payloads into preview domain objects."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from logging import getLogger
from typing import cast

from pydantic import ValidationError

from livepreview.domain.model import (
    ContentTypeSchema,
    EntryUpdate,
    FieldDefinition,
    FieldType,
    FieldTypeName,
    entity_id,
)

from .schema import (
    ContentTypePayload,
    ContentTypePayloadInput,
    EntryPayload,
    EntryPayloadInput,
    FieldPayload,
)

log = getLogger(__name__)


class PayloadError(ValueError):
    """Raised when a payload does not match the content management contract."""

    def __init__(self, message: str, *, kind: str) -> None:
        super().__init__(message)
        self.kind = kind


def _ensure_content_type_payload(payload: ContentTypePayloadInput) -> ContentTypePayload:
    if isinstance(payload, ContentTypePayload):
        return payload
    try:
        return ContentTypePayload.model_validate(payload)
    except ValidationError as exc:
        raise PayloadError(f"Invalid content type payload: {exc}", kind="content_type") from exc


def _ensure_entry_payload(payload: EntryPayloadInput) -> EntryPayload:
    if isinstance(payload, EntryPayload):
        return payload
    try:
        return EntryPayload.model_validate(payload)
    except ValidationError as exc:
        raise PayloadError(f"Invalid entry payload: {exc}", kind="entry") from exc


def _field_type(value: str) -> FieldTypeName:
    try:
        return FieldType(value)
    except ValueError:
        log.warning("Unknown field type %s, treating it as a scalar", value)
        return value


def _field_definition(payload: FieldPayload) -> FieldDefinition:
    items = payload.items
    return FieldDefinition(
        id=payload.id,
        name=payload.name,
        api_name=payload.api_name,
        type=_field_type(payload.type),
        item_type=_field_type(items.type) if items is not None else None,
        omitted=payload.omitted,
    )


def parse_content_type(payload: ContentTypePayloadInput) -> ContentTypeSchema:
    """Return the reconciliation schema for a content type payload."""

    content_type = _ensure_content_type_payload(payload)
    return ContentTypeSchema(
        id=content_type.sys.id,
        name=content_type.name,
        fields=tuple(_field_definition(field) for field in content_type.fields),
    )


def parse_entry_update(payload: EntryPayloadInput) -> EntryUpdate:
    """Return the entry update carried by an entry payload."""

    entry = _ensure_entry_payload(payload)
    return EntryUpdate(id=entry.sys.id, fields=entry.fields)


def build_reference_map(
    entities: Iterable[Mapping[str, object]],
) -> dict[str, Mapping[str, object]]:
    """Key raw entities shared by the editor by their ``sys.id``.

    Entities without an id cannot be referenced and are skipped.
    """

    references: dict[str, Mapping[str, object]] = {}
    for entity in entities:
        reference_id = entity_id(entity)
        if reference_id is None:
            log.warning("Skipping referenced entity without sys.id")
            continue
        references[reference_id] = cast(Mapping[str, object], entity)
    return references
