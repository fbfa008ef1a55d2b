"""Entry updates and denormalized query records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeAlias, cast

# A query-shaped record: field key -> value, plus a ``sys`` envelope with ``id``.
Entity: TypeAlias = Mapping[str, object]
LocalizedValues: TypeAlias = Mapping[str, object]

TYPENAME_KEY = "__typename"
COLLECTION_SUFFIX = "Collection"


def _empty_fields() -> dict[str, LocalizedValues]:
    return {}


@dataclass(frozen=True, slots=True, kw_only=True)
class EntryUpdate:
    """Entry state sent by the editor, keyed by field and then by locale."""

    id: str
    fields: Mapping[str, LocalizedValues] = field(default_factory=_empty_fields)

    def value(self, key: str, locale: str) -> object | None:
        """Return the value of ``key`` for ``locale`` or ``None`` when absent."""

        localized = self.fields.get(key)
        if not isinstance(localized, Mapping):
            return None
        return cast(Mapping[str, object], localized).get(locale)


def entity_id(entity: object) -> str | None:
    """Return ``entity.sys.id`` for a query record or raw link, if present."""

    if not isinstance(entity, Mapping):
        return None
    sys = cast(Mapping[str, object], entity).get("sys")
    if not isinstance(sys, Mapping):
        return None
    value = cast(Mapping[str, object], sys).get("id")
    return value if isinstance(value, str) and value else None


def content_type_id(entity: object) -> str | None:
    """Return ``entity.sys.contentType.sys.id`` if the entity carries one."""

    if not isinstance(entity, Mapping):
        return None
    node: object = entity
    for key in ("sys", "contentType", "sys", "id"):
        if not isinstance(node, Mapping):
            return None
        node = cast(Mapping[str, object], node).get(key)
    return node if isinstance(node, str) and node else None


def collection_key(key: str) -> str:
    return f"{key}{COLLECTION_SUFFIX}"
