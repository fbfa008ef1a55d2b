"""Field classification for entry reconciliation.

Every content type field maps to exactly one update strategy:
- scalar: anything that is not rich text, a link or an array of links
- rich text: the document is stored under ``json`` of the record value
- single reference: a ``Link`` field
- reference collection: an ``Array`` of ``Link`` items, stored under
  ``<key>Collection`` as ``{"items": [...]}``

Arrays of anything else (e.g. arrays of symbols) are classified as
``UnhandledArrayStrategy`` and left untouched by reconciliation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal, TypeAlias

from livepreview.domain.model import FieldType, collection_key

if TYPE_CHECKING:
    from collections.abc import Mapping

    from livepreview.domain.model import ContentTypeSchema, FieldDefinition, FieldTypeName


class StrategyKind(StrEnum):
    SCALAR = "scalar"
    RICH_TEXT = "rich_text"
    SINGLE_REFERENCE = "single_reference"
    REFERENCE_COLLECTION = "reference_collection"
    UNHANDLED_ARRAY = "unhandled_array"


@dataclass(frozen=True, slots=True)
class ScalarStrategy:
    key: str
    kind: Literal[StrategyKind.SCALAR] = StrategyKind.SCALAR

    @property
    def record_key(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class RichTextStrategy:
    key: str
    kind: Literal[StrategyKind.RICH_TEXT] = StrategyKind.RICH_TEXT

    @property
    def record_key(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class SingleReferenceStrategy:
    key: str
    kind: Literal[StrategyKind.SINGLE_REFERENCE] = StrategyKind.SINGLE_REFERENCE

    @property
    def record_key(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class ReferenceCollectionStrategy:
    key: str
    kind: Literal[StrategyKind.REFERENCE_COLLECTION] = StrategyKind.REFERENCE_COLLECTION

    @property
    def record_key(self) -> str:
        return collection_key(self.key)


@dataclass(frozen=True, slots=True)
class UnhandledArrayStrategy:
    """Array of non-link items; reconciliation does not touch these yet."""

    key: str
    item_type: FieldTypeName | None = None
    kind: Literal[StrategyKind.UNHANDLED_ARRAY] = StrategyKind.UNHANDLED_ARRAY

    @property
    def record_key(self) -> str:
        return self.key


FieldStrategy: TypeAlias = (
    ScalarStrategy
    | RichTextStrategy
    | SingleReferenceStrategy
    | ReferenceCollectionStrategy
    | UnhandledArrayStrategy
)


def classify_field(field: FieldDefinition) -> FieldStrategy:
    """Return the update strategy for ``field``."""

    key = field.key
    if field.type == FieldType.RICH_TEXT:
        return RichTextStrategy(key)
    if field.type == FieldType.LINK:
        return SingleReferenceStrategy(key)
    if field.type == FieldType.ARRAY:
        if field.item_type == FieldType.LINK:
            return ReferenceCollectionStrategy(key)
        return UnhandledArrayStrategy(key, item_type=field.item_type)
    return ScalarStrategy(key)


def classify_schema(schema: ContentTypeSchema) -> tuple[FieldStrategy, ...]:
    """Classify all fields of ``schema`` in declaration order."""

    return tuple(classify_field(field) for field in schema.fields)


def missing_record_keys(
    schema: ContentTypeSchema,
    record: Mapping[str, object],
) -> frozenset[str]:
    """Return record keys the schema expects but the query record does not carry.

    The key set of a record is fixed by the query that produced it, so these
    fields are silently skipped by reconciliation. Reporting them makes drift
    between the query and the current content type visible. Omitted fields are
    never part of query responses and are not reported.
    """

    expected = (classify_field(field).record_key for field in schema.fields if not field.omitted)
    return frozenset(key for key in expected if key not in record)


__all__ = [
    "FieldStrategy",
    "ReferenceCollectionStrategy",
    "RichTextStrategy",
    "ScalarStrategy",
    "SingleReferenceStrategy",
    "StrategyKind",
    "UnhandledArrayStrategy",
    "classify_field",
    "classify_schema",
    "missing_record_keys",
]
