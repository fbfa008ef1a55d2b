"""Public domain model surface."""

from __future__ import annotations

from livepreview.domain.model.content_types import (
    ContentTypeSchema,
    FieldDefinition,
    FieldTypeName,
)
from livepreview.domain.model.entries import (
    COLLECTION_SUFFIX,
    TYPENAME_KEY,
    Entity,
    EntryUpdate,
    LocalizedValues,
    collection_key,
    content_type_id,
    entity_id,
)
from livepreview.domain.model.enums import FieldType, MessageAction
from livepreview.domain.model.messages import EditorMessage

__all__ = [  # noqa: RUF022
    # content types
    "ContentTypeSchema",
    "FieldDefinition",
    "FieldTypeName",
    # entries
    "Entity",
    "EntryUpdate",
    "LocalizedValues",
    "COLLECTION_SUFFIX",
    "TYPENAME_KEY",
    "collection_key",
    "content_type_id",
    "entity_id",
    # messages
    "EditorMessage",
    # enums
    "FieldType",
    "MessageAction",
]
