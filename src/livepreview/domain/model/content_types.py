"""Content type schema as seen by the preview.

Only the parts of a content type that drive field reconciliation are modelled:
field identity, field type, the item type of array fields and whether the
field is omitted from delivery (and so from query responses). Type strings
the enum does not know are kept as plain strings so new field types degrade
to the scalar strategy instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from livepreview.domain.model.enums import FieldType

FieldTypeName: TypeAlias = FieldType | str


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldDefinition:
    id: str
    name: str
    type: FieldTypeName
    api_name: str | None = None
    item_type: FieldTypeName | None = None
    omitted: bool = False

    @property
    def key(self) -> str:
        """Key used to look the field up in entry data and query responses."""
        return self.api_name if self.api_name is not None else self.name


@dataclass(frozen=True, slots=True, kw_only=True)
class ContentTypeSchema:
    id: str
    name: str
    fields: tuple[FieldDefinition, ...] = field(default_factory=tuple)
