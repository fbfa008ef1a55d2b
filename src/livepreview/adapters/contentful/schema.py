"""Pydantic models describing content management API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContentfulBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SysPayload(ContentfulBaseModel):
    id: str


class FieldItemsPayload(ContentfulBaseModel):
    type: str


class FieldPayload(ContentfulBaseModel):
    id: str
    name: str
    type: str
    api_name: str | None = Field(default=None, alias="apiName")
    items: FieldItemsPayload | None = None
    omitted: bool = False


class ContentTypePayload(ContentfulBaseModel):
    sys: SysPayload
    name: str
    fields: list[FieldPayload] = Field(default_factory=list)


class EntryPayload(ContentfulBaseModel):
    sys: SysPayload
    # field key -> locale code -> value; values stay raw, links included
    fields: dict[str, dict[str, Any]] = Field(default_factory=dict)


ContentTypePayloadInput = ContentTypePayload | Mapping[str, object]
EntryPayloadInput = EntryPayload | Mapping[str, object]
