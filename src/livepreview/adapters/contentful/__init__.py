"""Public interface for the content management payload adapter."""

from __future__ import annotations

from .schema import (
    ContentTypePayload,
    ContentTypePayloadInput,
    EntryPayload,
    EntryPayloadInput,
    FieldPayload,
)
from .translator import PayloadError, build_reference_map, parse_content_type, parse_entry_update

__all__ = [
    "ContentTypePayload",
    "ContentTypePayloadInput",
    "EntryPayload",
    "EntryPayloadInput",
    "FieldPayload",
    "PayloadError",
    "build_reference_map",
    "parse_content_type",
    "parse_entry_update",
]
