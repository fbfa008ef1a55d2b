"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class FieldType(StrEnum):
    """Field types a content type may declare."""

    SYMBOL = "Symbol"
    TEXT = "Text"
    INTEGER = "Integer"
    NUMBER = "Number"
    DATE = "Date"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    LOCATION = "Location"
    RICH_TEXT = "RichText"
    LINK = "Link"
    RESOURCE_LINK = "ResourceLink"
    ARRAY = "Array"


class MessageAction(StrEnum):
    """Actions the preview may send back to the entry editor."""

    ENTITY_NOT_KNOWN = "ENTITY_NOT_KNOWN"
