"""Domain port definitions for adapters."""

from __future__ import annotations

from .messaging import EditorMessageSink
from .references import EntityLookup

__all__ = [
    "EditorMessageSink",
    "EntityLookup",
]
