"""Resolve raw entry links into typed query references.

An entry update carries links as bare pointers (``{"sys": {"id": ...}}``)
while the query record expects typed sub-objects carrying ``__typename``.
The type name is derived from the content type of the referenced entity,
which is only known when the editor has shared that entity with the preview.

Resolution outcomes:
- ``None`` link: the reference was removed, resolves to ``None``
- link already carrying ``__typename``: returned unchanged
- referenced entity known: link plus derived ``__typename``
- referenced entity unknown: ``None`` plus an ``ENTITY_NOT_KNOWN`` message, so
  the editor can share the entity before the next update arrives
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, cast

from livepreview.domain.model import TYPENAME_KEY, EditorMessage, content_type_id, entity_id

if TYPE_CHECKING:
    from livepreview.domain.ports import EntityLookup


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReferenceResolution:
    """Resolved reference item and the message to send, if any."""

    item: Mapping[str, object] | None
    message: EditorMessage | None = None


def typename_for(content_type: str) -> str:
    """Derive the query type name from a content type id.

    Only the first character is upper-cased (``blogPost`` -> ``BlogPost``). This
    assumes the query schema follows the default naming of content types.
    """

    return content_type[:1].upper() + content_type[1:]


def _lookup_typename(references: EntityLookup | None, reference_id: str) -> str | None:
    if references is None:
        return None
    entity = references.get(reference_id)
    if entity is None:
        return None
    type_id = content_type_id(entity)
    if type_id is None:
        return None
    return typename_for(type_id)


def resolve_reference(raw: object, references: EntityLookup | None) -> ReferenceResolution:
    """Resolve one raw link from an entry update against ``references``."""

    if raw is None:
        return ReferenceResolution(item=None)
    if not isinstance(raw, Mapping):
        log.debug("Ignoring malformed reference value of type %s", type(raw).__name__)
        return ReferenceResolution(item=None)

    link = cast(Mapping[str, object], raw)
    if link.get(TYPENAME_KEY):
        return ReferenceResolution(item=link)

    reference_id = entity_id(link)
    if reference_id is None:
        log.debug("Ignoring reference without sys.id: %s", link)
        return ReferenceResolution(item=None)

    typename = _lookup_typename(references, reference_id)
    if typename is None:
        log.debug("Reference %s is not known yet, requesting it from the editor", reference_id)
        return ReferenceResolution(
            item=None,
            message=EditorMessage.entity_not_known(reference_id),
        )

    log.debug("Resolved reference %s as %s", reference_id, typename)
    return ReferenceResolution(item={**link, TYPENAME_KEY: typename})


__all__ = [
    "ReferenceResolution",
    "resolve_reference",
    "typename_for",
]
