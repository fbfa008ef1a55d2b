"""Port for looking up entities referenced by an entry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@runtime_checkable
class EntityLookup(Protocol):
    """Read-only view of the entities the editor has shared with the preview.

    Any ``Mapping[str, Mapping]`` keyed by entity id satisfies this port. The
    returned entity only needs to expose ``sys.contentType.sys.id``.
    """

    def get(self, entity_id: str, /) -> Mapping[str, object] | None: ...


__all__ = ["EntityLookup"]
