"""Messages the preview sends back to the entry editor."""

from __future__ import annotations

from dataclasses import dataclass

from livepreview.domain.model.enums import MessageAction


@dataclass(frozen=True, slots=True)
class EditorMessage:
    action: MessageAction
    reference_entity_id: str

    @classmethod
    def entity_not_known(cls, reference_entity_id: str) -> EditorMessage:
        return cls(MessageAction.ENTITY_NOT_KNOWN, reference_entity_id)

    def to_payload(self) -> dict[str, str]:
        """Wire shape expected by the editor."""
        return {"action": str(self.action), "referenceEntityId": self.reference_entity_id}
