from __future__ import annotations

from livepreview.domain.model import (
    ContentTypeSchema,
    EditorMessage,
    EntryUpdate,
    FieldDefinition,
    FieldType,
    MessageAction,
    collection_key,
    content_type_id,
    entity_id,
)


def test_entry_update_value_reads_locale() -> None:
    update = EntryUpdate(id="e1", fields={"title": {"en-US": "Hello", "de-DE": "Hallo"}})

    assert update.value("title", "de-DE") == "Hallo"
    assert update.value("title", "fr-FR") is None
    assert update.value("missing", "en-US") is None


def test_entry_update_value_ignores_non_localized_field_values() -> None:
    update = EntryUpdate(id="e1", fields={"title": "Hello"})  # type: ignore[arg-type]

    assert update.value("title", "en-US") is None


def test_entity_id_and_content_type_id_read_sys_envelope() -> None:
    entity = {"sys": {"id": "e1", "contentType": {"sys": {"id": "blogPost"}}}}

    assert entity_id(entity) == "e1"
    assert content_type_id(entity) == "blogPost"
    assert entity_id({"sys": {"id": ""}}) is None
    assert entity_id(None) is None
    assert content_type_id({"sys": {"id": "e1"}}) is None
    assert content_type_id({"sys": {"contentType": None}}) is None


def test_field_definition_key_falls_back_to_name() -> None:
    field = FieldDefinition(id="heroImage", name="Hero image", type=FieldType.LINK)

    assert field.key == "Hero image"
    assert FieldDefinition(id="a", name="A", api_name="a", type=FieldType.SYMBOL).key == "a"


def test_content_type_schema_keeps_field_order() -> None:
    title = FieldDefinition(id="title", name="title", api_name="title", type=FieldType.SYMBOL)
    body = FieldDefinition(id="body", name="Body", type=FieldType.RICH_TEXT)
    schema = ContentTypeSchema(id="page", name="Page", fields=(title, body))

    assert [field.key for field in schema.fields] == ["title", "Body"]
    assert ContentTypeSchema(id="empty", name="Empty").fields == ()


def test_collection_key_appends_suffix() -> None:
    assert collection_key("relatedPosts") == "relatedPostsCollection"


def test_editor_message_payload_uses_wire_names() -> None:
    message = EditorMessage.entity_not_known("r1")

    assert message.action is MessageAction.ENTITY_NOT_KNOWN
    assert message.to_payload() == {"action": "ENTITY_NOT_KNOWN", "referenceEntityId": "r1"}
