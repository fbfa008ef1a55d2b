from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, cast

import pytest

from livepreview.adapters.contentful import build_reference_map, parse_content_type

if TYPE_CHECKING:
    from collections.abc import Mapping

    from livepreview.domain.model import ContentTypeSchema

DATA_DIR = Path(__file__).resolve().parent / "data" / "contentful"


def _load(name: str) -> object:
    with (DATA_DIR / name).open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def content_type_payload() -> dict[str, object]:
    return cast(dict[str, object], _load("blog_post_content_type.json"))


@pytest.fixture
def entry_payload() -> dict[str, object]:
    return cast(dict[str, object], _load("blog_post_entry.json"))


@pytest.fixture
def record_payload() -> dict[str, object]:
    return cast(dict[str, object], _load("blog_post_record.json"))


@pytest.fixture
def reference_payloads() -> list[dict[str, object]]:
    return cast(list[dict[str, object]], _load("references.json"))


@pytest.fixture
def blog_post_schema(content_type_payload: dict[str, object]) -> ContentTypeSchema:
    return parse_content_type(content_type_payload)


@pytest.fixture
def references(
    reference_payloads: list[dict[str, object]],
) -> dict[str, Mapping[str, object]]:
    return build_reference_map(reference_payloads)
