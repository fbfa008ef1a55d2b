from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from livepreview.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


def _args(data_dir: Path, *extra: str) -> list[str]:
    return [
        "reconcile",
        "--content-type",
        str(data_dir / "blog_post_content_type.json"),
        "--record",
        str(data_dir / "blog_post_record.json"),
        "--update",
        str(data_dir / "blog_post_entry.json"),
        *extra,
    ]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LIVEPREVIEW_LOCALE", raising=False)
    monkeypatch.delenv("LIVEPREVIEW_LOG_LEVEL", raising=False)


def test_cli_reconcile_prints_record_and_messages(
    data_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(_args(data_dir, "--references", str(data_dir / "references.json")))

    output = json.loads(capsys.readouterr().out)
    assert output["data"]["title"] == "Hello live preview"
    assert output["data"]["author"]["__typename"] == "Author"
    assert output["messages"] == [{"action": "ENTITY_NOT_KNOWN", "referenceEntityId": "post-9"}]


def test_cli_reconcile_without_references_requests_every_link(
    data_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(_args(data_dir))

    output = json.loads(capsys.readouterr().out)
    assert output["data"]["author"] is None
    assert [message["referenceEntityId"] for message in output["messages"]] == [
        "author-2",
        "post-2",
        "post-9",
    ]


def test_cli_reconcile_uses_locale_from_environment(
    data_dir: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("LIVEPREVIEW_LOCALE", "de-DE")
    target = tmp_path / "out.json"

    cli.main(_args(data_dir, "--output", str(target)))

    output = json.loads(target.read_text(encoding="utf-8"))
    assert output["data"]["title"] == "Hallo Vorschau"
    assert output["messages"] == []


def test_cli_reconcile_exits_on_invalid_payload(data_dir: Path, tmp_path: Path) -> None:
    broken = tmp_path / "entry.json"
    broken.write_text(json.dumps({"fields": {}}), encoding="utf-8")
    args = _args(data_dir)
    args[args.index("--update") + 1] = str(broken)

    with pytest.raises(SystemExit) as exc:
        cli.main(args)

    assert exc.value.code == 2


def test_cli_reconcile_exits_on_missing_file(data_dir: Path, tmp_path: Path) -> None:
    args = _args(data_dir)
    args[args.index("--record") + 1] = str(tmp_path / "missing.json")

    with pytest.raises(SystemExit) as exc:
        cli.main(args)

    assert exc.value.code == 2


def test_cli_reconcile_exits_on_unwritable_output(
    data_dir: Path,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    target = tmp_path / "no-such-dir" / "out.json"

    with pytest.raises(SystemExit) as exc:
        cli.main(_args(data_dir, "--output", str(target)))

    assert exc.value.code == 2
    assert not target.exists()
    assert "Cannot write" in caplog.text


def test_cli_exits_on_invalid_log_level(
    data_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("LIVEPREVIEW_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as exc:
        cli.main(_args(data_dir))

    assert exc.value.code == 2
