from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, cast

from dotenv import load_dotenv

from livepreview.adapters.contentful import (
    build_reference_map,
    parse_content_type,
    parse_entry_update,
)
from livepreview.adapters.editor import OutboxMessageSink
from livepreview.app import apply_entry_update
from livepreview.config import ConfigurationError, configure_logging, get_preview_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from livepreview.config import PreviewConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str], config: PreviewConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile live preview data")
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Apply an entry update to a GraphQL response record",
    )
    reconcile.add_argument(
        "--content-type",
        type=Path,
        required=True,
        help="JSON file holding the content type of the entry",
    )
    reconcile.add_argument(
        "--record",
        type=Path,
        required=True,
        help="JSON file holding the GraphQL record to update",
    )
    reconcile.add_argument(
        "--update",
        type=Path,
        required=True,
        help="JSON file holding the entry sent by the editor",
    )
    reconcile.add_argument(
        "--references",
        type=Path,
        help="JSON file holding a list of entities referenced by the entry",
    )
    reconcile.add_argument(
        "--locale",
        type=str,
        default=config.locale,
        help="Locale code to read from the entry (default: %(default)s)",
    )
    reconcile.add_argument(
        "--output",
        type=Path,
        help="Write the result to this file instead of stdout",
    )

    return parser.parse_args(list(argv))


def _load_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise ValueError(f"Cannot read {path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def _load_mapping(path: Path) -> Mapping[str, object]:
    data = _load_json(path)
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected a JSON object in {path}")
    return cast(Mapping[str, object], data)


def _load_references(path: Path | None) -> dict[str, Mapping[str, object]]:
    if path is None:
        return {}
    data = _load_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of entities in {path}")
    entities = [
        cast(Mapping[str, object], entity)
        for entity in cast(list[object], data)
        if isinstance(entity, Mapping)
    ]
    return build_reference_map(entities)


def _run_reconcile(args: argparse.Namespace) -> dict[str, object]:
    schema = parse_content_type(_load_mapping(args.content_type))
    record = _load_mapping(args.record)
    update = parse_entry_update(_load_mapping(args.update))
    references = _load_references(args.references)

    sink = OutboxMessageSink()
    result = apply_entry_update(
        schema,
        record,
        update,
        locale=args.locale,
        references=references,
        sink=sink,
    )
    return {
        "data": result.record,
        "messages": [message.to_payload() for message in sink.drain()],
    }


def _write_output(payload: dict[str, object], output: Path | None) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output is None:
        sys.stdout.write(text + "\n")
        return
    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot write {output}: {exc.strerror}") from exc
    log.info("Wrote reconciled record to %s", output)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_preview_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    configure_logging(level=config.log_level)
    parsed_args = _parse_args(args_list, config)

    try:
        if parsed_args.command == "reconcile":
            payload = _run_reconcile(parsed_args)
            _write_output(payload, parsed_args.output)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ValueError:
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
