"""Live preview reconciliation of entry updates into query records."""

from __future__ import annotations

from .classify import (
    FieldStrategy,
    ReferenceCollectionStrategy,
    RichTextStrategy,
    ScalarStrategy,
    SingleReferenceStrategy,
    StrategyKind,
    UnhandledArrayStrategy,
    classify_field,
    classify_schema,
    missing_record_keys,
)
from .reconcile import MissingFieldsReporter, ReconcileResult, log_missing_fields, reconcile_entry
from .resolve import ReferenceResolution, resolve_reference, typename_for

__all__ = [
    "FieldStrategy",
    "MissingFieldsReporter",
    "ReconcileResult",
    "ReferenceCollectionStrategy",
    "ReferenceResolution",
    "RichTextStrategy",
    "ScalarStrategy",
    "SingleReferenceStrategy",
    "StrategyKind",
    "UnhandledArrayStrategy",
    "classify_field",
    "classify_schema",
    "log_missing_fields",
    "missing_record_keys",
    "reconcile_entry",
    "resolve_reference",
    "typename_for",
]
