"""Normalization of raw agent records and summaries."""

from .fields import FIELD_TABLE, FieldSpec, resolve_field, to_text
from .records import normalize_record, normalize_records
from .summary import build_summary, derive_summary

__all__ = [
    "FIELD_TABLE",
    "FieldSpec",
    "build_summary",
    "derive_summary",
    "normalize_record",
    "normalize_records",
    "resolve_field",
    "to_text",
]
