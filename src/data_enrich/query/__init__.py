"""Filtering, sorting and CSV export of enriched records."""

from .engine import SORT_FIELDS, FilterMode, SortDir, apply_view, filter_records, sort_records
from .export import EXPORT_HEADERS, export_csv, to_csv_text
from .session import EnrichmentSession

__all__ = [
    "EXPORT_HEADERS",
    "EnrichmentSession",
    "FilterMode",
    "SORT_FIELDS",
    "SortDir",
    "apply_view",
    "export_csv",
    "filter_records",
    "sort_records",
    "to_csv_text",
]
