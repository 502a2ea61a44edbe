"""Filter and sort canonical records for display and export."""

from enum import Enum
from typing import Callable, Iterable

from data_enrich.models.record import RECORD_FIELDS, EnrichedRecord
from data_enrich.normalize.summary import is_decision_maker, is_low_confidence


class FilterMode(str, Enum):
    ALL = "all"
    LOW_CONFIDENCE = "low_confidence"
    DECISION_MAKERS = "decision_makers"


class SortDir(str, Enum):
    ASC = "asc"
    DESC = "desc"


SORT_FIELDS: tuple[str, ...] = RECORD_FIELDS

_PREDICATES: dict[FilterMode, Callable[[EnrichedRecord], bool]] = {
    FilterMode.LOW_CONFIDENCE: is_low_confidence,
    FilterMode.DECISION_MAKERS: is_decision_maker,
}


def filter_records(records: Iterable[EnrichedRecord], mode: FilterMode | str = FilterMode.ALL) -> list[EnrichedRecord]:
    """Records matching the filter mode, in their original relative order."""
    mode = FilterMode(mode)
    predicate = _PREDICATES.get(mode)
    if predicate is None:
        return list(records)
    return [r for r in records if predicate(r)]


def sort_records(
    records: Iterable[EnrichedRecord],
    field: str = "name",
    direction: SortDir | str = SortDir.ASC,
) -> list[EnrichedRecord]:
    """Stable case-insensitive sort on one field; equal keys keep prior order."""
    if field not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field: {field}. Available: {list(SORT_FIELDS)}")
    reverse = SortDir(direction) is SortDir.DESC
    return sorted(records, key=lambda r: getattr(r, field).lower(), reverse=reverse)


def apply_view(
    records: Iterable[EnrichedRecord],
    mode: FilterMode | str = FilterMode.ALL,
    field: str = "name",
    direction: SortDir | str = SortDir.ASC,
) -> list[EnrichedRecord]:
    """Filter then sort."""
    return sort_records(filter_records(records, mode), field, direction)
