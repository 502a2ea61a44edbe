"""Map heterogeneous raw agent records onto the canonical EnrichedRecord."""

import logging
from typing import Any, Iterable

from data_enrich.models.record import EnrichedRecord

from .fields import FIELD_TABLE, resolve_field

logger = logging.getLogger(__name__)


def normalize_record(raw: Any) -> EnrichedRecord:
    """Normalize one raw record. Non-object entries yield an all-default record."""
    if not isinstance(raw, dict):
        logger.warning("Non-object enrichment entry normalized to defaults: %r", raw)
        raw = {}
    return EnrichedRecord(**{spec.name: resolve_field(raw, spec) for spec in FIELD_TABLE})


def normalize_records(raw_records: Iterable[Any]) -> list[EnrichedRecord]:
    """Normalize every raw record, preserving order (one output per input)."""
    return [normalize_record(r) for r in raw_records]
