"""Validate an agent-supplied summary or derive one from normalized records."""

import logging
import math
import re
from typing import Any, Optional

from data_enrich.models.record import EnrichedRecord, EnrichmentSummary

from .fields import to_text

logger = logging.getLogger(__name__)

_YES = re.compile("yes", re.IGNORECASE)
_LOW = re.compile("low", re.IGNORECASE)
_HIGH = re.compile("high", re.IGNORECASE)


def is_decision_maker(record: EnrichedRecord) -> bool:
    return bool(_YES.search(record.decision_maker))


def is_low_confidence(record: EnrichedRecord) -> bool:
    return bool(_LOW.search(record.confidence))


def is_high_confidence(record: EnrichedRecord) -> bool:
    return bool(_HIGH.search(record.confidence))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def coerce_count(value: Any, fallback: int) -> int:
    """Non-negative integer from a JSON value; fallback when absent or non-numeric."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return fallback
    else:
        return fallback
    if not math.isfinite(number) or number < 0:
        return fallback
    return int(number)


def derive_summary(records: list[EnrichedRecord]) -> EnrichmentSummary:
    """Compute totals purely from the normalized records."""
    total = len(records)
    high = sum(1 for r in records if is_high_confidence(r))
    rate = f"{_round_half_up(high / total * 100)}%" if total else "0%"
    return EnrichmentSummary(
        total_records=total,
        decision_makers_found=sum(1 for r in records if is_decision_maker(r)),
        low_confidence_count=sum(1 for r in records if is_low_confidence(r)),
        high_confidence_rate=rate,
    )


def build_summary(supplied: Optional[Any], records: list[EnrichedRecord]) -> EnrichmentSummary:
    """
    Prefer the agent's summary when it is an object, coercing each field;
    supplied numbers win over derived totals. Otherwise derive from records.
    """
    if supplied is None:
        return derive_summary(records)
    if not isinstance(supplied, dict):
        logger.warning("Ignoring non-object summary from agent: %r", supplied)
        return derive_summary(records)

    rate = supplied.get("high_confidence_rate")
    return EnrichmentSummary(
        # a supplied 0 is kept; only missing or invalid totals fall back to the record count
        total_records=coerce_count(supplied.get("total_records"), len(records)),
        decision_makers_found=coerce_count(supplied.get("decision_makers_found"), 0),
        low_confidence_count=coerce_count(supplied.get("low_confidence_count"), 0),
        high_confidence_rate=to_text(rate) if rate is not None else "0%",
    )
