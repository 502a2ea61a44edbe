"""Data models for input rows, enriched records and service results."""

from data_enrich.models.raw import RawRow
from data_enrich.models.record import (
    DEFAULT_CONFIDENCE,
    NOT_AVAILABLE,
    RECORD_FIELDS,
    ArtifactFile,
    EnrichedRecord,
    EnrichmentSummary,
)
from data_enrich.models.service import AgentResult, UploadResult

__all__ = [
    "AgentResult",
    "ArtifactFile",
    "DEFAULT_CONFIDENCE",
    "EnrichedRecord",
    "EnrichmentSummary",
    "NOT_AVAILABLE",
    "RECORD_FIELDS",
    "RawRow",
    "UploadResult",
]
