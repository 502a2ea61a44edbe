"""Canonical enrichment records, run summary and output file references."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

NOT_AVAILABLE = "N/A"
DEFAULT_CONFIDENCE = "Low"

RECORD_FIELDS: tuple[str, ...] = (
    "name",
    "company",
    "revenue",
    "sector",
    "decision_maker",
    "job_title",
    "confidence",
)


class EnrichedRecord(BaseModel):
    """Canonical enriched record; every field is always a string."""

    model_config = ConfigDict(frozen=True)

    name: str = NOT_AVAILABLE
    company: str = NOT_AVAILABLE
    revenue: str = NOT_AVAILABLE
    sector: str = NOT_AVAILABLE
    decision_maker: str = NOT_AVAILABLE
    job_title: str = NOT_AVAILABLE
    confidence: str = DEFAULT_CONFIDENCE


class EnrichmentSummary(BaseModel):
    """Per-run totals, supplied by the agent or derived from records."""

    total_records: int = Field(default=0, ge=0)
    decision_makers_found: int = Field(default=0, ge=0)
    low_confidence_count: int = Field(default=0, ge=0)
    high_confidence_rate: str = "0%"


class ArtifactFile(BaseModel):
    """Reference to a generated output file hosted by the agent platform."""

    model_config = ConfigDict(extra="ignore")

    file_url: str
    name: str = ""
    format_type: str = ""

    @classmethod
    def coerce(cls, value: object) -> Optional["ArtifactFile"]:
        """Build from an untyped agent value; None when it has no usable URL."""
        if not isinstance(value, dict):
            return None
        url = value.get("file_url")
        if not isinstance(url, str) or not url.strip():
            return None
        name = value.get("name")
        fmt = value.get("format_type")
        return cls(
            file_url=url,
            name=name if isinstance(name, str) else "",
            format_type=fmt if isinstance(fmt, str) else "",
        )
