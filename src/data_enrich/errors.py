"""Exception hierarchy for enrichment runs."""

from typing import Optional


class EnrichmentError(Exception):
    """Base class for reported, recoverable enrichment failures."""


class InputValidationError(EnrichmentError):
    """Uploaded file rejected before any work starts (extension, size, missing)."""


class CsvParseError(EnrichmentError):
    """Delimited text could not be read or contained no data rows."""


class UpstreamError(EnrichmentError):
    """Upload or agent service reported failure."""

    def __init__(self, stage: str, message: Optional[str] = None):
        self.stage = stage
        self.upstream_message = message or "Unknown error"
        prefix = "File upload failed" if stage == "upload" else "Enrichment failed"
        super().__init__(f"{prefix}: {self.upstream_message}")


class NoEnrichmentDataError(EnrichmentError):
    """Agent succeeded but neither records nor a textual response were found."""
