"""Pipeline orchestration: validate → upload → invoke agent → extract → normalize."""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from data_enrich.client.agent import AgentService
from data_enrich.config import Settings
from data_enrich.errors import EnrichmentError, NoEnrichmentDataError, UpstreamError
from data_enrich.extraction import candidate_views, extract_from_views, locate_artifact_files
from data_enrich.ingest import preview_file
from data_enrich.models.record import ArtifactFile, EnrichedRecord, EnrichmentSummary
from data_enrich.models.service import AgentResult
from data_enrich.normalize import build_summary, normalize_records
from data_enrich.prompt import build_enrichment_prompt
from data_enrich.query.session import EnrichmentSession
from data_enrich.samples import SAMPLE_ENRICHED, SAMPLE_SUMMARY

logger = logging.getLogger(__name__)

UNPARSED_STATUS = (
    "Agent responded but could not parse structured enrichment data. "
    "Check the response below."
)
NO_DATA_ERROR = (
    "No enrichment data was returned. The agent may not have processed "
    "the file correctly. Please try again."
)


class EnrichmentRun(BaseModel):
    """Everything one enrichment run produced, including how it ended."""

    records: list[EnrichedRecord] = Field(default_factory=list)
    summary: Optional[EnrichmentSummary] = None
    artifacts: list[ArtifactFile] = Field(default_factory=list)
    status_message: Optional[str] = None
    raw_response_text: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def session(self) -> EnrichmentSession:
        """Fresh view state over this run's results."""
        return EnrichmentSession(
            records=list(self.records),
            summary=self.summary,
            artifacts=list(self.artifacts),
        )


def fallback_response_text(envelope: Any) -> Optional[str]:
    """Best-effort agent text when no records were found: message, result, result.text."""
    if not isinstance(envelope, dict):
        return None
    response = envelope.get("response")
    if not isinstance(response, dict):
        return None

    message = response.get("message")
    if message is not None and message != "":
        if isinstance(message, str):
            return message
        return json.dumps(message, indent=2, ensure_ascii=False, default=str)

    result = response.get("result")
    if isinstance(result, str) and result:
        return result
    if isinstance(result, dict) and isinstance(result.get("text"), str) and result["text"]:
        return result["text"]
    return None


def process_agent_result(result: AgentResult, *, max_depth: int = 10) -> EnrichmentRun:
    """
    Turn a successful agent result into a run.
    Raises NoEnrichmentDataError when neither records nor fallback text exist.
    """
    envelope = result.envelope()
    extracted = extract_from_views(candidate_views(envelope), max_depth=max_depth)
    logger.debug("Extracted enriched records: %d", len(extracted.enriched))

    records = normalize_records(extracted.enriched)
    artifacts = locate_artifact_files(envelope)

    if records:
        return EnrichmentRun(
            records=records,
            summary=build_summary(extracted.summary, records),
            artifacts=artifacts,
            status_message=f"Successfully enriched {len(records)} records.",
        )

    text = fallback_response_text(envelope)
    if not text:
        raise NoEnrichmentDataError(NO_DATA_ERROR)
    return EnrichmentRun(
        summary=build_summary(extracted.summary, records),
        artifacts=artifacts,
        status_message=UNPARSED_STATUS,
        raw_response_text=text,
    )


def sample_run() -> EnrichmentRun:
    """Canned run over the bundled sample data; no services are called."""
    return EnrichmentRun(
        records=list(SAMPLE_ENRICHED),
        summary=SAMPLE_SUMMARY.model_copy(),
        status_message="Sample enrichment complete.",
    )


def _enrich(path: Path, service: AgentService, settings: Settings) -> EnrichmentRun:
    preview = preview_file(path, settings)

    upload = service.upload_file(path)
    if not upload.success or not upload.asset_ids:
        raise UpstreamError("upload", upload.error)

    prompt = build_enrichment_prompt(preview.all_rows)
    count = preview.total_rows if preview.total_rows > 0 else "the"
    logger.info("Enriching %s records... This may take a few minutes.", count)

    result = service.call_agent(prompt, settings.agent_id, upload.asset_ids)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Raw agent result: %s", repr(result.envelope())[:2000])
    if not result.success:
        raise UpstreamError("agent", result.error)

    return process_agent_result(result, max_depth=settings.max_depth)


def run_enrichment(
    path: Optional[str | Path],
    service: Optional[AgentService],
    settings: Optional[Settings] = None,
    *,
    sample: bool = False,
) -> EnrichmentRun:
    """
    Run one enrichment end to end. Never raises for data or upstream problems:
    failures come back as a run with `error` set.
    """
    settings = settings or Settings()
    if sample:
        return sample_run()
    if path is None or service is None:
        return EnrichmentRun(error="No file selected.")

    try:
        return _enrich(Path(path), service, settings)
    except EnrichmentError as e:
        logger.warning("Enrichment run failed: %s", e)
        return EnrichmentRun(error=str(e))
    except Exception as e:
        logger.exception("Unexpected error during enrichment")
        return EnrichmentRun(error=f"An unexpected error occurred: {e}")
