"""
Recursive search for enrichment records inside an unknown agent response.

The agent gives no schema guarantee: records may sit at the top level, under
generic wrapper keys, inside JSON-encoded strings, or as a bare array. Each
level is resolved in a fixed priority order and short-circuits on the first
hit:

1. text      -> lenient JSON decode, recurse into the decoded object/array
2. contract  -> object with a non-empty ``enriched_data`` array
3. pattern   -> array whose first element looks like a subject + enrichment
4. wrappers  -> result/response/data/output/content/message/text
5. key scan  -> literal ``enriched_data`` array, even when empty
6. brute     -> every other object/array value, in enumeration order

Recursion fails closed once depth exceeds the configured cap.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from data_enrich.models.record import ArtifactFile

from .json_bridge import JsonDecodeFailure, parse_llm_json

logger = logging.getLogger(__name__)

MAX_DEPTH = 10

ENRICHED_KEY = "enriched_data"
SUMMARY_KEY = "summary"
ARTIFACTS_KEY = "artifact_files"

WRAPPER_KEYS: tuple[str, ...] = ("result", "response", "data", "output", "content", "message", "text")
SUBJECT_KEYS: tuple[str, ...] = ("name", "company")
ENRICHMENT_KEYS: tuple[str, ...] = ("revenue", "sector", "decision_maker")


@dataclass
class ExtractionResult:
    """Raw records, raw summary and artifact files located in a response."""

    enriched: list[Any] = field(default_factory=list)
    summary: Any = None
    artifacts: list[ArtifactFile] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return len(self.enriched) > 0


def coerce_artifacts(value: Any) -> list[ArtifactFile]:
    """Convert an untyped artifact array into ArtifactFiles, dropping unusable entries."""
    if not isinstance(value, list):
        return []
    files: list[ArtifactFile] = []
    for item in value:
        artifact = ArtifactFile.coerce(item)
        if artifact is None:
            logger.warning("Dropping artifact entry without file_url: %r", item)
            continue
        files.append(artifact)
    return files


def looks_like_records(value: Any) -> bool:
    """True if value is a non-empty array whose first element has subject and enrichment keys."""
    if not isinstance(value, list) or not value:
        return False
    first = value[0]
    if not isinstance(first, dict):
        return False
    return any(k in first for k in SUBJECT_KEYS) and any(k in first for k in ENRICHMENT_KEYS)


def _children(value: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(value, dict):
        return value.items()
    return enumerate(value)


def extract_enrichment(value: Any, depth: int = 0, *, max_depth: int = MAX_DEPTH) -> ExtractionResult:
    """Locate enrichment records, summary and artifacts anywhere inside value."""
    if value is None or depth > max_depth:
        if depth > max_depth:
            logger.debug("Extraction depth limit %d reached", max_depth)
        return ExtractionResult()

    if isinstance(value, str):
        try:
            parsed = parse_llm_json(value)
        except JsonDecodeFailure:
            return ExtractionResult()
        if isinstance(parsed, (dict, list)):
            return extract_enrichment(parsed, depth + 1, max_depth=max_depth)
        return ExtractionResult()

    if not isinstance(value, (dict, list)):
        return ExtractionResult()

    if isinstance(value, dict):
        records = value.get(ENRICHED_KEY)
        if isinstance(records, list) and records:
            return ExtractionResult(
                enriched=records,
                summary=value.get(SUMMARY_KEY),
                artifacts=coerce_artifacts(value.get(ARTIFACTS_KEY)),
            )

    if looks_like_records(value):
        return ExtractionResult(enriched=value)

    if isinstance(value, dict):
        for key in WRAPPER_KEYS:
            if value.get(key) is not None:
                inner = extract_enrichment(value[key], depth + 1, max_depth=max_depth)
                if inner.found:
                    return inner

        for key in value:
            if key == ENRICHED_KEY and isinstance(value[key], list):
                return ExtractionResult(enriched=value[key], summary=value.get(SUMMARY_KEY))

    for key, child in _children(value):
        if isinstance(value, dict) and key in WRAPPER_KEYS:
            continue
        if isinstance(child, (dict, list)):
            inner = extract_enrichment(child, depth + 1, max_depth=max_depth)
            if inner.found:
                return inner

    return ExtractionResult()


def candidate_views(envelope: Any) -> list[Any]:
    """
    Views of an agent result to search, in priority order:
    response.result, response, the envelope itself, then decoded raw_response.
    """
    if not isinstance(envelope, dict):
        return [envelope] if envelope is not None else []

    views: list[Any] = []
    response = envelope.get("response")
    if isinstance(response, dict):
        views.append(response.get("result"))
    views.append(response)
    views.append(envelope)

    raw = envelope.get("raw_response")
    if isinstance(raw, str):
        try:
            views.append(parse_llm_json(raw))
        except JsonDecodeFailure:
            logger.debug("raw_response did not decode as JSON")
    return [v for v in views if v]


def extract_from_views(views: Iterable[Any], *, max_depth: int = MAX_DEPTH) -> ExtractionResult:
    """Try each view in order; the first one yielding records wins."""
    for idx, view in enumerate(views):
        if not view:
            continue
        result = extract_enrichment(view, max_depth=max_depth)
        if result.found:
            logger.debug("Enrichment records found in view %d (%d records)", idx, len(result.enriched))
            return result
    return ExtractionResult()
