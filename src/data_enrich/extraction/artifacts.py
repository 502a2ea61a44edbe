"""Locate generated output files referenced in an agent result envelope."""

import logging
from typing import Any

from data_enrich.models.record import ArtifactFile

from .deep import ARTIFACTS_KEY, coerce_artifacts
from .json_bridge import JsonDecodeFailure, parse_llm_json

logger = logging.getLogger(__name__)

MODULE_OUTPUTS_KEY = "module_outputs"


def _module_files(container: Any) -> list[ArtifactFile]:
    """Artifacts at container.module_outputs.artifact_files, or []."""
    if not isinstance(container, dict):
        return []
    outputs = container.get(MODULE_OUTPUTS_KEY)
    if not isinstance(outputs, dict):
        return []
    return coerce_artifacts(outputs.get(ARTIFACTS_KEY))


def _probe(container: Any) -> list[ArtifactFile]:
    """Check the top-level path, then the same path under `response`."""
    files = _module_files(container)
    if files:
        return files
    if isinstance(container, dict):
        return _module_files(container.get("response"))
    return []


def locate_artifact_files(envelope: Any) -> list[ArtifactFile]:
    """
    Return the first non-empty artifact list found in the envelope, falling
    back to the decoded raw_response. Returns [] when none is present.
    """
    files = _probe(envelope)
    if files:
        return files

    raw = envelope.get("raw_response") if isinstance(envelope, dict) else None
    if isinstance(raw, str) and raw.strip():
        try:
            decoded = parse_llm_json(raw)
        except JsonDecodeFailure:
            logger.debug("raw_response not decodable while locating artifacts")
            return []
        files = _probe(decoded)
        if files:
            return files
    return []
