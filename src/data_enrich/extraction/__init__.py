"""Extraction of enrichment data from unstructured agent responses."""

from .artifacts import locate_artifact_files
from .deep import (
    ExtractionResult,
    candidate_views,
    extract_enrichment,
    extract_from_views,
)
from .json_bridge import JsonDecodeFailure, parse_llm_json

__all__ = [
    "ExtractionResult",
    "JsonDecodeFailure",
    "candidate_views",
    "extract_enrichment",
    "extract_from_views",
    "locate_artifact_files",
    "parse_llm_json",
]
