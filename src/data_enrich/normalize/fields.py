"""Canonical field table: accepted source keys and defaults per field."""

import json
from dataclasses import dataclass
from typing import Any, Optional

from data_enrich.models.record import DEFAULT_CONFIDENCE, NOT_AVAILABLE


@dataclass(frozen=True)
class FieldSpec:
    """One canonical field, the source keys it accepts (in order) and its default."""

    name: str
    aliases: tuple[str, ...]
    default: str = NOT_AVAILABLE


FIELD_TABLE: tuple[FieldSpec, ...] = (
    FieldSpec("name", ("name", "person_name", "contact_name", "full_name")),
    FieldSpec("company", ("company", "company_name", "organization")),
    FieldSpec("revenue", ("revenue", "company_revenue", "annual_revenue")),
    FieldSpec("sector", ("sector", "industry", "company_sector")),
    FieldSpec("decision_maker", ("decision_maker", "is_decision_maker", "decisionMaker")),
    FieldSpec("job_title", ("job_title", "title", "role", "position", "jobTitle")),
    # Missing confidence must not read as trustworthy
    FieldSpec("confidence", ("confidence", "confidence_level", "confidenceLevel"), DEFAULT_CONFIDENCE),
)


def to_text(value: Any) -> str:
    """Render an arbitrary JSON value as display text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return ",".join("" if v is None else to_text(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def resolve_field(raw: dict, spec: FieldSpec) -> str:
    """First alias present with a non-null value, as text; else the field default."""
    for alias in spec.aliases:
        value: Optional[Any] = raw.get(alias)
        if value is not None:
            return to_text(value)
    return spec.default
