"""Pytest fixtures for data-enrich tests."""

import csv
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from data_enrich.config import Settings
from data_enrich.models.service import AgentResult, UploadResult


def _build_csv(rows: list[dict]) -> str:
    """Build CSV string from list of row dicts."""
    if not rows:
        return ""
    out = StringIO()
    writer = csv.DictWriter(out, fieldnames=rows[0].keys())
    writer.writeheader()
    writer.writerows(rows)
    return out.getvalue()


@pytest.fixture
def jane_record() -> dict:
    """Fully populated raw record as the agent is asked to return it."""
    return {
        "name": "Jane Doe",
        "company": "Acme Corp",
        "revenue": "$10M",
        "sector": "SaaS",
        "decision_maker": "Yes",
        "job_title": "CTO",
        "confidence": "High",
    }


@pytest.fixture
def agent_payload(jane_record: dict) -> dict:
    """Agent payload in the exact contract shape."""
    return {
        "enriched_data": [jane_record],
        "summary": {
            "total_records": 1,
            "decision_makers_found": 1,
            "low_confidence_count": 0,
            "high_confidence_rate": "100%",
        },
    }


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake agent platform."""
    return Settings(api_base_url="https://agents.test", agent_id="agent-1", api_key="secret")


@pytest.fixture
def contacts_csv(tmp_path: Path) -> Path:
    """Small contacts CSV on disk."""
    path = tmp_path / "contacts.csv"
    path.write_text(
        _build_csv(
            [
                {"Full Name": "Jane Doe", "Organization": "Acme Corp", "Email": "jane@acme.test"},
                {"Full Name": "John Roe", "Organization": "Globex", "Email": "john@globex.test"},
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def fake_service(agent_payload: dict) -> MagicMock:
    """Agent service whose upload succeeds and whose agent returns agent_payload."""
    service = MagicMock()
    service.upload_file.return_value = UploadResult(success=True, asset_ids=["asset-1"])
    service.call_agent.return_value = AgentResult(
        success=True,
        response={"status": "success", "result": agent_payload},
    )
    return service
