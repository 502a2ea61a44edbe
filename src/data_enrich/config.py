"""Runtime settings for the agent services and upload limits."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

ENV_PREFIX = "DATA_ENRICH_"

# env var suffix -> settings field
_ENV_FIELDS: dict[str, str] = {
    "API_URL": "api_base_url",
    "API_KEY": "api_key",
    "AGENT_ID": "agent_id",
    "TIMEOUT": "timeout",
    "MAX_FILE_BYTES": "max_file_bytes",
}


class Settings(BaseModel):
    """Agent endpoint, credentials and input limits."""

    api_base_url: str = Field(default="http://localhost:8000", description="Agent platform base URL")
    api_key: Optional[str] = None
    agent_id: str = Field(default="", description="Enrichment coordinator agent identifier")
    upload_path: str = "/upload"
    agent_path: str = "/agent"
    timeout: float = 300.0

    max_file_bytes: int = 10 * 1024 * 1024
    accepted_extensions: list[str] = Field(default_factory=lambda: [".csv", ".xlsx", ".xls"])
    max_depth: int = Field(default=10, ge=0, description="Recursion cap for response search")
    preview_rows: int = 10
    export_filename: str = "enriched_data.csv"

    @classmethod
    def from_env(cls, base: Optional[dict] = None) -> "Settings":
        """Build settings from DATA_ENRICH_* environment variables over `base`."""
        data = dict(base or {})
        for suffix, field in _ENV_FIELDS.items():
            value = os.environ.get(ENV_PREFIX + suffix)
            if value:
                data[field] = value
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load from YAML. Supports nested (agent/limits) or flat structure; env wins."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        agent = data.get("agent", {}) or {}
        limits = data.get("limits", {}) or {}

        flat: dict = {}
        for key in cls.model_fields:
            for section in (agent, limits, data):
                if key in section and section[key] is not None:
                    flat[key] = section[key]
                    break
        if "base_url" in agent and "api_base_url" not in flat:
            flat["api_base_url"] = agent["base_url"]
        return cls.from_env(flat)
