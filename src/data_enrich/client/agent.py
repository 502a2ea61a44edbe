"""HTTP client for the agent platform's upload and agent invocation endpoints."""

import logging
import mimetypes
from pathlib import Path
from typing import Optional, Protocol

import httpx

from data_enrich.config import Settings
from data_enrich.models.service import AgentResult, UploadResult

logger = logging.getLogger(__name__)


class AgentService(Protocol):
    """What the pipeline needs from the agent platform."""

    def upload_file(self, path: Path) -> UploadResult: ...

    def call_agent(self, prompt: str, agent_id: str, assets: list[str]) -> AgentResult: ...


def _error_text(e: Exception) -> str:
    if isinstance(e, httpx.HTTPStatusError):
        detail = e.response.text[:200].strip()
        return f"HTTP {e.response.status_code}" + (f": {detail}" if detail else "")
    return str(e) or e.__class__.__name__


class AgentClient:
    """
    Talks to the agent platform over HTTP.
    Failures are returned as success=False results; nothing is retried.
    """

    DEFAULT_HEADERS = {
        "User-Agent": "data-enrich/0.1",
        "Accept": "application/json",
    }

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        self.settings = settings
        headers = dict(self.DEFAULT_HEADERS)
        if settings.api_key:
            headers["Authorization"] = f"Bearer {settings.api_key}"
        self._client = client or httpx.Client(
            base_url=settings.api_base_url.rstrip("/"),
            timeout=settings.timeout,
            follow_redirects=True,
            headers=headers,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AgentClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def upload_file(self, path: Path) -> UploadResult:
        """POST the file as multipart form data; returns asset ids on success."""
        path = Path(path)
        mime = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        try:
            with path.open("rb") as fh:
                resp = self._client.post(
                    self.settings.upload_path,
                    files={"files": (path.name, fh, mime)},
                )
            resp.raise_for_status()
            return UploadResult.model_validate(resp.json())
        except (httpx.HTTPError, OSError, ValueError) as e:
            logger.warning("Upload of %s failed: %s", path.name, e)
            return UploadResult(success=False, error=_error_text(e))

    def call_agent(self, prompt: str, agent_id: str, assets: list[str]) -> AgentResult:
        """POST the prompt to the agent; the response body is returned unvalidated."""
        payload = {"message": prompt, "agent_id": agent_id, "assets": list(assets)}
        try:
            resp = self._client.post(self.settings.agent_path, json=payload)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Agent %s call failed: %s", agent_id, e)
            return AgentResult(success=False, error=_error_text(e))

        try:
            body = resp.json()
        except ValueError:
            # Non-JSON body: keep it as raw text for the extraction fallback
            return AgentResult(success=True, response=None, raw_response=resp.text)
        if not isinstance(body, dict) or "success" not in body:
            return AgentResult(success=True, response=body, raw_response=resp.text)
        return AgentResult(
            success=bool(body.get("success")),
            response=body.get("response"),
            raw_response=body.get("raw_response") if isinstance(body.get("raw_response"), str) else None,
            error=body.get("error") if isinstance(body.get("error"), str) else None,
        )
