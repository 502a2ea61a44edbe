"""Results returned by the upload and agent invocation services."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class UploadResult(BaseModel):
    """Outcome of uploading one file."""

    success: bool = False
    asset_ids: list[str] = Field(default_factory=list)
    error: Optional[str] = None


class AgentResult(BaseModel):
    """Outcome of one agent invocation. `response` is arbitrary JSON."""

    success: bool = False
    response: Any = None
    raw_response: Optional[str] = None
    error: Optional[str] = None

    def envelope(self) -> dict[str, Any]:
        """Plain dict view of the result; `response` is shared, not copied."""
        return {
            "success": self.success,
            "response": self.response,
            "raw_response": self.raw_response,
            "error": self.error,
        }
