"""Raw input row representation before enrichment."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class RawRow(BaseModel):
    """
    One data line from an uploaded CSV.
    Carries the resolved name/company plus every header copied verbatim.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = ""
    company: str = ""

    def get(self, key: str, default: Optional[str] = None) -> Optional[Any]:
        """Return any column by its header text."""
        if key in ("name", "company"):
            return getattr(self, key)
        return (self.model_extra or {}).get(key, default)
