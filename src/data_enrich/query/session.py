"""Per-run view state: current records plus the selected filter and sort."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from data_enrich.models.record import ArtifactFile, EnrichedRecord, EnrichmentSummary

from .engine import SORT_FIELDS, FilterMode, SortDir, apply_view
from .export import export_csv


class EnrichmentSession(BaseModel):
    """Records of one enrichment run and how they are currently presented."""

    records: list[EnrichedRecord] = Field(default_factory=list)
    summary: Optional[EnrichmentSummary] = None
    artifacts: list[ArtifactFile] = Field(default_factory=list)

    filter_mode: FilterMode = FilterMode.ALL
    sort_field: str = "name"
    sort_dir: SortDir = SortDir.ASC

    @property
    def primary_artifact(self) -> Optional[ArtifactFile]:
        return self.artifacts[0] if self.artifacts else None

    def set_filter(self, mode: FilterMode | str) -> None:
        self.filter_mode = FilterMode(mode)

    def toggle_sort(self, field: str) -> None:
        """Flip direction when field is already selected, else select it ascending."""
        if field not in SORT_FIELDS:
            raise ValueError(f"Unknown sort field: {field}")
        if self.sort_field == field:
            self.sort_dir = SortDir.DESC if self.sort_dir is SortDir.ASC else SortDir.ASC
        else:
            self.sort_field = field
            self.sort_dir = SortDir.ASC

    def view(self) -> list[EnrichedRecord]:
        return apply_view(self.records, self.filter_mode, self.sort_field, self.sort_dir)

    def export(self, path: str | Path) -> Optional[Path]:
        """Write the current view; None when it is empty."""
        return export_csv(self.view(), path)

    def reset(self) -> None:
        """Clear results and restore default filter/sort."""
        self.records = []
        self.summary = None
        self.artifacts = []
        self.filter_mode = FilterMode.ALL
        self.sort_field = "name"
        self.sort_dir = SortDir.ASC
