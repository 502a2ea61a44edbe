"""Serialize records to the enriched CSV export format."""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, Optional

from data_enrich.models.record import RECORD_FIELDS, EnrichedRecord

logger = logging.getLogger(__name__)

EXPORT_HEADERS: tuple[str, ...] = (
    "Name",
    "Company",
    "Revenue",
    "Sector",
    "Decision Maker",
    "Job Title",
    "Confidence",
)


def to_csv_text(records: Iterable[EnrichedRecord]) -> Optional[str]:
    """CSV text with a fixed header, every field quoted; None when there are no rows."""
    rows = [[getattr(r, f) for f in RECORD_FIELDS] for r in records]
    if not rows:
        return None
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(EXPORT_HEADERS)
    csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n").writerows(rows)
    # no trailing newline after the last row
    return buf.getvalue()[:-1]


def export_csv(records: Iterable[EnrichedRecord], path: str | Path) -> Optional[Path]:
    """Write records to path. Returns None and writes nothing when there are no rows."""
    text = to_csv_text(records)
    if text is None:
        logger.info("No records to export; skipping %s", path)
        return None
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    return path
