"""Upload validation and local preview of the selected file."""

from dataclasses import dataclass, field
from pathlib import Path

from data_enrich.config import Settings
from data_enrich.errors import CsvParseError, InputValidationError
from data_enrich.models.raw import RawRow

from .csv_parser import parse_csv

UNKNOWN_ROW_COUNT = -1


@dataclass
class FilePreview:
    """Row count and leading rows of an uploaded file."""

    path: Path
    total_rows: int  # -1 when the agent must parse the file (spreadsheets)
    rows: list[RawRow] = field(default_factory=list)
    all_rows: list[RawRow] = field(default_factory=list, repr=False)


def validate_upload(path: Path, settings: Settings) -> None:
    """Reject files with an unsupported extension or over the size limit."""
    name = path.name.lower()
    if not any(name.endswith(ext.lower()) for ext in settings.accepted_extensions):
        raise InputValidationError(
            "Invalid file format. Please upload a .csv, .xlsx, or .xls file."
        )
    if not path.is_file():
        raise InputValidationError(f"File not found: {path}")
    if path.stat().st_size > settings.max_file_bytes:
        limit_mb = settings.max_file_bytes // (1024 * 1024)
        raise InputValidationError(f"File too large. Maximum size is {limit_mb}MB.")


def read_csv_rows(path: Path) -> list[RawRow]:
    """Read and parse a CSV file; raises CsvParseError when unreadable or empty."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise CsvParseError(f"Error reading file: {e}") from e
    if not text:
        raise CsvParseError("Could not read file contents.")
    rows = parse_csv(text)
    if not rows:
        raise CsvParseError(
            "No data rows found. Make sure your CSV has Name and Company columns."
        )
    return rows


def preview_file(path: str | Path, settings: Settings) -> FilePreview:
    """Validate the file and, for CSV, parse it for a preview."""
    path = Path(path)
    validate_upload(path, settings)
    if path.suffix.lower() != ".csv":
        return FilePreview(path=path, total_rows=UNKNOWN_ROW_COUNT)
    rows = read_csv_rows(path)
    return FilePreview(
        path=path,
        total_rows=len(rows),
        rows=rows[: settings.preview_rows],
        all_rows=rows,
    )
