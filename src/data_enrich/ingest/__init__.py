"""CSV ingestion and upload checks."""

from .csv_parser import parse_csv, split_csv_line
from .upload import FilePreview, preview_file, read_csv_rows, validate_upload

__all__ = [
    "FilePreview",
    "parse_csv",
    "preview_file",
    "read_csv_rows",
    "split_csv_line",
    "validate_upload",
]
