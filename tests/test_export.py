"""Tests for CSV export of enriched records."""

from pathlib import Path

from data_enrich.ingest import split_csv_line
from data_enrich.models.record import EnrichedRecord
from data_enrich.query import EXPORT_HEADERS, export_csv, to_csv_text


class TestToCsvText:
    """Tests for to_csv_text."""

    def test_header_and_quoting(self) -> None:
        """Fixed header; every field is quoted."""
        text = to_csv_text([EnrichedRecord(name="Jane", company="Acme", revenue="$10M")])
        lines = text.split("\n")
        assert lines[0] == "Name,Company,Revenue,Sector,Decision Maker,Job Title,Confidence"
        assert lines[1] == '"Jane","Acme","$10M","N/A","N/A","N/A","Low"'

    def test_embedded_quotes_and_commas(self) -> None:
        """Quotes are doubled and commas stay inside the field."""
        text = to_csv_text([EnrichedRecord(company='Acme, Inc. "Global"')])
        row = text.split("\n")[1]
        assert '"Acme, Inc. ""Global"""' in row
        assert split_csv_line(row)[1] == 'Acme, Inc. "Global"'

    def test_rows_joined_with_newline(self) -> None:
        """One line per record, no trailing newline."""
        text = to_csv_text([EnrichedRecord(name="a"), EnrichedRecord(name="b")])
        assert text.count("\n") == 2
        assert not text.endswith("\n")

    def test_reads_back_with_csv_reader(self) -> None:
        """Output is standard CSV, including fields with line breaks."""
        import csv
        import io

        record = EnrichedRecord(name="Jane", job_title="CTO\nco-founder")
        rows = list(csv.reader(io.StringIO(to_csv_text([record]))))
        assert rows[0] == list(EXPORT_HEADERS)
        assert rows[1][:2] == ["Jane", "N/A"]
        assert rows[1][5] == "CTO\nco-founder"

    def test_empty(self) -> None:
        """Zero records produce no text at all."""
        assert to_csv_text([]) is None

    def test_header_constant(self) -> None:
        """Seven export columns."""
        assert len(EXPORT_HEADERS) == 7


class TestExportCsv:
    """Tests for export_csv."""

    def test_writes_file(self, tmp_path: Path) -> None:
        """Records are written as UTF-8 text."""
        path = tmp_path / "enriched_data.csv"
        written = export_csv([EnrichedRecord(name="José", company="Ñandú SpA")], path)
        assert written == path
        assert "José" in path.read_text(encoding="utf-8")

    def test_zero_rows_writes_nothing(self, tmp_path: Path) -> None:
        """Exporting zero rows produces no file."""
        path = tmp_path / "enriched_data.csv"
        assert export_csv([], path) is None
        assert not path.exists()
