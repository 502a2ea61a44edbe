"""Tests for the command-line interface."""

import json
import sys
from pathlib import Path

import pytest

from data_enrich.cli.main import main


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["data-enrich", *argv])
    main()


class TestCli:
    """Tests for CLI subcommands."""

    def test_preview(self, monkeypatch: pytest.MonkeyPatch, capsys, contacts_csv: Path) -> None:
        """preview prints row count and rows."""
        _run(monkeypatch, "preview", str(contacts_csv))
        out = json.loads(capsys.readouterr().out)
        assert out["total_rows"] == 2
        assert out["preview"][0]["name"] == "Jane Doe"
        assert out["preview"][0]["Email"] == "jane@acme.test"

    def test_preview_invalid(self, monkeypatch: pytest.MonkeyPatch, capsys, tmp_path: Path) -> None:
        """preview exits 1 with the validation message."""
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "preview", str(path))
        assert exc.value.code == 1
        assert "Invalid file format" in capsys.readouterr().err

    def test_preview_sample(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """preview --sample shows the bundled rows without reading a file."""
        _run(monkeypatch, "preview", "--sample")
        out = json.loads(capsys.readouterr().out)
        assert out["file"] == "sample"
        assert out["total_rows"] == 5
        assert out["preview"][0] == {"name": "Sarah Chen", "company": "TechFlow Inc"}

    def test_preview_without_file(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """preview with neither a file nor --sample exits 1."""
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "preview")
        assert exc.value.code == 1
        assert "No file selected." in capsys.readouterr().err

    def test_enrich_sample(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """enrich --sample writes the run and the CSV export."""
        run_path = tmp_path / "run.json"
        csv_path = tmp_path / "enriched_data.csv"
        _run(monkeypatch, "enrich", "--sample", "--output", str(run_path), "--export", str(csv_path))
        run = json.loads(run_path.read_text())
        assert len(run["records"]) == 5
        assert run["summary"]["high_confidence_rate"] == "60%"
        assert csv_path.read_text().startswith("Name,Company,Revenue")

    def test_extract_then_export(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, agent_payload: dict
    ) -> None:
        """extract on a saved agent result feeds export."""
        saved = tmp_path / "agent_result.json"
        saved.write_text(json.dumps({"success": True, "response": {"result": json.dumps(agent_payload)}}))
        run_path = tmp_path / "run.json"
        _run(monkeypatch, "extract", str(saved), "--output", str(run_path))
        assert json.loads(run_path.read_text())["records"][0]["name"] == "Jane Doe"

        csv_path = tmp_path / "dm.csv"
        _run(
            monkeypatch,
            "export",
            str(run_path),
            "--filter",
            "decision_makers",
            "--sort",
            "company",
            "--desc",
            "--output",
            str(csv_path),
        )
        lines = csv_path.read_text().split("\n")
        assert lines[1].startswith('"Jane Doe","Acme Corp"')

    def test_export_empty_view(self, monkeypatch: pytest.MonkeyPatch, capsys, tmp_path: Path) -> None:
        """Exporting an empty view exits 1 and writes nothing."""
        run_path = tmp_path / "run.json"
        run_path.write_text(json.dumps({"records": [{"name": "A", "decision_maker": "No"}]}))
        csv_path = tmp_path / "out.csv"
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "export", str(run_path), "--filter", "decision_makers", "--output", str(csv_path))
        assert exc.value.code == 1
        assert "No records to export." in capsys.readouterr().err
        assert not csv_path.exists()

    def test_extract_hard_miss(self, monkeypatch: pytest.MonkeyPatch, capsys, tmp_path: Path) -> None:
        """A result with nothing usable exits 1."""
        saved = tmp_path / "agent_result.json"
        saved.write_text(json.dumps({"success": True, "response": {"status": "ok"}}))
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, "extract", str(saved))
        assert exc.value.code == 1
        assert "No enrichment data was returned" in capsys.readouterr().err
