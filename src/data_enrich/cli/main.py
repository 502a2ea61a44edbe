"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="data-enrich",
        description="Enrich contact and company data with AI-powered research",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to settings YAML (DATA_ENRICH_* env vars override it)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # preview
    preview_parser = subparsers.add_parser("preview", help="Validate a file and preview its rows")
    preview_parser.add_argument("file", type=Path, nargs="?", default=None, help="CSV or spreadsheet to check")
    preview_parser.add_argument(
        "--sample",
        action="store_true",
        help="Show the bundled sample rows instead of reading a file",
    )

    # enrich
    enrich_parser = subparsers.add_parser("enrich", help="Upload a file and run the enrichment agent")
    enrich_parser.add_argument("file", type=Path, nargs="?", default=None, help="CSV or spreadsheet")
    enrich_parser.add_argument(
        "--sample",
        action="store_true",
        help="Return the bundled sample results without calling the agent",
    )
    enrich_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the run as JSON to file (default: stdout)",
    )
    enrich_parser.add_argument(
        "--export",
        type=Path,
        default=None,
        metavar="CSV_PATH",
        help="Also export enriched records to CSV",
    )

    # extract
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract and normalize records from a saved agent result JSON",
    )
    extract_parser.add_argument("response", type=Path, help="Saved agent result envelope")
    extract_parser.add_argument("--output", type=Path, default=None, help="Write run JSON to file")

    # export
    export_parser = subparsers.add_parser("export", help="Filter, sort and export a saved run to CSV")
    export_parser.add_argument("run", type=Path, help="Run JSON written by enrich/extract")
    export_parser.add_argument("--output", type=Path, default=None, help="CSV path (default: enriched_data.csv)")
    export_parser.add_argument(
        "--filter",
        dest="filter_mode",
        default="all",
        choices=["all", "low_confidence", "decision_makers"],
        help="Record filter",
    )
    export_parser.add_argument(
        "--sort",
        default="name",
        choices=["name", "company", "revenue", "sector", "decision_maker", "job_title", "confidence"],
        help="Sort field",
    )
    export_parser.add_argument("--desc", action="store_true", help="Sort descending")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "preview":
        _run_preview(args)
    elif args.command == "enrich":
        _run_enrich(args)
    elif args.command == "extract":
        _run_extract(args)
    elif args.command == "export":
        _run_export(args)
    else:
        parser.print_help()


def _load_settings(args: argparse.Namespace):
    from data_enrich.config import Settings

    if args.config:
        return Settings.from_yaml(args.config)
    return Settings.from_env()


def _emit(output: str, path: Path | None, summary: str) -> None:
    if path:
        path.write_text(output, encoding="utf-8")
        print(summary)
    else:
        print(output)


def _run_preview(args: argparse.Namespace) -> None:
    """Run preview command."""
    from data_enrich.errors import EnrichmentError
    from data_enrich.ingest import preview_file

    if args.sample:
        from data_enrich.samples import SAMPLE_PREVIEW_ROWS

        file, total, rows = "sample", len(SAMPLE_PREVIEW_ROWS), SAMPLE_PREVIEW_ROWS
    elif args.file is None:
        print("No file selected.", file=sys.stderr)
        raise SystemExit(1)
    else:
        settings = _load_settings(args)
        try:
            preview = preview_file(args.file, settings)
        except EnrichmentError as e:
            print(str(e), file=sys.stderr)
            raise SystemExit(1)
        file, total, rows = str(preview.path), preview.total_rows, preview.rows

    output = json.dumps(
        {
            "file": file,
            "total_rows": total,
            "preview": [r.model_dump(mode="json") for r in rows],
        },
        indent=2,
        ensure_ascii=False,
    )
    print(output)


def _finish_run(run, args: argparse.Namespace) -> None:
    if run.error:
        print(run.error, file=sys.stderr)
        raise SystemExit(1)
    if run.status_message:
        print(run.status_message, file=sys.stderr)

    export_path = getattr(args, "export", None)
    if export_path is not None:
        written = run.session().export(export_path)
        if written is None:
            print("No records to export.", file=sys.stderr)
        else:
            print(f"Exported {len(run.records)} records to {written}", file=sys.stderr)

    output = json.dumps(run.model_dump(mode="json"), indent=2, ensure_ascii=False)
    _emit(output, args.output, f"Wrote {len(run.records)} records to {args.output}")


def _run_enrich(args: argparse.Namespace) -> None:
    """Run enrich command."""
    from data_enrich.client import AgentClient
    from data_enrich.pipeline import run_enrichment

    if args.sample:
        run = run_enrichment(None, None, sample=True)
        _finish_run(run, args)
        return
    if args.file is None:
        raise SystemExit("enrich requires a FILE (or --sample)")

    settings = _load_settings(args)
    if not settings.agent_id:
        raise SystemExit("No agent configured. Set DATA_ENRICH_AGENT_ID or agent_id in --config.")
    with AgentClient(settings) as client:
        run = run_enrichment(args.file, client, settings)
    _finish_run(run, args)


def _run_extract(args: argparse.Namespace) -> None:
    """Run extract command against a saved agent result."""
    from data_enrich.errors import EnrichmentError
    from data_enrich.models.service import AgentResult
    from data_enrich.pipeline import EnrichmentRun, process_agent_result

    settings = _load_settings(args)
    try:
        data = json.loads(args.response.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SystemExit(f"Could not read agent result: {e}")

    if isinstance(data, dict) and "response" in data:
        result = AgentResult(
            success=True,
            response=data.get("response"),
            raw_response=data.get("raw_response") if isinstance(data.get("raw_response"), str) else None,
        )
    else:
        result = AgentResult(success=True, response=data)

    try:
        run = process_agent_result(result, max_depth=settings.max_depth)
    except EnrichmentError as e:
        run = EnrichmentRun(error=str(e))
    _finish_run(run, args)


def _run_export(args: argparse.Namespace) -> None:
    """Run export command."""
    from data_enrich.pipeline import EnrichmentRun
    from data_enrich.query import SortDir

    settings = _load_settings(args)
    run = EnrichmentRun.model_validate_json(args.run.read_text(encoding="utf-8"))
    session = run.session()
    session.set_filter(args.filter_mode)
    session.sort_field = args.sort
    session.sort_dir = SortDir.DESC if args.desc else SortDir.ASC

    path = args.output or Path(settings.export_filename)
    written = session.export(path)
    if written is None:
        print("No records to export.", file=sys.stderr)
        raise SystemExit(1)
    print(f"Exported {len(session.view())} records to {written}")


if __name__ == "__main__":
    main()
