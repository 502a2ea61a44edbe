#!/usr/bin/env python3
"""Quick live check of the upload + agent invocation flow.

Run:
  poetry run python scripts/agent_live_check.py                  # sample CSV built in-memory
  poetry run python scripts/agent_live_check.py contacts.csv     # your own file

Needs DATA_ENRICH_API_URL, DATA_ENRICH_API_KEY and DATA_ENRICH_AGENT_ID.
"""

import sys
import tempfile
from pathlib import Path

from data_enrich.client import AgentClient
from data_enrich.config import Settings
from data_enrich.pipeline import run_enrichment


def main() -> None:
    settings = Settings.from_env()
    if not settings.agent_id:
        raise SystemExit("Set DATA_ENRICH_AGENT_ID first.")

    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
    else:
        path = Path(tempfile.mkdtemp()) / "live_check.csv"
        path.write_text("Name,Company\nSarah Chen,TechFlow Inc\n", encoding="utf-8")
    print(f"Enriching {path} via {settings.api_base_url} (agent {settings.agent_id})...")

    with AgentClient(settings) as client:
        run = run_enrichment(path, client, settings)

    if run.error:
        print(f"\n⚠️ {run.error}")
        raise SystemExit(1)
    print(run.status_message)
    for i, r in enumerate(run.records[:5], 1):
        print(f"  {i}. {r.name} @ {r.company}: {r.job_title}, {r.revenue}, {r.sector} [{r.confidence}]")
    if run.raw_response_text:
        print("\nRaw agent text:\n" + run.raw_response_text[:1000])
    for f in run.artifacts:
        print(f"  file: {f.name or f.file_url} ({f.format_type})")
    print("\n✅ Upload + agent flow succeeded.")


if __name__ == "__main__":
    main()
