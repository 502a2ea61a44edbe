"""Instruction text sent to the enrichment agent."""

import json
from typing import Optional

from data_enrich.models.raw import RawRow

_INSTRUCTIONS = """You have received an uploaded file with contact and company data. Please enrich EVERY row.

IMPORTANT SEARCH INSTRUCTIONS:
- Many companies may be Italian. Search for revenue in Italian: "[company] fatturato annuale", "[company] ricavi", "[company] bilancio". Also try English: "[company] annual revenue".
- Check these sources for revenue: registroimprese.it, reportaziende.it, dnb.com, crunchbase.com, company websites, annual reports, news articles.
- For job titles, search LinkedIn specifically: "[person name] [company] LinkedIn", "[person name] [company] site:linkedin.com". Also check company websites and press releases.
- Do NOT change or translate person names or company names from the original data.
- Revenue must be a specific value like "€15M" or "$120M", not "N/A". If exact revenue is not available, estimate based on company size and industry.
- Job titles must be specific (e.g., "VP Sales", "Direttore Commerciale"), not generic like "Employee".

For each row provide:
1. Revenue/Fatturato (e.g., "€15M", "$120M", "€2.5B")
2. Industry Sector/Settore (be specific, e.g., "Consulenza IT", "Enterprise SaaS")
3. Job Title/Ruolo (from LinkedIn or company website)
4. Decision Maker status: "Yes" if C-level, VP, Director, Direttore, Responsabile, Founder, Managing Director, Amministratore Delegato, Partner, Head of, Titolare; "No" otherwise
5. Confidence: "High" if data from official sources, "Low" if estimated or uncertain

Return your response as JSON with this EXACT structure:
{
  "enriched_data": [
    {"name": "original name unchanged", "company": "original company unchanged", "revenue": "€15M", "sector": "specific sector", "decision_maker": "Yes/No", "job_title": "specific title", "confidence": "High/Low"}
  ],
  "summary": {
    "total_records": <number>,
    "decision_makers_found": <number>,
    "low_confidence_count": <number>,
    "high_confidence_rate": "<percentage>"
  }
}"""

_ROWS_INTRO = "\n\nHere is the data to enrich (DO NOT change these names):\n"
_FILE_ONLY = (
    "\n\nThe data is in the attached file. Parse the file to extract names and companies, "
    "then enrich each row. Do NOT change the original names."
)


def build_enrichment_prompt(rows: Optional[list[RawRow]] = None) -> str:
    """Prompt with the required JSON shape; embeds name/company pairs when rows are known."""
    if rows:
        payload = [{"name": r.name, "company": r.company} for r in rows]
        return _INSTRUCTIONS + _ROWS_INTRO + json.dumps(payload, ensure_ascii=False)
    return _INSTRUCTIONS + _FILE_ONLY
