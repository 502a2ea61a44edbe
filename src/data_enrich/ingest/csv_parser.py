"""Parsing utilities for uploaded contact/company CSV text."""

import re
from typing import Optional

from data_enrich.models.raw import RawRow

LINE_SPLIT = re.compile(r"\r?\n")
# Single layer of straight or smart quotes around a header token
HEADER_QUOTES = re.compile(r"^[\"'“”‘’]|[\"'“”‘’]$")

NAME_HEADER = re.compile(r"^(name|full.?name|contact.?name|person)$", re.IGNORECASE)
COMPANY_HEADER = re.compile(r"^(company|organization|org|company.?name|employer)$", re.IGNORECASE)


def split_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into fields.
    Commas separate only outside quotes; "" inside quotes is a literal quote.
    Quotes may open mid-field. Always returns at least one field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if in_quotes:
            if ch == '"' and line[i + 1 : i + 2] == '"':
                current.append('"')
                i += 1
            elif ch == '"':
                in_quotes = False
            else:
                current.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return fields


def parse_header(line: str) -> list[str]:
    """Split header on commas, trim, and strip one layer of surrounding quotes."""
    return [HEADER_QUOTES.sub("", token.strip()) for token in line.split(",")]


def find_column(headers: list[str], pattern: re.Pattern) -> Optional[int]:
    """Index of the first header fully matching pattern, else None."""
    for idx, header in enumerate(headers):
        if pattern.match(header):
            return idx
    return None


def _pick(values: list[str], idx: Optional[int], fallback: int) -> str:
    if idx is not None and idx < len(values):
        return values[idx].strip()
    if fallback < len(values):
        return values[fallback].strip()
    return ""


def parse_csv(text: str) -> list[RawRow]:
    """
    Parse CSV text into RawRows.
    Returns [] when there is no header plus at least one data line.
    Rows whose resolved name and company are both empty are dropped.
    """
    lines = [line for line in LINE_SPLIT.split(text or "") if line.strip()]
    if len(lines) < 2:
        return []

    headers = parse_header(lines[0])
    name_idx = find_column(headers, NAME_HEADER)
    company_idx = find_column(headers, COMPANY_HEADER)

    rows: list[RawRow] = []
    for line in lines[1:]:
        values = split_csv_line(line)
        data: dict[str, str] = {
            "name": _pick(values, name_idx, 0),
            "company": _pick(values, company_idx, 1),
        }
        for idx, header in enumerate(headers):
            if idx < len(values):
                data[header] = values[idx].strip()
        if not data["name"] and not data["company"]:
            continue
        rows.append(RawRow.model_validate(data))
    return rows
