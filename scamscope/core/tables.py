"""
CSV transaction table parsing.

Rows come back as plain dicts keyed by the header row. A table whose quoting
is broken, or whose rows disagree with the header on field count, is rejected
as a whole: partial tables are never scored.
"""

from __future__ import annotations

import csv
import io
from typing import Dict, List

from scamscope.core.errors import TableParseError


def decode_table_bytes(raw: bytes) -> str:
    # utf-8-sig drops a leading BOM that spreadsheet exports often add
    return raw.decode("utf-8-sig", errors="replace")


def parse_transaction_table(text: str) -> List[Dict[str, str]]:
    text = text.lstrip("\ufeff")
    reader = csv.DictReader(io.StringIO(text), strict=True)
    rows: List[Dict[str, str]] = []
    try:
        header = reader.fieldnames or []
        for row in reader:
            if None in row:
                raise TableParseError(
                    f"Invalid record length on line {reader.line_num}: "
                    f"expected {len(header)} fields, got more"
                )
            if any(v is None for v in row.values()):
                raise TableParseError(
                    f"Invalid record length on line {reader.line_num}: "
                    f"expected {len(header)} fields, got fewer"
                )
            rows.append(row)
    except csv.Error as e:
        raise TableParseError(f"line {reader.line_num}: {e}") from e
    return rows
