"""
Content decoders for previewable formats.

Pure functions: they take what the host returned and either produce preview
data or raise DecodeFailedError. No I/O happens here.
"""

import csv
import io
import logging
from typing import Dict, List, Tuple

from export_browser.core.exceptions import DecodeFailedError
from export_browser.core.host import BinaryPayload, normalize_binary_payload

UTF8_BOM = "\ufeff"


def _unique_headers(header: List[str]) -> List[str]:
    # Repeated column names get _1, _2...
    seen: Dict[str, int] = {}
    columns = []
    for column in header:
        if column in seen:
            seen[column] += 1
            renamed = f"{column}_{seen[column]}"
            while renamed in seen:
                seen[column] += 1
                renamed = f"{column}_{seen[column]}"
            seen[renamed] = 0
            columns.append(renamed)
        else:
            seen[column] = 0
            columns.append(column)
    return columns


def parse_delimited(name: str, text: str) -> Tuple[List[str], List[Dict[str, str]]]:
    """
    Parse comma-delimited text with a header row.

    Empty lines are skipped. Rows shorter than the header are padded with "",
    cells beyond the header width are dropped.

    Returns:
        (columns, rows) where each row maps column name to cell text.
    """
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM):]

    try:
        records = [row for row in csv.reader(io.StringIO(text, newline="")) if row]
    except csv.Error as e:
        raise DecodeFailedError(name, "csv", str(e)) from e

    if not records:
        return [], []

    columns = _unique_headers(records[0])
    width = len(columns)
    rows = []

    for line_number, record in enumerate(records[1:], start=2):
        if len(record) > width:
            logging.debug(
                f"{name}: row {line_number} has {len(record)} cells, header has {width}; extra cells dropped"
            )
        cells = record[:width] + [""] * (width - len(record))
        rows.append(dict(zip(columns, cells)))

    return columns, rows


def decode_binary(name: str, payload: BinaryPayload) -> bytes:
    """Normalize a base64 string or raw byte payload to bytes."""
    try:
        return normalize_binary_payload(payload)
    except (TypeError, ValueError) as e:
        raise DecodeFailedError(name, "binary", str(e)) from e
