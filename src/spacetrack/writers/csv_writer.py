"""CSV writer for fetched rows."""

import csv
import io
from typing import Any, Dict, List, Sequence


def _columns(records: Sequence[Dict[str, Any]]) -> List[str]:
    # Union of all record keys, preserving first-seen order
    all_keys: List[str] = []
    seen = set()
    for record in records:
        for key in record.keys():
            if key not in seen:
                all_keys.append(key)
                seen.add(key)
    return all_keys


def encode_csv(
    records: Sequence[Dict[str, Any]],
    delimiter: str = ",",
    header: bool = True,
) -> bytes:
    """Encode rows as CSV.

    Args:
        records: Rows as dicts
        delimiter: Field delimiter (default: ",")
        header: Whether to include header row (default: True)

    Notes:
        - Column order is the union of keys in first-seen order
        - Missing keys in later records result in empty values
        - An empty batch produces an empty document
    """
    if not records:
        return b""

    output = io.StringIO(newline="")
    writer = csv.DictWriter(
        output, fieldnames=_columns(records), delimiter=delimiter
    )
    if header:
        writer.writeheader()
    writer.writerows(records)
    return output.getvalue().encode("utf-8")
