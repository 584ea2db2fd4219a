"""HTML table writer for fetched rows."""

from typing import Any, Dict, Sequence

from tabulate import tabulate

from .csv_writer import _columns


def encode_html(records: Sequence[Dict[str, Any]]) -> bytes:
    """Encode rows as a single ``<table>`` with a header row."""
    columns = _columns(records)
    rows = [[record.get(c, "") for c in columns] for record in records]
    table = tabulate(rows, headers=columns, tablefmt="html", disable_numparse=True)
    return (str(table) + "\n").encode("utf-8")
