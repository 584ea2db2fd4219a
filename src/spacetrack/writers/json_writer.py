"""JSON writer for fetched rows."""

import json
from typing import Any, Dict, Sequence


def encode_json(records: Sequence[Dict[str, Any]], pretty: bool = False) -> bytes:
    """Encode rows as a JSON array.

    Args:
        records: Rows as dicts
        pretty: Whether to pretty-print with indentation (default: False)
    """
    if pretty:
        text = json.dumps(list(records), indent=2)
    else:
        text = json.dumps(list(records))
    return (text + "\n").encode("utf-8")
