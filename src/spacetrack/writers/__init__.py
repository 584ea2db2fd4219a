"""Writers that serialize fetched rows into the supported output formats."""

from typing import Any, Dict, Sequence

from ..query.types import Format
from .csv_writer import encode_csv
from .html_writer import encode_html
from .json_writer import encode_json
from .xml_writer import encode_xml


def encode(
    records: Sequence[Dict[str, Any]], fmt: Format | str, kind: str = "tle"
) -> bytes:
    """Serialize ``records`` in ``fmt``.

    ``kind`` names the XML root element (``spacetrack-<kind>``).

    Raises:
        FormatParseError: If ``fmt`` is not a known format name.
    """
    if not isinstance(fmt, Format):
        fmt = Format.parse(fmt)

    if fmt is Format.JSON:
        return encode_json(records)
    if fmt is Format.XML:
        return encode_xml(records, root_element=f"spacetrack-{kind}")
    if fmt is Format.CSV:
        return encode_csv(records)
    return encode_html(records)


__all__ = ["encode", "encode_csv", "encode_html", "encode_json", "encode_xml"]
