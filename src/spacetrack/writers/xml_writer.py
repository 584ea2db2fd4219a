"""XML writer for fetched rows."""

from typing import Any, Dict, Sequence

import xmltodict


def encode_xml(
    records: Sequence[Dict[str, Any]],
    root_element: str = "spacetrack",
    item_element: str = "item",
    pretty: bool = False,
) -> bytes:
    """Encode rows as ``<root><item>...</item>...</root>``.

    Every row becomes one ``item`` element, even when the batch holds a
    single row, so readers can rely on a stable structure.
    """
    if records:
        xml_dict = {root_element: {item_element: list(records)}}
    else:
        xml_dict = {root_element: None}

    xml_output = xmltodict.unparse(xml_dict, pretty=pretty, encoding="utf-8")
    return xml_output.encode("utf-8")
