"""Assemble validated predicates into a space-track query path.

Segment order is fixed by the remote service:

    /<predicate>.../orderby/<field> <sort>/limit/<max>[,<skip>]/format/<fmt>[/emptyresult/show]

The result is appended to ``/<controller>/<action>/class/<class>`` to form
the request URL.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .parser import Predicate
from .types import (
    CDM_SORTABLE_FIELDS,
    DECAY_SORTABLE_FIELDS,
    GP_SORTABLE_FIELDS,
    Format,
    Limit,
    OrderBy,
)

BASE_URL = "https://www.space-track.org"
LOGIN_ENDPOINT = "/ajaxauth/login"
EMPTY_RESULT_SUFFIX = "/emptyresult/show"


class RequestController(str, Enum):
    BASIC_SPACE_DATA = "basicspacedata"
    EXPANDED_SPACE_DATA = "expandedspacedata"
    FILE_SHARE = "fileshare"
    COMBINED_OPS_DATA = "combinedopsdata"


class RequestAction(str, Enum):
    QUERY = "query"
    MODEL_DEF = "modeldef"


class RequestClass(str, Enum):
    GP = "gp"
    SATCAT = "satcat"
    DECAY = "decay"
    CDM_PUBLIC = "cdm_public"

    @property
    def kind(self) -> str:
        """Short name used for output folders and XML roots."""
        return _KINDS[self]


_KINDS: Dict[RequestClass, str] = {
    RequestClass.GP: "tle",
    RequestClass.SATCAT: "satcat",
    RequestClass.DECAY: "decay",
    RequestClass.CDM_PUBLIC: "cdm",
}

SORTABLE_FIELDS: Dict[RequestClass, Tuple[str, ...]] = {
    RequestClass.GP: GP_SORTABLE_FIELDS,
    RequestClass.SATCAT: (),
    RequestClass.DECAY: DECAY_SORTABLE_FIELDS,
    RequestClass.CDM_PUBLIC: CDM_SORTABLE_FIELDS,
}


def build_query(
    predicates: Iterable[Predicate],
    fmt: Format,
    limit: Limit,
    order_by: OrderBy,
    show_empty_result: bool,
    sortable: Iterable[str] = GP_SORTABLE_FIELDS,
) -> str:
    """Concatenate path segments in the order the service expects.

    Predicates are emitted verbatim in the order supplied; no validation
    happens here.

    Examples:
        >>> build_query(
        ...     [Predicate("epoch", "<now-30"), Predicate("decay_date", "<>null-val")],
        ...     Format.JSON,
        ...     Limit(10),
        ...     OrderBy("norad_cat_id"),
        ...     True,
        ... )
        '/epoch<now-30/decay_date<>null-val/orderby/norad_cat_id asc/limit/10/format/json/emptyresult/show'
    """
    parts: List[str] = [p.to_path() for p in predicates]
    parts.append(order_by.to_path(sortable))
    parts.append(limit.to_path())
    parts.append(fmt.to_path())
    if show_empty_result:
        parts.append(EMPTY_RESULT_SUFFIX)
    return "".join(parts)


class SpaceRequest(BaseModel):
    """Everything needed to query one request class."""

    model_config = ConfigDict(frozen=True)

    request_class: RequestClass = RequestClass.GP
    controller: RequestController = RequestController.BASIC_SPACE_DATA
    action: RequestAction = RequestAction.QUERY
    predicates: List[Predicate] = Field(default_factory=list)
    format: Format = Format.JSON
    limit: Limit = Field(default_factory=Limit)
    order_by: OrderBy = Field(default_factory=lambda: OrderBy("NORAD_CAT_ID"))
    show_empty_result: bool = True

    def build_query(self) -> str:
        return build_query(
            self.predicates,
            self.format,
            self.limit,
            self.order_by,
            self.show_empty_result,
            sortable=SORTABLE_FIELDS[self.request_class],
        )

    def endpoint(self, base_url: str = BASE_URL) -> str:
        return (
            f"{base_url.rstrip('/')}/{self.controller.value}"
            f"/{self.action.value}/class/{self.request_class.value}"
        )

    def url(self, base_url: str = BASE_URL) -> str:
        return self.endpoint(base_url) + self.build_query()


__all__ = [
    "BASE_URL",
    "LOGIN_ENDPOINT",
    "RequestAction",
    "RequestClass",
    "RequestController",
    "SORTABLE_FIELDS",
    "SpaceRequest",
    "build_query",
]
