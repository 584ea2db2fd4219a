"""Value objects that contribute fixed segments to a query path."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .errors import FormatParseError, SortParseError

GP_SORTABLE_FIELDS: Tuple[str, ...] = (
    "CCSDS_OMM_VERS",
    "COMMENT",
    "CREATION_DATE",
    "ORIGINATOR",
    "OBJECT_NAME",
    "OBJECT_ID",
    "CENTER_NAME",
    "REF_FRAME",
    "TIME_SYSTEM",
    "MEAN_ELEMENT_THEORY",
    "EPOCH",
    "MEAN_MOTION",
    "ECCENTRICITY",
    "INCLINATION",
    "RA_OF_ASC_NODE",
    "ARG_OF_PERICENTER",
    "MEAN_ANOMALY",
    "EPHEMERIS_TYPE",
    "CLASSIFICATION_TYPE",
    "NORAD_CAT_ID",
    "ELEMENT_SET_NO",
    "REV_AT_EPOCH",
    "BSTAR",
    "MEAN_MOTION_DOT",
    "MEAN_MOTION_DDOT",
    "SEMIMAJOR_AXIS",
    "PERIOD",
    "APOAPSIS",
    "PERIAPSIS",
    "OBJECT_TYPE",
    "RCS_SIZE",
    "COUNTRY_CODE",
    "LAUNCH_DATE",
    "SITE",
    "DECAY_DATE",
    "FILE",
    "GP_ID",
    "TLE_LINE0",
    "TLE_LINE1",
    "TLE_LINE2",
)

DECAY_SORTABLE_FIELDS: Tuple[str, ...] = (
    "NORAD_CAT_ID",
    "OBJECT_NUMBER",
    "OBJECT_NAME",
    "INTLDES",
    "OBJECT_ID",
    "RCS",
    "RCS_SIZE",
    "COUNTRY",
    "MSG_EPOCH",
    "DECAY_EPOCH",
    "SOURCE",
    "MSG_TYPE",
    "PRECEDENCE",
)

CDM_SORTABLE_FIELDS: Tuple[str, ...] = (
    "CDM_ID",
    "CREATED",
    "EMERGENCY_REPORTABLE",
    "TCA",
    "MIN_RNG",
    "PC",
    "SAT_1_ID",
    "SAT_1_NAME",
    "SAT1_OBJECT_TYPE",
    "SAT1_RCS",
    "SAT_1_EXCL_VOL",
    "SAT_2_ID",
    "SAT_2_NAME",
    "SAT2_OBJECT_TYPE",
    "SAT2_RCS",
    "SAT_2_EXCL_VOL",
)


class Format(str, Enum):
    """Serialization format, both on the wire and on disk."""

    JSON = "json"
    XML = "xml"
    CSV = "csv"
    HTML = "html"

    @classmethod
    def parse(cls, text: str) -> "Format":
        try:
            return cls(text.lower())
        except ValueError:
            raise FormatParseError(
                f"parsing input to format type: {text!r}", raw=text
            ) from None

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(f.value for f in cls)

    @property
    def extension(self) -> str:
        return self.value

    def to_path(self) -> str:
        return f"/format/{self.value}"

    def __str__(self) -> str:
        return self.value


class Sort(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, text: str) -> "Sort":
        try:
            return cls(text.lower())
        except ValueError:
            raise SortParseError(
                f"unmarshalling text to sort type: {text!r}", raw=text
            ) from None

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(s.value for s in cls)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OrderBy:
    """``/orderby/<field> <sort>`` segment.

    A field outside the sortable list contributes nothing, so an unknown
    ``--orderby`` value leaves the query unordered instead of failing.
    """

    by: str
    sort: Sort = Sort.ASC

    def to_path(self, sortable: Iterable[str] = GP_SORTABLE_FIELDS) -> str:
        wanted = self.by.lower()
        if not any(field.lower() == wanted for field in sortable):
            return ""
        return f"/orderby/{self.by} {self.sort.value}"


@dataclass(frozen=True)
class Limit:
    """``/limit/<max>[,<skip>]`` segment; non-positive max disables it."""

    max: int = -1
    skip: int = -1

    def to_path(self) -> str:
        if self.max <= 0:
            return ""
        path = f"/limit/{self.max}"
        if self.skip > 0:
            path += f",{self.skip}"
        return path


__all__ = [
    "CDM_SORTABLE_FIELDS",
    "DECAY_SORTABLE_FIELDS",
    "Format",
    "GP_SORTABLE_FIELDS",
    "Limit",
    "OrderBy",
    "Sort",
]
