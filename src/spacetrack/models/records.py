"""Row models for the space-track classes we fetch.

Space-track returns every column as a string (or null). Rows keep that
representation; the model only fixes the column set and order used when
serializing to CSV, XML or HTML.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Type

from pydantic import BaseModel, ConfigDict, field_validator

from ..query.builder import RequestClass


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def as_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @classmethod
    def columns(cls) -> List[str]:
        return list(cls.model_fields)


class GpRecord(Record):
    """General perturbations (OMM) element set."""

    CCSDS_OMM_VERS: str = ""
    COMMENT: str = ""
    CREATION_DATE: str = ""
    ORIGINATOR: str = ""
    OBJECT_NAME: str = ""
    OBJECT_ID: str = ""
    CENTER_NAME: str = ""
    REF_FRAME: str = ""
    TIME_SYSTEM: str = ""
    MEAN_ELEMENT_THEORY: str = ""
    EPOCH: str = ""
    MEAN_MOTION: str = ""
    ECCENTRICITY: str = ""
    INCLINATION: str = ""
    RA_OF_ASC_NODE: str = ""
    ARG_OF_PERICENTER: str = ""
    MEAN_ANOMALY: str = ""
    EPHEMERIS_TYPE: str = ""
    CLASSIFICATION_TYPE: str = ""
    NORAD_CAT_ID: str = ""
    ELEMENT_SET_NO: str = ""
    REV_AT_EPOCH: str = ""
    BSTAR: str = ""
    MEAN_MOTION_DOT: str = ""
    MEAN_MOTION_DDOT: str = ""
    SEMIMAJOR_AXIS: str = ""
    PERIOD: str = ""
    APOAPSIS: str = ""
    PERIAPSIS: str = ""
    OBJECT_TYPE: str = ""
    RCS_SIZE: str = ""
    COUNTRY_CODE: str = ""
    LAUNCH_DATE: str = ""
    SITE: str = ""
    DECAY_DATE: str = ""
    FILE: str = ""
    GP_ID: str = ""
    TLE_LINE0: str = ""
    TLE_LINE1: str = ""
    TLE_LINE2: str = ""


class DecayRecord(Record):
    """Reentry prediction or historical decay message."""

    NORAD_CAT_ID: str = ""
    OBJECT_NUMBER: str = ""
    OBJECT_NAME: str = ""
    INTLDES: str = ""
    OBJECT_ID: str = ""
    RCS: str = ""
    RCS_SIZE: str = ""
    COUNTRY: str = ""
    MSG_EPOCH: str = ""
    DECAY_EPOCH: str = ""
    SOURCE: str = ""
    MSG_TYPE: str = ""
    PRECEDENCE: str = ""


class CdmRecord(Record):
    """Public conjunction data message."""

    CDM_ID: str = ""
    CREATED: str = ""
    EMERGENCY_REPORTABLE: str = ""
    TCA: str = ""
    MIN_RNG: str = ""
    PC: str = ""
    SAT_1_ID: str = ""
    SAT_1_NAME: str = ""
    SAT1_OBJECT_TYPE: str = ""
    SAT1_RCS: str = ""
    SAT_1_EXCL_VOL: str = ""
    SAT_2_ID: str = ""
    SAT_2_NAME: str = ""
    SAT2_OBJECT_TYPE: str = ""
    SAT2_RCS: str = ""
    SAT_2_EXCL_VOL: str = ""


RECORD_TYPES: Dict[RequestClass, Type[Record]] = {
    RequestClass.GP: GpRecord,
    RequestClass.DECAY: DecayRecord,
    RequestClass.CDM_PUBLIC: CdmRecord,
}


def records_for(
    request_class: RequestClass, rows: Iterable[Dict[str, Any]]
) -> List[Dict[str, str]]:
    """Normalize raw JSON rows to the class's column set and order.

    Classes without a row model pass through unchanged.
    """
    model = RECORD_TYPES.get(request_class)
    if model is None:
        return [dict(row) for row in rows]
    return [model.model_validate(row).model_dump() for row in rows]


__all__ = [
    "CdmRecord",
    "DecayRecord",
    "GpRecord",
    "RECORD_TYPES",
    "Record",
    "records_for",
]
