"""Filterable fields and the validator that guards each one."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from .operands import (
    DATE_PATTERNS,
    NUMBER_PATTERNS,
    STRING_PATTERNS,
    VERSION_PATTERNS,
    ExactMatchValidator,
    GeneralValidator,
    ObjectIdValidator,
    OperandValidator,
)

MEAN_ELEMENT_THEORY_VALUES = ("SGP4", "DSST", "USM")
MEAN_ELEMENT_THEORY_HELP = (
    "Description of the mean element theory. Indicates the proper method "
    "to employ to propagate the state."
)

REF_FRAME_VALUES = (
    "EME2000",
    "GCRF",
    "ICRF",
    "ITRF2000",
    "ITRF-93",
    "ITRF-97",
    "MCI",
    "TDR",
    "TEME",
    "TOD",
)
REF_FRAME_HELP = """Possible values are:
    EME2000: Earth Mean Equator and Equinox of J2000
    GCRF: Geocentric Celestial Reference Frame
    ICRF: International Celestial Reference Frame
    ITRF2000: International Terrestrial Reference Frame 2000
    ITRF-93: International Terrestrial Reference Frame 1993
    ITRF-97: International Terrestrial Reference Frame 1997
    MCI: Mars Centered Inertial
    TDR: True of Date, Rotating
    TEME: True Equator Mean Equinox
    TOD: True of Date"""

TIME_SYSTEM_VALUES = ("UTC", "TAI", "TT", "GPS", "TDB", "TCB")
TIME_SYSTEM_HELP = """Possible values are:
    UTC: Universal Coordinated Time
    TAI: International Atomic Time
    TT: Terrestrial Time
    GPS: GPS Control Segment
    TDB: Barycentric Dynamical Time
    TCB: Barycentric Coordinate Time"""

CCSDS_OMM_VERS_HELP = "Version number of the document, it has to be of the format x.y"
COMMENT_HELP = "Simple match of the comment field inside of the predicate"


class GrammarRegistry:
    """Read-only mapping of uppercase field name to operand validator."""

    def __init__(self, entries: Mapping[str, OperandValidator]):
        self._entries = MappingProxyType(
            {name.upper(): validator for name, validator in entries.items()}
        )

    def lookup(self, field: str) -> Optional[OperandValidator]:
        """Return the validator for ``field`` (any case), or None."""
        return self._entries.get(field.upper())

    def help_for(self, field: str) -> str:
        validator = self.lookup(field)
        return validator.help() if validator is not None else ""

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, field: object) -> bool:
        return isinstance(field, str) and field.upper() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def _general(patterns, help_text: str) -> GeneralValidator:
    return GeneralValidator(patterns=patterns, help_text=help_text)


DEFAULT_REGISTRY = GrammarRegistry(
    {
        "CCSDS_OMM_VERS": _general(VERSION_PATTERNS, CCSDS_OMM_VERS_HELP),
        "COMMENT": _general(STRING_PATTERNS, COMMENT_HELP),
        "CREATION_DATE": _general(
            DATE_PATTERNS,
            "Creation date field which identifies the origin of the orbit object",
        ),
        "ORIGINATOR": _general(
            STRING_PATTERNS,
            "Creating agency or operator (value should be specified in an ICD)",
        ),
        "OBJECT_NAME": _general(
            STRING_PATTERNS,
            "Spacecraft name for which the orbit state is provided. "
            "There is no specific format.",
        ),
        "OBJECT_ID": ObjectIdValidator(
            help_text="ObjectID representing the orbital object in the format "
            "YYYY-NNNP[P] like 2000-052A"
        ),
        "CENTER_NAME": _general(
            STRING_PATTERNS,
            "Origin of the reference name, which may be a natural solar system "
            "body. For example: EARTH, MOON, SUN...",
        ),
        "REF_FRAME": ExactMatchValidator(
            values=REF_FRAME_VALUES, help_text=REF_FRAME_HELP
        ),
        "TIME_SYSTEM": ExactMatchValidator(
            values=TIME_SYSTEM_VALUES, help_text=TIME_SYSTEM_HELP
        ),
        "MEAN_ELEMENT_THEORY": ExactMatchValidator(
            values=MEAN_ELEMENT_THEORY_VALUES, help_text=MEAN_ELEMENT_THEORY_HELP
        ),
        "EPOCH": _general(
            DATE_PATTERNS, "Epoch of state vector and optional Keplerian elements"
        ),
        "MEAN_MOTION": _general(NUMBER_PATTERNS, "Mean motion in revolutions per day"),
        "ECCENTRICITY": _general(
            NUMBER_PATTERNS,
            "Eccentricity: https://en.wikipedia.org/wiki/Orbital_eccentricity",
        ),
        "INCLINATION": _general(
            NUMBER_PATTERNS, "Inclination of the object in the orbit"
        ),
        "RA_OF_ASC_NODE": _general(
            NUMBER_PATTERNS, "Right ascension of ascending node"
        ),
        "ARG_OF_PERICENTER": _general(NUMBER_PATTERNS, "Argument of pericenter"),
        "COUNTRY_CODE": _general(STRING_PATTERNS, "Country Code"),
        "DECAY_DATE": _general(DATE_PATTERNS, "Orbital decay"),
    }
)

__all__ = [
    "DEFAULT_REGISTRY",
    "GrammarRegistry",
    "MEAN_ELEMENT_THEORY_VALUES",
    "REF_FRAME_VALUES",
    "TIME_SYSTEM_VALUES",
]
