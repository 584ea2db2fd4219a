"""Operand validators for filter predicates.

A filter operand is everything after the field name, e.g. ``<now-30`` in
``epoch<now-30``. Each filterable field owns exactly one validator:

- GeneralValidator: any of a list of patterns matches
- ExactMatchValidator: the value is one of an enumerated set
- ObjectIdValidator: international designator (``YYYY-NNNP[P]``) or a year
  comparison, with the year restricted to the space age
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Pattern, Tuple

NUMBER = re.compile(r"^(\^|~~|<|>)?\d+(\.\d+)?$", re.ASCII)
NUMBER_RANGE = re.compile(r"^\d+(\.\d+)?--\d+(\.\d+)?$", re.ASCII)

# Letters and underscore, plus the ASCII run from space to slash.
STRING = re.compile(r"^(\^|~~)?([^\W\d]|[ -/])+$")


class _FreeText:
    """``STRING`` narrowed to letters.

    ``\\w`` also matches numerics that are not decimal digits (``²``, ``½``,
    ``Ⅻ``), so every character of the body must pass ``str.isalpha``, be an
    underscore or fall between space and slash.
    """

    pattern = STRING.pattern

    def fullmatch(self, value: str):
        match = STRING.fullmatch(value)
        if match is None:
            return None
        body = value[len(match.group(1) or ""):]
        if all(c.isalpha() or c == "_" or " " <= c <= "/" for c in body):
            return match
        return None


FREE_TEXT = _FreeText()

DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
DATE_TIME = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", re.ASCII)
DATE_RELATIVE = re.compile(r"^(>|<)?now(-\d+(\.\d+)?)?$", re.ASCII)
DATE_RELATIVE_RANGE = re.compile(
    r"^now(-\d+(\.\d+)?)?--now(-\d+(\.\d+)?)?$", re.ASCII
)
NULL_VALUE = re.compile(r"^(<>)?null-val$")

CCSDS_OMM_VERS = re.compile(r"^[0-2]\.\d$", re.ASCII)

OBJECT_ID = re.compile(r"^(\^|~~)?(\d{4})-\d{3}[A-Z]{1,2}$", re.ASCII)
OBJECT_ID_YEAR = re.compile(r"^(\^|~~|<|>)?(\d+)", re.ASCII)

NUMBER_PATTERNS: Tuple[Pattern[str], ...] = (NUMBER, NUMBER_RANGE)
STRING_PATTERNS = (FREE_TEXT,)
DATE_PATTERNS: Tuple[Pattern[str], ...] = (
    DATE,
    DATE_TIME,
    DATE_RELATIVE,
    DATE_RELATIVE_RANGE,
    NULL_VALUE,
)
VERSION_PATTERNS: Tuple[Pattern[str], ...] = (CCSDS_OMM_VERS,)

FIRST_LAUNCH_YEAR = 1957


def _current_year() -> int:
    return datetime.now().year


@dataclass(frozen=True)
class GeneralValidator:
    """Valid when at least one pattern matches the whole operand."""

    patterns: Tuple[Pattern[str], ...]
    help_text: str = ""

    def validate(self, value: str) -> bool:
        return any(p.fullmatch(value) for p in self.patterns)

    def help(self) -> str:
        return self.help_text


@dataclass(frozen=True)
class ExactMatchValidator:
    """Valid when the uppercased operand is one of ``values``."""

    values: Tuple[str, ...]
    help_text: str = ""

    def validate(self, value: str) -> bool:
        return value.upper() in self.values

    def help(self) -> str:
        return self.help_text


@dataclass(frozen=True)
class ObjectIdValidator:
    """International designator validator.

    Accepts ``1998-067A``, ``^1998-067``-style prefixes (``^``, ``~~``) and
    bare year comparisons such as ``>1990``. In every form the embedded year
    must fall between the first launch year and the current year.
    """

    help_text: str = ""
    earliest_year: int = FIRST_LAUNCH_YEAR

    def validate(self, value: str) -> bool:
        match = OBJECT_ID.fullmatch(value)
        if match:
            return self._year_in_range(match.group(2))

        match = OBJECT_ID_YEAR.match(value)
        if match:
            return self._year_in_range(match.group(2))

        return False

    def _year_in_range(self, text: str) -> bool:
        try:
            year = int(text)
        except ValueError:
            return False
        return self.earliest_year <= year <= _current_year()

    def help(self) -> str:
        return self.help_text


OperandValidator = GeneralValidator | ExactMatchValidator | ObjectIdValidator

__all__ = [
    "DATE_PATTERNS",
    "ExactMatchValidator",
    "FIRST_LAUNCH_YEAR",
    "GeneralValidator",
    "NUMBER_PATTERNS",
    "ObjectIdValidator",
    "OperandValidator",
    "STRING_PATTERNS",
    "VERSION_PATTERNS",
]
