"""Errors raised while parsing and validating query input."""

from __future__ import annotations


class QueryError(ValueError):
    """Base error for query input that cannot be turned into a path."""

    def __init__(self, message: str, raw: str = "", help_text: str = ""):
        super().__init__(message)
        self.raw = raw
        self.help_text = help_text


class PredicateSyntaxError(QueryError):
    """Filter string is not of the form ``field<op>value``."""


class UnknownFieldError(QueryError):
    """Filter names a field that cannot be filtered on."""


class InvalidOperandError(QueryError):
    """Field is known but the operand does not satisfy its grammar."""


class FormatParseError(QueryError):
    """Output format is not one of json, xml, csv or html."""


class SortParseError(QueryError):
    """Sort direction is not asc or desc."""


__all__ = [
    "FormatParseError",
    "InvalidOperandError",
    "PredicateSyntaxError",
    "QueryError",
    "SortParseError",
    "UnknownFieldError",
]
