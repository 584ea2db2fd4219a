"""Predicate parsing for the ``--filter`` syntax.

A filter is a field name immediately followed by its operand:

    field<op>value[,value...]

Where:
    - field: letters and underscores, any case (``epoch``, ``OBJECT_ID``)
    - op: ``=``, ``<``, ``>``, ``<>``, ``^`` or ``~~``
    - value: one or more comma-separated alternatives

Examples:
    epoch<now-30
    decay_date<>null-val
    object_id=1960-000A
    comment=single comment,^another one,~~hey there

Parsing only splits the field from the operand. Validation looks the field
up in a GrammarRegistry and requires every comma-separated alternative to
satisfy the field's validator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

from .errors import InvalidOperandError, PredicateSyntaxError, UnknownFieldError
from .registry import DEFAULT_REGISTRY, GrammarRegistry

PREDICATE = re.compile(r"^([a-zA-Z_]+)(.*)$")


@dataclass(frozen=True)
class Predicate:
    """One user filter.

    ``name`` keeps the case the user typed; ``value`` is the whole operand
    including its operator, e.g. ``Predicate("epoch", "<now-30")``.
    """

    name: str
    value: str

    def to_path(self) -> str:
        return f"/{self.name}{self.value}"

    def __str__(self) -> str:
        return f"{self.name}{self.value}"


class PredicateParser:
    """Parse and validate filter strings against a registry."""

    def __init__(self, registry: GrammarRegistry = DEFAULT_REGISTRY):
        self.registry = registry

    def parse(self, raw: str) -> Predicate:
        """Split ``raw`` into a Predicate.

        Raises:
            PredicateSyntaxError: If there is no field name or no operand.
        """
        match = PREDICATE.fullmatch(raw)
        if match is None or not match.group(2):
            raise PredicateSyntaxError(
                f"parsing input to predicate: {raw!r}", raw=raw
            )
        return Predicate(name=match.group(1), value=match.group(2))

    def parse_all(self, raws: Iterable[str]) -> List[Predicate]:
        """Parse every filter in order; the first failure aborts the batch."""
        return [self.parse(raw) for raw in raws]

    def is_valid(self, raw: str) -> bool:
        try:
            self.check(raw)
        except (PredicateSyntaxError, UnknownFieldError, InvalidOperandError):
            return False
        return True

    def check(self, raw: str) -> Predicate:
        """Parse ``raw`` and validate its operand.

        Raises:
            PredicateSyntaxError: Malformed filter string.
            UnknownFieldError: Field is not filterable.
            InvalidOperandError: An operand alternative fails the field's
                validator. ``help_text`` carries the field's help.
        """
        predicate = self.parse(raw)

        validator = self.registry.lookup(predicate.name)
        if validator is None:
            raise UnknownFieldError(
                f"field {predicate.name!r} can not be used as a filter", raw=raw
            )

        for piece in predicate.value.split(","):
            operand = piece.replace("=", "")
            if not validator.validate(operand):
                raise InvalidOperandError(
                    f"invalid value {operand!r} for field {predicate.name!r}",
                    raw=raw,
                    help_text=validator.help(),
                )

        return predicate

    def check_all(self, raws: Iterable[str]) -> List[Predicate]:
        return [self.check(raw) for raw in raws]

    def help(self, field: str) -> str:
        return self.registry.help_for(field)


_DEFAULT_PARSER = PredicateParser()


def parse_predicate(raw: str) -> Predicate:
    return _DEFAULT_PARSER.parse(raw)


def parse_predicates(raws: Iterable[str]) -> List[Predicate]:
    return _DEFAULT_PARSER.parse_all(raws)


def is_valid(raw: str) -> bool:
    """Whether ``raw`` parses and passes the default registry."""
    return _DEFAULT_PARSER.is_valid(raw)


def operand_help(field: str) -> str:
    return _DEFAULT_PARSER.help(field)


__all__ = [
    "PREDICATE",
    "Predicate",
    "PredicateParser",
    "is_valid",
    "operand_help",
    "parse_predicate",
    "parse_predicates",
]
