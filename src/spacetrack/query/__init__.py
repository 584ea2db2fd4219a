"""Query building for the space-track REST API.

Turns ``--filter`` strings into validated predicates and assembles them,
together with ordering, limit and format directives, into the path that
follows ``/basicspacedata/query/class/<class>``.

Example:
    epoch<now-30 + decay_date<>null-val, ordered by norad_cat_id, limit 10:

    /epoch<now-30/decay_date<>null-val/orderby/norad_cat_id asc/limit/10/format/json/emptyresult/show
"""

from .builder import (
    BASE_URL,
    LOGIN_ENDPOINT,
    RequestAction,
    RequestClass,
    RequestController,
    SpaceRequest,
    build_query,
)
from .errors import (
    FormatParseError,
    InvalidOperandError,
    PredicateSyntaxError,
    QueryError,
    SortParseError,
    UnknownFieldError,
)
from .operands import ExactMatchValidator, GeneralValidator, ObjectIdValidator
from .parser import (
    Predicate,
    PredicateParser,
    is_valid,
    operand_help,
    parse_predicate,
    parse_predicates,
)
from .registry import DEFAULT_REGISTRY, GrammarRegistry
from .types import Format, Limit, OrderBy, Sort

__all__ = [
    "BASE_URL",
    "DEFAULT_REGISTRY",
    "ExactMatchValidator",
    "Format",
    "FormatParseError",
    "GeneralValidator",
    "GrammarRegistry",
    "InvalidOperandError",
    "LOGIN_ENDPOINT",
    "Limit",
    "ObjectIdValidator",
    "OrderBy",
    "Predicate",
    "PredicateParser",
    "PredicateSyntaxError",
    "QueryError",
    "RequestAction",
    "RequestClass",
    "RequestController",
    "Sort",
    "SortParseError",
    "SpaceRequest",
    "UnknownFieldError",
    "build_query",
    "is_valid",
    "operand_help",
    "parse_predicate",
    "parse_predicates",
]
