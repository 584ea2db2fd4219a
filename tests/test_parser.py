"""Unit tests for filter predicate parsing and validation."""

import pytest

from spacetrack.query import (
    DEFAULT_REGISTRY,
    GeneralValidator,
    GrammarRegistry,
    InvalidOperandError,
    Predicate,
    PredicateParser,
    PredicateSyntaxError,
    QueryError,
    UnknownFieldError,
    is_valid,
    operand_help,
    parse_predicate,
    parse_predicates,
)
from spacetrack.query.operands import NUMBER_PATTERNS


class TestParse:
    """Splitting a filter into field name and operand."""

    def test_name_and_operand(self):
        assert parse_predicate("epoch<now-30") == Predicate("epoch", "<now-30")

    def test_name_keeps_case(self):
        predicate = parse_predicate("Decay_Date<>null-val")
        assert predicate.name == "Decay_Date"
        assert predicate.value == "<>null-val"

    def test_operand_keeps_equals(self):
        assert parse_predicate("comment=single comment") == Predicate(
            "comment", "=single comment"
        )

    def test_no_operand(self):
        """A bare name is a syntax error, not an unknown field."""
        with pytest.raises(PredicateSyntaxError) as exc_info:
            parse_predicate("incorrectpredicate")
        assert not isinstance(exc_info.value, UnknownFieldError)
        assert exc_info.value.raw == "incorrectpredicate"

    @pytest.mark.parametrize("raw", ["", "=5", "1epoch=5", "epoch<now\nfoo"])
    def test_malformed(self, raw):
        with pytest.raises(PredicateSyntaxError):
            parse_predicate(raw)

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_predicate("incorrectpredicate")

    def test_to_path(self):
        assert Predicate("epoch", "<now-30").to_path() == "/epoch<now-30"
        assert str(Predicate("epoch", "<now-30")) == "epoch<now-30"


class TestParseAll:
    def test_keeps_input_order(self):
        predicates = parse_predicates(["comment=single comment", "object_id=1960-000A"])
        assert predicates == [
            Predicate("comment", "=single comment"),
            Predicate("object_id", "=1960-000A"),
        ]

    def test_fails_fast(self):
        """One bad entry fails the whole batch."""
        with pytest.raises(PredicateSyntaxError) as exc_info:
            parse_predicates(["epoch<now-30", "incorrectpredicate", "also bad"])
        assert exc_info.value.raw == "incorrectpredicate"

    def test_empty(self):
        assert parse_predicates([]) == []


class TestCheck:
    """Validation against the default registry."""

    parser = PredicateParser()

    @pytest.mark.parametrize(
        "raw",
        [
            "epoch<now-30",
            "decay_date<>null-val",
            "object_id=1960-000A",
            "comment=single comment,^another one,~~hey there",
            "mean_motion=15.5",
            "eccentricity<0.001",
            "inclination=50--52",
            "ref_frame=teme",
            "TIME_SYSTEM=UTC",
            "creation_date=2024-01-01",
            "ccsds_omm_vers=2.0",
        ],
    )
    def test_valid(self, raw):
        assert self.parser.check(raw) == parse_predicate(raw)
        assert is_valid(raw)

    def test_unknown_field(self):
        with pytest.raises(UnknownFieldError) as exc_info:
            self.parser.check("norad_cat_id=25544")
        assert exc_info.value.help_text == ""
        assert not is_valid("norad_cat_id=25544")

    def test_invalid_operand_carries_help(self):
        with pytest.raises(InvalidOperandError) as exc_info:
            self.parser.check("epoch<yesterday")
        assert exc_info.value.help_text == DEFAULT_REGISTRY.help_for("EPOCH")
        assert exc_info.value.raw == "epoch<yesterday"

    def test_every_alternative_must_pass(self):
        assert is_valid("mean_motion=15,16")
        assert not is_valid("mean_motion=15,abc")

    def test_object_id_year_out_of_range(self):
        assert not is_valid("object_id=1956-000A")
        assert not is_valid("object_id=4000-000A")

    def test_equals_removed_before_validation(self):
        """``=`` is stripped from every alternative, wherever it appears."""
        assert is_valid("mean_motion=1=5")

    def test_malformed_is_not_valid(self):
        assert not is_valid("incorrectpredicate")

    def test_check_all(self):
        predicates = self.parser.check_all(["epoch<now-30", "decay_date<>null-val"])
        assert [p.name for p in predicates] == ["epoch", "decay_date"]

    def test_check_all_stops_at_first_failure(self):
        with pytest.raises(QueryError) as exc_info:
            self.parser.check_all(["epoch<now-30", "mean_motion=abc", "foo=1"])
        assert isinstance(exc_info.value, InvalidOperandError)


class TestHelp:
    def test_case_insensitive(self):
        assert operand_help("object_id") == DEFAULT_REGISTRY.help_for("OBJECT_ID")
        assert operand_help("Object_Id") != ""

    def test_unknown(self):
        assert operand_help("unknown") == ""


class TestCustomRegistry:
    def test_injected_registry(self):
        registry = GrammarRegistry({"FOO": GeneralValidator(NUMBER_PATTERNS, "a number")})
        parser = PredicateParser(registry)

        assert parser.check("foo=1") == Predicate("foo", "=1")
        assert parser.help("foo") == "a number"
        with pytest.raises(UnknownFieldError):
            parser.check("epoch<now-30")
