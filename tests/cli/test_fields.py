"""Tests for the fields command."""

from spacetrack.query import DEFAULT_REGISTRY


def test_lists_every_field(invoke):
    result = invoke(["fields"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    for name in DEFAULT_REGISTRY.fields:
        assert name in lines
    assert "  Epoch of state vector and optional Keplerian elements" in lines


def test_one_field(invoke):
    result = invoke(["fields", "ref_frame"])

    assert result.exit_code == 0
    assert result.output.startswith("REF_FRAME\n")
    assert "TEME: True Equator Mean Equinox" in result.output
    assert "EPOCH" not in result.output


def test_unknown_field(invoke):
    result = invoke(["fields", "norad_cat_id"])
    assert result.exit_code == 1
    assert "Error: field 'norad_cat_id' can not be used as a filter" in result.output
