"""Pytest configuration and shared fixtures."""

import logging

import pytest
from click.testing import CliRunner

from spacetrack.cli import cli
from spacetrack.logs import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and environment.

    HOME and the working directory point at a temporary directory so config
    resolution never finds ~/.spacetrack.yaml or ./spacetrack.yml.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in (
        "SPACETRACK_CONFIG",
        "SPACETRACK_IDENTITY",
        "SPACETRACK_PASSWORD",
        "SPACETRACK_WORK_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    yield home


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Invoke the CLI with console logging off.

    Usage:
        result = invoke(["gp", "-f", "epoch<now-30", "--dry-run"])
        result = invoke(["credentials"], input_data="secret\\n")
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, ["--no-console", *args], input=input_data)

    return _invoke


@pytest.fixture
def gp_row():
    """One GP row as space-track returns it (values are strings or null)."""
    return {
        "CCSDS_OMM_VERS": "2.0",
        "COMMENT": "GENERATED VIA SPACE-TRACK.ORG API",
        "CREATION_DATE": "2024-01-01T06:26:10",
        "ORIGINATOR": "18 SPCS",
        "OBJECT_NAME": "ISS (ZARYA)",
        "OBJECT_ID": "1998-067A",
        "CENTER_NAME": "EARTH",
        "REF_FRAME": "TEME",
        "TIME_SYSTEM": "UTC",
        "MEAN_ELEMENT_THEORY": "SGP4",
        "EPOCH": "2024-01-01T04:12:35.462592",
        "MEAN_MOTION": "15.49920455",
        "ECCENTRICITY": "0.00012960",
        "INCLINATION": "51.6412",
        "NORAD_CAT_ID": "25544",
        "DECAY_DATE": None,
        "TLE_LINE0": "0 ISS (ZARYA)",
    }
