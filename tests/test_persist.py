"""Tests for writing fetched rows into the work directory."""

import json
import logging
from unittest.mock import patch

import pytest

from spacetrack.persist import (
    OneFilePerRowPersister,
    OneFilePersister,
    Persister,
    batch_folder,
    build_filepath,
    clean_up,
    get_persister,
)
from spacetrack.query import Format

ROWS = [{"NORAD_CAT_ID": "25544"}, {"NORAD_CAT_ID": "20580"}, {"NORAD_CAT_ID": "43013"}]


def test_build_filepath(tmp_path):
    assert build_filepath(7, tmp_path, Format.CSV) == (
        tmp_path / "Spacetrack_record_0000000000000007.csv"
    )


def test_batch_folder(tmp_path):
    assert batch_folder(tmp_path, "tle", stamp=1700000000) == (
        tmp_path / "spacetrack-tle" / "1700000000"
    )


def test_get_persister():
    assert isinstance(get_persister(True, Format.JSON), OneFilePersister)
    persister = get_persister(False, Format.XML, "cdm")
    assert isinstance(persister, OneFilePerRowPersister)
    assert persister.kind == "cdm"


def test_base_persister_is_abstract():
    with pytest.raises(TypeError):
        Persister(Format.JSON)


class TestOneFilePersister:
    def test_writes_whole_batch(self, tmp_path):
        folder = tmp_path / "out"
        with patch("spacetrack.persist.time.time", return_value=1700000000.5):
            assert OneFilePersister(Format.JSON).persist(folder, ROWS) == 1

        path = folder / "Spacetrack_record_0000001700000000.json"
        assert json.loads(path.read_text()) == ROWS


class TestOneFilePerRowPersister:
    def test_one_file_per_row(self, tmp_path):
        folder = tmp_path / "out"
        assert OneFilePerRowPersister(Format.JSON).persist(folder, ROWS) == 3

        files = sorted(p.name for p in folder.iterdir())
        assert files == [
            "Spacetrack_record_0000000000000000.json",
            "Spacetrack_record_0000000000000001.json",
            "Spacetrack_record_0000000000000002.json",
        ]
        second = json.loads((folder / files[1]).read_text())
        assert second == [ROWS[1]]

    def test_previous_records_removed(self, tmp_path):
        """Only old record files go; anything else in the folder stays."""
        folder = tmp_path / "out"
        folder.mkdir()
        (folder / "Spacetrack_record_0000000000000009.json").write_text("[]")
        (folder / "notes.txt").write_text("keep me")

        OneFilePerRowPersister(Format.CSV).persist(folder, ROWS[:1])

        assert sorted(p.name for p in folder.iterdir()) == [
            "Spacetrack_record_0000000000000000.csv",
            "notes.txt",
        ]

    def test_failed_write_is_skipped(self, tmp_path, caplog):
        persister = OneFilePerRowPersister(Format.JSON)
        with patch.object(
            OneFilePerRowPersister,
            "write",
            side_effect=[None, OSError("disk full"), None],
        ):
            with caplog.at_level(logging.ERROR, logger="spacetrack.persist"):
                written = persister.persist(tmp_path / "out", ROWS)

        assert written == 2
        assert "disk full" in caplog.text


def test_clean_up_counts_removed(tmp_path):
    folder = tmp_path / "out"
    folder.mkdir()
    for i in range(3):
        build_filepath(i, folder, Format.JSON).write_text("[]")
    assert clean_up(folder) == 3
    assert list(folder.iterdir()) == []
