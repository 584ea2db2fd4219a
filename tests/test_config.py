"""Tests for config file resolution, loading and interval parsing."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import yaml

from spacetrack.config import (
    load_config,
    parse_interval,
    resolve_config_path,
    save_config,
    save_cookie,
    stored_auth,
    update_auth,
)
from spacetrack.errors import ConfigError
from spacetrack.models import Config, CookieConfig
from spacetrack.query import Format


class TestResolveConfigPath:
    def test_option_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SPACETRACK_CONFIG", str(tmp_path / "env.yaml"))
        assert resolve_config_path(tmp_path / "cli.yaml") == tmp_path / "cli.yaml"

    def test_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SPACETRACK_CONFIG", str(tmp_path / "env.yaml"))
        assert resolve_config_path() == tmp_path / "env.yaml"

    def test_project_file(self, tmp_path):
        (tmp_path / "spacetrack.yml").write_text("work_dir: data\n")
        assert resolve_config_path() == Path.cwd() / "spacetrack.yml"

    def test_user_default(self, isolated_env):
        assert resolve_config_path() == isolated_env / ".spacetrack.yaml"


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")
        assert config == Config()
        assert config.format is Format.JSON
        assert config.logger.level == "info"

    def test_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "auth": {
                        "identity": "me@example.com",
                        "password": "hunter22",
                        "cookie": {
                            "name": "chocolatechip",
                            "value": "abc",
                            "expires": "2030-01-01T00:00:00+00:00",
                        },
                    },
                    "work_dir": "/data",
                    "one_file": True,
                    "format": "CSV",
                    "logger": {"level": "WARN", "files": ["spacetrack.log"]},
                }
            )
        )
        config = load_config(path)

        assert config.auth.identity == "me@example.com"
        assert config.auth.cookie.value == "abc"
        assert not config.auth.needs_login()
        assert config.work_dir == "/data"
        assert config.one_file is True
        assert config.format is Format.CSV
        assert config.logger.level == "warning"
        assert config.logger.files == ["spacetrack.log"]

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("auth:\n  identity: file-user\nwork_dir: /file\n")
        monkeypatch.setenv("SPACETRACK_IDENTITY", "env-user")
        monkeypatch.setenv("SPACETRACK_PASSWORD", "env-pass")
        monkeypatch.setenv("SPACETRACK_WORK_DIR", "/env")

        config = load_config(path)

        assert config.auth.identity == "env-user"
        assert config.auth.password == "env-pass"
        assert config.work_dir == "/env"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("auth: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize(
        "content", ["format: yaml\n", "logger:\n  level: loud\n", "one_file: maybe\n"]
    )
    def test_invalid_values(self, tmp_path, content):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError):
            load_config(path)


class TestSaveConfig:
    def test_secret_never_written(self, tmp_path):
        config = Config(work_dir="/data", format=Format.XML)
        config.auth.identity = "me"
        config.auth.secret = "do not store"
        path = tmp_path / "nested" / "config.yaml"

        save_config(config, path)

        text = path.read_text()
        assert "do not store" not in text
        assert load_config(path) == Config(
            work_dir="/data", format=Format.XML, auth={"identity": "me"}
        )

    def test_update_auth_keeps_other_sections(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("work_dir: /data\nauth:\n  identity: old\n")

        assert update_auth(path, {"identity": "new", "password": "enc"})

        data = yaml.safe_load(path.read_text())
        assert data == {"work_dir": "/data", "auth": {"identity": "new", "password": "enc"}}

    def test_update_auth_missing_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        assert not update_auth(path, {"identity": "x"})
        assert not path.exists()
        assert update_auth(path, {"identity": "x"}, create=True)
        assert yaml.safe_load(path.read_text()) == {"auth": {"identity": "x"}}

    def test_save_cookie(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("auth:\n  identity: me\n")
        expires = datetime(2030, 1, 1, tzinfo=timezone.utc)

        save_cookie(CookieConfig(name="chocolatechip", value="abc", expires=expires), path)

        cookie = load_config(path).auth.cookie
        assert cookie.value == "abc"
        assert cookie.expires == expires

    def test_stored_auth(self, tmp_path):
        path = tmp_path / "config.yaml"
        assert stored_auth(path) == {}

        path.write_text("work_dir: /data\n")
        assert stored_auth(path) == {}

        path.write_text("auth:\n  identity: enc\n")
        assert stored_auth(path) == {"identity": "enc"}


class TestCookie:
    def test_expired(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        cookie = CookieConfig(name="chocolatechip", value="abc", expires=now)
        assert cookie.is_expired(now)
        assert not cookie.is_expired(now - timedelta(seconds=1))

    def test_naive_expiry_treated_as_utc(self):
        cookie = CookieConfig(name="c", value="v", expires=datetime(2024, 1, 1))
        assert cookie.is_expired(datetime(2024, 1, 1, 0, 0, 1, tzinfo=timezone.utc))

    def test_header(self):
        cookie = CookieConfig(name="chocolatechip", value="abc", expires=datetime.now())
        assert cookie.header() == "chocolatechip=abc"


class TestParseInterval:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("5m", timedelta(minutes=5)),
            ("300s", timedelta(minutes=5)),
            ("1h", timedelta(hours=1)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("24h", timedelta(hours=24)),
            (" 10M ", timedelta(minutes=10)),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_interval(text) == expected

    @pytest.mark.parametrize("text", ["", "10", "1d", "abc", "1h 30m", "-5m"])
    def test_malformed(self, text):
        with pytest.raises(ConfigError, match="invalid interval"):
            parse_interval(text)

    @pytest.mark.parametrize("text", ["4m", "299s", "25h", "24h1s"])
    def test_out_of_range(self, text):
        with pytest.raises(ConfigError, match="out of range"):
            parse_interval(text)
