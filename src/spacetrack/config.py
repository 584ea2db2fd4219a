"""Config file resolution, loading and persistence."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .models.config import Config, CookieConfig

CONFIG_ENV = "SPACETRACK_CONFIG"
PROJECT_CONFIG_NAME = "spacetrack.yml"
USER_CONFIG_NAME = ".spacetrack.yaml"

ENV_OVERRIDES = {
    "SPACETRACK_IDENTITY": ("auth", "identity"),
    "SPACETRACK_PASSWORD": ("auth", "password"),
    "SPACETRACK_WORK_DIR": ("work_dir",),
}

MIN_INTERVAL = timedelta(minutes=5)
MAX_INTERVAL = timedelta(hours=24)

_DURATION_PART = re.compile(r"(\d+)(h|m|s)")
_UNITS = {"h": "hours", "m": "minutes", "s": "seconds"}


def resolve_config_path(option: Optional[str | Path] = None) -> Path:
    """Resolve which config file to use.

    Resolution order:
    1. --config CLI option (explicit override)
    2. $SPACETRACK_CONFIG environment variable
    3. ./spacetrack.yml if it exists (project-local)
    4. ~/.spacetrack.yaml (user global, also the default write target)
    """
    if option:
        return Path(option)

    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)

    project = Path.cwd() / PROJECT_CONFIG_NAME
    if project.is_file():
        return project

    return Path.home() / USER_CONFIG_NAME


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must hold a mapping")
    return data


def _apply_env(data: Dict[str, Any]) -> Dict[str, Any]:
    for env_name, keys in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        target = data
        for key in keys[:-1]:
            nested = target.get(key)
            if not isinstance(nested, dict):
                nested = {}
                target[key] = nested
            target = nested
        target[keys[-1]] = value
    return data


def load_config(path: Optional[Path] = None) -> Config:
    """Load ``path`` (missing file means defaults) and apply env overrides."""
    data: Dict[str, Any] = {}
    if path is not None and path.is_file():
        data = _read_yaml(path)

    try:
        return Config.model_validate(_apply_env(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def save_config(config: Config, path: Path) -> None:
    """Write ``config`` to ``path`` as YAML, keeping secrets out of it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json", exclude_none=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")


def update_auth(path: Path, values: Dict[str, Any], create: bool = False) -> bool:
    """Merge ``values`` into the ``auth`` section of the file at ``path``.

    Only that section is touched so values given on the command line or
    through the environment never end up on disk. Returns False when the
    file does not exist and ``create`` is not set.
    """
    if path.is_file():
        data = _read_yaml(path)
    elif create:
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {}
    else:
        return False

    auth = data.get("auth")
    if not isinstance(auth, dict):
        auth = {}
        data["auth"] = auth
    auth.update(values)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return True


def stored_auth(path: Path) -> Dict[str, Any]:
    """The raw ``auth`` section of the file at ``path``, empty when missing."""
    if not path.is_file():
        return {}
    auth = _read_yaml(path).get("auth")
    return auth if isinstance(auth, dict) else {}


def save_cookie(cookie: CookieConfig, path: Path) -> bool:
    """Store a fresh session cookie into an existing config file."""
    return update_auth(path, {"cookie": cookie.model_dump(mode="json")})


def parse_interval(text: str) -> timedelta:
    """Parse ``1h``, ``10m``, ``1h30m`` or ``300s`` into a timedelta.

    Raises:
        ConfigError: If the text is malformed or outside 5 minutes to 24 hours.
    """
    text = text.strip().lower()
    if not text or _DURATION_PART.sub("", text):
        raise ConfigError(f"invalid interval {text!r}: use forms like 10m, 1h, 1h30m")

    interval = timedelta()
    for amount, unit in _DURATION_PART.findall(text):
        interval += timedelta(**{_UNITS[unit]: int(amount)})

    if not MIN_INTERVAL <= interval <= MAX_INTERVAL:
        raise ConfigError(
            f"interval {text!r} out of range: minimum is 5 minutes and maximum is 24 hours"
        )
    return interval


__all__ = [
    "CONFIG_ENV",
    "load_config",
    "parse_interval",
    "resolve_config_path",
    "save_config",
    "save_cookie",
    "stored_auth",
    "update_auth",
]
