"""Root configuration model for the spacetrack YAML config file."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..query.types import Format

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class CookieConfig(BaseModel):
    """Session cookie handed out by ``/ajaxauth/login``."""

    name: str
    value: str
    expires: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        expires = self.expires
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=timezone.utc)
        return expires <= now

    def header(self) -> str:
        return f"{self.name}={self.value}"


class AuthConfig(BaseModel):
    """Space-track credentials.

    ``identity`` and ``password`` are stored encrypted when the config was
    written by ``spacetrack credentials``; ``secret`` is the passphrase that
    decrypts them and is never written back to disk.
    """

    identity: str = ""
    password: str = ""
    cookie: Optional[CookieConfig] = None
    secret: str = Field(default="", exclude=True)

    def needs_login(self, now: Optional[datetime] = None) -> bool:
        return self.cookie is None or self.cookie.is_expired(now)


class LoggerConfig(BaseModel):
    level: str = "info"
    console: bool = True
    files: List[str] = Field(default_factory=list)
    date_format: str = "iso8601"

    @field_validator("level")
    @classmethod
    def level_known(cls, v: str) -> str:
        level = v.lower()
        if level == "warn":
            level = "warning"
        if level not in LOG_LEVELS:
            raise ValueError(
                f"logger level not allowed: {v}. Use one of {', '.join(LOG_LEVELS)}"
            )
        return level


class Config(BaseModel):
    """Root spacetrack configuration."""

    auth: AuthConfig = Field(default_factory=AuthConfig)
    work_dir: str = ""
    interval: str = ""
    secret_file: str = ""
    one_file: bool = False
    format: Format = Format.JSON
    logger: LoggerConfig = Field(default_factory=LoggerConfig)

    @field_validator("format", mode="before")
    @classmethod
    def format_any_case(cls, v):
        if isinstance(v, str):
            return Format.parse(v)
        return v


__all__ = ["AuthConfig", "Config", "CookieConfig", "LOG_LEVELS", "LoggerConfig"]
