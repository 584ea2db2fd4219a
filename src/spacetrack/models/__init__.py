"""Pydantic models for configuration and fetched rows."""

from .config import AuthConfig, Config, CookieConfig, LoggerConfig
from .records import CdmRecord, DecayRecord, GpRecord, Record, records_for

__all__ = [
    "AuthConfig",
    "CdmRecord",
    "Config",
    "CookieConfig",
    "DecayRecord",
    "GpRecord",
    "LoggerConfig",
    "Record",
    "records_for",
]
