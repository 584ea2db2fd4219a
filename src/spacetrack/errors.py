"""Errors raised by the client, configuration and persistence layers."""

from __future__ import annotations


class SpaceTrackError(Exception):
    """Base error for everything outside query validation."""


class ConfigError(SpaceTrackError):
    """Configuration file or option value is invalid."""


class CredentialsError(SpaceTrackError):
    """Credentials can not be decrypted or the passphrase is malformed."""


class AuthenticationError(SpaceTrackError):
    """Login to space-track was refused."""


class ResponseError(SpaceTrackError):
    """Space-track answered with an unexpected status code."""

    def __init__(self, message: str, status: int = 0, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class ContentTypeError(SpaceTrackError):
    """Response body is not JSON and can not be decoded into rows."""


__all__ = [
    "AuthenticationError",
    "ConfigError",
    "ContentTypeError",
    "CredentialsError",
    "ResponseError",
    "SpaceTrackError",
]
