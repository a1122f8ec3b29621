"""Exception hierarchy for corsheaders.

All library exceptions inherit from CorsHeadersException. They are raised
while a configuration is being built, bound or installed, never from the
per-request path.

Categories:
- CorsConfigurationException: a configuration that cannot be built or installed
- ConfigurationLoadException: configuration files and placeholder resolution
"""

from __future__ import annotations


class CorsHeadersException(Exception):
    """Base exception for all corsheaders errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_CONFIG_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class CorsConfigurationException(CorsHeadersException):
    """A CORS configuration was rejected while building or installing it."""


class ConfigurationLoadException(CorsHeadersException):
    """A configuration source could not be read or resolved."""
