from __future__ import annotations


class OCILauncherError(Exception):
    """Base exception for instance launcher operations."""

    pass


class ConfigurationError(OCILauncherError):
    """Raised when a required setting is missing or a value is invalid."""

    pass


class DomainListError(OCILauncherError):
    """Raised when availability domains cannot be listed."""

    pass
