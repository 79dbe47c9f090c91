"""Centralized custom exception hierarchy for nav reconciliation."""
from __future__ import annotations


class RefNavError(Exception):
    """Base class for all refnav related errors."""


class ResolutionError(RefNavError):
    pass


class ConfigError(RefNavError):
    pass


class NavFormatError(ConfigError):
    pass


class WriteError(RefNavError):
    pass
