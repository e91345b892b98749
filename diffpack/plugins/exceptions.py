"""Plugin subsystem exceptions."""

from __future__ import annotations


class PluginError(Exception):
    """Base class for diffkit plugin errors."""


class PluginConfigError(PluginError):
    """Plugin config file is unreadable JSON or fails schema validation."""

    def __init__(self, message: str, *, location: str | None = None) -> None:
        super().__init__(message)
        self.location = location


class PluginLoadError(PluginError):
    """A configured entrypoint could not be imported, built or version-checked."""
