"""Plugin config loading and activation.

A config file looks like::

    {"config_version": 1,
     "plugins": [{"entrypoint": "package.module:Factory",
                  "options": {...}, "enabled": true}]}

``active_plugins`` prefers a manager installed with ``use_plugins`` and
otherwise loads the file named by ``DIFFKIT_PLUGIN_CONFIG``.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
import importlib
import json
import os
from pathlib import Path
from typing import Any, Iterator

from jsonschema import Draft202012Validator

from diffpack.plugins.events import PLUGIN_API_VERSION
from diffpack.plugins.exceptions import PluginConfigError, PluginLoadError
from diffpack.plugins.manager import PluginManager

PLUGIN_CONFIG_ENV_VAR = "DIFFKIT_PLUGIN_CONFIG"
PLUGIN_CONFIG_VERSION = 1

PLUGIN_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "diffkit plugin config",
    "type": "object",
    "required": ["config_version", "plugins"],
    "additionalProperties": False,
    "properties": {
        "config_version": {"const": PLUGIN_CONFIG_VERSION},
        "plugins": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["entrypoint"],
                "additionalProperties": False,
                "properties": {
                    "entrypoint": {
                        "type": "string",
                        "pattern": r"^[A-Za-z_][\w.]*:[A-Za-z_]\w*$",
                    },
                    "options": {"type": "object"},
                    "enabled": {"type": "boolean"},
                },
            },
        },
    },
}

_CONFIG_VALIDATOR = Draft202012Validator(PLUGIN_CONFIG_SCHEMA)
_NO_PLUGINS = PluginManager()
_OVERRIDE: ContextVar[PluginManager | None] = ContextVar("diffkit_plugins", default=None)


def load_plugins(path: str | Path) -> PluginManager:
    """Build a ``PluginManager`` from a config file.

    Unreadable or invalid config raises ``PluginConfigError``; an entrypoint
    that cannot be imported or built raises ``PluginLoadError``.
    """
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as error:
        raise PluginConfigError(
            f"could not read plugin config {config_path}: {error.strerror or error}"
        ) from error
    except json.JSONDecodeError as error:
        raise PluginConfigError(f"plugin config {config_path} is not JSON: {error}") from error

    validate_plugin_config(raw)
    return PluginManager(
        plugins=tuple(
            _build_plugin(entry, position=position)
            for position, entry in enumerate(raw["plugins"], start=1)
            if entry.get("enabled", True)
        )
    )


def validate_plugin_config(raw: Any) -> None:
    violations = sorted(
        _CONFIG_VALIDATOR.iter_errors(raw),
        key=lambda violation: [str(part) for part in violation.path],
    )
    if violations:
        location = ".".join(str(part) for part in violations[0].path) or "$"
        raise PluginConfigError(
            f"plugin config invalid at {location}: {violations[0].message}",
            location=location,
        )


def active_plugins() -> PluginManager:
    override = _OVERRIDE.get()
    if override is not None:
        return override
    config_path = os.getenv(PLUGIN_CONFIG_ENV_VAR, "").strip()
    if not config_path:
        return _NO_PLUGINS
    return _load_from_env(config_path)


@contextmanager
def use_plugins(manager: PluginManager) -> Iterator[PluginManager]:
    token = _OVERRIDE.set(manager)
    try:
        yield manager
    finally:
        _OVERRIDE.reset(token)


def reset_plugin_cache() -> None:
    """Forget configs loaded through the environment variable."""
    _load_from_env.cache_clear()


@lru_cache(maxsize=4)
def _load_from_env(config_path: str) -> PluginManager:
    return load_plugins(config_path)


def _build_plugin(entry: dict[str, Any], *, position: int) -> object:
    entrypoint = entry["entrypoint"]
    module_name, _, attribute = entrypoint.partition(":")
    try:
        factory = getattr(importlib.import_module(module_name), attribute)
    except (ImportError, AttributeError) as error:
        raise PluginLoadError(f"plugin #{position} ({entrypoint}) not importable: {error}") from error

    try:
        plugin = factory(**entry.get("options", {}))
    except Exception as error:
        raise PluginLoadError(f"plugin #{position} ({entrypoint}) failed to start: {error}") from error

    declared = str(getattr(plugin, "api_version", PLUGIN_API_VERSION))
    if declared.split(".")[0] != PLUGIN_API_VERSION.split(".")[0]:
        raise PluginLoadError(
            f"plugin #{position} ({entrypoint}) targets api_version {declared}, "
            f"expected {PLUGIN_API_VERSION}"
        )
    return plugin
