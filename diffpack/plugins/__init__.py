"""Lifecycle plugins for the document boundary."""

from diffpack.plugins.config import (
    PLUGIN_CONFIG_ENV_VAR,
    PLUGIN_CONFIG_SCHEMA,
    PLUGIN_CONFIG_VERSION,
    active_plugins,
    load_plugins,
    reset_plugin_cache,
    use_plugins,
    validate_plugin_config,
)
from diffpack.plugins.events import (
    PLUGIN_API_VERSION,
    DiffEndEvent,
    DiffStartEvent,
    DocumentReadEvent,
    LifecycleEvent,
    LifecyclePlugin,
)
from diffpack.plugins.exceptions import PluginConfigError, PluginError, PluginLoadError
from diffpack.plugins.manager import PluginManager
from diffpack.plugins.trace import TraceFilePlugin

__all__ = [
    "PLUGIN_API_VERSION",
    "PLUGIN_CONFIG_ENV_VAR",
    "PLUGIN_CONFIG_SCHEMA",
    "PLUGIN_CONFIG_VERSION",
    "PluginError",
    "PluginConfigError",
    "PluginLoadError",
    "DocumentReadEvent",
    "DiffStartEvent",
    "DiffEndEvent",
    "LifecycleEvent",
    "LifecyclePlugin",
    "PluginManager",
    "TraceFilePlugin",
    "load_plugins",
    "validate_plugin_config",
    "active_plugins",
    "use_plugins",
    "reset_plugin_cache",
]
