"""Event fan-out to configured plugins."""

from __future__ import annotations

from dataclasses import dataclass
import warnings

from diffpack.plugins.events import LifecycleEvent


@dataclass(frozen=True, slots=True)
class PluginManager:
    plugins: tuple[object, ...] = ()

    def notify(self, event: LifecycleEvent) -> None:
        """Deliver ``event`` to every plugin defining its hook.

        A plugin that raises is reported with a ``RuntimeWarning`` and the
        remaining plugins still receive the event.
        """
        for plugin in self.plugins:
            handler = getattr(plugin, event.hook, None)
            if handler is None:
                continue
            try:
                handler(event)
            except Exception as error:
                plugin_name = getattr(plugin, "name", plugin.__class__.__name__)
                warnings.warn(
                    f"diffkit plugin {plugin_name} failed in {event.hook}: "
                    f"{error.__class__.__name__}: {error}",
                    RuntimeWarning,
                    stacklevel=2,
                )
