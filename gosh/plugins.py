"""A registry of extra commands looked up by name."""

from abc import ABC, abstractmethod


class Plugin(ABC):
    """A named command that can be registered with the shell."""

    name = ""

    @abstractmethod
    def run(self, args):
        """Run the plugin with the given arguments."""


_registry = {}


def register(plugin):
    """Register ``plugin`` under its name, replacing any earlier one."""
    _registry[plugin.name] = plugin


def get(name):
    """Return the plugin registered as ``name``, or None."""
    return _registry.get(name)


def list_plugins():
    """Return the names of all registered plugins."""
    return list(_registry)