"""An interactive shell with file, notes and math builtins, and a plugin registry."""

__version__ = "0.1.0"