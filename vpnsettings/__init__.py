"""
Composite settings aggregator for a VPN client container.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

_LAZY_EXPORTS = {
    "Settings": ("vpnsettings.config.models", "Settings"),
    "load_settings_from_file": ("vpnsettings.config.loader", "load_settings_from_file"),
}

__all__ = ["__version__", "Settings", "load_settings_from_file"]


def __getattr__(name: str) -> Any:
    if name in _LAZY_EXPORTS:
        module_name, attr_name = _LAZY_EXPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'vpnsettings' has no attribute '{name}'")
