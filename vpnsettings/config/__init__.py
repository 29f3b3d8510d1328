"""
Settings aggregation for vpnsettings.

This package provides the setting group models, the ``Settings`` aggregate
and loaders for settings fragments.
"""

from .errors import OverrideRejectedError, SettingsValidationError
from .models import Settings
from .storage import FilterChoices, ServersFileStorage, Storage
from .loader import load_settings_from_file

__all__ = [
    "FilterChoices",
    "OverrideRejectedError",
    "ServersFileStorage",
    "Settings",
    "SettingsValidationError",
    "Storage",
    "load_settings_from_file",
]
