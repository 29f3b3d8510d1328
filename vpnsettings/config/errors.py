"""
Exceptions raised by the settings aggregate.
"""

from __future__ import annotations


class SettingsValidationError(ValueError):
    """
    A setting group reported invalid values.

    The message is prefixed with the group's stable name, for example
    ``"dns settings: update period must be ..."``, so callers can tell which
    subsystem failed without walking the cause chain.
    """

    def __init__(self, group: str, cause: BaseException):
        super().__init__(f"{group} settings: {cause}")
        self.group = group
        self.cause = cause


class OverrideRejectedError(SettingsValidationError):
    """
    An override was rejected because the patched settings failed validation.

    The settings the override was applied to are left unchanged.
    """
