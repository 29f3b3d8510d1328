"""
Public IP check configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import (
    DEFAULT_PUBLIC_IP_API,
    DEFAULT_PUBLIC_IP_FILEPATH,
    DEFAULT_PUBLIC_IP_PERIOD,
    MIN_PUBLIC_IP_PERIOD,
    PUBLIC_IP_APIS,
)


@dataclass
class PublicIP:
    """
    Configuration for periodic public IP lookups.
    """

    period: Optional[int] = None
    """Seconds between lookups, 0 disables them."""

    ip_filepath: Optional[str] = None
    """File the public IP is written to."""

    api: Optional[str] = None
    """Lookup service name."""

    token: Optional[str] = None
    """API token, empty for anonymous access."""

    def validate(self) -> None:
        helpers.validate_period(self.period, MIN_PUBLIC_IP_PERIOD, "period")
        if self.period and not self.ip_filepath:
            raise ValueError("IP file path must be set when the public IP check is enabled")
        if not helpers.is_one_of(self.api, PUBLIC_IP_APIS):
            raise ValueError(f"API {self.api!r} must be one of {', '.join(PUBLIC_IP_APIS)}")

    def copy(self) -> PublicIP:
        return deepcopy(self)

    def merge_with(self, other: PublicIP) -> None:
        self.period = helpers.merge_with(self.period, other.period)
        self.ip_filepath = helpers.merge_with(self.ip_filepath, other.ip_filepath)
        self.api = helpers.merge_with(self.api, other.api)
        self.token = helpers.merge_with(self.token, other.token)

    def override_with(self, other: PublicIP) -> None:
        self.period = helpers.override_with(self.period, other.period)
        self.ip_filepath = helpers.override_with(self.ip_filepath, other.ip_filepath)
        self.api = helpers.override_with(self.api, other.api)
        self.token = helpers.override_with(self.token, other.token)

    def set_defaults(self) -> None:
        self.period = helpers.default_to(self.period, DEFAULT_PUBLIC_IP_PERIOD)
        self.ip_filepath = helpers.default_to(self.ip_filepath, DEFAULT_PUBLIC_IP_FILEPATH)
        self.api = helpers.default_to(self.api, DEFAULT_PUBLIC_IP_API)
        self.token = helpers.default_to(self.token, "")

    def to_node(self) -> Tree:
        node = helpers.new_node("Public IP settings:")
        if not self.period:
            helpers.add_line(node, "Enabled: no")
            return node

        helpers.add_line(node, f"Fetching: every {helpers.format_duration(self.period)}")
        helpers.add_line(node, f"IP file path: {self.ip_filepath}")
        helpers.add_line(node, f"Public IP data API: {self.api}")
        if self.token:
            helpers.add_line(node, f"API token: {helpers.obfuscate(self.token)}")
        return node
