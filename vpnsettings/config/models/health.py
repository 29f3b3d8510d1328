"""
Health check configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import (
    DEFAULT_HEALTH_SERVER_ADDRESS,
    DEFAULT_HEALTH_SUCCESS_WAIT,
    DEFAULT_HEALTH_TARGET_ADDRESS,
    DEFAULT_HEALTH_VPN_ADDITION,
    DEFAULT_HEALTH_VPN_INITIAL,
)


@dataclass
class Health:
    """
    Configuration for the health server and the VPN health checks.

    Durations are in seconds.
    """

    server_address: Optional[str] = None
    """Listening address of the health server."""

    target_address: Optional[str] = None
    """Address dialed to check connectivity through the tunnel."""

    success_wait: Optional[int] = None
    """Wait between checks once healthy."""

    vpn_initial: Optional[int] = None
    """Initial timeout before restarting an unhealthy VPN."""

    vpn_addition: Optional[int] = None
    """Timeout increment after each unsuccessful restart."""

    def validate(self) -> None:
        helpers.validate_address(self.server_address, "server listening address")
        helpers.validate_address(self.target_address, "target address")
        for name, value in (
            ("success wait duration", self.success_wait),
            ("VPN initial duration", self.vpn_initial),
            ("VPN addition duration", self.vpn_addition),
        ):
            if value is None or value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    def copy(self) -> Health:
        return deepcopy(self)

    def merge_with(self, other: Health) -> None:
        self.server_address = helpers.merge_with(self.server_address, other.server_address)
        self.target_address = helpers.merge_with(self.target_address, other.target_address)
        self.success_wait = helpers.merge_with(self.success_wait, other.success_wait)
        self.vpn_initial = helpers.merge_with(self.vpn_initial, other.vpn_initial)
        self.vpn_addition = helpers.merge_with(self.vpn_addition, other.vpn_addition)

    def override_with(self, other: Health) -> None:
        self.server_address = helpers.override_with(self.server_address, other.server_address)
        self.target_address = helpers.override_with(self.target_address, other.target_address)
        self.success_wait = helpers.override_with(self.success_wait, other.success_wait)
        self.vpn_initial = helpers.override_with(self.vpn_initial, other.vpn_initial)
        self.vpn_addition = helpers.override_with(self.vpn_addition, other.vpn_addition)

    def set_defaults(self) -> None:
        self.server_address = helpers.default_to(self.server_address, DEFAULT_HEALTH_SERVER_ADDRESS)
        self.target_address = helpers.default_to(self.target_address, DEFAULT_HEALTH_TARGET_ADDRESS)
        self.success_wait = helpers.default_to(self.success_wait, DEFAULT_HEALTH_SUCCESS_WAIT)
        self.vpn_initial = helpers.default_to(self.vpn_initial, DEFAULT_HEALTH_VPN_INITIAL)
        self.vpn_addition = helpers.default_to(self.vpn_addition, DEFAULT_HEALTH_VPN_ADDITION)

    def to_node(self) -> Tree:
        node = helpers.new_node("Health settings:")
        helpers.add_line(node, f"Server listening address: {self.server_address}")
        helpers.add_line(node, f"Target address: {self.target_address}")
        helpers.add_line(node, f"Duration to wait after success: {helpers.format_duration(self.success_wait)}")
        vpn = helpers.add_line(node, "VPN wait durations:")
        helpers.add_line(vpn, f"Initial duration: {helpers.format_duration(self.vpn_initial)}")
        helpers.add_line(vpn, f"Additional duration: {helpers.format_duration(self.vpn_addition)}")
        return node
