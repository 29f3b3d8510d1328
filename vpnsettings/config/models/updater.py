"""
Server data updater configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import (
    CUSTOM,
    DEFAULT_UPDATER_DNS_ADDRESS,
    DEFAULT_UPDATER_MIN_RATIO,
    DEFAULT_UPDATER_PERIOD,
    MIN_UPDATER_PERIOD,
    PROVIDERS,
)


@dataclass
class Updater:
    """
    Configuration for the periodic VPN server data updater.

    Merge keeps existing values, override takes incoming values and replaces
    the provider list wholesale.
    """

    period: Optional[int] = None
    """Seconds between updates, 0 disables the updater."""

    dns_address: Optional[str] = None
    """Plaintext DNS server used while updating."""

    min_ratio: Optional[float] = None
    """Minimum ratio of new to old server count accepted from an update."""

    providers: Optional[List[str]] = None
    """Providers whose server data is updated."""

    def validate(self) -> None:
        helpers.validate_period(self.period, MIN_UPDATER_PERIOD, "period")
        helpers.validate_address(self.dns_address, "DNS address")

        if self.min_ratio is None or self.min_ratio <= 0 or self.min_ratio > 1:
            raise ValueError(f"minimum ratio {self.min_ratio} must be in the range (0, 1]")

        for provider in self.providers or []:
            if provider.lower() == CUSTOM or not helpers.is_one_of(provider, PROVIDERS):
                raise ValueError(f"provider {provider!r} cannot be updated")

    def copy(self) -> Updater:
        return deepcopy(self)

    def merge_with(self, other: Updater) -> None:
        self.period = helpers.merge_with(self.period, other.period)
        self.dns_address = helpers.merge_with(self.dns_address, other.dns_address)
        self.min_ratio = helpers.merge_with(self.min_ratio, other.min_ratio)
        self.providers = helpers.merge_with(self.providers, other.providers)

    def override_with(self, other: Updater) -> None:
        self.period = helpers.override_with(self.period, other.period)
        self.dns_address = helpers.override_with(self.dns_address, other.dns_address)
        self.min_ratio = helpers.override_with(self.min_ratio, other.min_ratio)
        self.providers = helpers.override_with(self.providers, other.providers)

    def set_defaults(self, vpn_provider: str) -> None:
        """
        Set defaults, updating the active VPN provider unless it is custom.

        An explicitly empty provider list is kept, so updates stay off.

        Args:
            vpn_provider: The already-defaulted VPN provider name.
        """
        self.period = helpers.default_to(self.period, DEFAULT_UPDATER_PERIOD)
        self.dns_address = helpers.default_to(self.dns_address, DEFAULT_UPDATER_DNS_ADDRESS)
        self.min_ratio = helpers.default_to(self.min_ratio, DEFAULT_UPDATER_MIN_RATIO)
        if self.providers is None and vpn_provider.lower() != CUSTOM:
            self.providers = [vpn_provider.lower()]
        self.providers = helpers.default_to(self.providers, [])

    def to_node(self) -> Tree:
        node = helpers.new_node("Server data updater settings:")
        if not self.period:
            helpers.add_line(node, "Update period: disabled")
            return node

        helpers.add_line(node, f"Update period: every {helpers.format_duration(self.period)}")
        helpers.add_line(node, f"DNS address: {self.dns_address}")
        helpers.add_line(node, f"Minimum ratio: {self.min_ratio:.1f}")
        helpers.add_line(node, f"Providers to update: {helpers.join_or_none(self.providers)}")
        return node
