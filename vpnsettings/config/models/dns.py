"""
DNS configuration model.
"""

from __future__ import annotations

import ipaddress
from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import (
    DEFAULT_DNS_ADDRESS,
    DEFAULT_DNS_UPDATE_PERIOD,
    DEFAULT_DNS_UPSTREAM_PROVIDERS,
    DNS_UPSTREAM_PROVIDERS,
    MIN_DNS_UPDATE_PERIOD,
)


@dataclass
class DNS:
    """
    Configuration for the built-in DNS server and its block lists.

    Merge keeps existing values (lists included), override takes incoming
    values and replaces lists wholesale.
    """

    server_enabled: Optional[bool] = None
    """Run the local DNS-over-TLS server."""

    address: Optional[str] = None
    """Nameserver IP written to resolv.conf."""

    keep_nameserver: Optional[bool] = None
    """Keep the nameserver inherited from the container runtime."""

    upstream_providers: Optional[List[str]] = None
    """Upstream DNS-over-TLS providers."""

    caching: Optional[bool] = None
    block_malicious: Optional[bool] = None
    block_ads: Optional[bool] = None
    block_surveillance: Optional[bool] = None

    allowed_hosts: Optional[List[str]] = None
    """Hostnames never blocked by the block lists."""

    update_period: Optional[int] = None
    """Block list refresh period in seconds, 0 disables updates."""

    def validate(self) -> None:
        try:
            ipaddress.ip_address(self.address or "")
        except ValueError:
            raise ValueError(f"address {self.address!r} is not a valid IP address") from None

        if self.server_enabled and not self.upstream_providers:
            raise ValueError("at least one upstream provider is required when the DNS server is enabled")

        for provider in self.upstream_providers or []:
            if not helpers.is_one_of(provider, DNS_UPSTREAM_PROVIDERS):
                raise ValueError(
                    f"upstream provider {provider!r} must be one of {', '.join(DNS_UPSTREAM_PROVIDERS)}"
                )

        helpers.validate_period(self.update_period, MIN_DNS_UPDATE_PERIOD, "update period")

    def copy(self) -> DNS:
        return deepcopy(self)

    def merge_with(self, other: DNS) -> None:
        self.server_enabled = helpers.merge_with(self.server_enabled, other.server_enabled)
        self.address = helpers.merge_with(self.address, other.address)
        self.keep_nameserver = helpers.merge_with(self.keep_nameserver, other.keep_nameserver)
        self.upstream_providers = helpers.merge_with(self.upstream_providers, other.upstream_providers)
        self.caching = helpers.merge_with(self.caching, other.caching)
        self.block_malicious = helpers.merge_with(self.block_malicious, other.block_malicious)
        self.block_ads = helpers.merge_with(self.block_ads, other.block_ads)
        self.block_surveillance = helpers.merge_with(self.block_surveillance, other.block_surveillance)
        self.allowed_hosts = helpers.merge_with(self.allowed_hosts, other.allowed_hosts)
        self.update_period = helpers.merge_with(self.update_period, other.update_period)

    def override_with(self, other: DNS) -> None:
        self.server_enabled = helpers.override_with(self.server_enabled, other.server_enabled)
        self.address = helpers.override_with(self.address, other.address)
        self.keep_nameserver = helpers.override_with(self.keep_nameserver, other.keep_nameserver)
        self.upstream_providers = helpers.override_with(self.upstream_providers, other.upstream_providers)
        self.caching = helpers.override_with(self.caching, other.caching)
        self.block_malicious = helpers.override_with(self.block_malicious, other.block_malicious)
        self.block_ads = helpers.override_with(self.block_ads, other.block_ads)
        self.block_surveillance = helpers.override_with(self.block_surveillance, other.block_surveillance)
        self.allowed_hosts = helpers.override_with(self.allowed_hosts, other.allowed_hosts)
        self.update_period = helpers.override_with(self.update_period, other.update_period)

    def set_defaults(self) -> None:
        self.server_enabled = helpers.default_to(self.server_enabled, True)
        self.address = helpers.default_to(self.address, DEFAULT_DNS_ADDRESS)
        self.keep_nameserver = helpers.default_to(self.keep_nameserver, False)
        self.upstream_providers = helpers.default_to(self.upstream_providers, DEFAULT_DNS_UPSTREAM_PROVIDERS)
        self.caching = helpers.default_to(self.caching, True)
        self.block_malicious = helpers.default_to(self.block_malicious, True)
        self.block_ads = helpers.default_to(self.block_ads, False)
        self.block_surveillance = helpers.default_to(self.block_surveillance, False)
        self.allowed_hosts = helpers.default_to(self.allowed_hosts, [])
        self.update_period = helpers.default_to(self.update_period, DEFAULT_DNS_UPDATE_PERIOD)

    def to_node(self) -> Tree:
        node = helpers.new_node("DNS settings:")
        helpers.add_line(node, f"Keep existing nameserver(s): {helpers.yes_no(self.keep_nameserver)}")
        helpers.add_line(node, f"DNS server address to use: {self.address}")
        if not self.server_enabled:
            helpers.add_line(node, "DNS over TLS server: disabled")
            return node

        server = helpers.add_line(node, "DNS over TLS server:")
        helpers.add_line(server, f"Upstream providers: {helpers.join_or_none(self.upstream_providers)}")
        helpers.add_line(server, f"Caching: {helpers.yes_no(self.caching)}")

        blocking = helpers.add_line(server, "DNS filtering settings:")
        helpers.add_line(blocking, f"Block malicious: {helpers.yes_no(self.block_malicious)}")
        helpers.add_line(blocking, f"Block ads: {helpers.yes_no(self.block_ads)}")
        helpers.add_line(blocking, f"Block surveillance: {helpers.yes_no(self.block_surveillance)}")
        if self.allowed_hosts:
            helpers.add_line(blocking, f"Allowed hosts: {helpers.join_or_none(self.allowed_hosts)}")
        if self.update_period:
            helpers.add_line(blocking, f"Update period: every {helpers.format_duration(self.update_period)}")
        else:
            helpers.add_line(blocking, "Update period: disabled")
        return node
