"""
Wireguard client configuration model.
"""

from __future__ import annotations

import base64
import binascii
import ipaddress
from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import DEFAULT_WIREGUARD_IMPLEMENTATION, WIREGUARD_IMPLEMENTATIONS


@dataclass
class Wireguard:
    """
    Configuration for the Wireguard client.

    Merge keeps existing values, override takes incoming values and replaces
    the address list wholesale.
    """

    private_key: Optional[str] = None
    """Base64 encoded 32 byte private key."""

    addresses: Optional[List[str]] = None
    """Interface addresses in CIDR notation."""

    implementation: Optional[str] = None
    """auto, kernelspace or userspace."""

    def validate(self, ipv6_supported: bool) -> None:
        """
        Validate Wireguard settings.

        Args:
            ipv6_supported: Whether the host network stack supports IPv6.
                IPv6 interface addresses are rejected when it does not.
        """
        if not self.private_key:
            raise ValueError("private key is required")
        try:
            key = base64.b64decode(self.private_key, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("private key is not valid base64") from None
        if len(key) != 32:
            raise ValueError(f"private key must decode to 32 bytes, got {len(key)}")

        if not self.addresses:
            raise ValueError("at least one interface address is required")
        for address in self.addresses:
            try:
                network = ipaddress.ip_network(address, strict=False)
            except ValueError:
                raise ValueError(f"interface address {address!r} is not valid") from None
            if network.version == 6 and not ipv6_supported:
                raise ValueError(f"interface address {address} is IPv6 but IPv6 is not supported")

        if self.implementation not in WIREGUARD_IMPLEMENTATIONS:
            raise ValueError(
                f"implementation {self.implementation!r} must be one of "
                f"{', '.join(WIREGUARD_IMPLEMENTATIONS)}"
            )

    def copy(self) -> Wireguard:
        return deepcopy(self)

    def merge_with(self, other: Wireguard) -> None:
        self.private_key = helpers.merge_with(self.private_key, other.private_key)
        self.addresses = helpers.merge_with(self.addresses, other.addresses)
        self.implementation = helpers.merge_with(self.implementation, other.implementation)

    def override_with(self, other: Wireguard) -> None:
        self.private_key = helpers.override_with(self.private_key, other.private_key)
        self.addresses = helpers.override_with(self.addresses, other.addresses)
        self.implementation = helpers.override_with(self.implementation, other.implementation)

    def set_defaults(self) -> None:
        self.private_key = helpers.default_to(self.private_key, "")
        self.addresses = helpers.default_to(self.addresses, [])
        self.implementation = helpers.default_to(self.implementation, DEFAULT_WIREGUARD_IMPLEMENTATION)

    def to_node(self) -> Tree:
        node = helpers.new_node("Wireguard settings:")
        helpers.add_line(node, f"Private key: {helpers.obfuscate(self.private_key)}")
        helpers.add_line(node, f"Interface addresses: {helpers.join_or_none(self.addresses)}")
        helpers.add_line(node, f"Implementation: {self.implementation}")
        return node
