"""
VPN configuration model combining provider, OpenVPN and Wireguard settings.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers
from vpnsettings.config.storage import Storage

from .constants import DEFAULT_VPN_TYPE, VPN_OPENVPN, VPN_TYPES
from .openvpn import OpenVPN
from .provider import Provider
from .wireguard import Wireguard


@dataclass
class VPN:
    """
    Configuration for the VPN tunnel.

    Only the sub-group matching ``type`` is validated and displayed.
    """

    type: Optional[str] = None
    """Tunnel type: openvpn or wireguard."""

    provider: Provider = field(default_factory=Provider)
    openvpn: OpenVPN = field(default_factory=OpenVPN)
    wireguard: Wireguard = field(default_factory=Wireguard)

    def validate(self, storage: Storage, ipv6_supported: bool) -> None:
        """
        Validate VPN settings.

        Args:
            storage: Source of the provider's server filter choices.
            ipv6_supported: Whether the host network stack supports IPv6.

        Raises:
            ValueError: If any field has an invalid value.
        """
        if self.type not in VPN_TYPES:
            raise ValueError(f"VPN type {self.type!r} must be one of {', '.join(VPN_TYPES)}")

        try:
            self.provider.validate(self.type, storage)
        except ValueError as exc:
            raise ValueError(f"provider settings: {exc}") from exc

        if self.type == VPN_OPENVPN:
            try:
                self.openvpn.validate(self.provider.name or "")
            except ValueError as exc:
                raise ValueError(f"OpenVPN settings: {exc}") from exc
        else:
            try:
                self.wireguard.validate(ipv6_supported)
            except ValueError as exc:
                raise ValueError(f"Wireguard settings: {exc}") from exc

    def copy(self) -> VPN:
        return deepcopy(self)

    def merge_with(self, other: VPN) -> None:
        self.type = helpers.merge_with(self.type, other.type)
        self.provider.merge_with(other.provider)
        self.openvpn.merge_with(other.openvpn)
        self.wireguard.merge_with(other.wireguard)

    def override_with(self, other: VPN) -> None:
        self.type = helpers.override_with(self.type, other.type)
        self.provider.override_with(other.provider)
        self.openvpn.override_with(other.openvpn)
        self.wireguard.override_with(other.wireguard)

    def set_defaults(self) -> None:
        self.type = helpers.default_to(self.type, DEFAULT_VPN_TYPE)
        self.provider.set_defaults()
        self.openvpn.set_defaults()
        self.wireguard.set_defaults()

    def to_node(self) -> Tree:
        node = helpers.new_node("VPN settings:")
        helpers.append_node(node, self.provider.to_node())
        if self.type == VPN_OPENVPN:
            helpers.append_node(node, self.openvpn.to_node())
        else:
            helpers.append_node(node, self.wireguard.to_node())
        return node
