"""
Firewall configuration model.
"""

from __future__ import annotations

import ipaddress
from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

from rich.tree import Tree

from vpnsettings.config import helpers


def _validate_ports(ports: Optional[List[int]], field: str) -> None:
    for port in ports or []:
        if port < 1 or port > 65535:
            raise ValueError(f"{field} port {port} must be between 1 and 65535")


@dataclass
class Firewall:
    """
    Configuration for the kill-switch firewall.

    Merge keeps existing values (lists included), override takes incoming
    values and replaces port and subnet lists wholesale.
    """

    enabled: Optional[bool] = None
    vpn_input_ports: Optional[List[int]] = None
    """Ports allowed in through the VPN interface."""

    input_ports: Optional[List[int]] = None
    """Ports allowed in through the default interface."""

    outbound_subnets: Optional[List[str]] = None
    """Subnets reachable outside the VPN tunnel."""

    debug: Optional[bool] = None

    def validate(self) -> None:
        _validate_ports(self.vpn_input_ports, "VPN input")
        _validate_ports(self.input_ports, "input")

        for subnet in self.outbound_subnets or []:
            try:
                network = ipaddress.ip_network(subnet, strict=False)
            except ValueError:
                raise ValueError(f"outbound subnet {subnet!r} is not a valid network") from None
            if network.prefixlen == 0:
                raise ValueError(f"outbound subnet {subnet!r} cannot be the default route")

    def copy(self) -> Firewall:
        return deepcopy(self)

    def merge_with(self, other: Firewall) -> None:
        self.enabled = helpers.merge_with(self.enabled, other.enabled)
        self.vpn_input_ports = helpers.merge_with(self.vpn_input_ports, other.vpn_input_ports)
        self.input_ports = helpers.merge_with(self.input_ports, other.input_ports)
        self.outbound_subnets = helpers.merge_with(self.outbound_subnets, other.outbound_subnets)
        self.debug = helpers.merge_with(self.debug, other.debug)

    def override_with(self, other: Firewall) -> None:
        self.enabled = helpers.override_with(self.enabled, other.enabled)
        self.vpn_input_ports = helpers.override_with(self.vpn_input_ports, other.vpn_input_ports)
        self.input_ports = helpers.override_with(self.input_ports, other.input_ports)
        self.outbound_subnets = helpers.override_with(self.outbound_subnets, other.outbound_subnets)
        self.debug = helpers.override_with(self.debug, other.debug)

    def set_defaults(self) -> None:
        self.enabled = helpers.default_to(self.enabled, True)
        self.vpn_input_ports = helpers.default_to(self.vpn_input_ports, [])
        self.input_ports = helpers.default_to(self.input_ports, [])
        self.outbound_subnets = helpers.default_to(self.outbound_subnets, [])
        self.debug = helpers.default_to(self.debug, False)

    def to_node(self) -> Tree:
        node = helpers.new_node("Firewall settings:")
        if not self.enabled:
            helpers.add_line(node, "Enabled: no")
            return node

        helpers.add_line(node, "Enabled: yes")
        if self.debug:
            helpers.add_line(node, "Debug mode: on")
        if self.vpn_input_ports:
            helpers.add_line(node, f"VPN input ports: {helpers.join_or_none(self.vpn_input_ports)}")
        if self.input_ports:
            helpers.add_line(node, f"Input ports: {helpers.join_or_none(self.input_ports)}")
        if self.outbound_subnets:
            helpers.add_line(node, f"Outbound subnets: {helpers.join_or_none(self.outbound_subnets)}")
        return node
