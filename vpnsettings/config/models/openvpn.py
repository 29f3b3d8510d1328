"""
OpenVPN client configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import (
    DEFAULT_OPENVPN_PROTOCOL,
    DEFAULT_OPENVPN_VERSION,
    OPENVPN_NO_CREDENTIALS_PROVIDERS,
    OPENVPN_PROTOCOLS,
    OPENVPN_USER_ONLY_PROVIDERS,
    OPENVPN_VERSIONS,
)


@dataclass
class OpenVPN:
    """
    Configuration for the OpenVPN client.

    ``user`` and ``password`` treat the empty string as a set value, so an
    override can clear them.
    """

    version: Optional[str] = None
    """OpenVPN major version to run: 2.4, 2.5 or 2.6."""

    user: Optional[str] = None
    password: Optional[str] = None

    ciphers: Optional[List[str]] = None
    """Data ciphers negotiated with the server, empty for the provider default."""

    protocol: Optional[str] = None
    """Transport protocol: udp or tcp."""

    def validate(self, provider: str) -> None:
        """
        Validate OpenVPN settings for the selected provider.

        Args:
            provider: Selected VPN provider name, used to decide which
                credentials are required.

        Raises:
            ValueError: If any field has an invalid value.
        """
        if self.version not in OPENVPN_VERSIONS:
            raise ValueError(f"version {self.version!r} must be one of {', '.join(OPENVPN_VERSIONS)}")

        if not helpers.is_one_of(self.protocol, OPENVPN_PROTOCOLS):
            raise ValueError(f"protocol {self.protocol!r} must be one of {', '.join(OPENVPN_PROTOCOLS)}")

        provider = provider.lower()
        if provider not in OPENVPN_NO_CREDENTIALS_PROVIDERS:
            if not self.user:
                raise ValueError(f"user is required for provider {provider}")
            if provider not in OPENVPN_USER_ONLY_PROVIDERS and not self.password:
                raise ValueError(f"password is required for provider {provider}")

        for cipher in self.ciphers or []:
            if not cipher.strip():
                raise ValueError("ciphers cannot contain an empty value")

    def copy(self) -> OpenVPN:
        return deepcopy(self)

    def merge_with(self, other: OpenVPN) -> None:
        self.version = helpers.merge_with(self.version, other.version)
        self.user = helpers.merge_with(self.user, other.user)
        self.password = helpers.merge_with(self.password, other.password)
        self.ciphers = helpers.merge_with(self.ciphers, other.ciphers)
        self.protocol = helpers.merge_with(self.protocol, other.protocol)

    def override_with(self, other: OpenVPN) -> None:
        self.version = helpers.override_with(self.version, other.version)
        self.user = helpers.override_with(self.user, other.user)
        self.password = helpers.override_with(self.password, other.password)
        self.ciphers = helpers.override_with(self.ciphers, other.ciphers)
        self.protocol = helpers.override_with(self.protocol, other.protocol)

    def set_defaults(self) -> None:
        self.version = helpers.default_to(self.version, DEFAULT_OPENVPN_VERSION)
        self.user = helpers.default_to(self.user, "")
        self.password = helpers.default_to(self.password, "")
        self.ciphers = helpers.default_to(self.ciphers, [])
        self.protocol = helpers.default_to(self.protocol, DEFAULT_OPENVPN_PROTOCOL)

    def to_node(self) -> Tree:
        node = helpers.new_node("OpenVPN settings:")
        helpers.add_line(node, f"OpenVPN version: {self.version}")
        helpers.add_line(node, f"User: {helpers.obfuscate(self.user)}")
        helpers.add_line(node, f"Password: {helpers.obfuscate(self.password)}")
        helpers.add_line(node, f"Protocol: {self.protocol}")
        if self.ciphers:
            helpers.add_line(node, f"Ciphers: {helpers.join_or_none(self.ciphers)}")
        return node
