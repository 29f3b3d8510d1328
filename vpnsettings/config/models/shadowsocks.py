"""
Shadowsocks server configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import (
    DEFAULT_SHADOWSOCKS_ADDRESS,
    DEFAULT_SHADOWSOCKS_CIPHER,
    SHADOWSOCKS_CIPHERS,
)


@dataclass
class Shadowsocks:
    """
    Configuration for the Shadowsocks server.

    Merge keeps existing values, override takes incoming values.
    """

    enabled: Optional[bool] = None
    address: Optional[str] = None
    cipher: Optional[str] = None
    password: Optional[str] = None
    log: Optional[bool] = None

    def validate(self) -> None:
        helpers.validate_address(self.address, "listening address")
        if not helpers.is_one_of(self.cipher, SHADOWSOCKS_CIPHERS):
            raise ValueError(
                f"cipher {self.cipher!r} must be one of {', '.join(SHADOWSOCKS_CIPHERS)}"
            )
        if self.enabled and not self.password:
            raise ValueError("password must be set when the server is enabled")

    def copy(self) -> Shadowsocks:
        return deepcopy(self)

    def merge_with(self, other: Shadowsocks) -> None:
        self.enabled = helpers.merge_with(self.enabled, other.enabled)
        self.address = helpers.merge_with(self.address, other.address)
        self.cipher = helpers.merge_with(self.cipher, other.cipher)
        self.password = helpers.merge_with(self.password, other.password)
        self.log = helpers.merge_with(self.log, other.log)

    def override_with(self, other: Shadowsocks) -> None:
        self.enabled = helpers.override_with(self.enabled, other.enabled)
        self.address = helpers.override_with(self.address, other.address)
        self.cipher = helpers.override_with(self.cipher, other.cipher)
        self.password = helpers.override_with(self.password, other.password)
        self.log = helpers.override_with(self.log, other.log)

    def set_defaults(self) -> None:
        self.enabled = helpers.default_to(self.enabled, False)
        self.address = helpers.default_to(self.address, DEFAULT_SHADOWSOCKS_ADDRESS)
        self.cipher = helpers.default_to(self.cipher, DEFAULT_SHADOWSOCKS_CIPHER)
        self.password = helpers.default_to(self.password, "")
        self.log = helpers.default_to(self.log, False)

    def to_node(self) -> Tree:
        node = helpers.new_node("Shadowsocks server settings:")
        if not self.enabled:
            helpers.add_line(node, "Enabled: no")
            return node

        helpers.add_line(node, f"Listening address: {self.address}")
        helpers.add_line(node, f"Cipher: {self.cipher}")
        helpers.add_line(node, f"Password: {helpers.obfuscate(self.password)}")
        helpers.add_line(node, f"Log: {helpers.yes_no(self.log)}")
        return node
