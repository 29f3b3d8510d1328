"""
HTTP proxy configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import DEFAULT_HTTP_PROXY_ADDRESS


@dataclass
class HTTPProxy:
    """
    Configuration for the HTTP proxy exposed through the tunnel.

    An empty ``user`` or ``password`` is a set value; only ``None`` is unset,
    so an override can clear credentials.
    """

    enabled: Optional[bool] = None
    user: Optional[str] = None
    password: Optional[str] = None
    listening_address: Optional[str] = None

    stealth: Optional[bool] = None
    """Strip proxy headers from forwarded requests."""

    log: Optional[bool] = None

    def validate(self) -> None:
        helpers.validate_address(self.listening_address, "listening address")

    def copy(self) -> HTTPProxy:
        return deepcopy(self)

    def merge_with(self, other: HTTPProxy) -> None:
        self.enabled = helpers.merge_with(self.enabled, other.enabled)
        self.user = helpers.merge_with(self.user, other.user)
        self.password = helpers.merge_with(self.password, other.password)
        self.listening_address = helpers.merge_with(self.listening_address, other.listening_address)
        self.stealth = helpers.merge_with(self.stealth, other.stealth)
        self.log = helpers.merge_with(self.log, other.log)

    def override_with(self, other: HTTPProxy) -> None:
        self.enabled = helpers.override_with(self.enabled, other.enabled)
        self.user = helpers.override_with(self.user, other.user)
        self.password = helpers.override_with(self.password, other.password)
        self.listening_address = helpers.override_with(self.listening_address, other.listening_address)
        self.stealth = helpers.override_with(self.stealth, other.stealth)
        self.log = helpers.override_with(self.log, other.log)

    def set_defaults(self) -> None:
        self.enabled = helpers.default_to(self.enabled, False)
        self.user = helpers.default_to(self.user, "")
        self.password = helpers.default_to(self.password, "")
        self.listening_address = helpers.default_to(self.listening_address, DEFAULT_HTTP_PROXY_ADDRESS)
        self.stealth = helpers.default_to(self.stealth, False)
        self.log = helpers.default_to(self.log, False)

    def to_node(self) -> Tree:
        node = helpers.new_node("HTTP proxy settings:")
        if not self.enabled:
            helpers.add_line(node, "Enabled: no")
            return node

        helpers.add_line(node, f"Listening address: {self.listening_address}")
        helpers.add_line(node, f"User: {self.user or '[not set]'}")
        helpers.add_line(node, f"Password: {helpers.obfuscate(self.password)}")
        helpers.add_line(node, f"Stealth mode: {helpers.yes_no(self.stealth)}")
        helpers.add_line(node, f"Log: {helpers.yes_no(self.log)}")
        return node
