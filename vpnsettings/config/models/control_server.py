"""
HTTP control server configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import DEFAULT_CONTROL_SERVER_ADDRESS


@dataclass
class ControlServer:
    """
    Settings for the HTTP control server.

    Merge keeps existing values, override takes incoming values.
    """

    address: Optional[str] = None
    """Listening address, e.g. ``:8000``."""

    log: Optional[bool] = None
    """Whether each request is logged."""

    def validate(self) -> None:
        helpers.validate_address(self.address, "listening address")

    def copy(self) -> ControlServer:
        return deepcopy(self)

    def merge_with(self, other: ControlServer) -> None:
        self.address = helpers.merge_with(self.address, other.address)
        self.log = helpers.merge_with(self.log, other.log)

    def override_with(self, other: ControlServer) -> None:
        self.address = helpers.override_with(self.address, other.address)
        self.log = helpers.override_with(self.log, other.log)

    def set_defaults(self) -> None:
        self.address = helpers.default_to(self.address, DEFAULT_CONTROL_SERVER_ADDRESS)
        self.log = helpers.default_to(self.log, True)

    def to_node(self) -> Tree:
        node = helpers.new_node("Control server settings:")
        helpers.add_line(node, f"Listening address: {self.address}")
        helpers.add_line(node, f"Logging: {helpers.yes_no(self.log)}")
        return node
