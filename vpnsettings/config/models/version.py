"""
Version check configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers


@dataclass
class Version:
    enabled: Optional[bool] = None
    """Check for a newer release at startup."""

    def validate(self) -> None:
        return None

    def copy(self) -> Version:
        return deepcopy(self)

    def merge_with(self, other: Version) -> None:
        self.enabled = helpers.merge_with(self.enabled, other.enabled)

    def override_with(self, other: Version) -> None:
        self.enabled = helpers.override_with(self.enabled, other.enabled)

    def set_defaults(self) -> None:
        self.enabled = helpers.default_to(self.enabled, True)

    def to_node(self) -> Tree:
        node = helpers.new_node("Version settings:")
        helpers.add_line(node, f"Enabled: {helpers.yes_no(self.enabled)}")
        return node
