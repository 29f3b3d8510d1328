"""
Process and host system configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import DEFAULT_PGID, DEFAULT_PUID


@dataclass
class System:
    puid: Optional[int] = None
    """User ID owning files written by the process."""

    pgid: Optional[int] = None
    """Group ID owning files written by the process."""

    timezone: Optional[str] = None

    def validate(self) -> None:
        if self.puid is None or self.puid < 0:
            raise ValueError(f"process user ID must be non-negative, got {self.puid}")
        if self.pgid is None or self.pgid < 0:
            raise ValueError(f"process group ID must be non-negative, got {self.pgid}")

    def copy(self) -> System:
        return deepcopy(self)

    def merge_with(self, other: System) -> None:
        self.puid = helpers.merge_with(self.puid, other.puid)
        self.pgid = helpers.merge_with(self.pgid, other.pgid)
        self.timezone = helpers.merge_with(self.timezone, other.timezone)

    def override_with(self, other: System) -> None:
        self.puid = helpers.override_with(self.puid, other.puid)
        self.pgid = helpers.override_with(self.pgid, other.pgid)
        self.timezone = helpers.override_with(self.timezone, other.timezone)

    def set_defaults(self) -> None:
        self.puid = helpers.default_to(self.puid, DEFAULT_PUID)
        self.pgid = helpers.default_to(self.pgid, DEFAULT_PGID)
        self.timezone = helpers.default_to(self.timezone, "")

    def to_node(self) -> Tree:
        node = helpers.new_node("System settings:")
        helpers.add_line(node, f"Process UID: {self.puid}")
        helpers.add_line(node, f"Process GID: {self.pgid}")
        if self.timezone:
            helpers.add_line(node, f"Timezone: {self.timezone}")
        return node
