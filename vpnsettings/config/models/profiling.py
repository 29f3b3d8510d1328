"""
Profiling server configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import DEFAULT_PROFILING_ADDRESS


@dataclass
class Profiling:
    """
    Configuration for the profiling HTTP server.
    """

    enabled: Optional[bool] = None

    block_profile_rate: Optional[int] = None
    """Sampling rate of blocking events, 0 disables block profiling."""

    mutex_profile_rate: Optional[int] = None
    """Sampling rate of lock contention events, 0 disables mutex profiling."""

    address: Optional[str] = None

    def validate(self) -> None:
        if self.block_profile_rate is None or self.block_profile_rate < 0:
            raise ValueError(f"block profile rate must be non-negative, got {self.block_profile_rate}")
        if self.mutex_profile_rate is None or self.mutex_profile_rate < 0:
            raise ValueError(f"mutex profile rate must be non-negative, got {self.mutex_profile_rate}")
        helpers.validate_address(self.address, "server address")

    def copy(self) -> Profiling:
        return deepcopy(self)

    def merge_with(self, other: Profiling) -> None:
        self.enabled = helpers.merge_with(self.enabled, other.enabled)
        self.block_profile_rate = helpers.merge_with(self.block_profile_rate, other.block_profile_rate)
        self.mutex_profile_rate = helpers.merge_with(self.mutex_profile_rate, other.mutex_profile_rate)
        self.address = helpers.merge_with(self.address, other.address)

    def override_with(self, other: Profiling) -> None:
        self.enabled = helpers.override_with(self.enabled, other.enabled)
        self.block_profile_rate = helpers.override_with(self.block_profile_rate, other.block_profile_rate)
        self.mutex_profile_rate = helpers.override_with(self.mutex_profile_rate, other.mutex_profile_rate)
        self.address = helpers.override_with(self.address, other.address)

    def set_defaults(self) -> None:
        self.enabled = helpers.default_to(self.enabled, False)
        self.block_profile_rate = helpers.default_to(self.block_profile_rate, 0)
        self.mutex_profile_rate = helpers.default_to(self.mutex_profile_rate, 0)
        self.address = helpers.default_to(self.address, DEFAULT_PROFILING_ADDRESS)

    def to_node(self) -> Tree:
        node = helpers.new_node("Profiling settings:")
        if not self.enabled:
            helpers.add_line(node, "Enabled: no")
            return node

        helpers.add_line(node, f"Server address: {self.address}")
        helpers.add_line(node, f"Block profile rate: {self.block_profile_rate}")
        helpers.add_line(node, f"Mutex profile rate: {self.mutex_profile_rate}")
        return node
