"""
Log level configuration model.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

from rich.tree import Tree

from vpnsettings.config import helpers

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVELS


@dataclass
class Log:
    level: Optional[str] = None
    """Minimum level logged: debug, info, warning or error."""

    def validate(self) -> None:
        if not helpers.is_one_of(self.level, LOG_LEVELS):
            raise ValueError(f"level {self.level!r} must be one of {', '.join(LOG_LEVELS)}")

    def copy(self) -> Log:
        return deepcopy(self)

    def merge_with(self, other: Log) -> None:
        self.level = helpers.merge_with(self.level, other.level)

    def override_with(self, other: Log) -> None:
        self.level = helpers.override_with(self.level, other.level)

    def set_defaults(self) -> None:
        self.level = helpers.default_to(self.level, DEFAULT_LOG_LEVEL)

    def to_node(self) -> Tree:
        node = helpers.new_node("Log settings:")
        helpers.add_line(node, f"Log level: {self.level}")
        return node
