"""
Capability set shared by every setting group.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from rich.tree import Tree

G = TypeVar("G", bound="SettingGroup")


class SettingGroup(Protocol):
    """
    Operations the settings aggregate invokes on each group.

    Groups do not inherit from this class; any dataclass exposing these
    methods qualifies. ``validate`` and ``set_defaults`` may take extra
    arguments when a group depends on values outside itself.
    """

    def validate(self) -> None:
        ...

    def copy(self: G) -> G:
        ...

    def merge_with(self: G, other: G) -> None:
        ...

    def override_with(self: G, other: G) -> None:
        ...

    def set_defaults(self) -> None:
        ...

    def to_node(self) -> Tree:
        ...
