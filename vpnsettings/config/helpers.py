"""
Field-level helpers shared by the setting groups.

``None`` means "unset" for every group field. Values taken from another
group are deep-copied so two settings objects never share a mutable field.
"""

from __future__ import annotations

import io
from copy import deepcopy
from typing import Iterable, Optional, TypeVar

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

T = TypeVar("T")


def merge_with(existing: Optional[T], other: Optional[T]) -> Optional[T]:
    """Keep ``existing`` when set, otherwise take a copy of ``other``."""
    if existing is not None:
        return existing
    return deepcopy(other)


def override_with(existing: Optional[T], other: Optional[T]) -> Optional[T]:
    """Take a copy of ``other`` when set, otherwise keep ``existing``."""
    if other is not None:
        return deepcopy(other)
    return existing


def default_to(value: Optional[T], default: T) -> T:
    """Return ``value`` when set, otherwise a copy of ``default``."""
    if value is not None:
        return value
    return deepcopy(default)


def is_one_of(value: Optional[str], choices: Iterable[str]) -> bool:
    """Case-insensitive membership test."""
    if value is None:
        return False
    lowered = value.lower()
    return any(lowered == choice.lower() for choice in choices)


def validate_address(address: Optional[str], field: str) -> None:
    """
    Validate a ``[host]:port`` listening or target address.

    Raises:
        ValueError: If the address has no port or the port is out of range.
    """
    if not address:
        raise ValueError(f"{field} must be set")
    host, sep, port_text = address.rpartition(":")
    if not sep:
        raise ValueError(f"{field} {address!r} is missing a port")
    if host.startswith("[") != host.endswith("]"):
        raise ValueError(f"{field} {address!r} has an invalid host")
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"{field} {address!r} has a non-numeric port") from None
    if port < 0 or port > 65535:
        raise ValueError(f"{field} port {port} must be between 0 and 65535")


def validate_period(period: Optional[int], minimum: int, field: str) -> None:
    """A period is either 0 (disabled) or at least ``minimum`` seconds."""
    if period is None or period < 0:
        raise ValueError(f"{field} must be a positive duration, got {period}")
    if 0 < period < minimum:
        raise ValueError(
            f"{field} {format_duration(period)} must be 0 (disabled) "
            f"or at least {format_duration(minimum)}"
        )


def yes_no(value: Optional[bool]) -> str:
    return "yes" if value else "no"


def obfuscate(secret: Optional[str]) -> str:
    """Hide a secret value for display."""
    if not secret:
        return "[not set]"
    return "[set]"


def join_or_none(values: Optional[Iterable[str]]) -> str:
    items = [str(value) for value in values or []]
    return ", ".join(items) if items else "[none]"


def format_duration(seconds: Optional[int]) -> str:
    """Render a duration in seconds as ``1h2m3s``."""
    if not seconds:
        return "0s"
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs:
        parts.append(f"{secs}s")
    return "".join(parts)


def new_node(label: str) -> Tree:
    """Create a display node. Labels are plain text, never console markup."""
    return Tree(Text(label))


def add_line(node: Tree, line: str) -> Tree:
    return node.add(Text(line))


def append_node(node: Tree, child: Tree) -> Tree:
    node.children.append(child)
    return child


def render_tree(node: Tree, width: int = 200) -> str:
    """Render a display tree to plain text without colors or markup."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        color_system=None,
        force_terminal=False,
        markup=False,
        emoji=False,
        highlight=False,
    )
    console.print(node)
    lines = [line.rstrip() for line in buffer.getvalue().splitlines()]
    return "\n".join(lines)
