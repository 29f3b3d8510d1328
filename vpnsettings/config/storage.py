"""
Provider server data consumed during VPN settings validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Protocol

from vpnsettings.logging import get_logger

logger = get_logger(__name__)


@dataclass
class FilterChoices:
    """
    Server filter values available for one provider.
    """

    countries: List[str] = field(default_factory=list)
    regions: List[str] = field(default_factory=list)
    cities: List[str] = field(default_factory=list)
    isps: List[str] = field(default_factory=list)
    hostnames: List[str] = field(default_factory=list)
    names: List[str] = field(default_factory=list)


class Storage(Protocol):
    """Lookup of provider-specific filter choices."""

    def get_filter_choices(self, provider: str) -> FilterChoices:
        ...


_SERVER_KEYS = {
    "countries": "country",
    "regions": "region",
    "cities": "city",
    "isps": "isp",
    "hostnames": "hostname",
    "names": "server_name",
}


def filter_choices_from_servers(servers: List[Dict[str, Any]]) -> FilterChoices:
    """
    Derive sorted, de-duplicated filter choices from server records.

    Args:
        servers: Records with optional ``country``, ``region``, ``city``,
            ``isp``, ``hostname`` and ``server_name`` keys.
    """
    values: Dict[str, set] = {name: set() for name in _SERVER_KEYS}
    for server in servers:
        for choice_name, server_key in _SERVER_KEYS.items():
            value = server.get(server_key)
            if value:
                values[choice_name].add(str(value))
    return FilterChoices(**{name: sorted(found) for name, found in values.items()})


class ServersFileStorage:
    """
    Storage backed by a servers file mapping provider names to server lists.

    Example file (YAML)::

        mullvad:
          - country: Sweden
            city: Stockholm
            hostname: se-sto-wg-001
    """

    def __init__(self, servers: Dict[str, List[Dict[str, Any]]]):
        self._choices = {
            str(provider).lower(): filter_choices_from_servers(list(entries or []))
            for provider, entries in (servers or {}).items()
        }

    @classmethod
    def from_file(cls, path: Path | str) -> "ServersFileStorage":
        from vpnsettings.config.loader import read_structured_file

        raw = read_structured_file(Path(path))
        if not isinstance(raw, dict):
            raise ValueError(f"Servers file must map provider names to server lists: {path}")
        logger.debug("Loaded servers for %d providers from %s", len(raw), path)
        return cls(raw)

    def get_filter_choices(self, provider: str) -> FilterChoices:
        return self._choices.get(provider.lower(), FilterChoices())
