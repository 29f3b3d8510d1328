"""
VPN provider and server selection configuration models.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field, fields
from typing import List, Optional

from rich.tree import Tree

from vpnsettings.config import helpers
from vpnsettings.config.storage import Storage

from .constants import CUSTOM, DEFAULT_PROVIDER, PROVIDERS, VPN_WIREGUARD, WIREGUARD_PROVIDERS


@dataclass
class ServerSelection:
    """
    Server filters applied when picking a VPN server.

    Each list field is matched case-insensitively against the provider's
    filter choices. Merge keeps existing lists, override replaces them.
    """

    countries: Optional[List[str]] = None
    regions: Optional[List[str]] = None
    cities: Optional[List[str]] = None
    isps: Optional[List[str]] = None
    hostnames: Optional[List[str]] = None
    names: Optional[List[str]] = None

    def validate(self, provider: str, storage: Storage) -> None:
        """
        Check every requested filter value is offered by the provider.

        Custom providers have no server data, so filters are not checked.
        """
        provider = provider.lower()
        if provider == CUSTOM:
            return
        choices = storage.get_filter_choices(provider)
        for selection_field in fields(self):
            requested = getattr(self, selection_field.name) or []
            available = getattr(choices, selection_field.name)
            for value in requested:
                if not helpers.is_one_of(value, available):
                    raise ValueError(
                        f"{selection_field.name} value {value!r} is not available for "
                        f"provider {provider}: choices are {helpers.join_or_none(available)}"
                    )

    def copy(self) -> ServerSelection:
        return deepcopy(self)

    def merge_with(self, other: ServerSelection) -> None:
        for selection_field in fields(self):
            name = selection_field.name
            setattr(self, name, helpers.merge_with(getattr(self, name), getattr(other, name)))

    def override_with(self, other: ServerSelection) -> None:
        for selection_field in fields(self):
            name = selection_field.name
            setattr(self, name, helpers.override_with(getattr(self, name), getattr(other, name)))

    def set_defaults(self) -> None:
        for selection_field in fields(self):
            name = selection_field.name
            setattr(self, name, helpers.default_to(getattr(self, name), []))

    def to_node(self) -> Tree:
        node = helpers.new_node("Server selection settings:")
        labels = {
            "countries": "Countries",
            "regions": "Regions",
            "cities": "Cities",
            "isps": "ISPs",
            "hostnames": "Hostnames",
            "names": "Server names",
        }
        for name, label in labels.items():
            values = getattr(self, name)
            if values:
                helpers.add_line(node, f"{label}: {helpers.join_or_none(values)}")
        return node


@dataclass
class Provider:
    """
    VPN service provider selection.
    """

    name: Optional[str] = None
    """Provider name, lowercase, e.g. ``private internet access``."""

    server_selection: ServerSelection = field(default_factory=ServerSelection)

    def validate(self, vpn_type: str, storage: Storage) -> None:
        if not helpers.is_one_of(self.name, PROVIDERS):
            raise ValueError(f"provider name {self.name!r} is not a known provider")
        if vpn_type == VPN_WIREGUARD and not helpers.is_one_of(self.name, WIREGUARD_PROVIDERS):
            raise ValueError(f"provider {self.name} does not support Wireguard")
        try:
            self.server_selection.validate(self.name, storage)
        except ValueError as exc:
            raise ValueError(f"server selection: {exc}") from exc

    def copy(self) -> Provider:
        return deepcopy(self)

    def merge_with(self, other: Provider) -> None:
        self.name = helpers.merge_with(self.name, other.name)
        self.server_selection.merge_with(other.server_selection)

    def override_with(self, other: Provider) -> None:
        self.name = helpers.override_with(self.name, other.name)
        self.server_selection.override_with(other.server_selection)

    def set_defaults(self) -> None:
        self.name = helpers.default_to(self.name, DEFAULT_PROVIDER)
        self.server_selection.set_defaults()

    def to_node(self) -> Tree:
        node = helpers.new_node(f"{(self.name or '').title()} settings:")
        selection = self.server_selection.to_node()
        if selection.children:
            helpers.append_node(node, selection)
        return node
