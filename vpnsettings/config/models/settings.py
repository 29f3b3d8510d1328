"""
Top-level settings aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Callable, List, Tuple

from rich.tree import Tree

from vpnsettings.config import helpers
from vpnsettings.config.errors import OverrideRejectedError, SettingsValidationError
from vpnsettings.config.storage import Storage
from vpnsettings.logging import get_logger

from .constants import HIDEMYASS, OPENVPN_24, SLICKVPN, VPN_OPENVPN
from .control_server import ControlServer
from .dns import DNS
from .firewall import Firewall
from .health import Health
from .httpproxy import HTTPProxy
from .log import Log
from .profiling import Profiling
from .publicip import PublicIP
from .shadowsocks import Shadowsocks
from .system import System
from .updater import Updater
from .version import Version
from .vpn import VPN

logger = get_logger(__name__)


@dataclass
class Settings:
    """
    Root settings object owning one instance of every setting group.

    Typical lifecycle::

        settings = Settings()
        settings.set_defaults()
        settings.merge_with(fragment)
        settings.validate(storage, ipv6_supported=False)
        for warning in settings.warnings():
            print(warning)

    Not thread-safe: callers sharing a Settings object across threads must
    guard every call with a single lock.
    """

    control_server: ControlServer = field(default_factory=ControlServer)
    dns: DNS = field(default_factory=DNS)
    firewall: Firewall = field(default_factory=Firewall)
    health: Health = field(default_factory=Health)
    http_proxy: HTTPProxy = field(default_factory=HTTPProxy)
    log: Log = field(default_factory=Log)
    public_ip: PublicIP = field(default_factory=PublicIP)
    shadowsocks: Shadowsocks = field(default_factory=Shadowsocks)
    system: System = field(default_factory=System)
    updater: Updater = field(default_factory=Updater)
    version: Version = field(default_factory=Version)
    vpn: VPN = field(default_factory=VPN)
    profiling: Profiling = field(default_factory=Profiling)

    def _validations(
        self, storage: Storage, ipv6_supported: bool,
    ) -> Tuple[Tuple[str, Callable[[], None]], ...]:
        # Order decides which error surfaces when several groups are invalid.
        return (
            ("control server", self.control_server.validate),
            ("dns", self.dns.validate),
            ("firewall", self.firewall.validate),
            ("health", self.health.validate),
            ("http proxy", self.http_proxy.validate),
            ("log", self.log.validate),
            ("public ip check", self.public_ip.validate),
            ("shadowsocks", self.shadowsocks.validate),
            ("system", self.system.validate),
            ("updater", self.updater.validate),
            ("version", self.version.validate),
            ("VPN", lambda: self.vpn.validate(storage, ipv6_supported)),
            ("profiling", self.profiling.validate),
        )

    def validate(self, storage: Storage, ipv6_supported: bool) -> None:
        """
        Validate every setting group once, in a fixed order.

        Args:
            storage: Provider server data used by the VPN group.
            ipv6_supported: Whether the host network stack supports IPv6.

        Raises:
            SettingsValidationError: For the first invalid group, with the
                group name attached and the group error as cause.
        """
        for name, validation in self._validations(storage, ipv6_supported):
            try:
                validation()
            except ValueError as exc:
                raise SettingsValidationError(name, exc) from exc

    def copy(self) -> Settings:
        """Return a deep copy sharing no mutable state with this object."""
        return Settings(**{
            group_field.name: getattr(self, group_field.name).copy()
            for group_field in fields(self)
        })

    def merge_with(self, other: Settings) -> None:
        """
        Fold ``other`` into this object, keeping values already set here.

        Never validates and never fails; call ``validate`` before relying on
        the result.
        """
        for group_field in fields(self):
            getattr(self, group_field.name).merge_with(getattr(other, group_field.name))
        logger.debug("Merged settings fragment")

    def override_with(self, other: Settings, storage: Storage, ipv6_supported: bool) -> None:
        """
        Apply ``other`` on top of this object, all or nothing.

        The override is applied to a copy which is validated before its
        groups replace this object's groups. On failure this object is left
        unchanged.

        Raises:
            OverrideRejectedError: If the patched settings are invalid.
        """
        patched = self.copy()
        for group_field in fields(patched):
            getattr(patched, group_field.name).override_with(getattr(other, group_field.name))

        try:
            patched.validate(storage, ipv6_supported)
        except SettingsValidationError as exc:
            logger.warning("Rejected settings override: %s", exc)
            raise OverrideRejectedError(exc.group, exc.cause) from exc.cause

        # One dict update so readers see either the old or the new groups.
        self.__dict__.update(patched.__dict__)
        logger.debug("Applied settings override")

    def set_defaults(self) -> None:
        """Fill every unset field with its default value."""
        self.control_server.set_defaults()
        self.dns.set_defaults()
        self.firewall.set_defaults()
        self.health.set_defaults()
        self.http_proxy.set_defaults()
        self.log.set_defaults()
        self.public_ip.set_defaults()
        self.shadowsocks.set_defaults()
        self.system.set_defaults()
        self.version.set_defaults()
        self.vpn.set_defaults()
        # Updater defaults to the VPN provider, so it runs after the VPN group.
        self.updater.set_defaults(self.vpn.provider.name)
        self.profiling.set_defaults()

    def to_node(self) -> Tree:
        node = helpers.new_node("Settings summary:")
        helpers.append_node(node, self.vpn.to_node())
        helpers.append_node(node, self.dns.to_node())
        helpers.append_node(node, self.firewall.to_node())
        helpers.append_node(node, self.log.to_node())
        helpers.append_node(node, self.health.to_node())
        helpers.append_node(node, self.shadowsocks.to_node())
        helpers.append_node(node, self.http_proxy.to_node())
        helpers.append_node(node, self.control_server.to_node())
        helpers.append_node(node, self.system.to_node())
        helpers.append_node(node, self.public_ip.to_node())
        helpers.append_node(node, self.updater.to_node())
        helpers.append_node(node, self.version.to_node())
        helpers.append_node(node, self.profiling.to_node())
        return node

    def __str__(self) -> str:
        return helpers.render_tree(self.to_node())

    def warnings(self) -> List[str]:
        """
        Advisories derived from combinations of settings.

        Returns:
            Messages in rule order, empty when no rule matches.
        """
        warnings: List[str] = []
        provider = (self.vpn.provider.name or "").lower()

        if provider == HIDEMYASS:
            warnings.append(
                "HideMyAss dropped support for Linux OpenVPN "
                "so this will likely not work anymore."
            )

        if provider == SLICKVPN and self.vpn.type == VPN_OPENVPN:
            if self.vpn.openvpn.version == OPENVPN_24:
                warnings.append(
                    "OpenVPN 2.4 uses OpenSSL 1.1.1 "
                    "which allows the usage of weak security in today's standards. "
                    "This can be ok if good security is enforced by the VPN provider. "
                    f"However, {provider} uses weak security so you should use "
                    "OpenVPN 2.5 to enforce good security practices."
                )
            else:
                warnings.append(
                    "OpenVPN 2.5 uses OpenSSL 3 "
                    "which prohibits the usage of weak security in today's standards. "
                    f"{provider} uses weak security which is out of our control "
                    "so the only workaround is to allow such weaknesses "
                    'using the OpenVPN option tls-cipher "DEFAULT:@SECLEVEL=0". '
                    "You might want to reach to your provider so they upgrade their certificates."
                )

        if self.vpn.openvpn.version == OPENVPN_24:
            warnings.append(
                "OpenVPN 2.4 will be removed in a future release. "
                "Please create an issue if you have a compelling reason to keep it."
            )

        return warnings
