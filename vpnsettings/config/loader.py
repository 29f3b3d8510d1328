"""
Settings loader for vpnsettings.

Reads settings fragments from JSON/YAML files and converts them to
``Settings`` objects. Keys absent from a fragment stay unset (``None``) so
fragments can be layered with ``Settings.merge_with``.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from vpnsettings.logging import get_logger

from .models import (
    DNS,
    VPN,
    ControlServer,
    Firewall,
    Health,
    HTTPProxy,
    Log,
    OpenVPN,
    Profiling,
    Provider,
    PublicIP,
    ServerSelection,
    Settings,
    Shadowsocks,
    System,
    Updater,
    Version,
    Wireguard,
)
from .storage import Storage

logger = get_logger(__name__)

SECTIONS = (
    "control_server",
    "dns",
    "firewall",
    "health",
    "http_proxy",
    "log",
    "public_ip",
    "shadowsocks",
    "system",
    "updater",
    "version",
    "vpn",
    "profiling",
)


def parse_settings_text(content: str, path: Path | str) -> Dict[str, Any]:
    """
    Parse raw settings content from JSON or YAML.

    Args:
        content: File content
        path: Path or filename used for extension detection
    """
    if isinstance(path, str):
        path = Path(path)

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path.name}: {exc}") from exc
    if suffix == ".json":
        return json.loads(content)
    raise ValueError(
        f"Unsupported settings format: {suffix}. "
        f"Use .json, .yaml, or .yml"
    )


def read_structured_file(path: Path) -> Any:
    """
    Read a JSON or YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is unsupported
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return parse_settings_text(path.read_text(encoding="utf-8"), path)


def load_raw_settings(path: Path) -> Dict[str, Any]:
    """
    Load a raw settings fragment from a JSON or YAML file.

    Also loads environment variables from a .env file if present, so
    secrets can be kept out of the settings file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the format is unsupported, the content does not parse
            or the root is not a mapping
    """
    load_dotenv()

    raw = read_structured_file(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Settings root must be a mapping, got {type(raw).__name__}")

    unknown = sorted(set(raw) - set(SECTIONS))
    if unknown:
        logger.warning("Ignoring unknown settings sections: %s", ", ".join(unknown))
    return raw


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Settings section '{name}' must be a mapping")
    return section


_TRUE_VALUES = {"1", "true", "yes", "on", "y"}
_FALSE_VALUES = {"0", "false", "no", "off", "n"}


def _opt_bool(value: Any) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"expected boolean value, got {value!r}")


def _opt_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _opt_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _opt_list(value: Any, item_type=str) -> Optional[List[Any]]:
    if value is None:
        return None
    if isinstance(value, (str, int)):
        value = [value]
    return [item_type(item) for item in value]


def _env(name: str) -> Optional[str]:
    value = os.environ.get(name)
    return value if value else None


def build_control_server(raw: Dict[str, Any]) -> ControlServer:
    section = _section(raw, "control_server")
    return ControlServer(
        address=_opt_str(section.get("address")),
        log=_opt_bool(section.get("log")),
    )


def build_dns(raw: Dict[str, Any]) -> DNS:
    section = _section(raw, "dns")
    return DNS(
        server_enabled=_opt_bool(section.get("server_enabled")),
        address=_opt_str(section.get("address")),
        keep_nameserver=_opt_bool(section.get("keep_nameserver")),
        upstream_providers=_opt_list(section.get("upstream_providers")),
        caching=_opt_bool(section.get("caching")),
        block_malicious=_opt_bool(section.get("block_malicious")),
        block_ads=_opt_bool(section.get("block_ads")),
        block_surveillance=_opt_bool(section.get("block_surveillance")),
        allowed_hosts=_opt_list(section.get("allowed_hosts")),
        update_period=_opt_int(section.get("update_period")),
    )


def build_firewall(raw: Dict[str, Any]) -> Firewall:
    section = _section(raw, "firewall")
    return Firewall(
        enabled=_opt_bool(section.get("enabled")),
        vpn_input_ports=_opt_list(section.get("vpn_input_ports"), int),
        input_ports=_opt_list(section.get("input_ports"), int),
        outbound_subnets=_opt_list(section.get("outbound_subnets")),
        debug=_opt_bool(section.get("debug")),
    )


def build_health(raw: Dict[str, Any]) -> Health:
    section = _section(raw, "health")
    return Health(
        server_address=_opt_str(section.get("server_address")),
        target_address=_opt_str(section.get("target_address")),
        success_wait=_opt_int(section.get("success_wait")),
        vpn_initial=_opt_int(section.get("vpn_initial")),
        vpn_addition=_opt_int(section.get("vpn_addition")),
    )


def build_http_proxy(raw: Dict[str, Any]) -> HTTPProxy:
    section = _section(raw, "http_proxy")
    return HTTPProxy(
        enabled=_opt_bool(section.get("enabled")),
        user=_opt_str(section.get("user")),
        password=_opt_str(section.get("password")),
        listening_address=_opt_str(section.get("listening_address")),
        stealth=_opt_bool(section.get("stealth")),
        log=_opt_bool(section.get("log")),
    )


def build_public_ip(raw: Dict[str, Any]) -> PublicIP:
    section = _section(raw, "public_ip")
    return PublicIP(
        period=_opt_int(section.get("period")),
        ip_filepath=_opt_str(section.get("ip_filepath")),
        api=_opt_str(section.get("api")),
        token=_opt_str(section.get("token")),
    )


def build_shadowsocks(raw: Dict[str, Any]) -> Shadowsocks:
    section = _section(raw, "shadowsocks")
    return Shadowsocks(
        enabled=_opt_bool(section.get("enabled")),
        address=_opt_str(section.get("address")),
        cipher=_opt_str(section.get("cipher")),
        password=_opt_str(section.get("password", _env("SHADOWSOCKS_PASSWORD"))),
        log=_opt_bool(section.get("log")),
    )


def build_updater(raw: Dict[str, Any]) -> Updater:
    section = _section(raw, "updater")
    return Updater(
        period=_opt_int(section.get("period")),
        dns_address=_opt_str(section.get("dns_address")),
        min_ratio=_opt_float(section.get("min_ratio")),
        providers=_opt_list(section.get("providers")),
    )


def build_vpn(raw: Dict[str, Any]) -> VPN:
    """
    Build the VPN group from the ``vpn`` section.

    OpenVPN credentials and the Wireguard private key fall back to the
    ``OPENVPN_USER``, ``OPENVPN_PASSWORD`` and ``WIREGUARD_PRIVATE_KEY``
    environment variables when absent from the section.
    """
    section = _section(raw, "vpn")
    provider_raw = _section(section, "provider")
    selection_raw = _section(provider_raw, "server_selection")
    openvpn_raw = _section(section, "openvpn")
    wireguard_raw = _section(section, "wireguard")

    provider_name = _opt_str(provider_raw.get("name"))
    vpn_type = _opt_str(section.get("type"))
    return VPN(
        type=vpn_type.lower() if vpn_type else vpn_type,
        provider=Provider(
            name=provider_name.lower() if provider_name else provider_name,
            server_selection=ServerSelection(
                countries=_opt_list(selection_raw.get("countries")),
                regions=_opt_list(selection_raw.get("regions")),
                cities=_opt_list(selection_raw.get("cities")),
                isps=_opt_list(selection_raw.get("isps")),
                hostnames=_opt_list(selection_raw.get("hostnames")),
                names=_opt_list(selection_raw.get("names")),
            ),
        ),
        openvpn=OpenVPN(
            version=_opt_str(openvpn_raw.get("version")),
            user=_opt_str(openvpn_raw.get("user", _env("OPENVPN_USER"))),
            password=_opt_str(openvpn_raw.get("password", _env("OPENVPN_PASSWORD"))),
            ciphers=_opt_list(openvpn_raw.get("ciphers")),
            protocol=_opt_str(openvpn_raw.get("protocol")),
        ),
        wireguard=Wireguard(
            private_key=_opt_str(wireguard_raw.get("private_key", _env("WIREGUARD_PRIVATE_KEY"))),
            addresses=_opt_list(wireguard_raw.get("addresses")),
            implementation=_opt_str(wireguard_raw.get("implementation")),
        ),
    )


def build_profiling(raw: Dict[str, Any]) -> Profiling:
    section = _section(raw, "profiling")
    return Profiling(
        enabled=_opt_bool(section.get("enabled")),
        block_profile_rate=_opt_int(section.get("block_profile_rate")),
        mutex_profile_rate=_opt_int(section.get("mutex_profile_rate")),
        address=_opt_str(section.get("address")),
    )


def build_settings_from_raw(raw: Dict[str, Any]) -> Settings:
    """
    Build a settings fragment from raw data without defaults or validation.
    """
    system_raw = _section(raw, "system")
    log_raw = _section(raw, "log")
    version_raw = _section(raw, "version")
    return Settings(
        control_server=build_control_server(raw),
        dns=build_dns(raw),
        firewall=build_firewall(raw),
        health=build_health(raw),
        http_proxy=build_http_proxy(raw),
        log=Log(level=_opt_str(log_raw.get("level"))),
        public_ip=build_public_ip(raw),
        shadowsocks=build_shadowsocks(raw),
        system=System(
            puid=_opt_int(system_raw.get("puid")),
            pgid=_opt_int(system_raw.get("pgid")),
            timezone=_opt_str(system_raw.get("timezone")),
        ),
        updater=build_updater(raw),
        version=Version(enabled=_opt_bool(version_raw.get("enabled"))),
        vpn=build_vpn(raw),
        profiling=build_profiling(raw),
    )


def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        pruned = {key: _prune(item) for key, item in value.items() if item is not None}
        return {key: item for key, item in pruned.items() if item != {}}
    return value


def settings_to_raw(settings: Settings) -> Dict[str, Any]:
    """
    Serialize Settings into a JSON/YAML-friendly dict, omitting unset fields.
    """
    return _prune(asdict(settings))


def save_settings_to_file(settings: Settings, path: Path | str) -> None:
    """
    Serialize and save settings to a JSON/YAML file.
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()
    raw = settings_to_raw(settings)

    suffix = path.suffix.lower()
    if suffix == ".json":
        path.write_text(json.dumps(raw, indent=2), encoding="utf-8")
    elif suffix in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(raw, sort_keys=False), encoding="utf-8")
    else:
        raise ValueError(
            f"Unsupported settings format: {suffix}. "
            f"Use .json, .yaml, or .yml"
        )


def load_settings_from_file(
    path: Path | str,
    storage: Storage,
    ipv6_supported: bool = False,
) -> Settings:
    """
    Load settings from a file, fill defaults and validate.

    This is the main entry point for loading settings.

    Args:
        path: Path to the settings file (.json, .yaml, or .yml)
        storage: Provider server data used to validate server filters
        ipv6_supported: Whether the host network stack supports IPv6

    Raises:
        FileNotFoundError: If the file doesn't exist
        SettingsValidationError: If the resulting settings are invalid
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()
    fragment = build_settings_from_raw(load_raw_settings(path))

    settings = Settings()
    settings.merge_with(fragment)
    settings.set_defaults()
    settings.validate(storage, ipv6_supported)
    logger.debug("Loaded settings from %s", path)
    return settings
