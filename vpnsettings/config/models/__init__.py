"""
Setting group models for vpnsettings.

Each group is a dataclass whose fields default to ``None`` (unset) and which
exposes validate, copy, merge_with, override_with, set_defaults and to_node.
"""

from .control_server import ControlServer
from .dns import DNS
from .firewall import Firewall
from .group import SettingGroup
from .health import Health
from .httpproxy import HTTPProxy
from .log import Log
from .openvpn import OpenVPN
from .profiling import Profiling
from .provider import Provider, ServerSelection
from .publicip import PublicIP
from .settings import Settings
from .shadowsocks import Shadowsocks
from .system import System
from .updater import Updater
from .version import Version
from .vpn import VPN
from .wireguard import Wireguard

__all__ = [
    "ControlServer",
    "DNS",
    "Firewall",
    "SettingGroup",
    "Health",
    "HTTPProxy",
    "Log",
    "OpenVPN",
    "Profiling",
    "Provider",
    "ServerSelection",
    "PublicIP",
    "Settings",
    "Shadowsocks",
    "System",
    "Updater",
    "Version",
    "VPN",
    "Wireguard",
]
