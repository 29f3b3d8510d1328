"""
Constants and default values for setting groups.
"""

# VPN types
VPN_OPENVPN = "openvpn"
VPN_WIREGUARD = "wireguard"
VPN_TYPES = (VPN_OPENVPN, VPN_WIREGUARD)

# OpenVPN versions
OPENVPN_24 = "2.4"
OPENVPN_25 = "2.5"
OPENVPN_26 = "2.6"
OPENVPN_VERSIONS = (OPENVPN_24, OPENVPN_25, OPENVPN_26)

# Provider names
AIRVPN = "airvpn"
CUSTOM = "custom"
CYBERGHOST = "cyberghost"
EXPRESSVPN = "expressvpn"
FASTESTVPN = "fastestvpn"
HIDEMYASS = "hidemyass"
IPVANISH = "ipvanish"
IVPN = "ivpn"
MULLVAD = "mullvad"
NORDVPN = "nordvpn"
PERFECT_PRIVACY = "perfect privacy"
PRIVADO = "privado"
PRIVATE_INTERNET_ACCESS = "private internet access"
PRIVATEVPN = "privatevpn"
PROTONVPN = "protonvpn"
PUREVPN = "purevpn"
SLICKVPN = "slickvpn"
SURFSHARK = "surfshark"
TORGUARD = "torguard"
VPN_UNLIMITED = "vpn unlimited"
VPNSECURE = "vpnsecure"
VYPRVPN = "vyprvpn"
WINDSCRIBE = "windscribe"

PROVIDERS = (
    AIRVPN,
    CUSTOM,
    CYBERGHOST,
    EXPRESSVPN,
    FASTESTVPN,
    HIDEMYASS,
    IPVANISH,
    IVPN,
    MULLVAD,
    NORDVPN,
    PERFECT_PRIVACY,
    PRIVADO,
    PRIVATE_INTERNET_ACCESS,
    PRIVATEVPN,
    PROTONVPN,
    PUREVPN,
    SLICKVPN,
    SURFSHARK,
    TORGUARD,
    VPN_UNLIMITED,
    VPNSECURE,
    VYPRVPN,
    WINDSCRIBE,
)

WIREGUARD_PROVIDERS = frozenset({
    AIRVPN,
    CUSTOM,
    FASTESTVPN,
    IVPN,
    MULLVAD,
    NORDVPN,
    PROTONVPN,
    SURFSHARK,
    WINDSCRIBE,
})

# Providers authenticating OpenVPN with certificates or keys only
OPENVPN_NO_CREDENTIALS_PROVIDERS = frozenset({AIRVPN, CUSTOM, VPNSECURE})

# Providers whose OpenVPN account is a single identifier
OPENVPN_USER_ONLY_PROVIDERS = frozenset({IVPN, MULLVAD})

DNS_UPSTREAM_PROVIDERS = (
    "cleanbrowsing",
    "cloudflare",
    "google",
    "libredns",
    "opendns",
    "quad9",
    "quadrant",
)

LOG_LEVELS = ("debug", "info", "warning", "error")

PUBLIC_IP_APIS = ("cloudflare", "ip2location", "ipinfo")

SHADOWSOCKS_CIPHERS = (
    "aes-128-gcm",
    "aes-256-gcm",
    "chacha20-ietf-poly1305",
)

WIREGUARD_IMPLEMENTATIONS = ("auto", "kernelspace", "userspace")

OPENVPN_PROTOCOLS = ("udp", "tcp")

# Defaults (durations are seconds)
DEFAULT_VPN_TYPE = VPN_OPENVPN
DEFAULT_PROVIDER = PRIVATE_INTERNET_ACCESS
DEFAULT_OPENVPN_VERSION = OPENVPN_25
DEFAULT_OPENVPN_PROTOCOL = "udp"
DEFAULT_WIREGUARD_IMPLEMENTATION = "auto"

DEFAULT_CONTROL_SERVER_ADDRESS = ":8000"
DEFAULT_DNS_ADDRESS = "127.0.0.1"
DEFAULT_DNS_UPSTREAM_PROVIDERS = ["cloudflare"]
DEFAULT_DNS_UPDATE_PERIOD = 24 * 60 * 60
DEFAULT_HEALTH_SERVER_ADDRESS = "127.0.0.1:9999"
DEFAULT_HEALTH_TARGET_ADDRESS = "cloudflare.com:443"
DEFAULT_HEALTH_SUCCESS_WAIT = 5
DEFAULT_HEALTH_VPN_INITIAL = 6
DEFAULT_HEALTH_VPN_ADDITION = 5
DEFAULT_HTTP_PROXY_ADDRESS = ":8888"
DEFAULT_LOG_LEVEL = "info"
DEFAULT_PUBLIC_IP_PERIOD = 12 * 60 * 60
DEFAULT_PUBLIC_IP_FILEPATH = "/tmp/gluetun/ip"
DEFAULT_PUBLIC_IP_API = "ipinfo"
DEFAULT_SHADOWSOCKS_ADDRESS = ":8388"
DEFAULT_SHADOWSOCKS_CIPHER = "chacha20-ietf-poly1305"
DEFAULT_PUID = 1000
DEFAULT_PGID = 1000
DEFAULT_UPDATER_PERIOD = 0
DEFAULT_UPDATER_DNS_ADDRESS = "1.1.1.1:53"
DEFAULT_UPDATER_MIN_RATIO = 0.8
DEFAULT_PROFILING_ADDRESS = "localhost:6060"

MIN_DNS_UPDATE_PERIOD = 60
MIN_PUBLIC_IP_PERIOD = 5
MIN_UPDATER_PERIOD = 60
