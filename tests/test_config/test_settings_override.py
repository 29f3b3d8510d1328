import pytest

from vpnsettings.config.errors import OverrideRejectedError, SettingsValidationError
from vpnsettings.config.models import Settings


def test_valid_override_is_committed(valid_settings: Settings, storage) -> None:
    other = Settings()
    other.log.level = "debug"
    other.firewall.input_ports = [8080, 9090]
    other.vpn.provider.server_selection.countries = ["France"]

    valid_settings.override_with(other, storage, ipv6_supported=False)

    assert valid_settings.log.level == "debug"
    assert valid_settings.firewall.input_ports == [8080, 9090]
    assert valid_settings.vpn.provider.server_selection.countries == ["France"]
    # Unset fields in the override keep their values
    assert valid_settings.dns.address == "127.0.0.1"
    assert valid_settings.vpn.openvpn.user == "p1234567"
    valid_settings.validate(storage, ipv6_supported=False)


def test_override_takes_incoming_values_over_existing(valid_settings: Settings, storage) -> None:
    valid_settings.http_proxy.user = "alice"
    other = Settings()
    other.http_proxy.user = ""
    other.system.timezone = "Europe/Paris"

    valid_settings.override_with(other, storage, ipv6_supported=False)

    assert valid_settings.http_proxy.user == ""
    assert valid_settings.system.timezone == "Europe/Paris"


def test_invalid_override_leaves_settings_unchanged(valid_settings: Settings, storage) -> None:
    before = valid_settings.copy()
    other = Settings()
    other.log.level = "debug"
    other.firewall.vpn_input_ports = [0]

    with pytest.raises(OverrideRejectedError) as exc_info:
        valid_settings.override_with(other, storage, ipv6_supported=False)

    assert exc_info.value.group == "firewall"
    assert str(exc_info.value).startswith("firewall settings: ")
    assert valid_settings == before
    assert valid_settings.log.level == "info"
    valid_settings.validate(storage, ipv6_supported=False)


def test_rejected_override_is_a_validation_error(valid_settings: Settings, storage) -> None:
    other = Settings()
    other.vpn.openvpn.version = "2.3"

    with pytest.raises(SettingsValidationError) as exc_info:
        valid_settings.override_with(other, storage, ipv6_supported=False)

    assert isinstance(exc_info.value, OverrideRejectedError)
    assert exc_info.value.group == "VPN"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_override_validates_against_storage(valid_settings: Settings, storage) -> None:
    other = Settings()
    other.vpn.provider.server_selection.hostnames = ["tokyo999"]

    with pytest.raises(OverrideRejectedError, match="hostnames value 'tokyo999'"):
        valid_settings.override_with(other, storage, ipv6_supported=False)

    assert valid_settings.vpn.provider.server_selection.hostnames == []


def test_override_validates_the_combined_result(valid_settings: Settings, storage, wireguard_key) -> None:
    # Switching to Wireguard alone is invalid for this provider, together with
    # a Wireguard capable provider and keys it is valid.
    type_only = Settings()
    type_only.vpn.type = "wireguard"
    with pytest.raises(OverrideRejectedError, match="does not support Wireguard"):
        valid_settings.override_with(type_only, storage, ipv6_supported=False)
    assert valid_settings.vpn.type == "openvpn"

    full = Settings()
    full.vpn.type = "wireguard"
    full.vpn.provider.name = "mullvad"
    full.vpn.wireguard.private_key = wireguard_key
    full.vpn.wireguard.addresses = ["10.64.0.2/32"]
    valid_settings.override_with(full, storage, ipv6_supported=False)

    assert valid_settings.vpn.type == "wireguard"
    assert valid_settings.vpn.provider.name == "mullvad"


def test_override_does_not_share_state_with_fragment(valid_settings: Settings, storage) -> None:
    other = Settings()
    other.dns.allowed_hosts = ["example.com"]

    valid_settings.override_with(other, storage, ipv6_supported=False)
    other.dns.allowed_hosts.append("example.org")

    assert valid_settings.dns.allowed_hosts == ["example.com"]


def test_empty_override_is_a_no_op(valid_settings: Settings, storage) -> None:
    before = valid_settings.copy()
    valid_settings.override_with(Settings(), storage, ipv6_supported=False)
    assert valid_settings == before
