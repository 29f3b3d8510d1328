import pytest

from vpnsettings.config.errors import SettingsValidationError
from vpnsettings.config.models import Settings


def test_valid_settings_pass(valid_settings: Settings, storage) -> None:
    valid_settings.validate(storage, ipv6_supported=False)


def test_zero_settings_fail_on_first_group(storage) -> None:
    with pytest.raises(SettingsValidationError) as exc_info:
        Settings().validate(storage, ipv6_supported=False)
    assert exc_info.value.group == "control server"


def test_error_names_the_single_invalid_group(valid_settings: Settings, storage) -> None:
    valid_settings.log.level = "verbose"

    with pytest.raises(SettingsValidationError) as exc_info:
        valid_settings.validate(storage, ipv6_supported=False)

    error = exc_info.value
    assert error.group == "log"
    assert str(error).startswith("log settings: level 'verbose'")
    assert isinstance(error.cause, ValueError)
    assert error.__cause__ is error.cause


@pytest.mark.parametrize(
    "mutate, group",
    [
        (lambda s: setattr(s.control_server, "address", "8000"), "control server"),
        (lambda s: setattr(s.dns, "address", "not-an-ip"), "dns"),
        (lambda s: setattr(s.firewall, "input_ports", [70000]), "firewall"),
        (lambda s: setattr(s.health, "success_wait", 0), "health"),
        (lambda s: setattr(s.http_proxy, "listening_address", ":http"), "http proxy"),
        (lambda s: setattr(s.public_ip, "api", "whatismyip"), "public ip check"),
        (lambda s: setattr(s.shadowsocks, "cipher", "rc4-md5"), "shadowsocks"),
        (lambda s: setattr(s.system, "puid", -1), "system"),
        (lambda s: setattr(s.updater, "min_ratio", 1.5), "updater"),
        (lambda s: setattr(s.vpn, "type", "ipsec"), "VPN"),
        (lambda s: setattr(s.profiling, "block_profile_rate", -1), "profiling"),
    ],
)
def test_each_group_is_named_when_invalid(valid_settings: Settings, storage, mutate, group) -> None:
    mutate(valid_settings)
    with pytest.raises(SettingsValidationError) as exc_info:
        valid_settings.validate(storage, ipv6_supported=False)
    assert exc_info.value.group == group
    assert str(exc_info.value).startswith(f"{group} settings: ")


def test_first_invalid_group_in_fixed_order_is_reported(valid_settings: Settings, storage) -> None:
    valid_settings.profiling.mutex_profile_rate = -1
    valid_settings.log.level = "trace"
    valid_settings.dns.update_period = 10

    for _ in range(3):
        with pytest.raises(SettingsValidationError) as exc_info:
            valid_settings.validate(storage, ipv6_supported=False)
        assert exc_info.value.group == "dns"


def test_validate_does_not_modify_settings(valid_settings: Settings, storage) -> None:
    before = valid_settings.copy()
    valid_settings.validate(storage, ipv6_supported=False)
    assert valid_settings == before


def test_only_vpn_group_uses_storage(valid_settings: Settings, storage) -> None:
    valid_settings.vpn.provider.server_selection.countries = ["germany"]
    valid_settings.validate(storage, ipv6_supported=False)
    assert storage.calls == ["private internet access"]


def test_mixed_case_provider_looks_up_storage_in_lowercase(valid_settings: Settings, storage) -> None:
    valid_settings.vpn.provider.name = "Private Internet Access"
    valid_settings.vpn.provider.server_selection.countries = ["France"]

    valid_settings.validate(storage, ipv6_supported=False)

    assert storage.calls == ["private internet access"]


def test_unknown_server_filter_is_rejected(valid_settings: Settings, storage) -> None:
    valid_settings.vpn.provider.server_selection.cities = ["Atlantis"]

    with pytest.raises(SettingsValidationError) as exc_info:
        valid_settings.validate(storage, ipv6_supported=False)

    message = str(exc_info.value)
    assert message.startswith("VPN settings: provider settings: server selection: ")
    assert "cities value 'Atlantis'" in message


def test_ipv6_support_is_passed_to_vpn_validation(valid_settings: Settings, storage, wireguard_key) -> None:
    valid_settings.vpn.type = "wireguard"
    valid_settings.vpn.provider.name = "mullvad"
    valid_settings.vpn.wireguard.private_key = wireguard_key
    valid_settings.vpn.wireguard.addresses = ["10.64.0.2/32", "fc00:bbbb::2/128"]

    valid_settings.validate(storage, ipv6_supported=True)

    with pytest.raises(SettingsValidationError, match="IPv6 is not supported") as exc_info:
        valid_settings.validate(storage, ipv6_supported=False)
    assert exc_info.value.group == "VPN"
