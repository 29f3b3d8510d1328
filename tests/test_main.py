from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

import vpnsettings.__main__ as vpnsettings_main


@pytest.fixture(autouse=True)
def _quiet_logging_setup(monkeypatch: pytest.MonkeyPatch) -> list:
    applied: list = []
    monkeypatch.setattr(vpnsettings_main, "configure_logging_from_args", lambda **kwargs: None)
    monkeypatch.setattr(vpnsettings_main, "apply_settings_level", applied.append)
    for name in ("OPENVPN_USER", "OPENVPN_PASSWORD", "WIREGUARD_PRIVATE_KEY", "SHADOWSOCKS_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    return applied


def _write(path: Path, raw: dict) -> Path:
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return path


def _valid_raw() -> dict:
    return {
        "log": {"level": "warning"},
        "vpn": {"openvpn": {"user": "p1234567", "password": "secret"}},
    }


def test_check_valid_settings_prints_summary(tmp_path: Path, capsys) -> None:
    settings_file = _write(tmp_path / "settings.yaml", _valid_raw())

    code = vpnsettings_main.main(["check", str(settings_file)])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Settings summary:")
    assert "Private Internet Access settings:" in out
    assert "secret" not in out


def test_check_applies_log_level_from_settings(tmp_path: Path, _quiet_logging_setup: list) -> None:
    settings_file = _write(tmp_path / "settings.yaml", _valid_raw())

    assert vpnsettings_main.main(["check", str(settings_file)]) == 0
    assert vpnsettings_main.main(["--log-level", "DEBUG", "check", str(settings_file)]) == 0

    assert _quiet_logging_setup == ["warning"]


def test_check_invalid_settings_returns_1(tmp_path: Path, capsys) -> None:
    raw = _valid_raw()
    raw["log"]["level"] = "verbose"
    settings_file = _write(tmp_path / "settings.yaml", raw)

    code = vpnsettings_main.main(["check", str(settings_file)])

    captured = capsys.readouterr()
    assert code == 1
    assert "Invalid settings: SettingsValidationError: log settings:" in captured.err
    assert captured.out == ""


def test_check_rejected_override_returns_1(tmp_path: Path, capsys) -> None:
    settings_file = _write(tmp_path / "settings.yaml", _valid_raw())
    override_file = _write(tmp_path / "override.yaml", {"firewall": {"input_ports": [70000]}})

    code = vpnsettings_main.main(["check", str(settings_file), "--override", str(override_file)])

    err = capsys.readouterr().err
    assert code == 1
    assert "OverrideRejectedError: firewall settings:" in err


def test_check_applies_valid_override(tmp_path: Path, capsys) -> None:
    settings_file = _write(tmp_path / "settings.yaml", _valid_raw())
    override_file = _write(tmp_path / "override.yaml", {"system": {"timezone": "Europe/Paris"}})

    code = vpnsettings_main.main(["check", str(settings_file), "--override", str(override_file)])

    assert code == 0
    assert "Europe/Paris" in capsys.readouterr().out


def test_check_validates_server_selection_with_servers_file(tmp_path: Path, capsys) -> None:
    raw = _valid_raw()
    raw["vpn"]["provider"] = {"server_selection": {"cities": ["Tokyo"]}}
    settings_file = _write(tmp_path / "settings.yaml", raw)
    servers_file = _write(
        tmp_path / "servers.yaml",
        {"private internet access": [{"country": "Germany", "city": "Berlin"}]},
    )

    code = vpnsettings_main.main(["check", str(settings_file), "--servers", str(servers_file)])

    assert code == 1
    assert "cities value 'Tokyo'" in capsys.readouterr().err


def test_check_logs_warnings(tmp_path: Path, caplog) -> None:
    raw = _valid_raw()
    raw["vpn"]["provider"] = {"name": "hidemyass"}
    settings_file = _write(tmp_path / "settings.yaml", raw)

    with caplog.at_level(logging.WARNING, logger="vpnsettings"):
        code = vpnsettings_main.main(["check", str(settings_file)])

    assert code == 0
    assert any("HideMyAss dropped support" in message for message in caplog.messages)


def test_check_missing_file_returns_2(tmp_path: Path, capsys) -> None:
    code = vpnsettings_main.main(["check", str(tmp_path / "missing.yaml")])

    assert code == 2
    assert "Error: FileNotFoundError" in capsys.readouterr().err


def test_check_malformed_yaml_returns_2(tmp_path: Path, capsys) -> None:
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("vpn: [unclosed\n", encoding="utf-8")

    code = vpnsettings_main.main(["check", str(settings_file)])

    assert code == 2
    assert "Error: ValueError: Invalid YAML in settings.yaml" in capsys.readouterr().err


def test_check_malformed_servers_file_returns_2(tmp_path: Path, capsys) -> None:
    settings_file = _write(tmp_path / "settings.yaml", _valid_raw())
    servers_file = tmp_path / "servers.yml"
    servers_file.write_text("mullvad: [unclosed\n", encoding="utf-8")

    code = vpnsettings_main.main(["check", str(settings_file), "--servers", str(servers_file)])

    assert code == 2
    assert "Invalid YAML in servers.yml" in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit) as exc_info:
        vpnsettings_main.main([])
    assert exc_info.value.code == 2
