"""
Shared pytest fixtures for vpnsettings tests.
"""

import base64
import os
from typing import Dict

import pytest

from vpnsettings.config.models import Settings
from vpnsettings.config.storage import FilterChoices


class FakeStorage:
    """In-memory storage returning fixed filter choices per provider."""

    def __init__(self, choices: Dict[str, FilterChoices]):
        self.choices = choices
        self.calls: list[str] = []

    def get_filter_choices(self, provider: str) -> FilterChoices:
        self.calls.append(provider)
        return self.choices.get(provider, FilterChoices())


@pytest.fixture(autouse=True)
def _restore_env_after_test():
    original = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(original)


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage({
        "private internet access": FilterChoices(
            countries=["France", "Germany"],
            regions=["DE Berlin", "France"],
            cities=["Berlin", "Paris"],
            hostnames=["berlin401", "paris402"],
        ),
        "mullvad": FilterChoices(
            countries=["Sweden"],
            cities=["Stockholm"],
            hostnames=["se-sto-wg-001"],
        ),
    })


@pytest.fixture
def wireguard_key() -> str:
    return base64.b64encode(bytes(range(32))).decode("ascii")


@pytest.fixture
def default_settings() -> Settings:
    """Settings with every default set, not necessarily valid."""
    settings = Settings()
    settings.set_defaults()
    return settings


@pytest.fixture
def valid_settings(default_settings: Settings) -> Settings:
    """Defaulted settings completed with OpenVPN credentials."""
    default_settings.vpn.openvpn.user = "p1234567"
    default_settings.vpn.openvpn.password = "secret"
    return default_settings
