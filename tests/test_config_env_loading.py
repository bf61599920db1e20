"""
Settings loading: environment prefixes, validation and .env discovery.
"""

import os

import pytest
from pydantic import ValidationError

from careconnect.core import config
from careconnect.core.config import (
    BookingSettings,
    CORSSettings,
    DatabaseSettings,
    Settings,
    TwilioSettings,
    get_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults(monkeypatch):
    monkeypatch.delenv("MONGO_URI", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    settings = Settings()
    assert settings.app_name == "CareConnect"
    assert settings.database.uri == "mongodb://localhost:27017"
    assert settings.is_development
    assert not settings.twilio.is_configured
    assert settings.bootstrap.seed_defaults is True


def test_prefixed_environment_variables(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb+srv://cluster.example.net")
    monkeypatch.setenv("MONGO_DB_NAME", "hospital")
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC1")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "tok")
    monkeypatch.setenv("TWILIO_VERIFY_SERVICE_SID", "VA1")
    monkeypatch.setenv("TWILIO_CHANNEL", "WhatsApp")
    monkeypatch.setenv("BOOKING_DEFAULT_TIME_SLOT", "Evening")
    monkeypatch.setenv("APP_ENV", "Testing")

    settings = get_settings()
    assert settings.database.uri.startswith("mongodb+srv://")
    assert settings.database.db_name == "hospital"
    assert settings.twilio.is_configured
    assert settings.twilio.channel == "whatsapp"
    assert settings.booking.default_time_slot == "Evening"
    assert settings.is_testing


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first
    reset_settings()
    assert get_settings() is not first


@pytest.mark.parametrize(
    "factory",
    [
        lambda: DatabaseSettings(uri="postgres://localhost"),
        lambda: TwilioSettings(channel="pigeon"),
        lambda: BookingSettings(default_time_slot="Midnight"),
        lambda: Settings(app_env="qa"),
        lambda: Settings(port=70000),
    ],
)
def test_invalid_values_are_rejected(factory):
    with pytest.raises(ValidationError):
        factory()


def test_cors_origins_accept_json_or_single_value():
    assert CORSSettings(allowed_origins='["http://a", "http://b"]').allowed_origins == [
        "http://a",
        "http://b",
    ]
    assert CORSSettings(allowed_origins="http://a").allowed_origins == ["http://a"]


def test_env_file_found_in_parent_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("MONGO_DB_NAME", raising=False)
    (tmp_path / ".env").write_text("MONGO_DB_NAME=from_parent_env\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    config._load_env_file_if_available()
    try:
        assert os.getenv("MONGO_DB_NAME") == "from_parent_env"
    finally:
        os.environ.pop("MONGO_DB_NAME", None)


def test_already_set_env_vars_take_precedence(monkeypatch, tmp_path):
    monkeypatch.setenv("MONGO_DB_NAME", "already_set")
    (tmp_path / ".env").write_text("MONGO_DB_NAME=from_env_file\n")
    monkeypatch.chdir(tmp_path)

    config._load_env_file_if_available()
    assert os.getenv("MONGO_DB_NAME") == "already_set"


def test_no_env_file_no_crash(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    config._load_env_file_if_available()
