import unittest.mock as mock
from pathlib import Path

import tomllib

from nylas_calendar import Configurator
from nylas_calendar.core import sentry


def test_default_config(monkeypatch, tmp_path):
    monkeypatch.setenv("NYLAS_SETTINGS", str(tmp_path / "missing.toml"))
    config = Configurator()

    assert config.API_SERVER == "https://api.nylas.com"
    assert config.SUPPORTED_API_VERSION == "2.1"
    assert config.UNKNOWN_KEY is None

    # Make sure all config keys are defined
    with open(Path(__file__).parent.parent / "nylas_calendar/config_default.toml", "rb") as f:
        assert config.configuration.keys() == tomllib.load(f).keys()


def test_custom_config_file_override(monkeypatch, tmp_path):
    settings = tmp_path / "config.toml"
    settings.write_text('API_SERVER = "api.eu.nylas.com/"\nREQUEST_TIMEOUT = 5\n')
    monkeypatch.setenv("NYLAS_SETTINGS", str(settings))
    config = Configurator()

    assert config.API_SERVER == "https://api.eu.nylas.com"
    assert config.REQUEST_TIMEOUT == 5


def test_env_override(monkeypatch):
    monkeypatch.delenv("NYLAS_SETTINGS", raising=False)
    monkeypatch.setenv("NYLAS_API_SERVER", "https://example.com")
    monkeypatch.setenv("NYLAS_REQUEST_TIMEOUT", "10")
    monkeypatch.setenv("NYLAS_SENTRY_SAMPLE_RATE", "0.5")
    config = Configurator()

    assert config.API_SERVER == "https://example.com"
    assert config.REQUEST_TIMEOUT == 10
    assert config.SENTRY_SAMPLE_RATE == 0.5


def test_host_settings_are_ignored(monkeypatch, tmp_path):
    # a config.toml in the working directory and unprefixed env vars belong to the host app
    (tmp_path / "config.toml").write_text('API_SERVER = "https://internal.svc"\n')
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NYLAS_SETTINGS", raising=False)
    monkeypatch.setenv("API_SERVER", "https://other.svc")
    monkeypatch.setenv("CLIENT_SECRET", "host-secret")
    config = Configurator()

    assert config.API_SERVER == "https://api.nylas.com"
    assert config.CLIENT_SECRET == ""


def test_malformed_host_config_does_not_break_loading(monkeypatch, tmp_path):
    (tmp_path / "config.toml").write_text("not = [valid toml")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NYLAS_SETTINGS", raising=False)

    assert Configurator().API_SERVER == "https://api.nylas.com"


def test_override(monkeypatch, tmp_path):
    monkeypatch.setenv("NYLAS_SETTINGS", str(tmp_path / "missing.toml"))
    config = Configurator()
    config.override(API_SERVER="http://localhost:5555/")

    assert config.API_SERVER == "http://localhost:5555"


def test_sentry_kwargs():
    with mock.patch.object(sentry, "config", Configurator()) as config:
        config.override(SENTRY_DSN="https://key@sentry.example.com/1", SENTRY_ENVIRONMENT="test")
        kwargs = sentry.get_sentry_kwargs()

    assert kwargs["dsn"] == "https://key@sentry.example.com/1"
    assert kwargs["environment"] == "test"


def test_sentry_is_not_initialized_without_dsn():
    with mock.patch.object(sentry.sentry_sdk, "init") as init:
        assert sentry.init_sentry() is False
    init.assert_not_called()
