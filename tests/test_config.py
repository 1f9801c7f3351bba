"""Tests for PubSubSettings and load_settings."""

import pytest
from pydantic import ValidationError

from topicbus.config import _ENV_FIELDS, PubSubSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # set-then-delete so teardown also removes values written by load_dotenv
    for name in _ENV_FIELDS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


def test_defaults():
    settings = PubSubSettings.from_env()

    assert settings.max_workers == 4
    assert settings.thread_name_prefix == "topicbus-dispatch"
    assert settings.log_level == "INFO"
    assert settings.api_key is None


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("PUBSUB_MAX_WORKERS", "8")
    monkeypatch.setenv("PUBSUB_THREAD_PREFIX", "fanout")
    monkeypatch.setenv("PUBSUB_LOG_LEVEL", "debug")
    monkeypatch.setenv("API_KEY", " secret ")

    settings = PubSubSettings.from_env()

    assert settings.max_workers == 8
    assert settings.thread_name_prefix == "fanout"
    assert settings.log_level == "DEBUG"
    assert settings.api_key == "secret"


def test_blank_api_key_is_unset(monkeypatch):
    monkeypatch.setenv("API_KEY", "   ")
    assert PubSubSettings.from_env().api_key is None


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_invalid_max_workers(monkeypatch, value):
    monkeypatch.setenv("PUBSUB_MAX_WORKERS", value)
    with pytest.raises(ValidationError):
        PubSubSettings.from_env()


def test_unknown_log_level(monkeypatch):
    monkeypatch.setenv("PUBSUB_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        PubSubSettings.from_env()


def test_load_settings_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PUBSUB_MAX_WORKERS=3\nAPI_KEY=from-file\n")

    settings = load_settings(str(env_file))

    assert settings.max_workers == 3
    assert settings.api_key == "from-file"


def test_load_settings_keeps_real_environment(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PUBSUB_MAX_WORKERS=3\n")
    monkeypatch.setenv("PUBSUB_MAX_WORKERS", "6")

    assert load_settings(str(env_file)).max_workers == 6
