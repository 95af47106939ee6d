"""Unit tests for environment-driven settings."""

import pytest

from chatterjoy.config import Settings


CREDENTIAL_VARS = [
    "HF_API_TOKEN",
    "GEMINI_API_KEY",
    "FIREBASE_SERVICE_ACCOUNT_KEY",
    "FIREBASE_SERVICE_ACCOUNT_PATH",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in CREDENTIAL_VARS + ["PROVIDER_TIMEOUT", "FALLBACK_EMOTION_LABEL"]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_without_credentials(clean_env):
    settings = Settings(_env_file=None)

    assert settings.PROVIDER_TIMEOUT == 30.0
    assert settings.FALLBACK_EMOTION_LABEL == "neutral"
    assert settings.LIVENESS_MESSAGE == " ChatterJoy's Push Notification Server is running!"
    assert not settings.emotion_provider_configured
    assert not settings.reply_provider_configured
    assert not settings.push_provider_configured


def test_credentials_read_from_environment(clean_env):
    clean_env.setenv("HF_API_TOKEN", "hf_x")
    clean_env.setenv("GEMINI_API_KEY", "g_x")
    clean_env.setenv("FIREBASE_SERVICE_ACCOUNT_PATH", "/etc/firebase.json")
    clean_env.setenv("PROVIDER_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.HF_API_TOKEN == "hf_x"
    assert settings.PROVIDER_TIMEOUT == 2.5
    assert settings.emotion_provider_configured
    assert settings.reply_provider_configured
    assert settings.push_provider_configured


def test_empty_credential_counts_as_missing(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "")

    settings = Settings(_env_file=None)

    assert not settings.reply_provider_configured


def test_env_file_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("HF_API_TOKEN=from_file\nFALLBACK_EMOTION_LABEL=calm\n")

    settings = Settings(_env_file=env_file)

    assert settings.HF_API_TOKEN == "from_file"
    assert settings.FALLBACK_EMOTION_LABEL == "calm"


def test_unused_flags_are_not_settings(clean_env):
    clean_env.setenv("DEBUG", "true")

    settings = Settings(_env_file=None)

    assert "DEBUG" not in Settings.model_fields
    assert not hasattr(settings, "DEBUG")
