"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lambda_trigger_tracer.config import TracerSettings

_ENV_VARS = ("TRACER_METADATA_ONLY", "TRACER_MAX_PAYLOAD_LENGTH", "LOG_LEVEL", "TRACER_DEBUG")


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_settings_defaults(clean_env: Path) -> None:
    settings = TracerSettings()

    assert settings.metadata_only is False
    assert settings.max_payload_length == 1024
    assert settings.log_level == "INFO"
    assert settings.debug is False


def test_settings_loads_from_dotenv(clean_env: Path) -> None:
    (clean_env / ".env").write_text(
        "\n".join(
            [
                "TRACER_METADATA_ONLY=true",
                "TRACER_MAX_PAYLOAD_LENGTH=2048",
                "LOG_LEVEL=DEBUG",
                "",
            ]
        ),
        encoding="utf-8",
    )

    settings = TracerSettings()

    assert settings.metadata_only is True
    assert settings.max_payload_length == 2048
    assert settings.log_level == "DEBUG"


def test_environment_overrides_defaults(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRACER_METADATA_ONLY", "1")

    assert TracerSettings().metadata_only is True


def test_max_payload_length_must_be_positive(clean_env: Path) -> None:
    with pytest.raises(ValidationError):
        TracerSettings(max_payload_length=0)


def test_metadata_policy_mirrors_settings(clean_env: Path) -> None:
    policy = TracerSettings(metadata_only=True, max_payload_length=10).metadata_policy

    assert policy.metadata_only is True
    assert policy.max_payload_length == 10
