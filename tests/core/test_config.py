"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from safefs.core.config import DEFAULT_COPY_BUFFER_SIZE, FsSettings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SAFEFS_COPY_BUFFER_SIZE", raising=False)
    monkeypatch.delenv("SAFEFS_FSYNC", raising=False)


def test_defaults() -> None:
    """Test values when no variables are set."""
    settings = load_settings()

    assert settings.copy_buffer_size == DEFAULT_COPY_BUFFER_SIZE
    assert settings.fsync is True


def test_buffer_size_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the buffer size is parsed from the environment."""
    monkeypatch.setenv("SAFEFS_COPY_BUFFER_SIZE", "4096")

    assert load_settings().copy_buffer_size == 4096


@pytest.mark.parametrize("value", ["0", "false", "no", "False"])
def test_fsync_disabled(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    """Test falsy spellings of SAFEFS_FSYNC."""
    monkeypatch.setenv("SAFEFS_FSYNC", value)

    assert load_settings().fsync is False


@pytest.mark.parametrize("value", ["0", "-1", "lots"])
def test_invalid_buffer_size(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    """Test that bad buffer sizes are rejected."""
    monkeypatch.setenv("SAFEFS_COPY_BUFFER_SIZE", value)

    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_frozen() -> None:
    """Test that settings cannot be mutated after loading."""
    settings = FsSettings()

    with pytest.raises(ValidationError):
        settings.copy_buffer_size = 1  # type: ignore[misc]
