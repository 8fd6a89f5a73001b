import pytest
from pydantic import ValidationError

from backend.config import DEFAULT_API_BASE, Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("INCIDENTROI_DEFAULT_PROFILE", "INCIDENTROI_LOG_LEVEL", "INCIDENTROI_API_BASE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.default_profile == "standard"
    assert settings.log_level == "INFO"
    assert settings.api_base == DEFAULT_API_BASE


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INCIDENTROI_DEFAULT_PROFILE", "lean")
    monkeypatch.setenv("INCIDENTROI_LOG_LEVEL", "debug")
    monkeypatch.setenv("INCIDENTROI_API_BASE", "http://roi.internal:9000")
    settings = load_settings()
    assert settings.default_profile == "lean"
    assert settings.log_level == "DEBUG"
    assert settings.api_base == "http://roi.internal:9000"


def test_unknown_log_level_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INCIDENTROI_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        load_settings()


def test_unknown_default_profile_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INCIDENTROI_DEFAULT_PROFILE", "platinum")
    with pytest.raises(ValidationError, match="platinum"):
        load_settings()
