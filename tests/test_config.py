import pytest
from pydantic import ValidationError

from request_status.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "LOG_JSON", "DEFAULT_USERS_NEEDED", "STATUS_TIME_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.log_json is True
    assert settings.default_users_needed == 2
    assert settings.status_time_format == "%X"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEFAULT_USERS_NEEDED", "4")
    monkeypatch.setenv("STATUS_TIME_FORMAT", "%H:%M")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.default_users_needed == 4
    assert settings.status_time_format == "%H:%M"


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_settings_reject_non_positive_threshold() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_users_needed=0)
