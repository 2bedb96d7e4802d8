import sys

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_DEPOSIT_URL, AppSettings, get_user_env_file, write_user_env_vars


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEPOSIT_CB_DEPOSIT_URL", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.deposit_url == DEFAULT_DEPOSIT_URL == "https://jsonplaceholder.typicode.com/posts"
    assert settings.http_timeout_seconds > 0


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("DEPOSIT_CB_DEPOSIT_URL", "https://example.test/deposit")
    monkeypatch.setenv("DEPOSIT_CB_HTTP_TIMEOUT_SECONDS", "4.5")

    settings = AppSettings(_env_file=None)

    assert settings.deposit_url == "https://example.test/deposit"
    assert settings.http_timeout_seconds == 4.5


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout")
def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    write_user_env_vars({"DEPOSIT_CB_DEPOSIT_URL": "https://a.test"})
    path = write_user_env_vars({"DEPOSIT_CB_HTTP_TIMEOUT_SECONDS": "3"})

    assert path == get_user_env_file() == tmp_path / "deposit-callback" / ".env"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "DEPOSIT_CB_DEPOSIT_URL=https://a.test" in lines
    assert "DEPOSIT_CB_HTTP_TIMEOUT_SECONDS=3" in lines


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("DEPOSIT_CB_LOG_LEVEL", "debug")

    assert AppSettings(_env_file=None).log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("DEPOSIT_CB_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)
