import pytest
from pydantic import ValidationError

from core.config import AppConfig


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ISENSE_APP_URL", "https://isense.example.org")
    monkeypatch.setenv("ISENSE_LOG_LEVEL", "debug")
    cfg = AppConfig()
    assert cfg.APP_URL == "https://isense.example.org"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_export_filename_gets_txt_suffix(monkeypatch):
    monkeypatch.setenv("ISENSE_EXPORT_FILENAME", "my-analysis")
    assert AppConfig().EXPORT_FILENAME == "my-analysis.txt"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("ISENSE_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        AppConfig()
