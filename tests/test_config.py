"""
設定と構成のテスト
"""
import logging

import pytest
import structlog

from translate_http.config import Settings, clear_settings_cache, get_settings
from translate_http.core.logging import configure_logging


class TestSettings:
    """Settings のテスト"""

    @pytest.mark.unit
    def test_defaults(self, settings: Settings):
        assert settings.aws_region == "us-east-1"
        assert settings.aws_access_key_id is None
        assert settings.translate_timeout == 30.0
        assert not settings.has_credentials

    @pytest.mark.unit
    def test_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "eu-central-1")
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIDENV")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret-env")
        monkeypatch.setenv("TRANSLATE_TIMEOUT", "12.5")

        settings = Settings(_env_file=None)

        assert settings.aws_region == "eu-central-1"
        assert settings.translate_timeout == 12.5
        assert settings.has_credentials

    @pytest.mark.unit
    def test_empty_region_falls_back(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "")

        assert Settings(_env_file=None).aws_region == "us-east-1"

    @pytest.mark.unit
    def test_invalid_timeout(self, monkeypatch):
        from pydantic import ValidationError

        monkeypatch.setenv("TRANSLATE_TIMEOUT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.unit
    def test_get_settings_cached(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("AWS_REGION", "sa-east-1")
        clear_settings_cache()

        assert get_settings().aws_region == "sa-east-1"

    @pytest.mark.unit
    def test_log_level_int(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level_int == logging.DEBUG


class TestConfigureLogging:
    """configure_logging のテスト"""

    @pytest.mark.unit
    def test_configures_structlog(self, settings: Settings):
        try:
            configure_logging(settings)
            assert structlog.is_configured()
            assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger
        finally:
            structlog.reset_defaults()
