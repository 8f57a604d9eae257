"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from catalog_editor.config import Settings


class TestSettings:
    """Tests for settings validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.category_locale == "en"
        assert settings.refilter_after_commit is False

    def test_locale_is_normalized(self):
        assert Settings(_env_file=None, category_locale="PT-br").category_locale == "pt-BR"

    def test_unknown_locale_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, category_locale="fr")

    def test_unknown_env_falls_back(self):
        assert Settings(_env_file=None, app_env="qa").app_env == "development"

    def test_env_variables(self, monkeypatch):
        monkeypatch.setenv("CATEGORY_LOCALE", "pt-BR")
        monkeypatch.setenv("REFILTER_AFTER_COMMIT", "true")
        settings = Settings(_env_file=None)
        assert settings.category_locale == "pt-BR"
        assert settings.refilter_after_commit is True

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins='["http://localhost:3000"]')
        assert settings.cors_origins_list == ["http://localhost:3000"]
        assert Settings(_env_file=None, cors_origins="nope").cors_origins_list == ["*"]
