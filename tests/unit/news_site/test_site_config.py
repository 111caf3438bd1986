"""Tests for news_site.config module."""

from pathlib import Path

import pytest

from news_site import config as config_module
from news_site.config import load_config


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("ADMIN_EMAIL", "ADMIN_PASSWORD", "DATABASE_URL", "SITE_URL", "NEWS_SITE_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadConfig:
    def test_prod_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        config = load_config("prod")

        assert config.site.name == "NTR"
        assert config.site.tagline == "News Trends and Reports"
        assert config.page_size == 12
        assert config.admin.secure_cookie is True
        assert not config.admin.is_configured
        assert config.database.url is None

    def test_env_overlays(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ADMIN_EMAIL", " admin@ntr.test ")
        clean_env.setenv("ADMIN_PASSWORD", " pass with spaces ")
        clean_env.setenv("DATABASE_URL", "sqlite://")
        clean_env.setenv("SITE_URL", "https://ntr.test/")

        config = load_config("prod")

        assert config.admin.email == "admin@ntr.test"
        assert config.admin.password == " pass with spaces "
        assert config.database.url == "sqlite://"
        assert config.site.url == "https://ntr.test"

    def test_config_name_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NEWS_SITE_CONFIG", "local")
        config = load_config()
        assert config.admin.secure_cookie is False
        assert config.database.url == "sqlite:///ntr.db"

    def test_custom_dir(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        (tmp_path / "prod.yaml").write_text("page_size: 5\n")
        clean_env.setattr(config_module, "find_config_path", lambda name, env_var=None: tmp_path / "prod.yaml")

        assert load_config().page_size == 5
