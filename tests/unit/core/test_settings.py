"""
Tests for Settings.
"""

import pytest
from pydantic import ValidationError

from storefront.config.settings import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.CART_CACHE_TTL_SECONDS == 300
        assert settings.CART_PRICE_DRIFT_PERCENT == 1.0
        assert settings.CART_PRICE_DRIFT_ABSOLUTE == 1000
        assert settings.LOG_FORMAT == "colored"

    def test_database_urls(self):
        settings = Settings(_env_file=None, DB_USER="shop", DB_PASSWORD="secret", DB_HOST="db", DB_NAME="cart")

        assert settings.database_url == "postgresql://shop:secret@db:5432/cart"
        assert settings.async_database_url == "postgresql+asyncpg://shop:secret@db:5432/cart"

    def test_redis_url_without_password(self):
        settings = Settings(_env_file=None, REDIS_HOST="cache", REDIS_PORT=6380, REDIS_DB=2)

        assert settings.redis_url == "redis://cache:6380/2"

    def test_environment_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("CART_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("CART_PRICE_DRIFT_PERCENT", "2.5")

        settings = Settings(_env_file=None)

        assert settings.CART_CACHE_TTL_SECONDS == 60
        assert settings.CART_PRICE_DRIFT_PERCENT == 2.5

    @pytest.mark.parametrize(
        "overrides",
        [
            {"CART_CACHE_TTL_SECONDS": 0},
            {"CART_PRICE_DRIFT_PERCENT": -1},
            {"LOG_FORMAT": "xml"},
            {"DB_POOL_SIZE": 0},
        ],
    )
    def test_invalid_values_are_rejected(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)

    def test_test_environment_counts_as_development(self):
        assert Settings(_env_file=None, ENVIRONMENT="test").is_development
        assert not Settings(_env_file=None, ENVIRONMENT="production").is_development
