"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_cors_default_origins(self):
        """Test that default CORS origins are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            from config import CORSConfig

            config = CORSConfig()

            assert "http://localhost:8000" in config.allowed_origins

    def test_cors_parses_env_var(self):
        """Test that CORS origins are parsed from environment variable."""
        env_origins = "  http://example.com , http://localhost:3000,,"
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            from config import _parse_cors_origins

            assert _parse_cors_origins() == ["http://example.com", "http://localhost:3000"]


class TestSecurityConfig:
    """Tests for SecurityConfig class."""

    def test_secret_key_auto_generates(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import SecurityConfig

            assert len(SecurityConfig().secret_key) > 0

    def test_secret_key_from_env(self):
        with patch.dict(os.environ, {"SECRET_KEY": "my-super-secret-key-12345"}):
            from config import SecurityConfig

            assert SecurityConfig().secret_key == "my-super-secret-key-12345"


class TestStoreConfig:
    """Tests for StoreConfig class."""

    def test_default_path(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import StoreConfig

            assert StoreConfig().db_path == "res/CasinoInfo.txt"

    def test_path_from_env(self):
        with patch.dict(os.environ, {"CASINO_DB_PATH": "/tmp/players.txt"}):
            from config import StoreConfig

            assert StoreConfig().db_path == "/tmp/players.txt"


class TestLoggingConfig:
    """Tests for LoggingConfig and configure_logging."""

    def test_level_from_env_is_upper_cased(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            from config import LoggingConfig

            assert LoggingConfig().level == "DEBUG"

    def test_configure_logging_applies_level(self):
        from config import AppConfig, LoggingConfig, configure_logging

        app_config = AppConfig(debug=False, logging=LoggingConfig(level="INFO"))
        with patch("logging.basicConfig") as basic_config:
            configure_logging(app_config)

        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == "INFO"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_app_config_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            from config import AppConfig

            config = AppConfig()

            assert config.debug is False
            assert config.host == "0.0.0.0"
            assert config.port == 8000
            assert config.round_ttl == 3600

    def test_app_config_debug_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "true"}):
            from config import AppConfig

            assert AppConfig().debug is True

    def test_app_config_has_nested_configs(self):
        from config import AppConfig

        config = AppConfig()

        for name in ("game", "store", "logging", "cors", "security"):
            assert hasattr(config, name)


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_config_defaults(self):
        from config import GameConfig

        config = GameConfig()

        assert config.min_bet == 2
        assert config.starting_balance == 100
        assert config.dealer_stands_on == 17

    def test_game_config_frozen(self):
        from config import GameConfig

        config = GameConfig()

        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            config.min_bet = 5
