"""Tests for environment-driven configuration and schema setup."""

from pathlib import Path

import pytest

from config.settings import load_settings
from constants import ServerConfig
from database import build_engine
from exceptions import ConfigurationError
from init_db import check_schema, init_database


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (
        'CATALOG_DATABASE_URL', 'CATALOG_SQL_ECHO', 'CATALOG_LOG_DIR',
        'CATALOG_LOG_LEVEL', 'CATALOG_HOST', 'CATALOG_PORT',
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('CATALOG_DATA_DIR', str(tmp_path))
    return tmp_path


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings()

        assert settings.data_dir == clean_env
        assert settings.database_url == f"sqlite:///{clean_env / 'catalog.db'}"
        assert settings.sql_echo is False
        assert settings.log_dir == clean_env / 'logs'
        assert settings.log_level == 'INFO'
        assert settings.host == ServerConfig.HOST
        assert settings.port == ServerConfig.PORT

    def test_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv('CATALOG_DATABASE_URL', 'sqlite:///:memory:')
        monkeypatch.setenv('CATALOG_SQL_ECHO', 'TRUE')
        monkeypatch.setenv('CATALOG_LOG_DIR', '/var/log/catalog')
        monkeypatch.setenv('CATALOG_LOG_LEVEL', 'debug')
        monkeypatch.setenv('CATALOG_HOST', '127.0.0.1')
        monkeypatch.setenv('CATALOG_PORT', '9000')

        settings = load_settings()

        assert settings.database_url == 'sqlite:///:memory:'
        assert settings.sql_echo is True
        assert settings.log_dir == Path('/var/log/catalog')
        assert settings.log_level == 'DEBUG'
        assert settings.host == '127.0.0.1'
        assert settings.port == 9000

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_invalid_port_is_rejected(self, clean_env, monkeypatch, port):
        monkeypatch.setenv('CATALOG_PORT', port)

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()

        assert exc_info.value.details == {"missing_keys": ['CATALOG_PORT']}

    def test_invalid_log_level_is_rejected(self, clean_env, monkeypatch):
        monkeypatch.setenv('CATALOG_LOG_LEVEL', 'LOUD')

        with pytest.raises(ConfigurationError):
            load_settings()


class TestInitDatabase:
    def test_creates_missing_tables(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'nested' / 'catalog.db'}")

        assert check_schema(engine) == ['category']

        init_database(engine)

        assert check_schema(engine) == []
        assert (tmp_path / 'nested' / 'catalog.db').exists()
        engine.dispose()

    def test_is_idempotent(self, db_engine):
        init_database(db_engine)
        init_database(db_engine)

        assert check_schema(db_engine) == []

    def test_check_schema_with_missing_directory_reports_every_table(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'absent' / 'catalog.db'}")

        assert check_schema(engine) == ['category']
        engine.dispose()
