"""
Runtime Configuration

Reads application settings from environment variables, falling back to
defaults suitable for local development.

Variables:
- CATALOG_DATA_DIR: Directory holding the default SQLite database
- CATALOG_DATABASE_URL: SQLAlchemy URL (defaults to SQLite in CATALOG_DATA_DIR)
- CATALOG_SQL_ECHO: Log every SQL statement ('true'/'false')
- CATALOG_LOG_DIR: Directory for rotating log files
- CATALOG_LOG_LEVEL: Root log level name (INFO, DEBUG, ...)
- CATALOG_HOST / CATALOG_PORT: Bind address for the API server
"""
import os
import logging
from dataclasses import dataclass
from pathlib import Path

from constants import ServerConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ('true', '1', 'yes')
_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the runtime configuration."""

    data_dir: Path
    database_url: str
    sql_echo: bool
    log_dir: Path
    log_level: str
    host: str
    port: int


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUE_VALUES


def _env_port(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'", [name])
    if not 0 < port < 65536:
        raise ConfigurationError(f"{name} must be between 1 and 65535, got {port}", [name])
    return port


def load_settings() -> Settings:
    """
    Build settings from the current environment.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    data_dir = Path(os.environ.get('CATALOG_DATA_DIR', Path.home() / '.catalog-admin'))
    database_url = os.environ.get('CATALOG_DATABASE_URL') or f"sqlite:///{data_dir / 'catalog.db'}"

    log_level = os.environ.get('CATALOG_LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"CATALOG_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{log_level}'",
            ['CATALOG_LOG_LEVEL']
        )

    settings = Settings(
        data_dir=data_dir,
        database_url=database_url,
        sql_echo=_env_bool('CATALOG_SQL_ECHO'),
        log_dir=Path(os.environ.get('CATALOG_LOG_DIR', data_dir / 'logs')),
        log_level=log_level,
        host=os.environ.get('CATALOG_HOST', ServerConfig.HOST),
        port=_env_port('CATALOG_PORT', ServerConfig.PORT),
    )
    logger.debug(f"Loaded settings: database={settings.database_url} log_dir={settings.log_dir}")
    return settings
