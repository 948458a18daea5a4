from database import engine as default_engine, Base, settings
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
import logging
from pathlib import Path

import models  # noqa: F401  registers CategoryModel on Base.metadata

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ('category',)


def _ensure_sqlite_directory(engine: Engine):
    """Create the parent directory of a file-based SQLite database"""
    database = engine.url.database
    if engine.url.get_backend_name() != 'sqlite' or not database or database == ':memory:':
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def check_schema(engine: Engine = default_engine) -> list[str]:
    """
    List required tables that are missing from the database.

    The parent directory of a file-based SQLite database is created first,
    so a fresh data directory reports every table missing instead of
    failing to open.

    Returns:
        Names of missing tables (empty when the schema is complete)
    """
    _ensure_sqlite_directory(engine)
    existing = set(inspect(engine).get_table_names())
    return [table for table in REQUIRED_TABLES if table not in existing]


def init_database(engine: Engine = default_engine):
    """Create all tables that do not exist yet"""
    _ensure_sqlite_directory(engine)
    Base.metadata.create_all(bind=engine)

    missing = check_schema(engine)
    if missing:
        logger.error(f"❌ Database schema incomplete, missing tables: {', '.join(missing)}")
    else:
        logger.info(f"✅ Database ready: {engine.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    init_database()
