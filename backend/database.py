from sqlalchemy import String, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql.functions import GenericFunction

from config.settings import load_settings

settings = load_settings()


class casefold(GenericFunction):
    """
    Unicode case folding for case-insensitive matching in SQL.

    SQLite's built-in lower()/LIKE only fold ASCII, so SQLite connections get a
    `casefold` function backed by str.casefold; other backends use lower().
    """
    type = String()
    inherit_cache = True


@compiles(casefold)
def _compile_casefold(element, compiler, **kw):
    return "lower(%s)" % compiler.process(element.clauses, **kw)


@compiles(casefold, 'sqlite')
def _compile_casefold_sqlite(element, compiler, **kw):
    return "casefold(%s)" % compiler.process(element.clauses, **kw)


def _py_casefold(value):
    return value.casefold() if isinstance(value, str) else value


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections are shared across threads (API worker threads) and
    get foreign keys and WAL enabled plus the `casefold` SQL function;
    in-memory SQLite uses a single static connection so every session sees
    the same database.
    """
    if not url.startswith('sqlite'):
        return create_engine(url, echo=echo, pool_pre_ping=True)

    kwargs = {'connect_args': {'check_same_thread': False}, 'echo': echo}
    if ':memory:' in url or url in ('sqlite://', 'sqlite:///'):
        kwargs['poolclass'] = StaticPool
    sqlite_engine = create_engine(url, **kwargs)

    @event.listens_for(sqlite_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        dbapi_conn.create_function("casefold", 1, _py_casefold, deterministic=True)
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        if ':memory:' not in url:
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
        cursor.close()

    return sqlite_engine


engine = build_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
