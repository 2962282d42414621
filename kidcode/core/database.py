import os
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from kidcode.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **kwargs):
    """
    Creates an engine for the given URL.
    SQLite gets its data directory created, cross-thread access enabled
    (FastAPI runs sync endpoints in a threadpool) and foreign keys switched on.
    """
    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            data_dir = os.path.dirname(os.path.abspath(url.database))
            os.makedirs(data_dir, exist_ok=True)

    db_engine = create_engine(database_url, connect_args=connect_args, **kwargs)

    if db_engine.dialect.name == "sqlite":
        @event.listens_for(db_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Largest value a signed 64-bit INTEGER column can hold
MAX_ROW_ID = 2**63 - 1

def dialect_insert(db, model):
    """
    Returns an INSERT for `model` that supports `on_conflict_do_update` /
    `on_conflict_do_nothing` on the session's backend (SQLite or PostgreSQL).
    """
    dialect_name = db.get_bind().dialect.name
    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert as pg_insert
        return pg_insert(model)
    if dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert as sqlite_insert
        return sqlite_insert(model)
    raise ValueError(f"Upserts need a postgresql or sqlite database, got '{dialect_name}'.")

def get_db():
    """
    Dependency to get a database session.
    Ensures the database session is always closed after the request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Used on startup for development databases; Alembic owns the schema elsewhere.
def create_db_and_tables(bind=None):
    # Registers every model with Base.metadata before create_all
    import kidcode.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
