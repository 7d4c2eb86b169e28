# storefront/data/database.py
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.utils.settings import DATABASE_URL, DATABASE_ECHO
from storefront.utils.retry import db_retry
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    #sqlite ignores ON DELETE rules unless asked
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(bind: Engine | None = None) -> None:
    """
    Creates every table registered on Base.metadata.
    Retries while the database is still coming up.
    """
    # models have to be imported before create_all so they land in the metadata
    import storefront.data.models  # noqa: F401

    bind = bind or engine

    @db_retry()
    def _create_all():
        Base.metadata.create_all(bind=bind)

    _create_all()
    logger.info(f"Database tables ready: {sorted(Base.metadata.tables.keys())}")

