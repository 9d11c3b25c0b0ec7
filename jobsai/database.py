# database.py
import logging
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobsai.config import is_sqlite_url, settings


logger = logging.getLogger(__name__)

# Tables flagged with this key in `Table.info` are created by the first request that needs them.
ON_DEMAND = "create_on_demand"


def _build_connect_args(db_url: str) -> dict:
    if is_sqlite_url(db_url):
        return {"check_same_thread": False}
    return {}


def mask_db_url(db_url: str) -> str:
    try:
        return str(make_url(db_url).set(password="***"))
    except Exception:
        return db_url


engine = create_engine(settings.db_url, pool_pre_ping=True, future=True, connect_args=_build_connect_args(settings.db_url))
logger.info("SQLAlchemy db_url=%s", mask_db_url(settings.db_url))


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
Base = declarative_base()


def core_tables() -> list:
    return [t for t in Base.metadata.sorted_tables if not t.info.get(ON_DEMAND)]


def create_core_tables(bind: Engine = engine) -> None:
    """Create every mapped table except the on-demand ones."""

    import jobsai.models  # noqa: F401  # ensure all models are registered

    Base.metadata.create_all(bind=bind, tables=core_tables())


def get_db() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
