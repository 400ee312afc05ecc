"""Engine, sessions and table setup for the helpline store"""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .config import DATABASE_URL, DATABASE_ECHO, SQLITE_WAL


def make_engine(url: str, echo: bool = False, wal: bool = False, **kwargs):
    """Engine for url; SQLite connections are shared across request threads.

    wal switches file-backed SQLite databases to the WAL journal.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, echo=echo, **kwargs)

    if wal and url.startswith("sqlite"):
        @event.listens_for(engine, "connect")
        def set_journal_mode(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


engine = make_engine(DATABASE_URL, echo=DATABASE_ECHO, wal=SQLITE_WAL)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


class Base(DeclarativeBase):
    pass


def init_db(bind=None) -> None:
    """Create the helplines table if it does not exist"""
    from . import models  # noqa: F401  registers the tables on Base

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """FastAPI Depends"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
