"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file by default) and provides
small helpers used by the application, scripts and tests.
"""

from sqlalchemy import event
from sqlmodel import SQLModel, create_engine, Session
from .config import settings

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=_connect_args)


if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores FK constraints (and ON DELETE CASCADE) unless enabled per connection.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    Also makes sure the placeholder user exists, since projects and
    dependencies created without an explicit user are attributed to it.
    Production deployments should manage the schema with a migration
    tool instead.
    """
    from . import models  # noqa: F401  (registers the tables)
    SQLModel.metadata.create_all(engine)
    _ensure_default_user()


def _ensure_default_user():
    from .services import UserService
    with Session(engine) as session:
        UserService(session).ensure_user(settings.DEFAULT_USER_ID)


def get_session():
    """Request-scoped session dependency.

    Every repository used while serving one request shares this session;
    statements auto-commit per repository call, so nothing is left open
    when the request ends.
    """
    with Session(engine) as session:
        yield session
