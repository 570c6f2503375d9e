"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings

logger = logging.getLogger("flavourly.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _engine_options() -> dict:
    if not settings.is_sqlite():
        return {"pool_pre_ping": True}
    # In-memory SQLite must share one connection across threads (TestClient)
    return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}


# Create engine
engine = create_engine(
    settings.database_url, echo=settings.db_echo, future=True, **_engine_options()
)

if settings.is_sqlite():

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database():
    """Initialize database schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
