from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from pos.config import get_settings

settings = get_settings()


def _engine_options(url: str) -> dict:
    """SQLite needs cross-thread access; server databases get a connection pool."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True}


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency to get database session.
    Yields a database session and closes it after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
