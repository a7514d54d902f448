"""
Database session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from mindsphere.core.config import settings
from mindsphere.db.base import Base


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; in-memory SQLite shares one connection across sessions."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=3600
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_session_factory(database_url: str, echo: bool = False) -> sessionmaker:
    """Create a session factory bound to a fresh engine with all tables created."""
    custom_engine = build_engine(database_url, echo=echo)
    init_db(custom_engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=custom_engine)


def init_db(bind: Engine = None):
    """Initialize database tables."""
    # Import models so SQLAlchemy registers them on Base.metadata
    import mindsphere.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
