"""
Entrypoint for the MindSphere journal core.

Builds the configured storage and returns a hydrated application store for
the presentation layer to drive.
"""
import logging
from typing import Optional
from sqlalchemy.orm import sessionmaker
from mindsphere.core.config import Settings, settings as default_settings
from mindsphere.core.logging import setup_logging
from mindsphere.db.session import SessionLocal, create_session_factory, init_db
from mindsphere.services.app_store import AppStore
from mindsphere.services.blob_store import KeyValueStore
from mindsphere.services.persistence import PersistenceAdapter

logger = logging.getLogger(__name__)


def create_app_store(
    settings: Optional[Settings] = None,
    session_factory: Optional[sessionmaker] = None
) -> AppStore:
    """Configure logging and storage, then load the store from disk."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if session_factory is None:
        if settings.DATABASE_URL == default_settings.DATABASE_URL:
            init_db()
            session_factory = SessionLocal
        else:
            session_factory = create_session_factory(settings.DATABASE_URL, echo=settings.DB_ECHO)

    persistence = PersistenceAdapter(KeyValueStore(session_factory))
    store = AppStore(persistence, quick_answer_options=settings.QUICK_ANSWERS)
    logger.info(f"{settings.APP_NAME} store ready")
    return store
