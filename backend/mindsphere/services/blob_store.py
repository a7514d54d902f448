"""
Key-value blob store backed by the stored_values table.
"""
import logging
from typing import Callable, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from mindsphere.core.exceptions import PersistenceError
from mindsphere.models.stored_value import StoredValue

logger = logging.getLogger(__name__)

TRUE_VALUE = "true"
FALSE_VALUE = "false"


class KeyValueStore:
    """String-keyed text store. Every call runs in its own session."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent."""
        try:
            with self.session_factory() as db:
                row = db.query(StoredValue).filter(StoredValue.key == key).first()
                return row.value if row else None
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under key."""
        try:
            with self.session_factory() as db:
                row = db.query(StoredValue).filter(StoredValue.key == key).first()
                if row:
                    row.value = value
                else:
                    db.add(StoredValue(key=key, value=value))
                db.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to write '{key}': {e}") from e
        logger.debug(f"Stored {len(value)} characters under '{key}'")

    def get_bool(self, key: str) -> bool:
        """Read a boolean; absent or unrecognised values read as False."""
        return self.get(key) == TRUE_VALUE

    def set_bool(self, key: str, value: bool) -> None:
        """Store a boolean as 'true' or 'false'."""
        self.set(key, TRUE_VALUE if value else FALSE_VALUE)
