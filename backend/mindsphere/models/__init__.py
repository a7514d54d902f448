"""Models package - Import all models for SQLAlchemy registration."""
from mindsphere.models.stored_value import StoredValue

__all__ = [
    "StoredValue",
]
