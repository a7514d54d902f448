"""
Stored value model backing the local key-value blob store.
"""
from sqlalchemy import Column, String, Text
from mindsphere.db.base import BaseModel


class StoredValue(BaseModel):
    """One serialized blob kept under a unique string key."""
    __tablename__ = "stored_values"

    key = Column(String(100), unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False)
