"""
Exceptions raised by the storage layer.
"""


class PersistenceError(Exception):
    """Raised when the blob store cannot be read or written."""
    pass
