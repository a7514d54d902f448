"""
Shared fixtures for store and persistence tests.
"""
import pytest
from datetime import datetime, timedelta
from sqlalchemy.exc import OperationalError
from mindsphere.db.session import create_session_factory
from mindsphere.services.app_store import AppStore
from mindsphere.services.blob_store import KeyValueStore
from mindsphere.services.persistence import PersistenceAdapter

# Local noon keeps day arithmetic clear of midnight and DST edges
NOW = datetime(2026, 10, 19, 12, 0).astimezone()


class FixedClock:
    """Clock returning a settable time."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, hours: int = 0) -> None:
        self.now = self.now + timedelta(days=days, hours=hours)


def broken_session_factory():
    """Session factory standing in for an unreachable database."""
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


@pytest.fixture
def session_factory():
    return create_session_factory("sqlite://")


@pytest.fixture
def kv_store(session_factory):
    return KeyValueStore(session_factory)


@pytest.fixture
def persistence(kv_store):
    return PersistenceAdapter(kv_store)


@pytest.fixture
def broken_persistence():
    return PersistenceAdapter(KeyValueStore(broken_session_factory))


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store(persistence, clock):
    return AppStore(persistence, clock=clock)
