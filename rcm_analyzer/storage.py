"""
Key-value persistence used by the failure mode repository.

Two backends share the same get/set contract:
    - InMemoryStore: a plain dict, used in tests and for throwaway sessions
    - SqlKeyValueStore: a single SQLAlchemy table (kv_store)
"""

import logging
import threading
from typing import Dict, Optional

from .database import KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Minimal string key-value contract."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value


class SqlKeyValueStore(KeyValueStore):
    """Stores each key as one row of the kv_store table."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        session = self._session_factory()
        try:
            entry = session.query(KeyValueEntry).filter_by(key=key).first()
            return entry.value if entry else None
        finally:
            session.close()

    def set(self, key: str, value: str) -> None:
        session = self._session_factory()
        try:
            entry = session.query(KeyValueEntry).filter_by(key=key).first()
            if entry:
                entry.value = value
            else:
                session.add(KeyValueEntry(key=key, value=value))
            session.commit()
            logger.debug(f"Stored key {key} ({len(value)} chars)")
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def create_store(backend: str, session_factory=None) -> KeyValueStore:
    """Build the configured store backend."""
    if backend == 'memory':
        return InMemoryStore()
    if backend == 'sqlalchemy':
        if session_factory is None:
            raise ValueError("sqlalchemy store backend requires a session factory")
        return SqlKeyValueStore(session_factory)
    raise ValueError(f"Unknown store backend: {backend}")
