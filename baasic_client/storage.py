"""
Baasic Client Storage

Process-local key/value storage used by the SDK for tokens and session data.
"""

import threading
from typing import Any, Dict, Optional


class InMemoryStorageHandler:
    """In-memory key/value storage (default, non-persistent)."""

    def __init__(self) -> None:
        self._storage: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Get the value stored under key, or None."""
        with self._lock:
            return self._storage.get(key)

    def set(self, key: str, data: Any) -> None:
        """Store a value, replacing any previous one."""
        with self._lock:
            self._storage[key] = data

    def remove(self, key: str) -> None:
        with self._lock:
            self._storage.pop(key, None)

    def clear(self) -> None:
        """Remove all stored values."""
        with self._lock:
            self._storage = {}

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._storage

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)
