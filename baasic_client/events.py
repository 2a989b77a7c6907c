"""Event handler used by the SDK to announce token and session changes."""

import logging
import threading
from typing import Any, Callable, Dict, List


logger = logging.getLogger("baasic_client")


class EventHandler:
    """Synchronous publish/subscribe keyed by event name."""

    def __init__(self) -> None:
        self._events: Dict[str, List[Callable[[Any], Any]]] = {}
        self._lock = threading.Lock()

    def add_event(self, event_name: str, func: Callable[[Any], Any]) -> None:
        """Register a handler for every later trigger of event_name."""
        with self._lock:
            self._events.setdefault(event_name, []).append(func)

    def trigger_event(self, event_name: str, data: Any = None) -> None:
        """Invoke the handlers registered under event_name, in registration order."""
        with self._lock:
            handlers = list(self._events.get(event_name, ()))

        logger.debug("[Baasic] event %s -> %d handler(s)", event_name, len(handlers))

        # Handlers registered while dispatching only see later triggers
        for handler in handlers:
            handler(data)

    def push_message(self, message: Any, args: Any = None) -> None:
        """No-op. Kept so SDK code calling it keeps working."""
        return None

    def listener_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._events.get(event_name, ()))
