# -*- coding: utf-8 -*-
"""Small in-process event bus for document-store activity.

Event names used so far:
  records.written      -> payload {"user_id", "collection", "doc_id", "op"}
  records.deleted      -> payload {"user_id", "collection", "doc_id", "op"}
  records.write_failed -> payload {"user_id", "collection", "doc_id", "op", "error"}

Subscribers are callables taking ``(event_name, payload)``.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from threading import Lock
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

RECORD_WRITTEN = "records.written"
RECORD_DELETED = "records.deleted"
RECORD_WRITE_FAILED = "records.write_failed"

Listener = Callable[[str, Any], None]


class EventBus:
    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Listener]] = defaultdict(list)
        self._lock = Lock()

    def subscribe(self, event_name: str, callback: Listener) -> None:
        with self._lock:
            if callback not in self._subscribers[event_name]:
                self._subscribers[event_name].append(callback)

    def publish(self, event_name: str, payload: Any) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get(event_name, []))
        for cb in callbacks:
            try:
                cb(event_name, payload)
            except Exception:
                # Listener errors are logged, never raised to the publisher.
                logger.exception("Error delivering %s to %r", event_name, cb)


GLOBAL_EVENT_BUS = EventBus()


__all__ = [
    "EventBus", "GLOBAL_EVENT_BUS",
    "RECORD_WRITTEN", "RECORD_DELETED", "RECORD_WRITE_FAILED",
]
