# -*- coding: utf-8 -*-
"""Per-user feed of asynchronous write failures.

Fire-and-forget writes cannot report errors to the code that issued them, so
failures published on the event bus land here and clients poll for them.
Each entry gets an increasing integer id; clients pass ``since=<last id>`` to
fetch only newer ones. Memory is capped per user.
"""

from __future__ import annotations

from collections import defaultdict, deque
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Deque, Dict, List, Optional

from ..events import GLOBAL_EVENT_BUS, RECORD_WRITE_FAILED, EventBus

MAX_PER_USER = 100

_lock = Lock()
_feeds: Dict[str, Deque[Dict[str, Any]]] = defaultdict(lambda: deque(maxlen=MAX_PER_USER))
_next_id = 1
_subscribed_to: List[EventBus] = []


def _record(event_name: str, payload: Any) -> None:
    global _next_id
    if not isinstance(payload, dict) or not payload.get("user_id"):
        return
    with _lock:
        _feeds[payload["user_id"]].append(
            {
                "id": _next_id,
                "type": event_name,
                "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
                "collection": payload.get("collection"),
                "doc_id": payload.get("doc_id"),
                "op": payload.get("op"),
                "message": payload.get("error") or "",
            }
        )
        _next_id += 1


def start(bus: Optional[EventBus] = None) -> None:
    """Subscribe the feed to a bus (idempotent)."""
    bus = bus or GLOBAL_EVENT_BUS
    if any(b is bus for b in _subscribed_to):
        return
    bus.subscribe(RECORD_WRITE_FAILED, _record)
    _subscribed_to.append(bus)


def get_notifications(user_id: str, since: Optional[int] = None) -> Dict[str, Any]:
    with _lock:
        feed = list(_feeds.get(user_id, ()))
    if since is not None:
        feed = [n for n in feed if n["id"] > since]
    next_cursor = feed[-1]["id"] if feed else (since or 0)
    return {"items": feed, "next_cursor": next_cursor}
