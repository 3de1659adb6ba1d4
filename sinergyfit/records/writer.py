# -*- coding: utf-8 -*-
"""Non-blocking writes with an optional result channel.

Every write is queued on a single worker thread, so writes are applied in the
order they were issued. Callers get a WriteHandle back immediately; they may
wait on it or drop it. Outcomes are published on the event bus either way, and
failures are logged, so a dropped handle never loses an error.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from threading import Condition
from typing import Any, Callable, Dict, Optional, Set

from ..events import GLOBAL_EVENT_BUS, RECORD_DELETED, RECORD_WRITE_FAILED, RECORD_WRITTEN, EventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteOp:
    user_id: str
    collection: str
    doc_id: str
    op: str  # add | update | delete | set_field | merge

    def describe(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "collection": self.collection,
            "doc_id": self.doc_id,
            "op": self.op,
        }


@dataclass
class WriteHandle:
    """Result channel for one queued write."""

    op: WriteOp
    future: Future = field(repr=False)

    @property
    def record_id(self) -> str:
        return self.op.doc_id

    def wait(self, timeout: Optional[float] = None) -> Any:
        """Block until the write settles; re-raises the write's exception."""
        return self.future.result(timeout=timeout)


class WriteDispatcher:
    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self._bus = bus or GLOBAL_EVENT_BUS
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sinergyfit-writer")
        self._pending: Set[Future] = set()
        self._settled = Condition()

    def submit(self, op: WriteOp, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> WriteHandle:
        future = self._executor.submit(fn, *args, **kwargs)
        with self._settled:
            self._pending.add(future)
        future.add_done_callback(lambda f: self._settle(op, f))
        return WriteHandle(op=op, future=future)

    def _settle(self, op: WriteOp, future: Future) -> None:
        try:
            self._report(op, future)
        finally:
            with self._settled:
                self._pending.discard(future)
                self._settled.notify_all()

    def _report(self, op: WriteOp, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(
                "Write %s on users/%s/%s/%s failed: %s",
                op.op, op.user_id, op.collection, op.doc_id, exc,
            )
            self._bus.publish(RECORD_WRITE_FAILED, {**op.describe(), "error": str(exc)})
            return
        event = RECORD_DELETED if op.op == "delete" else RECORD_WRITTEN
        self._bus.publish(event, op.describe())

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait until every write submitted so far has settled and been reported.

        Returns False on timeout.
        """
        with self._settled:
            waiting_on = set(self._pending)
            return self._settled.wait_for(lambda: not (waiting_on & self._pending), timeout=timeout)

    def shutdown(self, wait_for_pending: bool = True) -> None:
        self._executor.shutdown(wait=wait_for_pending)


dispatcher = WriteDispatcher()
