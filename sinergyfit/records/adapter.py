# -*- coding: utf-8 -*-
"""Record store adapter — create / merge-update / delete user routines and recipes.

A store is bound to one user and one collection. Without a user there is no
collection to address, so every operation is a no-op (reads return nothing,
writes return None).
"""

from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Any, Dict, List, Optional

from . import storage
from .writer import WriteDispatcher, WriteHandle, WriteOp, dispatcher as default_dispatcher

logger = logging.getLogger(__name__)

ID_PREFIXES = {"routines": "routine", "recipes": "recipe"}

_id_lock = Lock()
_last_ms = 0


def _unique_millis() -> int:
    # Two ids issued within the same millisecond must still differ.
    global _last_ms
    with _id_lock:
        now = int(time.time() * 1000)
        _last_ms = now if now > _last_ms else _last_ms + 1
        return _last_ms


def new_record_id(kind: str) -> str:
    return f"{ID_PREFIXES[kind]}-{_unique_millis()}"


class RecordStore:
    def __init__(self, user_id: Optional[str], kind: str, writer: Optional[WriteDispatcher] = None) -> None:
        if kind not in ID_PREFIXES:
            raise ValueError(f"Unknown record kind: {kind}")
        self.user_id = user_id
        self.kind = kind
        self._writer = writer or default_dispatcher

    @property
    def available(self) -> bool:
        return bool(self.user_id)

    def list(self) -> List[Dict[str, Any]]:
        if not self.available:
            return []
        return storage.list_documents(user_id=self.user_id, collection=self.kind)

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        if not self.available:
            return None
        return storage.get_document(user_id=self.user_id, collection=self.kind, doc_id=record_id)

    def _submit(self, op_name: str, doc_id: str, fn, **kwargs: Any) -> WriteHandle:
        op = WriteOp(user_id=self.user_id, collection=self.kind, doc_id=doc_id, op=op_name)
        return self._writer.submit(op, fn, user_id=self.user_id, collection=self.kind, doc_id=doc_id, **kwargs)

    def add(self, record: Dict[str, Any]) -> Optional[WriteHandle]:
        """Queue a new record. Keeps a given id, otherwise assigns ``<kind>-<millis>``."""
        if not self.available:
            logger.debug("add on %s ignored: no authenticated user", self.kind)
            return None
        payload = dict(record)
        doc_id = payload.pop("id", None) or new_record_id(self.kind)
        payload["is_preloaded"] = False
        return self._submit("add", doc_id, storage.set_document, data=payload, merge=True)

    def update(self, record: Dict[str, Any]) -> Optional[WriteHandle]:
        """Queue a merge-write of the given fields onto an existing record."""
        if not self.available:
            logger.debug("update on %s ignored: no authenticated user", self.kind)
            return None
        payload = dict(record)
        doc_id = payload.pop("id", None)
        if not doc_id:
            raise ValueError("update requires a record id")
        return self._submit("update", doc_id, storage.set_document, data=payload, merge=True)

    def delete(self, record_id: str) -> Optional[WriteHandle]:
        """Queue a delete. Deleting an id that does not exist is a no-op."""
        if not self.available:
            logger.debug("delete on %s ignored: no authenticated user", self.kind)
            return None
        return self._submit("delete", record_id, storage.delete_document)
