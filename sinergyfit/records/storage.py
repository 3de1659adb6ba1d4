# -*- coding: utf-8 -*-
"""Document store — JSON documents in SQLite addressed as users/{uid}/{collection}/{doc_id}."""

from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..app_db import db_conn, write_txn
from ..config import settings

COLLECTIONS = ("routines", "recipes", "mealPlans")


class DocumentNotFound(LookupError):
    """Raised by field updates addressed at a document that does not exist."""


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _check_collection(collection: str) -> None:
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")


def _row_to_document(row: Any) -> Dict[str, Any]:
    try:
        payload = json.loads(row["payload_json"] or "{}")
    except json.JSONDecodeError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    payload["id"] = row["doc_id"]
    return payload


def _strip_id(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k != "id"}


def _dumps(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False)


@contextmanager
def _writing(conn: Optional[sqlite3.Connection]) -> Iterator[sqlite3.Connection]:
    # Join the caller's transaction when given one, otherwise open our own.
    if conn is not None:
        yield conn
        return
    with write_txn(settings.app_db_path) as own:
        yield own


def list_documents(*, user_id: str, collection: str) -> List[Dict[str, Any]]:
    _check_collection(collection)
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT doc_id, payload_json FROM documents
            WHERE user_id = ? AND collection = ?
            ORDER BY created_at ASC, rowid ASC
            """,
            (user_id, collection),
        ).fetchall()
    return [_row_to_document(r) for r in rows]


def get_document(*, user_id: str, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
    _check_collection(collection)
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT doc_id, payload_json FROM documents WHERE user_id = ? AND collection = ? AND doc_id = ?",
            (user_id, collection, doc_id),
        ).fetchone()
    return _row_to_document(row) if row else None


def create_document(
    *,
    user_id: str,
    collection: str,
    doc_id: str,
    data: Dict[str, Any],
    conn: Optional[sqlite3.Connection] = None,
) -> Dict[str, Any]:
    """Insert a document unless one with this id exists; returns the stored document."""
    _check_collection(collection)
    now = _utc_now()
    with _writing(conn) as c:
        c.execute(
            """
            INSERT OR IGNORE INTO documents (user_id, collection, doc_id, payload_json, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (user_id, collection, doc_id, _dumps(_strip_id(data)), now, now),
        )
        row = c.execute(
            "SELECT doc_id, payload_json FROM documents WHERE user_id = ? AND collection = ? AND doc_id = ?",
            (user_id, collection, doc_id),
        ).fetchone()
    return _row_to_document(row)


def set_document(
    *,
    user_id: str,
    collection: str,
    doc_id: str,
    data: Dict[str, Any],
    merge: bool = True,
) -> Dict[str, Any]:
    """Write a document and return it as stored.

    With ``merge`` the given top-level fields overlay the existing ones and
    everything else is left untouched; lists and nested objects given in
    ``data`` replace the stored value wholesale. Without ``merge`` the
    document is replaced. An ``id`` key in ``data`` is never persisted.
    """
    _check_collection(collection)
    incoming = _strip_id(data)
    now = _utc_now()
    with write_txn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT doc_id, payload_json FROM documents WHERE user_id = ? AND collection = ? AND doc_id = ?",
            (user_id, collection, doc_id),
        ).fetchone()
        if row is None:
            payload = incoming
            conn.execute(
                """
                INSERT INTO documents (user_id, collection, doc_id, payload_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (user_id, collection, doc_id, _dumps(payload), now, now),
            )
        else:
            payload = _strip_id(_row_to_document(row)) if merge else {}
            payload.update(incoming)
            conn.execute(
                "UPDATE documents SET payload_json = ?, updated_at = ? WHERE user_id = ? AND collection = ? AND doc_id = ?",
                (_dumps(payload), now, user_id, collection, doc_id),
            )
    return {**payload, "id": doc_id}


def update_field(
    *,
    user_id: str,
    collection: str,
    doc_id: str,
    path: Sequence[str],
    value: Any,
) -> Dict[str, Any]:
    """Atomically set one nested field, e.g. ``path=("Monday", "lunch")``.

    Runs inside a single write transaction, so concurrent updates of sibling
    fields never overwrite each other. Missing intermediate objects are
    created. Raises DocumentNotFound when the document does not exist.
    """
    _check_collection(collection)
    if not path:
        raise ValueError("Field path must not be empty")
    if path[0] == "id":
        raise ValueError("The id field is immutable")
    with write_txn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT doc_id, payload_json FROM documents WHERE user_id = ? AND collection = ? AND doc_id = ?",
            (user_id, collection, doc_id),
        ).fetchone()
        if row is None:
            raise DocumentNotFound(f"{collection}/{doc_id}")
        payload = _strip_id(_row_to_document(row))
        node = payload
        for key in path[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[path[-1]] = value
        conn.execute(
            "UPDATE documents SET payload_json = ?, updated_at = ? WHERE user_id = ? AND collection = ? AND doc_id = ?",
            (_dumps(payload), _utc_now(), user_id, collection, doc_id),
        )
    return {**payload, "id": doc_id}


def delete_document(*, user_id: str, collection: str, doc_id: str) -> bool:
    """Delete a document. Returns False (and does nothing) when it does not exist."""
    _check_collection(collection)
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM documents WHERE user_id = ? AND collection = ? AND doc_id = ?",
            (user_id, collection, doc_id),
        )
        return cur.rowcount > 0
