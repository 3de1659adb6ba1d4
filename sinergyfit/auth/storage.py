# -*- coding: utf-8 -*-
"""Auth — account rows in the app database.

An account and its weekly plan are written in one transaction, so every user
id that exists also has a plan root.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn, write_txn
from ..config import settings
from ..meal_plans.storage import create_weekly_plan

logger = logging.getLogger(__name__)


class EmailTaken(ValueError):
    """Another account already uses this email address."""


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _fetch_user(column: str, value: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            f"SELECT id, email, password_hash, created_at FROM users WHERE {column} = ?",
            (value,),
        ).fetchone()
    return dict(row) if row else None


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    return _fetch_user("email", normalize_email(email))


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    return _fetch_user("id", user_id)


def create_account(*, email: str, password_hash: str) -> Dict[str, Any]:
    """Insert the user row and an empty weekly plan; both land or neither does."""
    user = {
        "id": str(uuid4()),
        "email": normalize_email(email),
        "password_hash": password_hash,
        "created_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
    try:
        with write_txn(settings.app_db_path) as conn:
            conn.execute(
                "INSERT INTO users (id, email, password_hash, created_at) VALUES (:id, :email, :password_hash, :created_at)",
                user,
            )
            create_weekly_plan(user["id"], conn=conn)
    except sqlite3.IntegrityError as exc:
        raise EmailTaken(user["email"]) from exc
    logger.info("Created account %s with weekly plan", user["id"])
    return user
