# -*- coding: utf-8 -*-
"""Merge seed entries with user-owned records.

A user record shadows a seed entry when both share a collision key:

* a record carrying ``source_seed_id`` is keyed by that seed id;
* otherwise the key is the kind prefix plus the id segment right after it,
  so ``routine-1-1712345`` keys as ``routine-1`` and a fresh
  ``routine-1712345678901`` keys as itself.

Numeric segments are normalized (``recipe-01`` == ``recipe-1``). Seed ids key
as themselves under the same rule, and a seed is also dropped when a user
record reuses its id outright.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional


def collision_key(record_id: str, source_seed_id: Optional[str] = None) -> str:
    if source_seed_id:
        return collision_key(source_seed_id)
    parts = (record_id or "").strip().split("-")
    if len(parts) < 2:
        return parts[0]
    prefix, segment = parts[0], parts[1]
    if segment.isascii() and segment.isdigit():
        segment = str(int(segment))
    return f"{prefix}-{segment}"


def record_key(record: Dict[str, Any]) -> str:
    return collision_key(str(record.get("id") or ""), record.get("source_seed_id"))


def reconcile(seed: Iterable[Dict[str, Any]], user: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Seed entries not shadowed by a user record, then every user record in order."""
    user_list = list(user)
    taken = {record_key(r) for r in user_list}
    # A record reusing a seed id replaces that seed even when it points elsewhere.
    user_ids = {r.get("id") for r in user_list}
    kept = [s for s in seed if record_key(s) not in taken and s.get("id") not in user_ids]
    return kept + user_list
