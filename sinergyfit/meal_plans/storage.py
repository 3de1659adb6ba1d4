# -*- coding: utf-8 -*-
"""Weekly plan persistence on top of the document store."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, Mapping, Optional

from ..records import storage as documents
from ..records.writer import WriteDispatcher, WriteHandle, WriteOp, dispatcher as default_dispatcher
from .aggregate import check_slot, empty_week, set_slot

logger = logging.getLogger(__name__)

COLLECTION = "mealPlans"


class MealPlanNotFound(LookupError):
    """The user has no weekly plan document."""


def weekly_plan_id(user_id: str) -> str:
    return f"weekly-plan-{user_id}"


def create_weekly_plan(user_id: str, *, conn: Optional[sqlite3.Connection] = None) -> Dict[str, Any]:
    """Create the user's plan with every slot empty. Existing plans are left as they are.

    Pass ``conn`` to create the plan inside a transaction the caller already
    holds (account registration does).
    """
    logger.debug("Ensuring weekly plan for user %s", user_id)
    return documents.create_document(
        user_id=user_id,
        collection=COLLECTION,
        doc_id=weekly_plan_id(user_id),
        data=empty_week(),
        conn=conn,
    )


def load_weekly_plan(user_id: str) -> Dict[str, Any]:
    doc = documents.get_document(user_id=user_id, collection=COLLECTION, doc_id=weekly_plan_id(user_id))
    if doc is None:
        raise MealPlanNotFound(weekly_plan_id(user_id))
    return doc


def assign_slot(
    user_id: str,
    day: str,
    meal: str,
    recipe: Optional[Mapping[str, Any]],
    *,
    writer: Optional[WriteDispatcher] = None,
) -> WriteHandle:
    """Queue an atomic write of one (day, meal) slot.

    Only the addressed field is written, inside one store transaction, so
    edits of other slots issued at the same time are never lost.
    """
    check_slot(day, meal)
    load_weekly_plan(user_id)
    op = WriteOp(user_id=user_id, collection=COLLECTION, doc_id=weekly_plan_id(user_id), op="set_field")
    return (writer or default_dispatcher).submit(
        op,
        documents.update_field,
        user_id=user_id,
        collection=COLLECTION,
        doc_id=weekly_plan_id(user_id),
        path=(day, meal),
        value=dict(recipe) if recipe is not None else None,
    )


def merge_snapshot(
    user_id: str,
    snapshot: Optional[Mapping[str, Any]],
    day: str,
    meal: str,
    recipe: Optional[Mapping[str, Any]],
    *,
    writer: Optional[WriteDispatcher] = None,
) -> WriteHandle:
    """Queue a whole-week merge-write computed from a client-held snapshot.

    Known hazard: the written days come from ``snapshot``, not from the
    store. Two callers holding the same stale snapshot and editing different
    slots of one day overwrite each other, and the last write wins. Use
    assign_slot unless the caller owns the only copy of the plan.
    """
    updated = set_slot(snapshot, day, meal, recipe)
    op = WriteOp(user_id=user_id, collection=COLLECTION, doc_id=weekly_plan_id(user_id), op="merge")
    return (writer or default_dispatcher).submit(
        op,
        documents.set_document,
        user_id=user_id,
        collection=COLLECTION,
        doc_id=weekly_plan_id(user_id),
        data=updated,
        merge=True,
    )
