# -*- coding: utf-8 -*-
"""Routines — API endpoints."""

from __future__ import annotations

import secrets
import time
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..auth.security import get_current_user
from ..catalog import get_seed, preloaded_routines, reconcile
from ..catalog.seed import DEFAULT_EXERCISE_IMAGE, DEFAULT_ROUTINE_IMAGE, image, is_seed_id
from ..records.adapter import RecordStore
from ..records.api import await_write
from ..records.models import WriteResponse
from .models import Routine, RoutineCreateRequest, RoutineListResponse, RoutineUpdateRequest

router = APIRouter(prefix="/api/routines", tags=["Routines"])

KIND = "routines"


def _store(user: dict) -> RecordStore:
    return RecordStore(user["id"], KIND)


def _exercise_id() -> str:
    return f"ex-{int(time.time() * 1000)}-{secrets.token_hex(4)}"


def _with_exercise_defaults(exercises: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    url, hint = image(DEFAULT_EXERCISE_IMAGE)
    out = []
    for ex in exercises:
        ex = dict(ex)
        ex["id"] = ex.get("id") or _exercise_id()
        ex["image"] = ex.get("image") or url
        ex["image_hint"] = ex.get("image_hint") or hint
        ex.setdefault("description", "")
        out.append(ex)
    return out


def _seed_guard(store: RecordStore, routine_id: str) -> Dict[str, Any]:
    existing = store.get(routine_id)
    if existing is None:
        if is_seed_id(KIND, routine_id):
            raise HTTPException(status_code=403, detail="Preloaded routines are read-only")
        raise HTTPException(status_code=404, detail="Routine not found")
    return existing


@router.get("", response_model=RoutineListResponse, summary="Preloaded and user routines")
def list_routines(user: dict = Depends(get_current_user)):
    items = reconcile(preloaded_routines(), _store(user).list())
    return RoutineListResponse(count=len(items), items=[Routine.model_validate(r) for r in items])


@router.get("/{routine_id}", response_model=Routine, summary="Get a routine")
def get_routine(routine_id: str, user: dict = Depends(get_current_user)):
    record = _store(user).get(routine_id) or get_seed(KIND, routine_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Routine not found")
    return Routine.model_validate(record)


@router.post("", response_model=WriteResponse, status_code=202, summary="Create a routine")
def create_routine(
    request: RoutineCreateRequest,
    response: Response,
    wait: bool = Query(default=False, description="Block until the write is stored"),
    user: dict = Depends(get_current_user),
):
    if request.id and is_seed_id(KIND, request.id):
        raise HTTPException(status_code=409, detail="Id is reserved for a preloaded routine")
    if request.source_seed_id and not is_seed_id(KIND, request.source_seed_id):
        raise HTTPException(status_code=400, detail="Unknown preloaded routine")

    record = request.model_dump(exclude_none=True)
    record["exercises"] = _with_exercise_defaults(record["exercises"])
    record.setdefault("image_url", image(DEFAULT_ROUTINE_IMAGE)[0])
    record.setdefault("image_hint", "custom routine")

    handle = _store(user).add(record)
    if wait:
        stored = await_write(handle)
        response.status_code = 201
        return WriteResponse(id=handle.record_id, status="written", record=stored)
    return WriteResponse(id=handle.record_id, status="accepted")


@router.put("/{routine_id}", response_model=WriteResponse, status_code=202, summary="Update a routine")
def update_routine(
    routine_id: str,
    request: RoutineUpdateRequest,
    response: Response,
    wait: bool = Query(default=False, description="Block until the write is stored"),
    user: dict = Depends(get_current_user),
):
    store = _store(user)
    _seed_guard(store, routine_id)

    patch = request.model_dump(exclude_none=True)
    if not patch:
        raise HTTPException(status_code=400, detail="Nothing to update")
    if "exercises" in patch:
        patch["exercises"] = _with_exercise_defaults(patch["exercises"])

    handle = store.update({**patch, "id": routine_id})
    if wait:
        stored = await_write(handle)
        response.status_code = 200
        return WriteResponse(id=routine_id, status="written", record=stored)
    return WriteResponse(id=routine_id, status="accepted")


@router.delete("/{routine_id}", response_model=WriteResponse, status_code=202, summary="Delete a routine")
def delete_routine(
    routine_id: str,
    response: Response,
    wait: bool = Query(default=False, description="Block until the delete is applied"),
    user: dict = Depends(get_current_user),
):
    store = _store(user)
    if is_seed_id(KIND, routine_id) and store.get(routine_id) is None:
        raise HTTPException(status_code=403, detail="Preloaded routines are read-only")
    handle = store.delete(routine_id)
    if wait:
        await_write(handle)
        response.status_code = 200
        return WriteResponse(id=routine_id, status="deleted")
    return WriteResponse(id=routine_id, status="accepted")
