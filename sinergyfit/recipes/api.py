# -*- coding: utf-8 -*-
"""Recipes — API endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..auth.security import get_current_user
from ..catalog import get_seed, preloaded_recipes, reconcile
from ..catalog.seed import DEFAULT_RECIPE_IMAGE, image, is_seed_id
from ..records.adapter import RecordStore
from ..records.api import await_write
from ..records.models import WriteResponse
from .models import Recipe, RecipeCreateRequest, RecipeListResponse, RecipeUpdateRequest

router = APIRouter(prefix="/api/recipes", tags=["Recipes"])

KIND = "recipes"


def _store(user_id: str) -> RecordStore:
    return RecordStore(user_id, KIND)


def all_recipes(user_id: str) -> List[Dict[str, Any]]:
    """Reconciled recipe list; the meal planner picks from the same list."""
    return reconcile(preloaded_recipes(), _store(user_id).list())


def find_recipe(user_id: str, recipe_id: str) -> Optional[Dict[str, Any]]:
    for recipe in all_recipes(user_id):
        if recipe["id"] == recipe_id:
            return recipe
    return None


@router.get("", response_model=RecipeListResponse, summary="Preloaded and user recipes")
def list_recipes(user: dict = Depends(get_current_user)):
    items = all_recipes(user["id"])
    return RecipeListResponse(count=len(items), items=[Recipe.model_validate(r) for r in items])


@router.get("/{recipe_id}", response_model=Recipe, summary="Get a recipe")
def get_recipe(recipe_id: str, user: dict = Depends(get_current_user)):
    record = _store(user["id"]).get(recipe_id) or get_seed(KIND, recipe_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return Recipe.model_validate(record)


@router.post("", response_model=WriteResponse, status_code=202, summary="Create a recipe")
def create_recipe(
    request: RecipeCreateRequest,
    response: Response,
    wait: bool = Query(default=False, description="Block until the write is stored"),
    user: dict = Depends(get_current_user),
):
    if request.id and is_seed_id(KIND, request.id):
        raise HTTPException(status_code=409, detail="Id is reserved for a preloaded recipe")
    if request.source_seed_id and not is_seed_id(KIND, request.source_seed_id):
        raise HTTPException(status_code=400, detail="Unknown preloaded recipe")

    record = request.model_dump(exclude_none=True)
    record.setdefault("image", image(DEFAULT_RECIPE_IMAGE)[0])
    record.setdefault("image_hint", "custom recipe")

    handle = _store(user["id"]).add(record)
    if wait:
        stored = await_write(handle)
        response.status_code = 201
        return WriteResponse(id=handle.record_id, status="written", record=stored)
    return WriteResponse(id=handle.record_id, status="accepted")


@router.put("/{recipe_id}", response_model=WriteResponse, status_code=202, summary="Update a recipe")
def update_recipe(
    recipe_id: str,
    request: RecipeUpdateRequest,
    response: Response,
    wait: bool = Query(default=False, description="Block until the write is stored"),
    user: dict = Depends(get_current_user),
):
    store = _store(user["id"])
    if store.get(recipe_id) is None:
        if is_seed_id(KIND, recipe_id):
            raise HTTPException(status_code=403, detail="Preloaded recipes are read-only")
        raise HTTPException(status_code=404, detail="Recipe not found")

    patch = request.model_dump(exclude_none=True)
    if not patch:
        raise HTTPException(status_code=400, detail="Nothing to update")

    handle = store.update({**patch, "id": recipe_id})
    if wait:
        stored = await_write(handle)
        response.status_code = 200
        return WriteResponse(id=recipe_id, status="written", record=stored)
    return WriteResponse(id=recipe_id, status="accepted")


@router.delete("/{recipe_id}", response_model=WriteResponse, status_code=202, summary="Delete a recipe")
def delete_recipe(
    recipe_id: str,
    response: Response,
    wait: bool = Query(default=False, description="Block until the delete is applied"),
    user: dict = Depends(get_current_user),
):
    store = _store(user["id"])
    if is_seed_id(KIND, recipe_id) and store.get(recipe_id) is None:
        raise HTTPException(status_code=403, detail="Preloaded recipes are read-only")
    handle = store.delete(recipe_id)
    if wait:
        await_write(handle)
        response.status_code = 200
        return WriteResponse(id=recipe_id, status="deleted")
    return WriteResponse(id=recipe_id, status="accepted")
