# -*- coding: utf-8 -*-
"""Meal plan — API endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..auth.security import get_current_user
from ..recipes.api import find_recipe
from ..recipes.models import Recipe
from ..records.api import await_write
from .aggregate import get_slot, normalize_week
from .models import Day, DayPlan, Meal, SlotAssignRequest, SlotResponse, WeeklyPlanResponse
from .storage import MealPlanNotFound, assign_slot, load_weekly_plan

router = APIRouter(prefix="/api/meal-plan", tags=["Meal Plan"])


def _load(user_id: str) -> Dict[str, Any]:
    try:
        return load_weekly_plan(user_id)
    except MealPlanNotFound:
        raise HTTPException(status_code=404, detail="Weekly plan not found") from None


def _slot_response(day: Day, meal: Meal, recipe: Optional[Dict[str, Any]], status: str = "ok") -> SlotResponse:
    return SlotResponse(
        day=day,
        meal=meal,
        recipe=Recipe.model_validate(recipe) if recipe else None,
        status=status,
    )


def _write_slot(
    user_id: str,
    day: Day,
    meal: Meal,
    recipe: Optional[Dict[str, Any]],
    wait: bool,
    response: Response,
) -> SlotResponse:
    try:
        handle = assign_slot(user_id, day.value, meal.value, recipe)
    except MealPlanNotFound:
        raise HTTPException(status_code=404, detail="Weekly plan not found") from None
    if wait:
        stored = await_write(handle)
        return _slot_response(day, meal, get_slot(stored, day.value, meal.value), status="written")
    response.status_code = 202
    return _slot_response(day, meal, recipe, status="accepted")


@router.get("", response_model=WeeklyPlanResponse, summary="The weekly meal plan")
def get_weekly_plan(user: dict = Depends(get_current_user)):
    doc = _load(user["id"])
    week = normalize_week(doc)
    return WeeklyPlanResponse(
        id=doc["id"],
        days={day: DayPlan.model_validate(slots) for day, slots in week.items()},
    )


@router.get("/{day}/{meal}", response_model=SlotResponse, summary="One meal slot")
def get_meal_slot(day: Day, meal: Meal, user: dict = Depends(get_current_user)):
    doc = _load(user["id"])
    return _slot_response(day, meal, get_slot(doc, day.value, meal.value))


@router.put("/{day}/{meal}", response_model=SlotResponse, summary="Assign a recipe to a meal slot")
def put_meal_slot(
    day: Day,
    meal: Meal,
    request: SlotAssignRequest,
    response: Response,
    wait: bool = Query(default=False, description="Block until the write is stored"),
    user: dict = Depends(get_current_user),
):
    recipe = None
    if request.recipe_id is not None:
        recipe = find_recipe(user["id"], request.recipe_id)
        if recipe is None:
            raise HTTPException(status_code=404, detail="Recipe not found")
    return _write_slot(user["id"], day, meal, recipe, wait, response)


@router.delete("/{day}/{meal}", response_model=SlotResponse, summary="Clear a meal slot")
def clear_meal_slot(
    day: Day,
    meal: Meal,
    response: Response,
    wait: bool = Query(default=False, description="Block until the write is stored"),
    user: dict = Depends(get_current_user),
):
    return _write_slot(user["id"], day, meal, None, wait, response)
