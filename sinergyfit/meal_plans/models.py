# -*- coding: utf-8 -*-
"""Meal plan — Pydantic models and enums."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from ..recipes.models import Recipe


class Day(str, Enum):
    monday = "Monday"
    tuesday = "Tuesday"
    wednesday = "Wednesday"
    thursday = "Thursday"
    friday = "Friday"
    saturday = "Saturday"
    sunday = "Sunday"


class Meal(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"


class DayPlan(BaseModel):
    breakfast: Optional[Recipe] = None
    lunch: Optional[Recipe] = None
    dinner: Optional[Recipe] = None


class WeeklyPlanResponse(BaseModel):
    id: str
    days: Dict[str, DayPlan]


class SlotAssignRequest(BaseModel):
    recipe_id: Optional[str] = Field(default=None, description="Recipe to assign; null clears the slot")


class SlotResponse(BaseModel):
    day: Day
    meal: Meal
    recipe: Optional[Recipe] = None
    status: str = "ok"
