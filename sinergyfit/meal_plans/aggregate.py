# -*- coding: utf-8 -*-
"""Pure helpers for the weekly plan document.

A plan maps each of the seven days to ``{"breakfast", "lunch", "dinner"}``
slots holding a recipe snapshot or None. A missing day or slot means the same
as None.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, Optional

DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MEALS = ("breakfast", "lunch", "dinner")

WeekPlan = Dict[str, Dict[str, Optional[Dict[str, Any]]]]


def check_slot(day: str, meal: str) -> None:
    if day not in DAYS:
        raise ValueError(f"Unknown day: {day!r}")
    if meal not in MEALS:
        raise ValueError(f"Unknown meal: {meal!r}")


def empty_week() -> WeekPlan:
    return {day: {meal: None for meal in MEALS} for day in DAYS}


def normalize_week(doc: Optional[Mapping[str, Any]]) -> WeekPlan:
    """Full 7x3 grid from a stored document; unknown keys (including ``id``) are dropped."""
    week = empty_week()
    for day in DAYS:
        day_plan = (doc or {}).get(day)
        if not isinstance(day_plan, Mapping):
            continue
        for meal in MEALS:
            value = day_plan.get(meal)
            week[day][meal] = copy.deepcopy(value) if isinstance(value, Mapping) else None
    return week


def get_slot(plan: Optional[Mapping[str, Any]], day: str, meal: str) -> Optional[Dict[str, Any]]:
    check_slot(day, meal)
    day_plan = (plan or {}).get(day)
    if not isinstance(day_plan, Mapping):
        return None
    return day_plan.get(meal) or None


def set_slot(
    plan: Optional[Mapping[str, Any]],
    day: str,
    meal: str,
    recipe: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """Return a new plan with one slot replaced; the input is not modified.

    The slot value overlays the day, the day overlays the week, and every
    other day and slot is carried over untouched. ``id`` is stripped so the
    result can be written back as the document body.
    """
    check_slot(day, meal)
    current = dict(plan or {})
    current.pop("id", None)
    day_plan = current.get(day)
    new_day = dict(day_plan) if isinstance(day_plan, Mapping) else {}
    new_day[meal] = dict(recipe) if recipe is not None else None
    current[day] = new_day
    return current
