# -*- coding: utf-8 -*-
"""Routines — Pydantic models."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


def _reps_to_text(value: Any) -> Any:
    # Reps are free-form ("10-12", "60 seconds"); plain numbers are accepted too.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class ExerciseInput(BaseModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=120)
    sets: int = Field(..., ge=1)
    reps: str = Field(..., min_length=1, max_length=60)
    description: str = ""
    image: Optional[str] = None
    image_hint: Optional[str] = None

    @field_validator("reps", mode="before")
    @classmethod
    def coerce_reps(cls, value: Any) -> Any:
        return _reps_to_text(value)


class RoutineCreateRequest(BaseModel):
    id: Optional[str] = Field(default=None, pattern=r"^routine-[A-Za-z0-9-]{1,80}$")
    name: str = Field(..., min_length=2, max_length=120)
    description: str = Field(..., min_length=10)
    exercises: List[ExerciseInput] = Field(..., min_length=1)
    image_url: Optional[str] = None
    image_hint: Optional[str] = None
    source_seed_id: Optional[str] = Field(default=None, description="Seed routine this one replaces")


class RoutineUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=120)
    description: Optional[str] = Field(default=None, min_length=10)
    exercises: Optional[List[ExerciseInput]] = Field(default=None, min_length=1)
    image_url: Optional[str] = None
    image_hint: Optional[str] = None


class Exercise(BaseModel):
    id: str
    name: str
    sets: int
    reps: str
    description: str = ""
    image: str = ""
    image_hint: str = ""

    @field_validator("reps", mode="before")
    @classmethod
    def coerce_reps(cls, value: Any) -> Any:
        return _reps_to_text(value)


class Routine(BaseModel):
    id: str
    name: str
    description: str = ""
    exercises: List[Exercise] = Field(default_factory=list)
    image_url: Optional[str] = None
    image_hint: Optional[str] = None
    is_preloaded: bool = False
    source_seed_id: Optional[str] = None


class RoutineListResponse(BaseModel):
    count: int
    items: List[Routine]
