# -*- coding: utf-8 -*-
"""Recipes — Pydantic models."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


def _ingredient_lines(value: Any) -> Any:
    """Accept a list of lines or one newline-separated block; blank lines are dropped."""
    if isinstance(value, str):
        value = value.split("\n")
    if isinstance(value, list):
        return [line.strip() for line in value if isinstance(line, str) and line.strip()]
    return value


class RecipeCreateRequest(BaseModel):
    id: Optional[str] = Field(default=None, pattern=r"^recipe-[A-Za-z0-9-]{1,80}$")
    name: str = Field(..., min_length=2, max_length=120)
    ingredients: List[str] = Field(..., min_length=1)
    instructions: str = Field(..., min_length=20)
    image: Optional[str] = None
    image_hint: Optional[str] = None
    source_seed_id: Optional[str] = Field(default=None, description="Seed recipe this one replaces")

    @field_validator("ingredients", mode="before")
    @classmethod
    def split_ingredients(cls, value: Any) -> Any:
        return _ingredient_lines(value)


class RecipeUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=120)
    ingredients: Optional[List[str]] = Field(default=None, min_length=1)
    instructions: Optional[str] = Field(default=None, min_length=20)
    image: Optional[str] = None
    image_hint: Optional[str] = None

    @field_validator("ingredients", mode="before")
    @classmethod
    def split_ingredients(cls, value: Any) -> Any:
        return _ingredient_lines(value)


class Recipe(BaseModel):
    id: str
    name: str
    ingredients: List[str] = Field(default_factory=list)
    instructions: str = ""
    image: str = ""
    image_hint: str = ""
    is_preloaded: bool = False
    source_seed_id: Optional[str] = None


class RecipeListResponse(BaseModel):
    count: int
    items: List[Recipe]
