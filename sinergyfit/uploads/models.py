# -*- coding: utf-8 -*-
"""Uploads — models and enums."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class UploadKind(str, Enum):
    routine_images = "routine-images"
    exercise_images = "exercise-images"
    recipe_images = "recipe-images"


class UploadResponse(BaseModel):
    url: str
    name: str
    kind: UploadKind
    content_type: str
    size_bytes: int
