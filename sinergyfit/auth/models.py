# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("must be an email address")
        return value


class RegisterRequest(Credentials):
    password: str = Field(..., min_length=8, max_length=128)


class LoginRequest(Credentials):
    pass


class UserPublic(BaseModel):
    id: str
    email: str
    weekly_plan_id: str


class AuthResponse(BaseModel):
    user: UserPublic
    token: str
