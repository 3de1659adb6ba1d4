# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ..config import settings
from ..meal_plans.storage import weekly_plan_id
from .models import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from .security import TOKEN_COOKIE_NAME, get_current_user, hash_password, issue_token, verify_password
from .storage import EmailTaken, create_account, get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _user_public(row: dict) -> UserPublic:
    return UserPublic(id=row["id"], email=row["email"], weekly_plan_id=weekly_plan_id(row["id"]))


def _signed_in(response: Response, user: dict) -> AuthResponse:
    token = issue_token(user["id"])
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=int(settings.token_ttl_days) * 86400,
        path="/",
    )
    return AuthResponse(user=_user_public(user), token=token)


@router.post("/register", response_model=AuthResponse, summary="Create an account and its weekly plan")
def register(request: RegisterRequest, response: Response):
    try:
        user = create_account(email=request.email, password_hash=hash_password(request.password))
    except EmailTaken:
        raise HTTPException(status_code=400, detail="Email already registered") from None
    return _signed_in(response, user)


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest, response: Response):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        logger.info("Failed login for %s", request.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _signed_in(response, user)


@router.post("/logout", summary="Logout")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(get_current_user)):
    return _user_public(user)
