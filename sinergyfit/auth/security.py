# -*- coding: utf-8 -*-
"""Auth — password hashing, signed session tokens and the current-user dependency.

Tokens are compact HS256 JWTs carrying only the user id (``sub``) and the
issue/expiry times. Requests present them as a bearer header or in the
``sinergyfit_token`` cookie.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request

from ..config import settings
from .storage import get_user_by_id

TOKEN_COOKIE_NAME = "sinergyfit_token"

_HASH_NAME = "sha256"
_HASH_ROUNDS = 200_000
_TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _unb64(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _json_b64(obj: Dict[str, Any]) -> str:
    return _b64(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac(_HASH_NAME, password.encode("utf-8"), salt, _HASH_ROUNDS)
    return "$".join((f"pbkdf2_{_HASH_NAME}", str(_HASH_ROUNDS), _b64(salt), _b64(digest)))


def verify_password(password: str, stored: str) -> bool:
    try:
        scheme, rounds, salt, digest = stored.split("$", 3)
        name = scheme.partition("pbkdf2_")[2]
        if not name:
            return False
        candidate = hashlib.pbkdf2_hmac(name, password.encode("utf-8"), _unb64(salt), int(rounds))
        return hmac.compare_digest(candidate, _unb64(digest))
    except (ValueError, TypeError):
        return False


def _signature(signing_input: str) -> bytes:
    return hmac.new(settings.jwt_secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def issue_token(user_id: str) -> str:
    now = int(time.time())
    claims = {"sub": user_id, "iat": now, "exp": now + int(settings.token_ttl_days) * 86400}
    signing_input = f"{_json_b64(_TOKEN_HEADER)}.{_json_b64(claims)}"
    return f"{signing_input}.{_b64(_signature(signing_input))}"


def read_token(token: str) -> str:
    """Return the user id a token was issued for; 401 when it is forged, malformed or expired."""
    try:
        header, claims_b64, sig = token.split(".")
        if not hmac.compare_digest(_signature(f"{header}.{claims_b64}"), _unb64(sig)):
            raise ValueError("bad signature")
        claims = json.loads(_unb64(claims_b64))
    except (ValueError, UnicodeError) as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc
    if not isinstance(claims, dict) or not claims.get("sub"):
        raise HTTPException(status_code=401, detail="Invalid token")
    if int(claims.get("exp") or 0) < int(time.time()):
        raise HTTPException(status_code=401, detail="Token expired")
    return str(claims["sub"])


def _token_from(request: Request) -> Optional[str]:
    scheme, _, credentials = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    cached = getattr(request.state, "user", None)
    if cached:
        return cached

    token = _token_from(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    user = get_user_by_id(read_token(token))
    if user is None:
        raise HTTPException(status_code=401, detail="User not found")
    request.state.user = user
    return user


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user
