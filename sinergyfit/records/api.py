# -*- coding: utf-8 -*-
"""Records — write-result helper and the write-failure notification endpoint."""

from __future__ import annotations

from concurrent.futures import TimeoutError as FutureTimeout
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..config import settings
from .models import NotificationListResponse
from .notifications import get_notifications
from .writer import WriteHandle

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


def await_write(handle: Optional[WriteHandle]) -> Any:
    """Wait for a queued write on behalf of a caller that asked for ``?wait=true``."""
    if handle is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        return handle.wait(timeout=settings.write_timeout)
    except FutureTimeout as exc:
        raise HTTPException(status_code=504, detail="Write still pending") from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Write failed: {exc}") from exc


@router.get("", response_model=NotificationListResponse, summary="Failed background writes")
def list_notifications(
    since: Optional[int] = Query(default=None, ge=0, description="Only entries with a larger id"),
    user: dict = Depends(get_current_user),
):
    return NotificationListResponse.model_validate(get_notifications(user["id"], since=since))
