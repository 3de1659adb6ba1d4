# -*- coding: utf-8 -*-
"""Records — Pydantic models shared by the write endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class WriteResponse(BaseModel):
    id: str
    status: Literal["accepted", "written", "deleted"]
    record: Optional[Dict[str, Any]] = None


class Notification(BaseModel):
    id: int
    type: str
    ts: str
    collection: Optional[str] = None
    doc_id: Optional[str] = None
    op: Optional[str] = None
    message: str = ""


class NotificationListResponse(BaseModel):
    items: List[Notification] = Field(default_factory=list)
    next_cursor: int = 0
