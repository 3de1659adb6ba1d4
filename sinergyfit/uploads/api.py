# -*- coding: utf-8 -*-
"""Uploads — API endpoints."""

from __future__ import annotations

import mimetypes

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import FileResponse

from ..auth.security import get_current_user
from .models import UploadKind, UploadResponse
from .storage import get_upload_path, save_upload

router = APIRouter(prefix="/api/uploads", tags=["Uploads"])


@router.post("/{kind}", response_model=UploadResponse, summary="Upload an image")
def upload_image(kind: UploadKind, file: UploadFile = File(...), user: dict = Depends(get_current_user)):
    row = save_upload(user_id=user["id"], kind=kind.value, upload=file)
    return UploadResponse.model_validate(row)


@router.get("/{kind}/{name}", summary="Download one of my images")
def download_image(kind: UploadKind, name: str, user: dict = Depends(get_current_user)):
    path = get_upload_path(user_id=user["id"], kind=kind.value, name=name)
    if path is None:
        raise HTTPException(status_code=404, detail="Upload not found")
    media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return FileResponse(path, media_type=media_type)
