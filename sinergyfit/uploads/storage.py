# -*- coding: utf-8 -*-
"""Uploads — image files on disk under the owner's data directory."""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import HTTPException, UploadFile

from ..config import settings

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}
_SAFE_NAME = re.compile(r"^[0-9]+-[A-Za-z0-9._-]{1,120}$")


def _user_root(user_id: str, kind: str) -> Path:
    return settings.data_root / "users" / user_id / kind


def _safe_filename(filename: str) -> str:
    name = Path(filename or "").name
    name = re.sub(r"[^A-Za-z0-9._-]+", "-", name).strip("-.")
    return name[:100] or "image"


def save_upload(*, user_id: str, kind: str, upload: UploadFile) -> Dict[str, Any]:
    content_type = (upload.content_type or "").lower()
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(status_code=400, detail="Only JPEG, PNG, GIF or WebP images can be uploaded")

    target_dir = _user_root(user_id, kind)
    target_dir.mkdir(parents=True, exist_ok=True)
    name = f"{int(time.time() * 1000)}-{_safe_filename(upload.filename or '')}"
    target = target_dir / name

    size = 0
    max_bytes = int(settings.max_upload_mb) * 1024 * 1024
    try:
        with target.open("wb") as f:
            while True:
                chunk = upload.file.read(1024 * 256)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise HTTPException(status_code=413, detail=f"File too large (> {settings.max_upload_mb} MB)")
                f.write(chunk)
    except HTTPException:
        target.unlink(missing_ok=True)
        raise
    except OSError as exc:
        target.unlink(missing_ok=True)
        logger.error("Upload to %s failed: %s", target, exc)
        raise HTTPException(status_code=500, detail="Could not store the upload") from exc
    finally:
        upload.file.close()

    if size == 0:
        target.unlink(missing_ok=True)
        raise HTTPException(status_code=400, detail="Empty file")

    logger.info("Stored %s upload %s (%d bytes) for user %s", kind, name, size, user_id)
    return {
        "url": f"/api/uploads/{kind}/{name}",
        "name": name,
        "kind": kind,
        "content_type": content_type,
        "size_bytes": size,
    }


def get_upload_path(*, user_id: str, kind: str, name: str) -> Optional[Path]:
    if not _SAFE_NAME.fullmatch(name or ""):
        return None
    path = _user_root(user_id, kind) / name
    return path if path.is_file() else None
