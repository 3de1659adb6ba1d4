# -*- coding: utf-8 -*-
"""Shared setup for tests that touch settings, the database or the app."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Dict, Optional


def fresh_environment(extra_env: Optional[Dict[str, str]] = None) -> Path:
    """Point the app at a new temp data root and drop cached sinergyfit modules.

    Settings are read at import time, so every module is re-imported after
    this call and picks up the new paths.
    """
    tmp = Path(tempfile.mkdtemp(prefix="sinergyfit-test-"))
    data_root = tmp / "data"
    os.environ["SINERGY_DATA_ROOT"] = str(data_root)
    os.environ["SINERGY_DB_PATH"] = str(data_root / "sinergyfit.db")
    os.environ["SINERGY_JWT_SECRET"] = "test-secret"
    os.environ.pop("SINERGY_MAX_UPLOAD_MB", None)
    for key, value in (extra_env or {}).items():
        os.environ[key] = value

    for name in list(sys.modules.keys()):
        if name == "sinergyfit" or name.startswith("sinergyfit."):
            sys.modules.pop(name, None)
    return tmp
