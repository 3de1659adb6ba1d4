from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the SinergyFit backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("SINERGY_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("SINERGY_DB_PATH") or (self.data_root / "sinergyfit.db")
        ).expanduser()
        # In production you MUST set SINERGY_JWT_SECRET. The dev fallback keeps local demos easy.
        self.jwt_secret: str = os.environ.get("SINERGY_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("SINERGY_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("SINERGY_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}
        self.max_upload_mb: int = int(os.environ.get("SINERGY_MAX_UPLOAD_MB") or "5")
        # Seconds an awaited write (?wait=true) may take before the request fails.
        self.write_timeout: float = float(os.environ.get("SINERGY_WRITE_TIMEOUT") or "10")

        self.host: str = os.environ.get("SINERGY_HOST", "0.0.0.0")
        self.port: int = int(os.environ.get("SINERGY_PORT", "8000"))
        self.log_level: str = os.environ.get("SINERGY_LOG_LEVEL", "info").lower()

        cors = os.environ.get("SINERGY_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
