# -*- coding: utf-8 -*-
"""
SinergyFit API

Workout routines, recipes and a weekly meal plan for each user, on top of the
built-in seed catalog.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import init_app_db
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request
from .config import settings
from .meal_plans.api import router as meal_plan_router
from .recipes.api import router as recipes_router
from .records import notifications
from .records.api import router as notifications_router
from .routines.api import router as routines_router
from .uploads.api import router as uploads_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SinergyFit",
    description="Workout routines, recipes and weekly meal planning",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Schema is created at import so every entry point (uvicorn, TestClient) sees it.
init_app_db(settings.app_db_path)
notifications.start()


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/auth/logout",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    path = request.url.path
    if path.startswith("/api") and path != "/api/health" and not any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        try:
            user = get_current_user_from_request(request)
            request.state.user = user
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


app.include_router(auth_router)
app.include_router(routines_router)
app.include_router(recipes_router)
app.include_router(meal_plan_router)
app.include_router(uploads_router)
app.include_router(notifications_router)


@app.get("/api/health")
def health_check():
    return {"ok": True, "service": "sinergyfit"}


@app.get("/", include_in_schema=False)
def root():
    return {"message": "SinergyFit API", "docs": "/api/docs"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting SinergyFit on %s:%s", settings.host, settings.port)
    uvicorn.run("sinergyfit.api:app", host=settings.host, port=settings.port, log_level=settings.log_level, reload=False)


if __name__ == "__main__":
    run()
