# -*- coding: utf-8 -*-
"""
Daily diet API

Users, meals recorded against a diet, and the metrics/summaries derived from them.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .app_db import CountParseError, init_app_db
from .config import configure_logging, settings
from .meals.api import router as meals_router
from .users.api import router as users_router

logger = logging.getLogger(__name__)

configure_logging()

app = FastAPI(
    title="Daily Diet API",
    description="Record meals within and outside a diet and track your best streak.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.db_path)


@app.exception_handler(CountParseError)
async def _count_parse_error(request: Request, exc: CountParseError) -> JSONResponse:
    logger.error("Stored count unusable on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(users_router)
app.include_router(meals_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    try:
        port = int(settings.port_raw)
    except ValueError:
        port = 8000

    uvicorn.run("daily_diet.api:app", host=settings.host, port=port, reload=False)
