from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.routes import router as schedule_router
from .config import settings
from .jobs import schedule_jobs

logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    schedule_jobs.shutdown(wait=False)


app = FastAPI(title=settings.api_title, version=settings.api_version, lifespan=lifespan)
app.include_router(schedule_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"service": "day-roster-scheduler", "status": "ready"}
