from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from ..config import ServerSettings, ServingMode
from ..logging_config import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    App startup/shutdown:
      - log the serving mode resolved at creation time
      - log shutdown
    """
    settings: ServerSettings = app.state.settings
    logger.info(
        "Backend starting (mode=%s, environment=%s)",
        app.state.serving_mode.value,
        settings.environment,
    )
    try:
        yield
    finally:
        logger.info("Backend stopped")


async def get_serving_mode(request: Request) -> ServingMode:
    """
    Dependency to retrieve the ServingMode from app.state.
    """
    mode = getattr(request.app.state, "serving_mode", None)
    if mode is None:
        raise RuntimeError("ServingMode not available on app.state (create_app not used).")
    return mode
