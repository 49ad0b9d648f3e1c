from __future__ import annotations

from typing import Any, Optional

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import ServerSettings, ServingMode, get_server_settings
from .deps import get_serving_mode, lifespan
from .errors import validation_error_handler
from .routers import router
from .static import mount_spa


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    settings = settings or get_server_settings()
    mode = settings.serving_mode

    app = FastAPI(
        title="deploydemo API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.serving_mode = mode

    # Browsers may call the API from any origin when the frontend is hosted separately.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(router, prefix="/api")

    if mode is ServingMode.COMBINED:
        mount_spa(app, settings.static_dir)
    else:

        @app.get("/")
        async def root(serving_mode: ServingMode = Depends(get_serving_mode)) -> dict[str, Any]:
            return {"ok": True, "service": "deploydemo API", "mode": serving_mode.value}

    return app


# ASGI entrypoint (uvicorn deploydemo.server.app:app)
app = create_app()
