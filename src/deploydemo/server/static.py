"""
Combined-serving mode: host the built single-page app next to the API.

Any GET that is not an API route is answered with the matching file from the
static directory, or with index.html so the frontend can handle the route.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import FileResponse

from ..logging_config import get_logger

logger = get_logger(__name__)

ENTRY_DOCUMENT = "index.html"


def resolve_asset(static_dir: Path, path: str) -> Optional[Path]:
    """
    Map a request path to a file inside static_dir.

    Returns:
        The file path, or None if the path is empty, escapes static_dir,
        cannot be represented on this filesystem (too long, NUL byte),
        or does not name an existing file.
    """
    if not path:
        return None
    root = static_dir.resolve()
    try:
        candidate = (root / path).resolve()
        if not candidate.is_relative_to(root) or not candidate.is_file():
            return None
    except (OSError, ValueError):
        return None
    return candidate


def _is_api_path(path: str) -> bool:
    return path == "api" or path.startswith("api/")


def mount_spa(app: FastAPI, static_dir: Path) -> None:
    """
    Register the catch-all route. Must be called after the API routers are included.

    Raises:
        RuntimeError: if static_dir has no entry document.
    """
    index = static_dir / ENTRY_DOCUMENT
    if not index.is_file():
        raise RuntimeError(f"Combined serving needs {index}, which does not exist")

    logger.info("Serving single-page app from %s", static_dir)

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    async def spa_fallback(full_path: str) -> FileResponse:
        if _is_api_path(full_path):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

        asset = resolve_asset(static_dir, full_path)
        if asset is not None:
            return FileResponse(asset)
        return FileResponse(index)
