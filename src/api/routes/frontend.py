"""Static hosting for the prebuilt frontend.

- /assets/*  -> <dist>/assets/*
- /vite.svg  -> <dist>/vite.svg
- /          -> <dist>/index.html (served verbatim)
"""

import logging
from pathlib import Path

from fastapi import APIRouter, FastAPI, HTTPException, status
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


def _file_or_404(path: Path) -> FileResponse:
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(path)


def build_router(dist_dir: Path) -> APIRouter:
    router = APIRouter(tags=["frontend"], include_in_schema=False)

    @router.get("/")
    async def index():
        return _file_or_404(dist_dir / "index.html")

    @router.get("/vite.svg")
    async def vite_svg():
        return _file_or_404(dist_dir / "vite.svg")

    return router


def mount_frontend(app: FastAPI, dist_dir: Path) -> None:
    """Register the frontend routes and the /assets static mount on app."""
    app.include_router(build_router(dist_dir))

    assets_dir = dist_dir / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")
    else:
        logger.warning("Frontend assets directory not found, /assets is not served",
                       extra={"assets_dir": str(assets_dir)})
