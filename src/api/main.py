"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.config import (
    SERVICE_NAME,
    SERVICE_VERSION,
    HOST,
    PORT,
    FRONTEND_DIST_DIR,
    CORS_ORIGINS,
    CORS_METHODS,
    CORS_HEADERS,
    CORS_EXPOSE_HEADERS,
    CORS_ALLOW_CREDENTIALS,
    CORS_MAX_AGE,
)
from api.errors import request_validation_handler
from api.routes import health, users
from api.routes.frontend import mount_frontend
from adapter.memory.user_repository import InMemoryUserRepository, seed_users
from port.user_repository import UserRepository
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging(SERVICE_NAME)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: announce the endpoints once the server is up."""
    base_url = f"http://localhost:{PORT}"
    logger.info("Server started", extra={
        "api_url": f"{base_url}/api",
        "health_url": f"{base_url}/api/health",
        "users_url": f"{base_url}/api/users",
        "user_count": len(app.state.user_repo),
    })

    yield  # App runs here


def create_app(
    frontend_dist: Path | None = None,
    repo: UserRepository | None = None,
) -> FastAPI:
    """Build an application that owns its own user store."""
    app = FastAPI(
        title=SERVICE_NAME,
        description="In-memory user CRUD service with static frontend hosting",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    app.state.user_repo = repo if repo is not None else InMemoryUserRepository(seed_users())

    # Browsers only get CORS headers for the frontend dev servers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=CORS_ALLOW_CREDENTIALS,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        expose_headers=CORS_EXPOSE_HEADERS,
        max_age=CORS_MAX_AGE,
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register routes
    app.include_router(health.router)
    app.include_router(users.router)
    mount_frontend(app, frontend_dist if frontend_dist is not None else FRONTEND_DIST_DIR)

    return app


app = create_app()


def run():
    """Serve the application; a failed bind makes uvicorn exit non-zero."""
    import uvicorn
    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        access_log=False,  # request logging is done by the routes
        log_config=None,  # keep the structured handler installed above
    )


if __name__ == "__main__":
    run()
