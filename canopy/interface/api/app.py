"""FastAPI application."""

from fastapi import FastAPI

from canopy.interface.api.routes import comments, health, notifications, posts
from canopy.util.di.container import create_container, setup_di
from canopy.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    app_instance = FastAPI(
        title="Canopy API",
        description="Threaded comments embedded in posts, with likes and notifications",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(notifications.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
