"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mindful.config import Settings
from mindful.interface.api.broadcast import ConnectionManager
from mindful.interface.api.routes import (
    analytics,
    auth,
    chat,
    comments,
    doctors,
    health,
    posts,
    tags,
    votes,
    ws,
)
from mindful.interface.error import register_error_handlers
from mindful.util.di.container import create_container, setup_di
from mindful.util.observability import (
    instrument_fastapi,
    instrument_httpx,
    instrument_openai,
)

API_PREFIX = "/api"


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (production container if omitted)
    """
    settings = Settings()

    # Instrument outbound HTTP and model calls
    # (Logfire must be configured before instrumentation)
    instrument_httpx()
    instrument_openai()

    app_instance = FastAPI(
        title="Mindful API",
        description="Backend API for Mindful - a mental health community with peer support, doctor connections and an AI assistant",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.state.settings = settings
    app_instance.state.connection_manager = ConnectionManager()

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(ws.router)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)
    app_instance.include_router(votes.router, prefix=API_PREFIX)
    app_instance.include_router(tags.router, prefix=API_PREFIX)
    app_instance.include_router(doctors.router, prefix=API_PREFIX)
    app_instance.include_router(chat.router, prefix=API_PREFIX)
    app_instance.include_router(analytics.router, prefix=API_PREFIX)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
