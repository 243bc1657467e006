"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hostel_menu.api.admin import router as admin_router
from hostel_menu.api.events import router as events_router
from hostel_menu.api.feedback import router as feedback_router
from hostel_menu.api.finalization import router as finalization_router
from hostel_menu.api.menu import router as menu_router
from hostel_menu.api.profiles import router as profiles_router
from hostel_menu.api.reports import router as reports_router
from hostel_menu.api.sessions import router as sessions_router
from hostel_menu.api.votes import router as votes_router
from hostel_menu.app_logging import configure_logging
from hostel_menu.config import parse_allowed_origins
from hostel_menu.containers import AppContainer
from hostel_menu.errors import HostelMenuError

_ENDPOINTS = {
    "sessions": "/api/sessions",
    "menu": "/api/menu",
    "votes": "/api/votes",
    "finalize": "/api/finalize/:sessionId",
    "final_menu": "/api/final-menu/:sessionId",
    "pdf": "/api/generate-pdf/:sessionId/:messType",
    "profiles": "/api/profiles",
    "feedback": "/api/feedback",
    "events": "/api/events",
    "health": "/health",
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Hostel Mess Menu API")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (
        sessions_router,
        menu_router,
        votes_router,
        finalization_router,
        reports_router,
        profiles_router,
        feedback_router,
        events_router,
        admin_router,
    ):
        app.include_router(router)

    @app.exception_handler(HostelMenuError)
    async def handle_app_error(request: Request, exc: HostelMenuError) -> JSONResponse:
        if exc.http_status >= 500:  # noqa: PLR2004
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "error": exc.message},
            )
        else:
            logger.info(
                "Request rejected",
                extra={"path": request.url.path, "error": exc.message},
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

    @app.get("/")
    async def root() -> dict[str, object]:
        """Describe the API."""
        return {
            "message": "Hostel Mess Menu API",
            "version": "1.0.0",
            "endpoints": _ENDPOINTS,
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
