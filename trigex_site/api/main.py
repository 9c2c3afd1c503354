"""Main FastAPI application for the trigex.moe portfolio site."""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, settings
from trigex_site.services import (
    PageRenderer,
    RenderError,
    TRACKS,
    PROJECTS,
    build_home_page,
)
from trigex_site.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the site application: three pages, the asset store and error pages."""
    static_dir = app_settings.static_dir or DEFAULT_STATIC_DIR
    renderer = PageRenderer(
        site_name=app_settings.site_name,
        templates_dir=app_settings.templates_dir,
    )
    home_page = build_home_page(app_settings.site_name)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        base_url = f"http://localhost:{app_settings.port}"
        logger.info(f"Started server on {base_url}")
        logger.info(f"Access static assets at {base_url}/static/")
        yield

    # No docs or OpenAPI routes; the route table is the three pages below
    app = FastAPI(
        title=app_settings.site_name,
        description="Personal portfolio site: home, music and projects",
        version="1.0.0",
        debug=app_settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and latency of every request."""
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"{request.method} {request.url.path} -> {status_code} ({elapsed_ms:.1f}ms)")

    @app.exception_handler(StarletteHTTPException)
    async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render the branded page for 404s; anything else gets the default response."""
        if exc.status_code == 404:
            try:
                body = renderer.render_not_found()
            except RenderError as e:
                logger.error(f"Could not render not-found page for {request.url.path}: {e}")
                return await http_exception_handler(request, exc)
            return HTMLResponse(body, status_code=404)

        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        """Log unhandled errors and answer with a bare 500."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    # Static assets
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    # Pages
    @app.get("/", response_class=HTMLResponse)
    def serve_home_page():
        """Serve the home page."""
        return HTMLResponse(renderer.render_home(home_page))

    @app.get("/music", response_class=HTMLResponse)
    def serve_music_page():
        """Serve the discography page."""
        return HTMLResponse(renderer.render_music(TRACKS))

    @app.get("/projects", response_class=HTMLResponse)
    def serve_projects_page():
        """Serve the projects page."""
        return HTMLResponse(renderer.render_projects(PROJECTS))

    return app


app = create_app()


def run() -> None:
    """Start the site with uvicorn on the configured port."""
    import uvicorn

    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
