"""
CalcEngine - Free Financial Calculators

Main FastAPI application entry point. Configures routes, static files,
error pages and application lifecycle events.

Version: 1.0.0
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from calcengine import __version__
from calcengine.config import settings
# Import logging configuration (initializes logging)
from calcengine.logging_config import get_logger
from calcengine.templating import STATIC_DIR, templates
from calcengine.utils.metadata import build_metadata

# Import route modules
from calcengine.routes import api, calculators, compare, home

# Get logger for this module
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle manager.

    Handles startup and shutdown events for the application.
    """
    # Startup
    logger.info("=" * 60)
    logger.info(f"{settings.site_name} Application Starting")
    logger.info(f"Version: {app.version}")
    logger.info("=" * 60)

    yield  # Application runs here

    # Shutdown
    logger.info(f"{settings.site_name} Application Shutting Down")
    logger.info("=" * 60)


# Create FastAPI application instance
app = FastAPI(
    title=settings.site_name,
    description="Free financial calculators for mortgages, loans, taxes, salary and retirement.",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan
)

# Mount static files directory
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Include route modules
app.include_router(home.router, tags=["Pages"])
app.include_router(calculators.router, tags=["Calculators"])
app.include_router(compare.router, tags=["Guides"])
app.include_router(api.router, tags=["API"])


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    """Render the 404 page for browser requests; the JSON API keeps JSON errors."""
    if exc.status_code != 404 or request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)

    logger.info(f"404 Not Found: {request.url.path}")
    return templates.TemplateResponse(
        request,
        "404.html",
        {
            "meta": build_metadata(
                "Page Not Found",
                "The page you are looking for does not exist.",
                request.url.path,
            ),
        },
        status_code=404,
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


logger.info("All routes registered successfully")
