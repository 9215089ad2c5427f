from contextlib import asynccontextmanager
import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from risk_api.api.routers.routers import api_router
from risk_api.core.config import settings
from risk_api.core.logging_config import configure_logging
from risk_api.core.sentry import init_sentry
from risk_api.middleware import RequestIDMiddleware
from risk_api.risk.exceptions import RiskScoringError


# Load environment variables
load_dotenv()

# Configure logging with request_id support
configure_logging()

logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking (no-op without SENTRY_DSN)
init_sentry()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application startup and shutdown."""
    logger.info(f"Starting {settings.PROJECT_NAME} {settings.VERSION}...")
    try:
        yield
    finally:
        logger.info(f"Shutting down {settings.PROJECT_NAME}...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
    openapi_url="/openapi.json" if settings.is_local else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add Request ID middleware last so it wraps every response, preflights included
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(RiskScoringError)
async def risk_scoring_exception_handler(request: Request, exc: RiskScoringError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


# Include all API routes
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# Static frontend; mounted last so it only serves paths no route matched
if os.path.isdir(settings.STATIC_DIR):
    app.mount(
        "/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static"
    )
else:
    logger.warning(f"Static directory {settings.STATIC_DIR} not found - not serving it")
