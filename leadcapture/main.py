"""
Lead Capture Backend - FastAPI Application
Main entry point with all routes and error handlers configured.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from leadcapture import __version__
from leadcapture.api import consultation, contact, services
from leadcapture.config import settings
from leadcapture.core.exceptions import LeadCaptureException, RateLimitError
from leadcapture.core.responses import error_response, success_response
from leadcapture.database import init_db
from leadcapture.schemas.common import HealthResponse

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = {
    "GET /api/health": "Health check",
    "POST /api/contact": "Submit contact form",
    "GET /api/contact": "Get contacts (admin)",
    "POST /api/consultation": "Book free consultation",
    "GET /api/consultation": "Get consultations (admin)",
    "POST /api/services/inquiry": "Submit service inquiry",
    "GET /api/services/inquiry": "Get service inquiries (admin)",
    "GET /api/services/types": "Get available service types",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    await init_db()
    logger.info(f"{settings.APP_NAME} API started ({settings.environment})")
    yield
    # Shutdown


app = FastAPI(
    title=f"{settings.APP_NAME} Lead Capture API",
    description="Contact, consultation and service inquiry capture with lead scoring",
    version=__version__,
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(LeadCaptureException)
async def lead_capture_exception_handler(request: Request, exc: LeadCaptureException):
    headers = None
    if isinstance(exc, RateLimitError):
        headers = {
            "Retry-After": str(exc.retry_after),
            "X-RateLimit-Limit": str(exc.limit),
            "X-RateLimit-Remaining": str(exc.remaining),
        }
    return error_response(exc.message, exc.status_code, exc.extra, headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON and wrongly typed fields are input errors, not field validation."""
    details = [
        {"field": ".".join(str(part) for part in error["loc"][1:]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return error_response("Invalid JSON data", 400, {"details": details})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(
            "Endpoint not found", 404, {"available_endpoints": AVAILABLE_ENDPOINTS}
        )
    if exc.status_code == 405:
        return error_response("Method not allowed", 405)
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return error_response("Internal server error", 500)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response("Internal server error", 500)


# Include all routers
app.include_router(contact.router)
app.include_router(consultation.router)
app.include_router(services.router)


@app.get("/")
@app.get(f"{settings.API_PREFIX}/health")
async def health():
    """Health check endpoint."""
    payload = HealthResponse(version=settings.API_VERSION, environment=settings.environment)
    return success_response(f"{settings.APP_NAME} Backend API is running", payload)
