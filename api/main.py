"""
Classroom Hub - FastAPI Application
Main application with CORS, rate limiting, error handlers and routes
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from api.limiter import limiter
from api.models import HealthResponse
from api.routes import classrooms_router, dashboard_router
from config.logging import configure_logging
from config.settings import get_settings
from src.classroom.exceptions import ClassroomError
from src.database.db import get_db_context, init_db

logger = logging.getLogger("api.main")

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown"""
    configure_logging()
    logger.info("Classroom API starting")

    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed")
        raise

    yield

    logger.info("Classroom API shutting down")


# Create app
app = FastAPI(
    title="Classroom Hub API",
    description="""
    Classroom management: create a class, share its join code, manage members.

    ## Features
    - Join-code based membership
    - Author-only metadata edits and member removal
    - Server-rendered dashboard
    """,
    version=VERSION,
    lifespan=lifespan
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ================== MIDDLEWARE ==================

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add X-Process-Time header to all responses"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


# ================== ERROR HANDLERS ==================

def format_validation_errors(errors) -> list:
    """Turns pydantic errors into [{param, msg, location}] entries."""
    formatted = []
    for error in errors:
        loc = error.get("loc") or ("body",)
        location = str(loc[0])
        param = ".".join(str(part) for part in loc[1:]) or location
        if error.get("type") in ("missing", "string_too_short"):
            msg = f"{param} is required"
        else:
            msg = error.get("msg", "Invalid value")
        formatted.append({"param": param, "msg": msg, "location": location})
    return formatted


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"errors": format_validation_errors(exc.errors())}
    )


@app.exception_handler(ClassroomError)
async def classroom_exception_handler(request: Request, exc: ClassroomError):
    # Not found, conflict and not authorized all share 400
    return JSONResponse(status_code=400, content={"msg": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler - details stay in the server log"""
    settings = get_settings()
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")

    content = {"msg": "Server Error"}
    if settings.debug:
        content["detail"] = str(exc)

    return JSONResponse(status_code=500, content=content)


# ================== ROUTES ==================

app.include_router(classrooms_router)
app.include_router(dashboard_router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint"""
    return {
        "message": "Classroom Hub API",
        "docs": "/docs",
        "health": "/health",
        "dashboard": "/dashboard"
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
@limiter.limit(get_settings().health_rate_limit)
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns system health status.
    """
    services = {"database": "unknown"}

    try:
        with get_db_context() as db:
            db.execute(text("SELECT 1"))
        services["database"] = "healthy"
    except Exception:
        logger.warning("Health check: database unreachable")
        services["database"] = "unhealthy"

    return HealthResponse(
        status="healthy" if services["database"] == "healthy" else "degraded",
        version=VERSION,
        services=services
    )


# ================== RUN ==================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
