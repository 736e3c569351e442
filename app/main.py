"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers exception handlers and API routes
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.mongo import connect_to_mongo, close_mongo_connection, check_database_health, get_database
from app.db.indexes import create_indexes
from app.services.mail_service import MailService
from app.api import contact, content, orders, products, reviews, users

APP_VERSION = "1.0.0"

# Initialize logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("🚀 Starting storefront API...")

    try:
        validate_settings()
        logger.info("✅ Configuration validated")

        await connect_to_mongo()
        await create_indexes(get_database())

        is_healthy = await check_database_health()
        if not is_healthy:
            logger.warning("⚠️ Database health check failed during startup")

        app.state.mail_service = MailService()
        if not app.state.mail_service.is_configured():
            logger.warning("⚠️ SMTP credentials missing, contact messages will fail")

        logger.info(f"🎉 Storefront API started (environment={settings.ENVIRONMENT})")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    logger.info("🛑 Shutting down storefront API...")
    try:
        await close_mongo_connection()
        logger.info("👋 Storefront API shut down successfully")
    except Exception as e:
        logger.error(f"Error during shutdown: {str(e)}", exc_info=True)


app = FastAPI(
    title="Vastra Fusion Storefront API",
    description="Catalog, orders, users and content for the Vastra Fusion store",
    version=APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)

# CORS: the storefront origin only
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    if process_time > 5.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path} ({process_time:.2f}s)"
        )

    return response


add_exception_handlers(app)

# Register API routes
app.include_router(content.router, prefix=settings.API_PREFIX, tags=["Content"])
app.include_router(products.router, prefix=settings.API_PREFIX, tags=["Products"])
app.include_router(orders.router, prefix=settings.API_PREFIX, tags=["Orders"])
app.include_router(reviews.router, prefix=settings.API_PREFIX, tags=["Reviews"])
app.include_router(contact.router, prefix=settings.API_PREFIX, tags=["Contact"])
app.include_router(users.router, prefix=settings.API_PREFIX, tags=["Users"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic info."""
    return {
        "name": "Vastra Fusion Storefront API",
        "version": APP_VERSION,
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint. Checks database connectivity.
    """
    db_healthy = await check_database_health()
    health_status = {
        "status": "healthy" if db_healthy else "unhealthy",
        "timestamp": time.time(),
        "version": APP_VERSION,
        "checks": {"database": "healthy" if db_healthy else "unhealthy"},
    }
    status_code = 200 if db_healthy else 503
    return JSONResponse(content=health_status, status_code=status_code)


@app.get("/live", tags=["Health"])
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
