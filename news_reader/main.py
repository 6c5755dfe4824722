# main.py

"""
FastAPI application for the news reader gateway.
Entry point for the API Gateway that forwards feed requests to the news provider.
"""

import sys
import uvicorn
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .routers import feed_router
from .schemas.news_schemas import GatewayEnvelope
from .services.feed_gateway_service import FeedGatewayService
from .utils.dependencies import get_gateway_service
from common.logger import LoggerFactory, LoggerType, LogLevel

# Setup application logger
logger = LoggerFactory.get_logger(
    name="news-reader-main",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
    console_level=LogLevel.INFO,
    use_colors=True,
    log_file=settings.log_file("news_reader_main"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 Starting {settings.app_name} v1.0.0")
    logger.info(f"📊 Environment: {settings.environment}")
    logger.info(f"🌐 FastAPI Host: {settings.host}:{settings.port}")

    if not settings.has_provider_credential:
        logger.warning("⚠️ NEWSAPI_API_KEY is not set, upstream calls will be rejected")

    yield

    logger.info(f"👋 {settings.app_name} shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="News Reader Gateway",
    description="Forwards all-news, top-headlines and country feeds to the news provider",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(feed_router.router)


@app.get("/")
async def root():
    """Root endpoint with service information."""
    return {
        "service": settings.app_name,
        "status": "running",
        "version": "1.0.0",
        "environment": settings.environment,
        "routes": ["/all-news", "/top-headlines", "/country/{iso}"],
        "docs_url": "/docs" if settings.debug else "disabled",
    }


@app.get("/health")
async def health_check(gateway: FeedGatewayService = Depends(get_gateway_service)):
    """Health check endpoint."""
    try:
        provider_status = await gateway.health_check()
        return {
            "status": "healthy" if provider_status["credential_configured"] else "degraded",
            "service": settings.app_name,
            "version": "1.0.0",
            "components": {"provider": provider_status},
        }

    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "service": settings.app_name, "error": str(e)},
        )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Invalid query or path parameters still answer with the envelope."""
    errors = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(f"Invalid request {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content=GatewayEnvelope.fail(f"Invalid request parameters: {errors}").to_content(),
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with proper logging."""
    logger.error(f"Unhandled exception on {request.method} {request.url}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content=GatewayEnvelope.fail(
            "An unexpected error occurred. Please try again later."
        ).to_content(),
    )


def main():
    """Main function for running the FastAPI server."""
    try:
        logger.info(f"🚀 Starting FastAPI server on {settings.host}:{settings.port}")

        uvicorn.run(
            "news_reader.main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            log_level=settings.log_level.lower(),
            access_log=settings.debug,
        )

    except KeyboardInterrupt:
        logger.info("🛑 Server stopped by user")
    except Exception as e:
        logger.error(f"❌ Failed to start server: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
