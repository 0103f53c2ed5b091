import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import get_settings
from app.core.exceptions import CipherError, EngineNotFoundError
from app.core.logging import configure_logging
from app.models.schemas import ErrorResponse

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup
    configure_logging(settings.log_level)
    logger.info("Starting %s (%s)", settings.app_name, settings.app_env)
    yield
    # Shutdown


async def cipher_error_handler(request: Request, exc: CipherError) -> JSONResponse:
    """Turn cipher errors into ErrorResponse bodies."""
    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, EngineNotFoundError)
        else status.HTTP_400_BAD_REQUEST
    )
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    body = ErrorResponse(error=type(exc).__name__, message=exc.message, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Route transposition and Gronsfeld cipher API. "
            "Encrypt and decrypt texts with two classical ciphers "
            "for educational purposes."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CipherError, cipher_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
