from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from memforge.core.config import Settings, settings as default_settings
from memforge.core.container import build_container
from memforge.core.logging import setup_logging

from .routes import deck_routes, generation_routes, health_routes


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are caller errors: answer 400 in the usual error shape."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": {
                "error": "Invalid request",
                "error_code": "VALIDATION_ERROR",
                "message": "Request body is malformed",
                "details": {"errors": jsonable_encoder(exc.errors())},
            }
        },
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; the environment-loaded settings when omitted

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        app.state.container = await build_container(settings)
        yield
        # Shutdown
        await app.state.container.close()

    app = FastAPI(
        title="MemForge API",
        description="API for generating flashcards from study text and managing decks",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(generation_routes.router, prefix=settings.api_prefix)
    app.include_router(deck_routes.router, prefix=settings.api_prefix)
    app.include_router(health_routes.router, prefix=settings.api_prefix)

    return app


app = create_app()


def run() -> None:
    uvicorn.run("memforge.api.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")


if __name__ == "__main__":
    run()
