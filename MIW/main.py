from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Core imports
from packages.miw_core.config import MIWConfig
from packages.miw_core.errors import MIWBaseError
from packages.miw_core.logging import get_logger

# API
from MIW.api.dependencies import get_config, get_session_repository
from MIW.api.error_handler import miw_exception_handler, validation_exception_handler
from MIW.api.health import router as health_router
from MIW.api.interview import router as interview_router

logger = get_logger("MIW.main")


def create_app(config: Optional[MIWConfig] = None) -> FastAPI:
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"Starting {config.PROJECT_NAME} v{config.VERSION}...")
        logger.info(f"Using GEMINI_API_KEY (first 5 chars): {config.masked_api_key()}")
        logger.info(f"API mounted at {config.api_prefix}")

        yield

        # Shutdown
        logger.info(f"Server shutting down. Live sessions: {get_session_repository().count()}")

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None
    )

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error translation
    app.add_exception_handler(MIWBaseError, miw_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    app.include_router(health_router, prefix="", tags=["Status"])
    app.include_router(interview_router, prefix=config.api_prefix)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("MIW.main:app", host="0.0.0.0", port=8000, reload=True)
