from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from packages.miw_core.errors import MIWBaseError
from packages.miw_core.logging import get_logger

logger = get_logger("MIW.error_handler")


async def miw_exception_handler(request: Request, exc: MIWBaseError) -> JSONResponse:
    """Translate a domain error into the {"error": message} body the client displays."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{exc.code} on {request.url.path}: {exc.message} {exc.details or ''}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable request bodies are bad input, answered in the same shape."""
    logger.warning(f"Request validation failed on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )
