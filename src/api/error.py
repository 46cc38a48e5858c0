"""API error translation

Routes raise ClientError with the use case's Error; the handlers registered
in create_app render every failure as {"error": {"code", "message"}}.
"""

import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error
from src.app.use_cases.reporting.errors import (
    QUERY_TIMEOUT,
    STORE_UNAVAILABLE,
    VALIDATION_CODES,
    VALIDATION_ERROR,
)

logger = logging.getLogger(__name__)

def status_for(code: str) -> int:
    """HTTP status for an error code; unknown codes are server errors"""
    if code in VALIDATION_CODES:
        return status.HTTP_400_BAD_REQUEST
    if code == QUERY_TIMEOUT:
        return status.HTTP_408_REQUEST_TIMEOUT
    if code == STORE_UNAVAILABLE:
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        return cls(error, status_code=status_for(error.code))


def error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.error.code}: {exc.error.reason}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error.code, exc.error.message),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(VALIDATION_ERROR, f"Invalid request parameters ({details})"),
    )
