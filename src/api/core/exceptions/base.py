"""Global exception handlers for the FastAPI application."""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)


class QuotaImageException(Exception):
    """Base exception for the Quota Image API with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }


class UpstreamServiceError(QuotaImageException):
    """A call to the key service or the image service did not succeed."""

    def __init__(self, service: str, description: str):
        super().__init__(
            MessageCode.EXTERNAL_SERVICE_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"service": service, "description": description},
        )
        self.service = service


def _serializable_errors(exc: RequestValidationError) -> list[dict]:
    try:
        serializable_errors = []
        for error in exc.errors():
            error_dict = dict(error)
            # ctx may hold exception instances that JSON cannot encode
            error_dict.pop("ctx", None)
            if "input" in error_dict and isinstance(error_dict["input"], bytes):
                error_dict["input"] = error_dict["input"].decode(errors="replace")
            serializable_errors.append(error_dict)
        return serializable_errors
    except Exception:
        return [{"msg": "Validation error occurred", "type": "validation_error"}]


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(QuotaImageException)
    async def quota_image_exception_handler(
        request: Request, exc: QuotaImageException
    ) -> JSONResponse:
        """Handle application exceptions."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"Application exception: {exc.message_code.value}",
            path=request.url.path,
            method=request.method,
            status_code=exc.status_code,
            details=exc.details,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors such as unknown paths and wrong methods."""
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )

        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message_code = MessageCode.NOT_FOUND
        elif exc.status_code < 500:
            message_code = MessageCode.BAD_REQUEST
        else:
            message_code = MessageCode.INTERNAL_ERROR

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "message_code": message_code,
                "message": str(exc.detail),
                "details": {"description": "HTTP exception occurred"},
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        logger.warning(
            "Validation error occurred",
            path=request.url.path,
            method=request.method,
        )

        return JSONResponse(
            status_code=422,  # Unprocessable Content
            content={
                "message_code": MessageCode.INVALID_INPUT,
                "message": get_default_message(MessageCode.INVALID_INPUT),
                "details": {
                    "description": "Request validation failed",
                    "validation_errors": _serializable_errors(exc),
                },
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message_code": MessageCode.INTERNAL_ERROR,
                "message": "Internal server error",
                "details": {"error_type": type(exc).__name__},
            },
        )
