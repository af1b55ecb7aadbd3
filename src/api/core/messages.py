"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"
    API_KEY_CREATED = "API_KEY_CREATED"
    AUTHORIZED = "AUTHORIZED"

    # Authentication & Authorization
    UNAUTHORIZED = "UNAUTHORIZED"
    NO_SESSION = "NO_SESSION"
    INVALID_KEY = "INVALID_KEY"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"

    # Service Errors
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    MessageCode.API_KEY_CREATED: "API key created and stored in session",
    MessageCode.AUTHORIZED: "Session is authorized",
    # Authentication & Authorization
    MessageCode.UNAUTHORIZED: "Unauthorized: missing API key in cookies",
    MessageCode.NO_SESSION: "No session: call /authorize first",
    MessageCode.INVALID_KEY: "Invalid API key: unknown, disabled or expired",
    MessageCode.QUOTA_EXCEEDED: "Quota exceeded: no remaining calls for this API key",
    # Validation errors
    MessageCode.INVALID_INPUT: "Invalid input provided",
    # Service Errors
    MessageCode.EXTERNAL_SERVICE_ERROR: "External service error",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.NOT_FOUND: "Resource not found",
}

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
