"""Error response mapping for the web interface.

Converts SecpipeError exceptions (and anything else that escapes a handler)
into the `{"ok": false, "error": ...}` body every route uses for failures.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from secpipe_demo.exceptions import (
    SecpipeError,
    ConfigurationError,
    ExpressionError,
)

INTERNAL_ERROR = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass
class ErrorResponse:
    """Structured error response for API consumers."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None


def map_exception_to_response(error: Exception) -> ErrorResponse:
    """Convert an exception to a structured ErrorResponse.

    Args:
        error: The exception to convert

    Returns:
        ErrorResponse with structured error information
    """
    if isinstance(error, SecpipeError):
        return ErrorResponse(
            error_code=error.code,
            message=error.message,
            details=error.details if error.details else None,
        )

    # Generic exceptions - wrap with minimal structure
    return ErrorResponse(
        error_code=INTERNAL_ERROR,
        message=str(error) or type(error).__name__,
        details={"exception_type": type(error).__name__},
    )


def map_error_for_web(error: Exception) -> Dict[str, Any]:
    """Map exception to the web API failure body.

    Messages of unexpected exceptions stay in the log; the client only
    sees a fixed text for them.

    Args:
        error: The exception to convert

    Returns:
        Dictionary suitable for a Starlette JSONResponse
    """
    response = map_exception_to_response(error)
    if response.error_code == INTERNAL_ERROR:
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = response.message

    return {
        "ok": False,
        "error": message,
    }


def get_http_status_for_error(error: Exception) -> int:
    """Determine appropriate HTTP status code for an error.

    Args:
        error: The exception

    Returns:
        HTTP status code
    """
    if isinstance(error, ExpressionError):
        return 400
    elif isinstance(error, ConfigurationError):
        return 500
    elif isinstance(error, SecpipeError):
        return 400
    else:
        return 500
