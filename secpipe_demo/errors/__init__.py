"""Error handling utilities for the secpipe demo service."""

from secpipe_demo.errors.mapper import (
    ErrorResponse,
    map_exception_to_response,
    map_error_for_web,
    get_http_status_for_error,
)

__all__ = [
    "ErrorResponse",
    "map_exception_to_response",
    "map_error_for_web",
    "get_http_status_for_error",
]
