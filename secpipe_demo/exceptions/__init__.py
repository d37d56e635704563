"""Custom exceptions for the secpipe demo service."""

from secpipe_demo.exceptions.base import (
    SecpipeError,
    ConfigurationError,
    ExpressionError,
    InvalidExpressionError,
    EvaluationError,
)

__all__ = [
    "SecpipeError",
    "ConfigurationError",
    "ExpressionError",
    "InvalidExpressionError",
    "EvaluationError",
]
