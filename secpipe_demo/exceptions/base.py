"""Exception classes for the secpipe demo service.

Every error carries a machine-readable code, a human-readable message and
optional details, so the web layer can map it to a response without
inspecting the concrete type.
"""

from typing import Dict, Optional, Any


class SecpipeError(Exception):
    """Base for all secpipe errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(SecpipeError):
    """Raised when the process environment holds an unusable setting."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class ExpressionError(SecpipeError):
    """Base for all expression evaluator errors."""
    pass


class InvalidExpressionError(ExpressionError):
    """Raised when an expression cannot be parsed or uses unsupported syntax."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_EXPRESSION", message=message, details=details)


class EvaluationError(ExpressionError):
    """Raised when a parsed expression fails while being evaluated."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="EVALUATION_ERROR", message=message, details=details)
