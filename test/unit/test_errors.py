"""Tests for exception to response mapping."""

from secpipe_demo.errors import (
    get_http_status_for_error,
    map_error_for_web,
    map_exception_to_response,
)
from secpipe_demo.exceptions import (
    ConfigurationError,
    EvaluationError,
    InvalidExpressionError,
)


class TestMapping:

    def test_expression_error(self):
        error = InvalidExpressionError("SyntaxError: invalid syntax", details={"offset": 1})
        response = map_exception_to_response(error)
        assert response.error_code == "INVALID_EXPRESSION"
        assert response.message == "SyntaxError: invalid syntax"
        assert response.details == {"offset": 1}

    def test_empty_details_become_none(self):
        response = map_exception_to_response(EvaluationError("ZeroDivisionError: division by zero"))
        assert response.details is None

    def test_generic_error(self):
        response = map_exception_to_response(RuntimeError("boom"))
        assert response.error_code == "INTERNAL_ERROR"
        assert response.message == "boom"
        assert response.details == {"exception_type": "RuntimeError"}

    def test_generic_error_without_message(self):
        response = map_exception_to_response(KeyError())
        assert response.message == "KeyError"

    def test_web_body(self):
        body = map_error_for_web(EvaluationError("ZeroDivisionError: division by zero"))
        assert body == {"ok": False, "error": "ZeroDivisionError: division by zero"}

    def test_web_body_hides_internal_message(self):
        """Unexpected exceptions never leak their text to the client."""
        body = map_error_for_web(RuntimeError("secret path /etc/app.conf"))
        assert body == {"ok": False, "error": "Internal server error"}


class TestHttpStatus:

    def test_statuses(self):
        assert get_http_status_for_error(InvalidExpressionError("x")) == 400
        assert get_http_status_for_error(EvaluationError("x")) == 400
        assert get_http_status_for_error(ConfigurationError("x")) == 500
        assert get_http_status_for_error(RuntimeError("x")) == 500
