"""Secpipe demo web server.

Four GET routes: a JSON greeting, a plain-text liveness probe, an arithmetic
evaluator and a message reflector. The last two exist as targets for the
security scanners run against this service.
"""

import html
from typing import Any, Optional, Tuple

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from secpipe_demo.config import Settings
from secpipe_demo.errors import get_http_status_for_error, map_error_for_web
from secpipe_demo.exceptions import ExpressionError
from secpipe_demo.expression import ArithmeticEvaluator, get_evaluator
from secpipe_demo.logger import Logger, session_logger

GREETING = "Hello from DevSecOps secure pipeline 👋"
DEFAULT_EXPRESSION = "1+1"

REFLECT_TEMPLATE = "<html><body><h1>Message</h1><div>{msg}</div></body></html>"


def build_routes(server: "SecpipeWebServer") -> Tuple[Route, ...]:
    """Build the immutable route table for a server instance."""
    return (
        Route("/", endpoint=server.root, methods=["GET"]),
        Route("/healthz", endpoint=server.healthz, methods=["GET"]),
        Route("/vuln-eval", endpoint=server.vuln_eval, methods=["GET"]),
        Route("/reflect", endpoint=server.reflect, methods=["GET"]),
    )


class SecpipeWebServer:
    """HTTP service exposing the demo routes."""

    SERVICE_NAME = "secpipe-demo"

    def __init__(
        self,
        settings: Settings,
        evaluator: Optional[ArithmeticEvaluator] = None,
        logger: Logger = session_logger,
    ):
        self.settings = settings
        self.evaluator = evaluator if evaluator is not None else get_evaluator()
        self.logger = logger
        self.routes = build_routes(self)
        self.app = self._create_app()

    @property
    def host(self) -> str:
        return self.settings.server.host

    @property
    def port(self) -> int:
        return self.settings.server.port

    def _create_app(self) -> Starlette:
        """Create the Starlette application."""
        return Starlette(
            debug=False,
            routes=list(self.routes),
            exception_handlers={Exception: self.handle_error},
        )

    async def root(self, request: Request) -> JSONResponse:
        """Static greeting."""
        return JSONResponse({"ok": True, "message": GREETING})

    async def healthz(self, request: Request) -> PlainTextResponse:
        """Liveness probe."""
        return PlainTextResponse("ok", status_code=200)

    async def vuln_eval(self, request: Request) -> JSONResponse:
        """Evaluate the `code` query parameter as an arithmetic expression."""
        code = request.query_params.get("code") or DEFAULT_EXPRESSION
        try:
            result = self.evaluator.evaluate(code)
        except ExpressionError as e:
            self.logger.warning(
                "Expression rejected",
                error_code=e.code,
                error=e.message,
            )
            return JSONResponse(map_error_for_web(e), status_code=get_http_status_for_error(e))
        return JSONResponse(result.to_dict())

    async def reflect(self, request: Request) -> HTMLResponse:
        """Echo the `msg` query parameter inside an HTML page."""
        msg = request.query_params.get("msg") or ""
        if self.settings.reflect.escape_html:
            msg = html.escape(msg)
        return HTMLResponse(REFLECT_TEMPLATE.format(msg=msg))

    async def handle_error(self, request: Request, exc: Exception) -> Response:
        """Last-resort handler for exceptions escaping a route."""
        self.logger.error(
            "Unhandled error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(map_error_for_web(exc), status_code=get_http_status_for_error(exc))

    def get_app(self) -> Any:
        """Return the ASGI application."""
        return self.app
