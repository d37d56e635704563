"""HTTP service for the secpipe demo."""

from secpipe_demo.web_server.web_server import (
    GREETING,
    DEFAULT_EXPRESSION,
    SecpipeWebServer,
    build_routes,
)

__all__ = ["GREETING", "DEFAULT_EXPRESSION", "SecpipeWebServer", "build_routes"]
