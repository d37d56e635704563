"""Secpipe demo web server entry point."""

import sys
from typing import List, Optional

import uvicorn

from secpipe_demo.config import get_settings
from secpipe_demo.exceptions import ConfigurationError
from secpipe_demo.logger import Logger, session_logger
from secpipe_demo.web_server import SecpipeWebServer

logger: Logger = session_logger


class ListeningServer(uvicorn.Server):
    """uvicorn server that logs the start-up line once its sockets are bound."""

    def __init__(self, config: uvicorn.Config, logger: Logger = session_logger):
        super().__init__(config)
        self.logger = logger

    @property
    def bound_port(self) -> Optional[int]:
        """Port the first listening socket is bound to (resolves PORT=0)."""
        if not self.started:
            return None
        for server in self.servers:
            for sock in server.sockets or ():
                return sock.getsockname()[1]
        return None

    async def startup(self, sockets: Optional[List] = None) -> None:
        # uvicorn exits the process from here when the bind fails
        await super().startup(sockets=sockets)
        if self.started:
            port = self.bound_port
            self.logger.info(f"App listening on port {port}", host=self.config.host, port=port)


def serve(server: SecpipeWebServer, logger: Logger = session_logger) -> None:
    """Run the server until it stops."""
    if not server.settings.reflect.escape_html:
        logger.warning("/reflect echoes input without HTML escaping (scanner target)")

    config = uvicorn.Config(server.get_app(), host=server.host, port=server.port, log_level="info")
    ListeningServer(config, logger).run()
    logger.info("Web server shutdown complete")


def main() -> int:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error("FATAL: invalid configuration", error=e.message, details=e.details)
        return 1

    server = SecpipeWebServer(settings=settings, logger=logger)

    try:
        serve(server, logger)
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        return 0
    except SystemExit as e:
        logger.error("Failed to start web server", exit_code=e.code)
        return 1
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
