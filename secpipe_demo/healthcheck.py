"""Smoke test: one GET /healthz against a running instance.

Exits 0 when the probe answers 200, otherwise reports the failure on stderr
and exits 1. There are no retries.
"""

from __future__ import annotations

import sys
from typing import Optional

import httpx

from secpipe_demo.config import resolve_port
from secpipe_demo.exceptions import ConfigurationError

HEALTH_PATH = "/healthz"
DEFAULT_TIMEOUT = 5.0


def check_health(base_url: str, client: Optional[httpx.Client] = None) -> int:
    """Probe the liveness endpoint once.

    Args:
        base_url: Service root, e.g. "http://localhost:3000"
        client: Optional client to send the request with (tests pass one
            backed by httpx.MockTransport)

    Returns:
        Process exit status: 0 if healthy, 1 otherwise
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=DEFAULT_TIMEOUT)

    try:
        response = client.get(f"{base_url.rstrip('/')}{HEALTH_PATH}")
    except httpx.HTTPError as e:
        print(f"Health check request failed: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    finally:
        if owns_client:
            client.close()

    if response.status_code != 200:
        print(
            f"Health check failed: status={response.status_code} body={response.text!r}",
            file=sys.stderr,
        )
        return 1

    print("Health check passed")
    return 0


def main() -> int:
    try:
        port = resolve_port()
    except ConfigurationError as e:
        print(f"Health check misconfigured: {e.message} {e.details}", file=sys.stderr)
        return 1
    return check_health(f"http://localhost:{port}")


if __name__ == "__main__":
    raise SystemExit(main())
