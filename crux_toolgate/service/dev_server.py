from __future__ import annotations

import os

import uvicorn

from crux_toolgate.config.defaults import TOOLGATE_SERVICE_DEFAULT_HOST, TOOLGATE_SERVICE_DEFAULT_PORT
from crux_toolgate.config.env import parse_bool


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main() -> None:
    """Start the development server for the toolgate FastAPI app.

    Host/port and reload behavior are controlled via environment variables:

    - TOOLGATE_SERVICE_HOST: interface to bind (default "127.0.0.1")
    - TOOLGATE_SERVICE_PORT: port to bind (default 8092)
    - TOOLGATE_SERVICE_RELOAD: "true"/"false" to toggle auto-reload (default True)
    """
    host = os.getenv("TOOLGATE_SERVICE_HOST", TOOLGATE_SERVICE_DEFAULT_HOST)
    port = _parse_port(os.getenv("TOOLGATE_SERVICE_PORT"), TOOLGATE_SERVICE_DEFAULT_PORT)
    reload_enabled = parse_bool(os.getenv("TOOLGATE_SERVICE_RELOAD"))

    uvicorn.run(
        "crux_toolgate.service.app:app",
        host=host,
        port=port,
        reload=True if reload_enabled is None else reload_enabled,
    )


if __name__ == "__main__":
    main()
