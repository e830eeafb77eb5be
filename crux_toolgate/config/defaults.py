"""crux_toolgate.config.defaults
=============================

Central place for small, stable default values used across the crux_toolgate
package and the lightweight service layer. These defaults can be overridden
via environment variables or external configuration.

This module intentionally avoids importing from other toolgate packages to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Policy ----
# Mode used when a caller supplies no slug or an unknown one.
DEFAULT_MODE_SLUG = "code"
# Mode-policy tool whose permission decides whether external (MCP server)
# tools are exposed at all.
EXTERNAL_TOOL_GATE = "use_mcp_tool"

# ---- Service / HTTP layer ----
TOOLGATE_SERVICE_DEFAULT_HOST = "127.0.0.1"
TOOLGATE_SERVICE_DEFAULT_PORT = 8092
# Comma-separated list of allowed origins for the dev server.
TOOLGATE_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"

# ---- CLI ----
TOOLGATE_CLI_PROG = "toolgate-cli"
# Exit code used when configuration or catalog integrity checks fail.
TOOLGATE_CLI_CONFIG_EXIT_CODE = 2


__all__ = [
    "DEFAULT_MODE_SLUG",
    "EXTERNAL_TOOL_GATE",
    "TOOLGATE_SERVICE_DEFAULT_HOST",
    "TOOLGATE_SERVICE_DEFAULT_PORT",
    "TOOLGATE_SERVICE_CORS_DEFAULT_ORIGINS",
    "TOOLGATE_CLI_PROG",
    "TOOLGATE_CLI_CONFIG_EXIT_CODE",
]
