"""Toolgate inspection CLI (package entrypoint).

This package wires argument parsing to action handlers kept in small, focused
modules. It performs no policy logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import json
import sys
from typing import Optional

from ...base.errors import ToolPolicyError
from ...base.logging import get_logger, log_event
from ...config.defaults import TOOLGATE_CLI_CONFIG_EXIT_CODE
from .cli_actions import handle_check, handle_group, handle_modes, handle_resolve
from .cli_parser import build_parser

_HANDLERS = {
    "resolve": handle_resolve,
    "check": handle_check,
    "group": handle_group,
    "modes": handle_modes,
}


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 2 on configuration or catalog errors).
    """
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return _HANDLERS[args.cmd](args)
    except ToolPolicyError as e:
        log_event(get_logger("cli"), "cli.error", command=args.cmd, code=e.code.value)
        print(json.dumps({"error": e.to_dict()}), file=sys.stderr)
        return TOOLGATE_CLI_CONFIG_EXIT_CODE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
