"""CLI parser construction for toolgate-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse

from ...config.defaults import TOOLGATE_CLI_PROG


def add_policy_flags(parser: argparse.ArgumentParser) -> None:
    """Attach the policy inputs shared by every query subcommand.

    Notes
    -----
    - ``--experiment`` may be repeated; each names an experiment id to enable
      on top of the configured flags.
    - ``--settings`` and ``--model-info`` accept inline JSON or a path to a
      JSON/YAML file.
    """
    parser.add_argument("--mode", default=None, help="Mode slug (falls back to the default mode)")
    parser.add_argument("--custom-modes", default=None, help="JSON/YAML file with customModes")
    parser.add_argument("--experiment", action="append", default=[], metavar="NAME")
    parser.add_argument("--settings", default=None, help="Runtime settings overrides (JSON or file)")
    parser.add_argument("--hub-file", default=None, help="JSON/YAML list of MCP server snapshots")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``resolve``, ``check``, ``group`` and ``modes``
        subcommands.
    """
    p = argparse.ArgumentParser(
        prog=TOOLGATE_CLI_PROG, description="Inspect which tools a mode/model/environment combination allows"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_resolve = sub.add_parser("resolve", help="Resolve the presented tool list")
    add_policy_flags(p_resolve)
    p_resolve.add_argument("--tools-file", default=None, help="JSON/YAML list of candidate tool definitions")
    p_resolve.add_argument("--model-info", default=None)
    p_resolve.add_argument("--json", action="store_true")

    p_check = sub.add_parser("check", help="Check whether one tool is allowed")
    p_check.add_argument("tool")
    add_policy_flags(p_check)
    p_check.add_argument("--model-info", default=None)
    p_check.add_argument("--file-path", default=None, help="Also enforce the mode's file restriction")

    p_group = sub.add_parser("group", help="List the allowed tools of one group")
    p_group.add_argument("group")
    add_policy_flags(p_group)

    p_modes = sub.add_parser("modes", help="List built-in and custom modes")
    p_modes.add_argument("--custom-modes", default=None)
    p_modes.add_argument("--json", action="store_true")
    return p


__all__ = ["build_parser", "add_policy_flags"]
