"""CLI action handlers.

Purpose
-------
Subcommand handlers for ``toolgate-cli``, keeping the entrypoint minimal
(thin presentation layer). This module has no top-level side effects and is
safe to import in tests.

Error Semantics
---------------
Handlers let :class:`ToolPolicyError` propagate; ``main`` reports it as JSON
on stderr and returns the configuration exit code.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ...base.errors import ConfigLoadError, FileRestrictionError
from ...config import get_custom_modes, get_experiments, get_runtime_settings, load_custom_modes, load_document
from ...policy import get_default_resolver
from ..helpers import (
    build_hub,
    coerce_candidates,
    coerce_model_info,
    describe_modes,
    experiment_overrides,
    resolution_payload,
    synthesize_candidates,
)


def load_arg(value: Optional[str]) -> Any:
    """Parse an argument given as inline JSON or as a path to a JSON/YAML file."""
    if value is None:
        return None
    text = value.strip()
    if not text.startswith(("{", "[")):
        return load_document(Path(value))
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(message=f"invalid inline JSON: {e}") from e


def _emit(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _policy_inputs(args: argparse.Namespace) -> Dict[str, Any]:
    custom_modes = load_custom_modes(args.custom_modes) if args.custom_modes else get_custom_modes()
    return {
        "custom_modes": custom_modes,
        "experiments": get_experiments(experiment_overrides(args.experiment)),
        "settings": get_runtime_settings(load_arg(args.settings)),
        "resource_hub": build_hub(load_arg(args.hub_file)),
    }


def handle_resolve(args: argparse.Namespace) -> int:
    resolver = get_default_resolver()
    inputs = _policy_inputs(args)
    if args.tools_file:
        candidates = coerce_candidates(load_arg(args.tools_file), path=args.tools_file)
    else:
        candidates = coerce_candidates(synthesize_candidates(resolver.catalog))
    model_info = coerce_model_info(load_arg(args.model_info))
    resolution = resolver.resolve(candidates, args.mode, model_info=model_info, **inputs)
    if args.json:
        _emit(resolution_payload(resolution))
    else:
        for name in resolution.tool_names:
            print(name)
    return 0


def handle_check(args: argparse.Namespace) -> int:
    resolver = get_default_resolver()
    inputs = _policy_inputs(args)
    mode = resolver.modes.resolve(args.mode, inputs["custom_modes"])
    allowed = resolver.is_tool_allowed_in_mode(
        args.tool,
        args.mode,
        inputs["custom_modes"],
        inputs["experiments"],
        inputs["settings"],
        coerce_model_info(load_arg(args.model_info)),
        inputs["resource_hub"],
    )
    payload: Dict[str, Any] = {"tool": args.tool, "mode": mode.slug, "allowed": allowed}
    if allowed and args.file_path:
        try:
            resolver.modes.check_file_access(args.tool, args.mode, inputs["custom_modes"], args.file_path)
        except FileRestrictionError as e:
            payload |= {"allowed": False, "reason": e.message}
    _emit(payload)
    return 0


def handle_group(args: argparse.Namespace) -> int:
    resolver = get_default_resolver()
    inputs = _policy_inputs(args)
    mode = resolver.modes.resolve(args.mode, inputs["custom_modes"])
    tools = resolver.tools_for_group(
        args.group,
        args.mode,
        inputs["custom_modes"],
        inputs["experiments"],
        inputs["settings"],
        inputs["resource_hub"],
    )
    _emit({"group": args.group, "mode": mode.slug, "tools": tools})
    return 0


def handle_modes(args: argparse.Namespace) -> int:
    custom_modes = load_custom_modes(args.custom_modes) if args.custom_modes else get_custom_modes()
    modes = describe_modes(get_default_resolver(), custom_modes)
    if args.json:
        _emit(modes)
    else:
        for m in modes:
            marker = "*" if m["default"] else " "
            sys.stdout.write(f"{marker} {m['slug']:<16} {m['source']:<8} {','.join(m['groups'])}\n")
    return 0


__all__ = ["load_arg", "handle_resolve", "handle_check", "handle_group", "handle_modes"]
