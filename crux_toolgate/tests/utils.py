"""Shared testing utilities for the toolgate test suite.

Purpose:
    Avoid duplication of simple assertion and log-capture helpers across test
    modules while retaining explicit AssertionError semantics (eschewing bare
    `assert` to satisfy Bandit B101).

Exports:
    - assert_true(condition: bool, message: str) -> None
    - read_events(text: str) -> list[dict]
    - tool(name: str) -> dict
"""
from __future__ import annotations

import json
from typing import Any, Dict, List


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False.

    Parameters
    ----------
    condition: bool
        Boolean expression under test.
    message: str
        Rich, contextual diagnostic message to display on failure.

    Raises
    ------
    AssertionError
        If `condition` evaluates false.
    """
    if not condition:
        raise AssertionError(message)


def read_events(text: str) -> List[Dict[str, Any]]:
    """Parse captured stderr into the structured events it contains.

    Non-JSON lines (plain formatter output, warnings) are skipped.
    """
    events: List[Dict[str, Any]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError:
            continue
        if "event" in data:
            events.append(data)
    return events


def tool(name: str) -> Dict[str, Any]:
    """Minimal OpenAI-style function tool definition named ``name``."""
    return {
        "type": "function",
        "function": {"name": name, "description": f"{name} tool", "parameters": {"type": "object"}},
    }
