"""HTTP surface tests for the toolgate FastAPI app."""

from __future__ import annotations

from fastapi.testclient import TestClient

from crux_toolgate.service.app import app
from crux_toolgate.tests.utils import tool

client = TestClient(app)


def test_health_and_modes() -> None:
    assert client.get("/api/health").json() == {"ok": True}  # nosec B101
    data = client.get("/api/modes").json()
    assert data["default"] == "code"  # nosec B101
    assert {"code", "architect", "ask", "debug", "orchestrator"} <= {m["slug"] for m in data["modes"]}  # nosec B101


def test_resolve_endpoint_applies_full_pipeline() -> None:
    body = {
        "mode": "code",
        "tools": [tool("search_and_replace"), tool("access_mcp_resource"), tool("read_file")],
        "modelInfo": {"includedTools": ["search_replace"]},
        "mcpServers": [{"name": "docs", "resources": [{"uri": "file:///a"}]}],
    }
    resp = client.post("/api/tools/resolve", json=body)
    assert resp.status_code == 200  # nosec B101
    data = resp.json()
    assert data["names"] == ["search_replace", "access_mcp_resource", "read_file"]  # nosec B101
    assert data["tools"][0]["function"]["name"] == "search_replace"  # nosec B101


def test_resolve_endpoint_with_inline_custom_modes() -> None:
    body = {"mode": "reviewer", "customModes": [{"slug": "reviewer", "groups": ["read"]}], "tools": [tool("read_file"), tool("execute_command")]}
    data = client.post("/api/tools/resolve", json=body).json()
    assert data["mode"] == "reviewer" and data["names"] == ["read_file"]  # nosec B101


def test_check_endpoint() -> None:
    resp = client.post("/api/tools/check", json={"tool": "create_file", "mode": "architect", "filePath": "x.py"})
    data = resp.json()
    assert data["allowed"] is False and "reason" in data  # nosec B101
    ok = client.post("/api/tools/check", json={"tool": "create_file", "mode": "architect", "filePath": "x.md"}).json()
    assert ok["allowed"] is True  # nosec B101


def test_group_endpoint() -> None:
    data = client.get("/api/groups/command", params={"mode": "debug"}).json()
    assert data["tools"] == ["execute_command"] and data["mode"] == "debug"  # nosec B101
    assert client.get("/api/groups/nope").status_code == 404  # nosec B101


def test_policy_errors_render_envelope() -> None:
    body = {"customModes": [{"slug": "bad", "groups": [["edit", {"fileRegex": "("}]]}], "tools": []}
    resp = client.post("/api/tools/resolve", json=body)
    assert resp.status_code == 422  # nosec B101
    assert resp.json()["error"]["code"] == "validation"  # nosec B101


def test_malformed_candidates_and_model_info_return_422() -> None:
    blank = {"tools": [{"type": "function", "function": {"name": ""}}]}
    resp = client.post("/api/tools/resolve", json=blank)
    assert resp.status_code == 422 and resp.json()["error"]["code"] == "validation"  # nosec B101

    bad_info = {"tool": "read_file", "modelInfo": {"excludedTools": 5}}
    resp = client.post("/api/tools/check", json=bad_info)
    assert resp.status_code == 422 and resp.json()["error"]["code"] == "validation"  # nosec B101


def test_null_model_overrides_resolve_normally() -> None:
    body = {"tools": [tool("read_file")], "modelInfo": {"includedTools": None, "excludedTools": None}}
    resp = client.post("/api/tools/resolve", json=body)
    assert resp.status_code == 200  # nosec B101
    assert resp.json()["names"] == ["read_file"]  # nosec B101
