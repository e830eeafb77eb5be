"""Resource hub abstractions.

The resolver never talks to MCP servers itself. It only asks a hub which
servers are connected and whether any of them exposes resources, which
decides whether ``access_mcp_resource`` is offered.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class McpServer(BaseModel):
    """Snapshot of one connected MCP server.

    Attributes:
        name: Unique server name.
        resources: Resource descriptors advertised by the server (URI, name, ...).
        disabled: Disabled servers never count as exposing resources.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    resources: List[Dict[str, Any]] = Field(default_factory=list)
    disabled: bool = False

    @property
    def exposes_resources(self) -> bool:
        return not self.disabled and bool(self.resources)


ServerLike = Union[McpServer, Mapping[str, Any]]


@runtime_checkable
class ResourceHub(Protocol):
    """Anything that can enumerate connected MCP servers."""

    def list_servers(self) -> Sequence[ServerLike]:
        """Return the current server snapshots."""
        ...


def _server_exposes_resources(server: Any) -> bool:
    if isinstance(server, McpServer):
        return server.exposes_resources
    if isinstance(server, Mapping):
        return not server.get("disabled", False) and bool(server.get("resources"))
    return not getattr(server, "disabled", False) and bool(getattr(server, "resources", None))


def hub_has_resources(hub: Optional[ResourceHub]) -> bool:
    """Return True when ``hub`` has at least one enabled server with resources."""
    if hub is None:
        return False
    return any(_server_exposes_resources(s) for s in hub.list_servers())


__all__ = ["McpServer", "ServerLike", "ResourceHub", "hub_has_resources"]
