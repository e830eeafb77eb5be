"""In-memory resource hub.

A small registry of MCP server snapshots for embedding callers, the CLI
(``--hub-file``) and tests. Hosts with a live MCP connection manager can pass
their own object instead; it only has to satisfy :class:`ResourceHub`.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..base.logging import get_logger, log_event
from .base import McpServer, hub_has_resources


class InMemoryResourceHub:
    """Registry of MCP server snapshots keyed by name.

    Attributes:
        servers: Mapping of server name to snapshot.
        logger: Structured logger instance.
    """

    def __init__(self, servers: Optional[Iterable[Union[McpServer, Mapping[str, Any]]]] = None) -> None:
        self.servers: Dict[str, McpServer] = {}
        self.logger = get_logger("resource_hub")
        for server in servers or ():
            self.register(server)

    def register(self, server: Union[McpServer, Mapping[str, Any]]) -> McpServer:
        """Register a server snapshot.

        Raises:
            ValueError: If a server with the same name is already registered.
        """
        snapshot = server if isinstance(server, McpServer) else McpServer.model_validate(dict(server))
        if snapshot.name in self.servers:
            raise ValueError(f"MCP server '{snapshot.name}' already registered")
        self.servers[snapshot.name] = snapshot
        log_event(
            self.logger,
            "hub.server_registered",
            server=snapshot.name,
            resources=len(snapshot.resources),
            disabled=snapshot.disabled,
        )
        return snapshot

    def unregister(self, name: str) -> bool:
        """Remove a server; returns False when it was not registered."""
        if self.servers.pop(name, None) is None:
            return False
        log_event(self.logger, "hub.server_unregistered", server=name)
        return True

    def get(self, name: str) -> Optional[McpServer]:
        return self.servers.get(name)

    def list_servers(self) -> List[McpServer]:
        return list(self.servers.values())

    def has_resources(self) -> bool:
        return hub_has_resources(self)

    def __len__(self) -> int:
        return len(self.servers)


__all__ = ["InMemoryResourceHub"]
