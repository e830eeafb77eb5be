"""MCP resource hub protocol and an in-memory implementation."""

from .base import McpServer, ResourceHub, ServerLike, hub_has_resources
from .registry import InMemoryResourceHub

__all__ = ["McpServer", "ResourceHub", "ServerLike", "hub_has_resources", "InMemoryResourceHub"]
