"""MCP server."""

from .server import MCPServerBase, create_mcp_server

__all__ = ["MCPServerBase", "create_mcp_server"]
