"""MCP server implementation.

This module provides the stdio MCP server and registers the reminder tools.
"""

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import EmbeddedResource, ImageContent, TextContent, Tool

from ..clients.vikunja import VikunjaClient
from ..core.config import Settings
from ..tools.reminders import ReminderTools

logger = logging.getLogger(__name__)

SERVER_NAME = "vikunja"
SERVER_VERSION = "1.0.0"


class MCPServerBase:
    """
    MCP server with tool registration.

    Tools answer with plain text; every outcome, including errors, reaches
    the caller as a single text block.
    """

    def __init__(self, name: str, version: str | None = None):
        """
        Initialize MCP server.

        Args:
            name: Server name
            version: Server version reported during initialization
        """
        self.app = Server(name, version=version)
        self.tools: dict[str, dict[str, Any]] = {}
        self._tool_handlers: dict[str, Callable] = {}

    def register_tool(
        self,
        name: str,
        description: str,
        input_schema: dict[str, Any],
        handler: Callable,
    ):
        """
        Register a tool with the server.

        Args:
            name: Tool name
            description: Tool description
            input_schema: JSON schema for tool inputs
            handler: Async function returning the tool's text
        """
        self.tools[name] = {
            "name": name,
            "description": description,
            "input_schema": input_schema,
        }
        self._tool_handlers[name] = handler
        logger.info(f"Registered tool: {name}")

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> str:
        """Run a tool and return its text, rendering errors as text."""
        logger.info(f"Calling tool: {name} with arguments: {sorted((arguments or {}).keys())}")

        try:
            if name not in self._tool_handlers:
                raise ValueError(f"Unknown tool: {name}")

            handler = self._tool_handlers[name]
            arguments = arguments or {}
            try:
                inspect.signature(handler).bind(**arguments)
            except TypeError as e:
                raise ValueError(str(e)) from e

            return await handler(**arguments)

        except ValueError as e:
            logger.error(f"Validation error in {name}: {e}")
            return f"Invalid arguments for {name}: {e}"

        except Exception as e:
            logger.exception(f"Error executing tool {name}: {e}")
            return f"Error executing {name}"

    def setup_handlers(self) -> None:
        """Set up MCP handlers for tool listing and calling."""

        @self.app.list_tools()
        async def list_tools() -> list[Tool]:
            """List available MCP tools."""
            logger.info("Listing available tools")
            return [
                Tool(
                    name=tool_info["name"],
                    description=tool_info["description"],
                    inputSchema=tool_info["input_schema"],
                )
                for tool_info in self.tools.values()
            ]

        @self.app.call_tool()
        async def call_tool(
            name: str, arguments: Any
        ) -> Sequence[TextContent | ImageContent | EmbeddedResource]:
            """Execute a tool with the given arguments."""
            text = await self.dispatch(name, arguments)
            return [TextContent(type="text", text=text)]

    async def run(self) -> None:
        """Run the MCP server."""
        logger.info(f"Starting MCP Server: {self.app.name}")

        async with stdio_server() as (read_stream, write_stream):
            logger.info("Vikunja MCP Server running on stdio")
            await self.app.run(
                read_stream,
                write_stream,
                self.app.create_initialization_options(),
            )


def create_mcp_server(settings: Settings) -> MCPServerBase:
    """
    Create the Vikunja reminder MCP server.

    Args:
        settings: Loaded application settings

    Returns:
        MCPServerBase with the reminder tools registered and handlers set up
    """
    server = MCPServerBase(SERVER_NAME, version=SERVER_VERSION)
    tools = ReminderTools(VikunjaClient.from_settings(settings))
    for schema in tools.tool_schemas:
        server.register_tool(
            name=schema["name"],
            description=schema["description"],
            input_schema=schema["input_schema"],
            handler=schema["handler"],
        )
    server.setup_handlers()
    return server
