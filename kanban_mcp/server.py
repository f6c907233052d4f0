"""FastMCP server initialization for Kanban MCP."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP

from kanban_mcp.config import get_settings
from kanban_mcp.errors import KanbanError
from kanban_mcp.logging_setup import setup_logging
from kanban_mcp.ports import BoardApi
from kanban_mcp.runtime import BoardRuntime
from kanban_mcp.store import create_mock_store


@dataclass
class BoardContext:
    """Per-session objects handed to every tool through the lifespan context."""

    runtime: BoardRuntime

    @property
    def api(self) -> BoardApi:
        api = self.runtime.api
        if api is None:
            raise KanbanError("Board runtime has no active API")
        return api


@asynccontextmanager
async def board_lifespan(server: FastMCP) -> AsyncIterator[BoardContext]:
    """Build the store and runtime once for the server session."""
    settings = get_settings()
    runtime = BoardRuntime(
        mock_api_factory=lambda: create_mock_store(
            sample_count=settings.sample_tasks,
            snapshot_location=settings.snapshot_location,
        ),
    )
    await runtime.start()
    yield BoardContext(runtime=runtime)


# Initialize the MCP server
mcp = FastMCP(get_settings().app_name, lifespan=board_lifespan)


def run() -> None:
    """Run the MCP server."""
    setup_logging(get_settings().log_level)
    mcp.run()

