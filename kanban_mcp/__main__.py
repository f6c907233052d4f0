"""Allow ``python -m kanban_mcp``."""

from kanban_mcp.server import run

run()
