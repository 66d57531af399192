"""
MCP server definition for the Unix terminal.
"""

import logging
from typing import Any

from fastapi.middleware.cors import CORSMiddleware
from mcp.server.fastmcp import Context, FastMCP
from starlette.applications import Starlette
from starlette.middleware import Middleware

from unix_terminal_mcp.prompts import get_tutor_prompt
from unix_terminal_mcp.utils.config import ServiceConfig
from unix_terminal_mcp.utils.dependencies import get_base_config, get_shell_session_provider

# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware, so a browser terminal can connect."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "unix-terminal-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )


# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Unix Tutor System Prompt")
def get_system_prompt() -> str:
    """Provides the system prompt for an agent tutoring in the simulated terminal."""
    return get_tutor_prompt()


# --- Tool Definitions ---

@mcp_app.tool()
async def terminal(context: Context, command: str) -> dict[str, Any]:
    """
    Runs one command line in the simulated Unix terminal.

    Args:
        command: The command line exactly as typed, e.g. `ls -la ~/documents`.

    Returns:
        A dictionary with the rendered output (ANSI colored, CRLF separated),
        the plain text of every line with its role, and the working directory.
    """
    logger.info("Executing terminal command: %s", command)
    try:
        session = get_shell_session_provider()
        result = session.run(command)
        return {
            "status": "success",
            "output": result.output,
            "lines": [{"role": line.role.value, "text": line.text} for line in result.lines],
            "new_path": result.new_path,
            "cwd": session.cwd,
        }
    except Exception as e:
        logger.error(f"Error executing terminal command: {e}", exc_info=True)
        # It's better to return a structured error than to let the exception bubble up
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def complete(context: Context, buffer: str) -> dict[str, Any]:
    """
    Tab completion for a partially typed command line.

    Args:
        buffer: The text typed so far.

    Returns:
        A dictionary with the completed buffer (or null) and the matching candidates.
    """
    logger.info("Completing buffer: %r", buffer)
    try:
        completion = get_shell_session_provider().complete(buffer)
        return {"status": "success", "buffer": completion.buffer, "candidates": completion.candidates}
    except Exception as e:
        logger.error(f"Error completing buffer: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def history(context: Context) -> dict[str, Any]:
    """
    Returns the command history, oldest first.
    """
    logger.info("Reading command history.")
    try:
        return {"status": "success", "history": get_shell_session_provider().history.get_all()}
    except Exception as e:
        logger.error(f"Error reading history: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def snapshot(context: Context) -> dict[str, Any]:
    """
    Returns the whole virtual filesystem as a nested JSON image.
    """
    logger.info("Taking filesystem snapshot.")
    try:
        return {"status": "success", "tree": get_shell_session_provider().snapshot()}
    except Exception as e:
        logger.error(f"Error taking snapshot: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}


@mcp_app.tool()
async def reset_terminal(context: Context) -> dict[str, Any]:
    """
    Restores the original files, clears the history and returns to the home directory.
    """
    logger.info("Resetting terminal session.")
    try:
        session = get_shell_session_provider()
        session.reset()
        return {"status": "success", "cwd": session.cwd}
    except Exception as e:
        logger.error(f"Error resetting terminal: {e}", exc_info=True)
        return {"status": "error", "error": str(e)}
