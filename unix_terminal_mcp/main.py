"""
The main entry point for the Unix terminal MCP server.

This script handles environment loading, logging configuration, and server execution.
"""

import logging
import os
import sys

from dotenv import load_dotenv


def setup_environment(log_level: str | None = None) -> None:
    """
    Loads the .env file and configures logging for the whole process.

    ``LOG_LEVEL`` picks the level unless one is passed in. Records go to
    stderr since stdout carries the MCP stdio transport.
    """
    load_dotenv()

    level = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger(__name__).debug("Logging configured at %s.", level)


def run_server() -> None:
    """
    Sets up the environment and runs the MCP server.
    """
    setup_environment()

    # The server module reads its configuration at import time, after .env is loaded
    from .server import mcp_app, server_config

    logger = logging.getLogger(__name__)
    transport = server_config.MCP_TRANSPORT
    if transport == "stdio":
        logger.info("Starting Unix terminal MCP server over stdio.")
    else:
        logger.info("Starting Unix terminal MCP server over %s on %s:%s.", transport, server_config.MCP_HOST, server_config.MCP_PORT)

    mcp_app.run(transport=transport)


if __name__ == "__main__":
    run_server()
