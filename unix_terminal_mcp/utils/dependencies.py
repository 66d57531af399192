"""
Configuration and dependency management for the Unix terminal MCP server.
"""

import logging
from functools import lru_cache

from unix_terminal_mcp.shell_session import ShellSession
from unix_terminal_mcp.storage import JsonFileStorage
from unix_terminal_mcp.utils.config import ServiceConfig

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


@lru_cache
def get_storage_provider() -> JsonFileStorage | None:
    """Returns the storage backend, or None when persistence is disabled."""
    config = get_base_config()
    if not config.PERSIST_STATE:
        logger.info("State persistence is disabled.")
        return None
    logger.info("Initializing JsonFileStorage at %s.", config.STORAGE_DIR)
    return JsonFileStorage(config.STORAGE_DIR)


@lru_cache
def get_shell_session_provider() -> ShellSession:
    """Returns a cached instance of the ShellSession."""
    logger.info("Initializing ShellSession singleton.")
    return ShellSession(storage=get_storage_provider())
