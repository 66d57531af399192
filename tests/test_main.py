"""
Unit tests for main.py
"""

import sys
from unittest.mock import patch

from unix_terminal_mcp import main


class TestSetupEnvironment:
    def test_loads_dotenv_and_logs_to_stderr(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        with patch("unix_terminal_mcp.main.load_dotenv") as load_dotenv, \
             patch("unix_terminal_mcp.main.logging.basicConfig") as basic_config:
            main.setup_environment()

        load_dotenv.assert_called_once_with()
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == "DEBUG"
        assert kwargs["stream"] is sys.stderr

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        with patch("unix_terminal_mcp.main.load_dotenv"), \
             patch("unix_terminal_mcp.main.logging.basicConfig") as basic_config:
            main.setup_environment("warning")

        assert basic_config.call_args.kwargs["level"] == "WARNING"
