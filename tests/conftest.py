"""Shared fixtures for the terminal test suites."""

import pytest

from unix_terminal_mcp.commands.base import CommandContext
from unix_terminal_mcp.filesystem.tree import FileSystemTree
from unix_terminal_mcp.interpreter import CommandInterpreter

HOME = "/home/user"


@pytest.fixture
def tree():
    """A fresh seed filesystem"""
    return FileSystemTree()


@pytest.fixture
def interpreter(tree):
    """An interpreter bound to the tree fixture"""
    return CommandInterpreter(tree)


@pytest.fixture
def run(interpreter):
    """Executes one line, from the home directory unless told otherwise"""

    def _run(line, cwd=HOME, context=None):
        return interpreter.execute_command(line, cwd, context or CommandContext())

    return _run
