"""Builds the fixed name -> command mapping used by the interpreter."""

from collections.abc import Mapping
from types import MappingProxyType

from unix_terminal_mcp.filesystem.tree import FileSystemTree

from .base import Command
from .file_ops import (
    CatCommand,
    CpCommand,
    HeadCommand,
    LessCommand,
    MkdirCommand,
    MvCommand,
    RmCommand,
    TailCommand,
    TouchCommand,
)
from .navigation import CdCommand, LsCommand, PwdCommand, TreeCommand
from .permissions import ChmodCommand, ChownCommand
from .system_info import (
    DateCommand,
    DfCommand,
    DuCommand,
    KillCommand,
    PsCommand,
    UnameCommand,
    UptimeCommand,
    WhoamiCommand,
)
from .text import EchoCommand, FindCommand, GrepCommand, WcCommand
from .utilities import ClearCommand, HelpCommand, HistoryCommand, LessonCommand, ResetCommand

COMMAND_CLASSES: tuple[type[Command], ...] = (
    # Navigation
    PwdCommand,
    LsCommand,
    CdCommand,
    TreeCommand,
    # File operations
    CatCommand,
    HeadCommand,
    TailCommand,
    LessCommand,
    TouchCommand,
    MkdirCommand,
    RmCommand,
    CpCommand,
    MvCommand,
    # Search & text
    GrepCommand,
    FindCommand,
    WcCommand,
    EchoCommand,
    # System info
    WhoamiCommand,
    PsCommand,
    KillCommand,
    DfCommand,
    DuCommand,
    UnameCommand,
    UptimeCommand,
    # Permissions
    ChmodCommand,
    ChownCommand,
    # Utilities
    DateCommand,
    HistoryCommand,
    ClearCommand,
    HelpCommand,
    LessonCommand,
    ResetCommand,
)


def build_registry(tree: FileSystemTree) -> Mapping[str, Command]:
    """
    Instantiates every command against one tree.

    Returns:
        A read-only mapping from command name to command.
    """
    commands = (command_class(tree) for command_class in COMMAND_CLASSES)
    return MappingProxyType({command.get_name(): command for command in commands})
