"""Base classes shared by every shell command."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, computed_field

from unix_terminal_mcp.filesystem.paths import resolve_path
from unix_terminal_mcp.filesystem.tree import AnyNode, FileSystemTree
from unix_terminal_mcp.history import CommandHistory

from .utils.formatting_utils import OutputLine, error, render_lines

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """A user-facing failure; its message becomes a red output line."""


class CommandResult(BaseModel):
    """
    Uniform result of every command.

    ``new_path`` is set only when the caller should change its current
    directory.
    """

    lines: list[OutputLine] = Field(default_factory=list)
    new_path: str | None = None

    @computed_field
    @property
    def output(self) -> str:
        return render_lines(self.lines)


class CommandContext(BaseModel):
    """Collaborator hooks handed to every command; filesystem commands ignore them."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    history: CommandHistory | None = None
    current_lesson: int = 0
    on_lesson_change: Callable[[int], None] | None = None
    on_reset: Callable[[], None] | None = None


class Command(ABC):
    """
    One Unix command emulation.

    Subclasses implement ``run`` and may raise ``CommandError`` for a failure
    that ends the command; ``execute`` turns it into an error line so that
    callers always receive a ``CommandResult``.
    """

    def __init__(self, tree: FileSystemTree) -> None:
        self._tree = tree

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        pass

    def execute(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        try:
            return self.run(args, cwd, context)
        except CommandError as e:
            logger.debug("%s failed: %s", self.get_name(), e)
            return CommandResult(lines=[error(str(e))])

    # --- Helpers for subclasses ---

    def _resolve(self, cwd: str, token: str) -> str:
        return resolve_path(cwd, token)

    def _read_file(self, cwd: str, arg: str) -> str:
        """Returns a file's content or raises the standard not-found / is-a-directory errors."""
        node = self._tree.get_node(self._resolve(cwd, arg))
        return self._file_content(node, arg)

    def _file_content(self, node: AnyNode | None, arg: str) -> str:
        if node is None:
            raise CommandError(f"{self.get_name()}: {arg}: No such file or directory")
        if node.type == "directory":
            raise CommandError(f"{self.get_name()}: {arg}: Is a directory")
        return node.content
