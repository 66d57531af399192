"""
The command interpreter: tokenizes a raw input line and dispatches it.

``CommandInterpreter.execute_command`` is the single entry point a terminal
front end calls per submitted line. It always returns a ``CommandResult``;
unknown commands and handler failures come back as error output.
"""

import logging
from collections.abc import Mapping

from pydantic import BaseModel, Field

from .commands import build_registry
from .commands.base import Command, CommandContext, CommandResult
from .commands.utils.formatting_utils import OutputLine, Span, Style
from .filesystem.paths import resolve_path
from .filesystem.tree import FileSystemTree
from .models.nodes import DirectoryNode

logger = logging.getLogger(__name__)


def parse_command(line: str) -> list[str]:
    """
    Splits a line on spaces, honoring single and double quotes.

    Quote characters are stripped, whitespace inside quotes is kept and an
    unterminated quote simply closes at the end of the input.
    """
    parts: list[str] = []
    current = ""
    quote_char = ""

    for char in line:
        if char in ("'", '"') and not quote_char:
            quote_char = char
        elif quote_char and char == quote_char:
            quote_char = ""
        elif char == " " and not quote_char:
            if current:
                parts.append(current)
                current = ""
        else:
            current += char

    if current:
        parts.append(current)
    return parts


class Completion(BaseModel):
    """Result of tab completion: a replacement buffer and/or the candidates to show."""

    buffer: str | None = None
    candidates: list[str] = Field(default_factory=list)


class CommandInterpreter:
    """Dispatches parsed command lines to the registered commands."""

    def __init__(self, tree: FileSystemTree) -> None:
        self._tree = tree
        self._commands: Mapping[str, Command] = build_registry(tree)
        logger.debug("Registered %d commands.", len(self._commands))

    @property
    def command_names(self) -> list[str]:
        return list(self._commands)

    def execute_command(self, line: str, cwd: str, context: CommandContext | None = None) -> CommandResult:
        parts = parse_command(line.strip())
        if not parts:
            return CommandResult()

        name = parts[0].lower()
        command = self._commands.get(name)
        if command is None:
            logger.debug("Unknown command: %s", name)
            return CommandResult(lines=self._not_found_lines(name))

        return command.execute(parts[1:], cwd, context or CommandContext())

    @staticmethod
    def _not_found_lines(name: str) -> list[OutputLine]:
        return [
            OutputLine(role=Style.ERROR, spans=[Span(text=f"{name}: command not found", style=Style.ERROR)]),
            OutputLine(
                role=Style.INFO,
                spans=[
                    Span(text="Type "),
                    Span(text="help", style=Style.COMMAND),
                    Span(text=" to see available commands."),
                ],
            ),
        ]

    def complete(self, buffer: str, cwd: str) -> Completion:
        """
        Tab completion for a partially typed line.

        The first word completes against command names; later words complete
        against the entries of the directory named by the word's path part.
        """
        parts = buffer.split(" ")

        if len(parts) == 1:
            partial = parts[0].lower()
            matches = [name for name in self._commands if name.startswith(partial)]
            if len(matches) == 1:
                return Completion(buffer=matches[0] + " ", candidates=matches)
            return Completion(candidates=matches)

        word = parts[-1]
        if "/" in word:
            head, prefix = word.rsplit("/", 1)
            dir_path = resolve_path(cwd, head or "/")
            head += "/"
        else:
            head, prefix = "", word
            dir_path = cwd

        children = self._tree.get_directory_children(dir_path)
        if children is None:
            return Completion()

        matches = [name for name in children if name.startswith(prefix) and not name.startswith(".")]
        if len(matches) == 1:
            match = matches[0]
            suffix = "/" if isinstance(children[match], DirectoryNode) else ""
            parts[-1] = head + match + suffix
            return Completion(buffer=" ".join(parts), candidates=matches)
        if not matches:
            return Completion()

        common = _common_prefix(matches)
        if len(common) > len(prefix):
            parts[-1] = head + common
            return Completion(buffer=" ".join(parts), candidates=matches)
        return Completion(candidates=matches)


def _common_prefix(names: list[str]) -> str:
    prefix = names[0]
    for name in names[1:]:
        while not name.startswith(prefix):
            prefix = prefix[:-1]
    return prefix
