import logging
import re
from typing import override

from unix_terminal_mcp.filesystem.paths import join_path
from unix_terminal_mcp.models.nodes import DirectoryNode

from .base import Command, CommandContext, CommandError, CommandResult
from .utils.formatting_utils import OutputLine, Span, Style, error, plain

logger = logging.getLogger(__name__)


def highlight_pattern(line: str, pattern: str) -> list[Span]:
    """
    Splits a line into spans with every regex match of ``pattern`` highlighted.

    The pattern is applied as a regular expression and each match is displayed
    as the pattern text itself. An invalid expression leaves the line as is.
    """
    try:
        regex = re.compile(pattern)
    except re.error:
        logger.debug("Pattern %r is not a valid regular expression, skipping highlight.", pattern)
        return [Span(text=line)]

    spans: list[Span] = []
    pos = 0
    for match in regex.finditer(line):
        if match.start() > pos:
            spans.append(Span(text=line[pos:match.start()]))
        spans.append(Span(text=pattern, style=Style.MATCH))
        pos = match.end()
    if pos < len(line):
        spans.append(Span(text=line[pos:]))
    return spans


class GrepCommand(Command):
    """``grep <pattern> <file>``: prints the lines containing the pattern."""

    @override
    def get_name(self) -> str:
        return "grep"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if len(args) < 2:
            raise CommandError("grep: usage: grep <pattern> <file>")

        pattern, target = args[0], args[1]
        content = self._read_file(cwd, target)
        matches = [line for line in content.split("\n") if pattern in line]
        return CommandResult(
            lines=[OutputLine(role=Style.MATCH, spans=highlight_pattern(line, pattern)) for line in matches]
        )


class FindCommand(Command):
    """
    ``find [path] [-name <glob>]``: lists descendants in pre-order.

    Only ``*`` is a wildcard in the glob; it may match anywhere in a name.
    """

    @override
    def get_name(self) -> str:
        return "find"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        search_path = cwd
        name_pattern: str | None = None
        i = 0
        while i < len(args):
            if args[i] == "-name" and i + 1 < len(args):
                name_pattern = args[i + 1].replace("*", ".*")
                i += 1
            elif not args[i].startswith("-"):
                search_path = self._resolve(cwd, args[i])
            i += 1

        regex = None
        if name_pattern is not None:
            try:
                regex = re.compile(name_pattern)
            except re.error:
                logger.debug("Invalid -name pattern %r, nothing can match.", name_pattern)
                return CommandResult()

        results: list[str] = []
        self._search(search_path, regex, results)
        return CommandResult(lines=[plain(path) for path in results])

    def _search(self, path: str, regex: re.Pattern | None, results: list[str]) -> None:
        children = self._tree.get_directory_children(path)
        if children is None:
            return
        for name, node in children.items():
            full_path = join_path(path, name)
            if regex is None or regex.search(name):
                results.append(full_path)
            if isinstance(node, DirectoryNode):
                self._search(full_path, regex, results)


class WcCommand(Command):
    """Prints line, word and character counts per file."""

    @override
    def get_name(self) -> str:
        return "wc"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        if not args:
            raise CommandError("wc: missing file operand")

        lines: list[OutputLine] = []
        for arg in args:
            if arg.startswith("-"):
                continue
            try:
                content = self._read_file(cwd, arg)
            except CommandError as e:
                lines.append(error(str(e)))
                continue
            # Segments between "\n", so a trailing newline counts as one more line
            line_count = len(content.split("\n"))
            word_count = len(content.split())
            lines.append(plain(f"  {line_count}\t{word_count}\t{len(content)}\t{arg}"))
        return CommandResult(lines=lines)


class EchoCommand(Command):
    @override
    def get_name(self) -> str:
        return "echo"

    @override
    def run(self, args: list[str], cwd: str, context: CommandContext) -> CommandResult:
        return CommandResult(lines=[plain(" ".join(args))])
